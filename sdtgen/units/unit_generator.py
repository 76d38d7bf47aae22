import logging
from collections.abc import Iterable, Sequence
from enum import StrEnum
from pathlib import Path

from sdtgen.models.unit_options import (
    UnitOptions,
    UnitSectionLayout,
    resolve_path,
)
from sdtgen.system.constants import UnitTargets


DirectiveValue = str | int | bool | Path | StrEnum | Sequence[str] | None


class SystemdUnitGenerator:
    """Generates systemd unit files from UnitOptions.

    Every section is described by an ordered list of (key, value) pairs and
    a line is written only for values that are set. Values are written
    exactly as given, without quoting or escaping.
    """

    def __init__(self) -> None:
        """Initialize the unit generator.
        """
        self._logger = logging.getLogger(__name__)

    def generate_service_unit(self, options: UnitOptions) -> str:
        """Generate .service unit file content.
        """
        self._logger.debug('Rendering service unit %s', options.name)

        sections = [
            self._format_unit_section(options),
            self._format_service_section(options),
            self._format_section('Install', [
                ('WantedBy', options.wanted_by),
            ]),
        ]

        return '\n\n'.join(sections) + '\n'

    def generate_timer_unit(self, options: UnitOptions) -> str:
        """Generate .timer unit file content.
        """
        self._logger.debug('Rendering timer unit %s', options.name)

        sections = [
            self._format_section('Unit', []),
            self._format_section('Timer', [
                ('OnCalendar', options.on_calendar),
                ('OnUnitActiveSec', options.on_unit_active_sec),
                ('OnUnitInactiveSec', options.on_unit_inactive_sec),
                ('Persistent', options.persistent),
            ]),
            self._format_section('Install', [
                ('WantedBy', UnitTargets.TIMERS),
            ]),
        ]

        return '\n\n'.join(sections) + '\n'

    def _format_unit_section(self, options: UnitOptions) -> str:
        """Format [Unit] section content.
        """
        if options.unit_layout is UnitSectionLayout.LEGACY:
            return self._format_section('Unit', [
                ('Description', options.description),
                ('After', options.after),
                ('Conflicts', options.conflicts),
                ('Requires', options.requires),
                ('OnFailure', options.description),
            ])

        return self._format_section('Unit', [
            ('Description', options.description),
            ('Before', options.before),
            ('After', options.after),
            ('Conflicts', options.conflicts),
            ('Requires', options.requires),
            ('OnFailure', options.on_failure),
        ])

    def _format_service_section(self, options: UnitOptions) -> str:
        """Format [Service] section content.
        """
        return self._format_section('Service', [
            ('Type', options.service_type),
            ('ExecStart', resolve_path(options.exec_start)),
            ('ExecReload', self._resolve_optional(options.exec_reload)),
            ('ExecStop', self._resolve_optional(options.exec_stop)),
            ('Restart', options.restart),
            ('RestartSec', options.restart_sec),
            ('User', options.user),
            ('Group', options.group),
        ])

    def _format_section(
        self,
        name: str,
        directives: Iterable[tuple[str, DirectiveValue]],
    ) -> str:
        """Format a section header followed by its directive lines.
        """
        lines = [f'[{name}]']
        for key, value in directives:
            lines.extend(self._format_directive(key, value))
        return '\n'.join(lines)

    def _format_directive(self, key: str, value: DirectiveValue) -> list[str]:
        """Format the Key=value lines for a single directive.

        Unset values produce no line, sequences produce one line per entry.
        """
        if value is None:
            return []
        if isinstance(value, bool):
            return [f'{key}={"true" if value else "false"}']
        if isinstance(value, StrEnum):
            return [f'{key}={value.value}']
        if isinstance(value, (str, int, Path)):
            return [f'{key}={value}']
        return [f'{key}={entry}' for entry in value]

    def _resolve_optional(self, path: Path | None) -> Path | None:
        return resolve_path(path) if path is not None else None
