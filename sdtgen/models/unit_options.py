import logging
import re
from enum import StrEnum
from pathlib import Path

from pydantic import Field, field_validator

from sdtgen.errors import ExecutableNotFoundError, MissingCalendarSpecError
from sdtgen.system.constants import SystemdPaths, UnitSuffix, UnitTargets
from sdtgen.utils import BaseModel


logger = logging.getLogger(__name__)


class ServiceType(StrEnum):
    SIMPLE = 'simple'
    FORKING = 'forking'
    ONESHOT = 'oneshot'
    DBUS = 'dbus'
    NOTIFY = 'notify'
    IDLE = 'idle'


class RestartPolicy(StrEnum):
    NO = 'no'
    ALWAYS = 'always'
    ON_SUCCESS = 'on-success'
    ON_FAILURE = 'on-failure'
    ON_ABNORMAL = 'on-abnormal'
    ON_ABORT = 'on-abort'
    ON_WATCHDOG = 'on-watchdog'


class UnitSectionLayout(StrEnum):
    """Layout of the [Unit] section of the service file.

    ``legacy`` reproduces the historical output, which has no Before=
    lines and fills OnFailure= from the description.
    """

    CANONICAL = 'canonical'
    LEGACY = 'legacy'


def resolve_path(path: Path) -> Path:
    """Resolve a path to its absolute, symlink-free form.

    Falls back to the path as given when it cannot be resolved.
    """
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError):
        return path


class UnitOptions(BaseModel):
    """Options describing a service unit and its optional timer.

    Args:
        name: Unit name, used for the <name>.service and <name>.timer files.
            Only letters, digits, backslashes and the characters ":_.@-"
            are allowed, and it cannot start or end with a dot
        description: Unit description
        before: Units that must start after this one
        after: Units that must start before this one
        conflicts: Units that cannot run alongside this one
        requires: Units this one requires
        on_failure: Units activated when this one fails
        service_type: Service startup type
        exec_start: Executable started by the service
        exec_reload: Executable run to reload the service
        exec_stop: Executable run to stop the service
        restart: Restart policy
        restart_sec: Seconds to wait before restarting
        user: User to run the service as
        group: Group to run the service as
        wanted_by: Install target, an empty value omits WantedBy=
        timer_enabled: Also generate a timer unit
        persistent: Timer persists across reboots
        on_calendar: Timer calendar specification (e.g. "daily")
        on_unit_active_sec: Timer interval after the unit was last activated
        on_unit_inactive_sec: Timer interval after the unit was last
            deactivated
        accuracy_sec: Timer accuracy, accepted but not written
        output_dir: Directory the unit files are written to
        skip_exec_check: Do not require the ExecStart executable to exist
        unit_layout: Layout of the [Unit] section
    """
    model_config = {'frozen': True}

    # [Unit]
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None)
    before: tuple[str, ...] = Field(())
    after: tuple[str, ...] = Field(())
    conflicts: tuple[str, ...] = Field(())
    requires: tuple[str, ...] = Field(())
    on_failure: str | None = Field(None)

    # [Service]
    service_type: ServiceType = Field(ServiceType.SIMPLE)
    exec_start: Path = Field(...)
    exec_reload: Path | None = Field(None)
    exec_stop: Path | None = Field(None)
    restart: RestartPolicy | None = Field(None)
    restart_sec: int | None = Field(None, ge=0)
    user: str | None = Field(None)
    group: str | None = Field(None)

    # [Install]
    wanted_by: str | None = Field(UnitTargets.MULTI_USER.value)

    # Timer
    timer_enabled: bool = Field(False)
    persistent: bool = Field(False)
    on_calendar: str | None = Field(None)
    on_unit_active_sec: str | None = Field(None)
    on_unit_inactive_sec: str | None = Field(None)
    accuracy_sec: str | None = Field(None)

    output_dir: Path = Field(Path(SystemdPaths.SYSTEM_UNIT_DIR))
    skip_exec_check: bool = Field(False)
    unit_layout: UnitSectionLayout = Field(UnitSectionLayout.CANONICAL)

    @field_validator('name')
    @classmethod
    def validate_unit_name(cls, v: str) -> str:
        # Systemd unit name validation
        if not re.match(r'^[a-zA-Z0-9:_.@\\-]+$', v):
            raise ValueError(
                'Unit name contains invalid characters. '
                'Use only letters, numbers, :, _, ., @, \\, -'
            )

        if v.startswith('.') or v.endswith('.'):
            raise ValueError('Unit name cannot start or end with a dot')

        return v

    @field_validator('wanted_by')
    @classmethod
    def normalize_wanted_by(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v

    @property
    def service_filename(self) -> str:
        return f'{self.name}{UnitSuffix.SERVICE}'

    @property
    def timer_filename(self) -> str:
        return f'{self.name}{UnitSuffix.TIMER}'

    @property
    def service_path(self) -> Path:
        return self.output_dir / self.service_filename

    @property
    def timer_path(self) -> Path:
        return self.output_dir / self.timer_filename

    def validate(self) -> None:
        """Run the pre-flight checks for every artifact that will be generated.

        Raises:
            ExecutableNotFoundError: If exec_start is missing and not bypassed
            MissingCalendarSpecError: If a timer is requested without
                on_calendar
        """
        self.check_executable()
        if self.timer_enabled:
            self.check_timer()

    def check_executable(self) -> None:
        """Ensure the ExecStart executable exists unless the check is skipped.
        """
        if self.skip_exec_check:
            logger.debug('Skipping existence check for %s', self.exec_start)
            return

        if not self.exec_start.exists():
            raise ExecutableNotFoundError(self.exec_start)

    def check_timer(self) -> None:
        """Ensure the timer has a calendar specification.
        """
        if self.on_calendar is None:
            raise MissingCalendarSpecError()
