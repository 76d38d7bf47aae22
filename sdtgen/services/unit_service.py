import logging
from pathlib import Path

from sdtgen.errors import ArtifactError
from sdtgen.models.results import (
    ArtifactKind,
    ArtifactWriteResult,
    GenerationReport,
    UnitPreview,
)
from sdtgen.models.unit_options import UnitOptions
from sdtgen.system.unit_file_manager import UnitFileManager
from sdtgen.units.unit_generator import SystemdUnitGenerator


class UnitService:
    """A service for generating systemd service and timer units.
    """

    def __init__(
        self,
        generator: SystemdUnitGenerator | None = None,
        file_manager: UnitFileManager | None = None,
    ) -> None:
        """Initialise the service.
        """
        self._logger = logging.getLogger(__name__)

        self._generator = generator or SystemdUnitGenerator()
        self._file_manager = file_manager or UnitFileManager()

    def preview(self, options: UnitOptions) -> UnitPreview:
        """Render the unit files without writing them.

        Raises:
            UnitGenerationError: If the options fail the pre-flight checks
        """
        options.validate()

        service_content = self._generator.generate_service_unit(options)
        if not options.timer_enabled:
            return UnitPreview(
                service_content=service_content,
                service_path=options.service_path,
            )

        return UnitPreview(
            service_content=service_content,
            service_path=options.service_path,
            timer_content=self._generator.generate_timer_unit(options),
            timer_path=options.timer_path,
        )

    def generate(self, options: UnitOptions) -> GenerationReport:
        """Render and write the unit files.

        The service file is written first. A failed service write does not
        prevent the timer file from being attempted, and files already
        written are kept.

        Args:
            options: Validated unit options

        Returns:
            GenerationReport with one result per attempted file

        Raises:
            UnitGenerationError: If the options fail the pre-flight checks,
                in which case nothing is written
        """
        preview = self.preview(options)

        results = [
            self._write_artifact(
                ArtifactKind.SERVICE,
                preview.service_path,
                preview.service_content,
            ),
        ]

        if preview.timer_content is not None \
            and preview.timer_path is not None:
            results.append(self._write_artifact(
                ArtifactKind.TIMER,
                preview.timer_path,
                preview.timer_content,
            ))

        return GenerationReport(results=tuple(results))

    def _write_artifact(
        self,
        kind: ArtifactKind,
        path: Path,
        content: str,
    ) -> ArtifactWriteResult:
        """Write one unit file and capture the outcome.
        """
        try:
            written_path = self._file_manager.write_unit_file(path, content)
        except ArtifactError as e:
            self._logger.error('Failed to store %s file %s', kind, path)
            return ArtifactWriteResult(
                kind=kind,
                path=path,
                success=False,
                error_message=str(e),
            )

        return ArtifactWriteResult(kind=kind, path=written_path, success=True)
