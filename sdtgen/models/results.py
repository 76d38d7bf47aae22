from enum import StrEnum
from pathlib import Path

from sdtgen.utils import BaseModel


class ArtifactKind(StrEnum):
    SERVICE = 'service'
    TIMER = 'timer'


class ArtifactWriteResult(BaseModel):
    """Result of writing a single unit file.

    Args:
        kind: Kind of unit file that was written
        path: Path of the unit file
        success: Whether the file was written
        error_message: Error message if the write failed
    """
    model_config = {'frozen': True}

    kind: ArtifactKind
    path: Path
    success: bool
    error_message: str | None = None


class GenerationReport(BaseModel):
    """Outcome of a generate run, one result per attempted unit file.

    Args:
        results: Write results in the order the files were attempted
    """
    model_config = {'frozen': True}

    results: tuple[ArtifactWriteResult, ...] = ()

    @property
    def success(self) -> bool:
        return all(result.success for result in self.results)

    @property
    def written_paths(self) -> list[Path]:
        return [result.path for result in self.results if result.success]


class UnitPreview(BaseModel):
    """Preview of generated unit files.

    Args:
        service_content: Content of the service unit file
        service_path: Path where the service file will be created
        timer_content: Content of the timer unit file, if requested
        timer_path: Path where the timer file will be created, if requested
    """
    model_config = {'frozen': True}

    service_content: str
    service_path: Path
    timer_content: str | None = None
    timer_path: Path | None = None
