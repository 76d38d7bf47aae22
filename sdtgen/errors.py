from pathlib import Path


class UnitGenerationError(Exception):
    """Base class for every failure reported by sdtgen.
    """


class ExecutableNotFoundError(UnitGenerationError):
    """The configured ExecStart path does not exist.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f'Executable {path} does not exist')


class MissingCalendarSpecError(UnitGenerationError):
    """A timer was requested without an OnCalendar directive.
    """

    def __init__(self) -> None:
        super().__init__('Timer flag was specified but no OnCalendar')


class ArtifactError(UnitGenerationError):
    """A unit file could not be stored.

    Args:
        path: Target path of the unit file
        kind: Artifact kind, ``service`` or ``timer``
    """

    action = 'storing'

    def __init__(self, path: Path, kind: str) -> None:
        self.path = path
        self.kind = kind
        super().__init__(f'Error {self.action} {kind} file {path}')


class ArtifactCreateError(ArtifactError):
    action = 'creating'


class ArtifactWriteError(ArtifactError):
    action = 'writing'
