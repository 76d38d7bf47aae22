from enum import StrEnum


class SystemdPaths(StrEnum):
    """Systemd directory paths.
    """

    # System-level unit directory, the default output location
    SYSTEM_UNIT_DIR = '/etc/systemd/system/'


class UnitTargets(StrEnum):
    """Install targets referenced by generated units.
    """

    MULTI_USER = 'multi-user.target'
    TIMERS = 'timers.target'


class UnitSuffix(StrEnum):
    """Unit file name suffixes.
    """

    SERVICE = '.service'
    TIMER = '.timer'
    TEMPORARY = '.tmp'


class EnvironmentVariables(StrEnum):
    """Environment variables read by the CLI.
    """

    OUTPUT_DIR = 'SDTGEN_OUTPUT_DIR'
