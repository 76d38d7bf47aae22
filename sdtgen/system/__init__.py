from sdtgen.system.constants import (
    EnvironmentVariables,
    SystemdPaths,
    UnitSuffix,
    UnitTargets,
)
from sdtgen.system.unit_file_manager import UnitFileManager

__all__ = [
    'EnvironmentVariables',
    'SystemdPaths',
    'UnitFileManager',
    'UnitSuffix',
    'UnitTargets',
]
