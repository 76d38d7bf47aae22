from sdtgen.models.results import (
    ArtifactKind,
    ArtifactWriteResult,
    GenerationReport,
    UnitPreview,
)
from sdtgen.models.unit_options import (
    RestartPolicy,
    ServiceType,
    UnitOptions,
    UnitSectionLayout,
    resolve_path,
)

__all__ = [
    'ServiceType',
    'RestartPolicy',
    'UnitSectionLayout',
    'UnitOptions',
    'resolve_path',
    'ArtifactKind',
    'ArtifactWriteResult',
    'GenerationReport',
    'UnitPreview',
]
