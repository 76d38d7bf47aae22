from sdtgen.services.unit_service import UnitService

__all__ = [
    'UnitService',
]
