from sdtgen.units.unit_generator import SystemdUnitGenerator

__all__ = [
    'SystemdUnitGenerator',
]
