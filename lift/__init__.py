from .core import lmap, l2map, l3map, l4map, l5map, lift
from .walk import LiftError, InvalidDepthError, StructureMismatchError

__all__ = [
    'lmap', 'l2map', 'l3map', 'l4map', 'l5map', 'lift',
    'LiftError', 'InvalidDepthError', 'StructureMismatchError',
]
