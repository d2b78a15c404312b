"""Domain models for elevage."""

from .types import CreatureKind, Gender
from .creature import Creature
from .elevage import Elevage

__all__ = [
    'CreatureKind', 'Gender',
    'Creature',
    'Elevage',
]
