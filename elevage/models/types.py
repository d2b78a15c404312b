"""Creature kind and gender enumerations."""

from enum import Enum


class CreatureKind(Enum):
    """Elemental kind of a creature."""
    FIRE = "Fire"
    WATER = "Water"
    GRASS = "Grass"
    ELECTRIC = "Electric"
    
    @property
    def rank(self) -> int:
        """Sort position: Fire < Water < Grass < Electric."""
        return _KIND_RANKS[self]
    
    def __str__(self) -> str:
        return self.value


_KIND_RANKS = {
    CreatureKind.FIRE: 0,
    CreatureKind.WATER: 1,
    CreatureKind.GRASS: 2,
    CreatureKind.ELECTRIC: 3,
}


class Gender(Enum):
    """Creature gender."""
    MALE = "Male"
    FEMALE = "Female"
    
    def __str__(self) -> str:
        return self.value
