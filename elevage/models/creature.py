"""Creature model for elevage."""

from typing import List, Optional

from .types import CreatureKind, Gender


XP_PER_LEVEL = 100
MIN_BREEDING_LEVEL = 5
OFFSPRING_NAME = "Mystere"
OFFSPRING_LEVEL = 1


class Creature:
    """Represents an individual creature with its level, kind, experience and gender."""
    
    def __init__(
        self,
        name: str,
        level: int,
        kind: CreatureKind,
        experience: int,
        gender: Gender
    ):
        """
        Initialize a creature.
        
        No validation is performed: any level or experience is accepted,
        including zero and values above the level-up threshold.
        
        Args:
            name: Display name
            level: Current level
            kind: Elemental kind
            experience: Experience points towards the next level
            gender: Male or Female
        """
        self.name = name
        self.level = level
        self.kind = kind
        self.experience = experience
        self.gender = gender
    
    def __repr__(self) -> str:
        return (
            f"Creature(name={self.name!r}, level={self.level}, kind={self.kind}, "
            f"experience={self.experience}, gender={self.gender})"
        )
    
    def gain_experience(self, points: int, xp_per_level: int = XP_PER_LEVEL) -> List[int]:
        """
        Add experience points and level up for every full threshold reached.
        
        Prints one notification per level gained.
        
        Args:
            points: Experience points to add (non-negative)
            xp_per_level: Experience needed for one level
            
        Returns:
            Levels reached, in order (empty if no level was gained)
        """
        self.experience += points
        reached = []
        while self.experience >= xp_per_level:
            self.experience -= xp_per_level
            self.level += 1
            reached.append(self.level)
            print(f"{self.name} reaches level {self.level}")
        return reached
    
    def describe(self) -> List[str]:
        """Return the five attribute lines shown on screen and in the save file."""
        return [
            f"Nom   : {self.name}",
            f"Niveau: {self.level}",
            f"Type  : {self.kind}",
            f"XP    : {self.experience}",
            f"Genre : {self.gender}",
        ]
    
    def display(self) -> None:
        """Print the five attribute lines."""
        for line in self.describe():
            print(line)
    
    def can_breed_with(self, other: 'Creature', min_level: int = MIN_BREEDING_LEVEL) -> bool:
        """
        Check if two creatures can breed.
        
        Both must share a kind, be at least ``min_level`` and have
        different genders.
        
        Args:
            other: Prospective partner
            min_level: Minimum level required for both creatures
            
        Returns:
            True if eligible, False otherwise
        """
        return (
            self.kind == other.kind
            and self.level >= min_level
            and other.level >= min_level
            and self.gender != other.gender
        )
    
    def breed(
        self,
        other: 'Creature',
        min_level: int = MIN_BREEDING_LEVEL,
        offspring_name: str = OFFSPRING_NAME,
        offspring_level: int = OFFSPRING_LEVEL
    ) -> Optional['Creature']:
        """
        Try to produce an offspring with another creature.
        
        The offspring takes this creature's kind, starts with no experience
        and is always male. Neither parent is modified.
        
        Args:
            other: Partner creature
            min_level: Minimum level required for both parents
            offspring_name: Name given to the offspring
            offspring_level: Starting level of the offspring
            
        Returns:
            New Creature, or None if the pair cannot breed
        """
        if not self.can_breed_with(other, min_level):
            return None
        return Creature(offspring_name, offspring_level, self.kind, 0, Gender.MALE)
