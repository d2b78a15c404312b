"""Elevage model for managing the ordered collection of creatures."""

from typing import List, Optional

from .creature import Creature
from ..config import ElevageConfig
from ..storage import save_creatures


class Elevage:
    """Owns the creatures of a breeding collection, in insertion order."""
    
    def __init__(self, config: Optional[ElevageConfig] = None):
        """
        Initialize empty collection.
        
        Args:
            config: Collection settings (defaults if omitted)
        """
        self.config = config or ElevageConfig()
        self.creatures: List[Creature] = []
    
    def __len__(self) -> int:
        return len(self.creatures)
    
    def add(self, creature: Creature) -> None:
        """Append a creature to the end of the collection."""
        self.creatures.append(creature)
    
    def display(self) -> None:
        """Print every creature with a 1-based header, or a notice if empty."""
        if not self.creatures:
            print("The collection is empty.")
            return
        
        for i, creature in enumerate(self.creatures, start=1):
            print(f"=== Pokemon {i} ===")
            creature.display()
            print("----------------------")
    
    def train(self, points: int) -> None:
        """
        Give the same experience to every creature, in collection order.
        
        Args:
            points: Experience points added to each creature
        """
        for creature in self.creatures:
            creature.gain_experience(points, self.config.xp_per_level)
    
    def breed(self, index1: int, index2: int) -> Optional[Creature]:
        """
        Try to breed two creatures and append the offspring.
        
        The creature at ``index1`` is the parent whose kind the offspring
        inherits. Both indices may be equal; such a pair never breeds since
        the genders match.
        
        Args:
            index1: 0-based position of the first parent
            index2: 0-based position of the second parent
            
        Returns:
            The new creature, or None if the indices are invalid or the
            pair cannot breed
        """
        size = len(self.creatures)
        if not (0 <= index1 < size and 0 <= index2 < size):
            print("Invalid index.")
            return None
        
        parent1 = self.creatures[index1]
        parent2 = self.creatures[index2]
        offspring = parent1.breed(
            parent2,
            min_level=self.config.min_breeding_level,
            offspring_name=self.config.offspring_name,
            offspring_level=self.config.offspring_level
        )
        if offspring is None:
            print(f"Breeding impossible between {parent1.name} and {parent2.name}")
            return None
        
        print("Breeding succeeded! New Pokemon:")
        offspring.display()
        self.add(offspring)
        return offspring
    
    def sort_by_level(self) -> None:
        """Stable ascending sort by level."""
        self.creatures.sort(key=lambda c: c.level)
    
    def sort_by_type(self) -> None:
        """Stable ascending sort by kind rank."""
        self.creatures.sort(key=lambda c: c.kind.rank)
    
    def persist(self, path: Optional[str] = None) -> None:
        """
        Overwrite the save file with the whole collection.
        
        Args:
            path: Target file (configured save_path if omitted)
            
        Raises:
            PersistenceError: If the file cannot be written
        """
        target = path or self.config.save_path
        save_creatures(self.creatures, target)
        print(f"Data saved to file '{target}'")
