"""Flat text save file for elevage."""

from typing import Iterable, TYPE_CHECKING

from .exceptions import PersistenceError

if TYPE_CHECKING:
    from .models.creature import Creature


def format_creature(creature: 'Creature') -> str:
    """
    Render one creature as a save file block.
    
    Args:
        creature: Creature to render
        
    Returns:
        Five attribute lines followed by a blank line
    """
    return "\n".join(creature.describe()) + "\n\n"


def save_creatures(creatures: Iterable['Creature'], path: str) -> None:
    """
    Write every creature to ``path``, replacing any previous content.
    
    An empty collection produces an empty file.
    
    Args:
        creatures: Creatures to save, in collection order
        path: Target file path
        
    Raises:
        PersistenceError: If the file cannot be created or written
    """
    try:
        with open(path, 'w', encoding='utf-8') as f:
            for creature in creatures:
                f.write(format_creature(creature))
    except OSError as e:
        raise PersistenceError(f"Failed to write save file {path}: {e}") from e
