"""Interactive text menu driving an Elevage."""

import re
from typing import Callable, Optional

from .models.creature import Creature
from .models.elevage import Elevage
from .models.types import CreatureKind, Gender


InputFunc = Callable[[str], str]

MENU = """
--- Menu ---
1. Add a Pokemon
2. Display all Pokemon
3. Train all Pokemon
4. Try breeding two Pokemon
5. Sort Pokemon by level
6. Sort Pokemon by type
7. Quit"""

KIND_CHOICES = {
    "1": CreatureKind.FIRE,
    "2": CreatureKind.WATER,
    "3": CreatureKind.GRASS,
    "4": CreatureKind.ELECTRIC,
}

GENDER_CHOICES = {
    "1": Gender.MALE,
    "2": Gender.FEMALE,
}

_COUNT_RE = re.compile(r"\+?[0-9]+")
MAX_COUNT = 2**32 - 1


def read_input(prompt: str, input_func: InputFunc = input) -> str:
    """Prompt for one line and return it without surrounding whitespace."""
    return input_func(prompt).strip()


def parse_count(text: str, default: int) -> int:
    """
    Parse a non-negative integer, falling back to ``default``.
    
    Args:
        text: Raw user input
        default: Value used when ``text`` is not a non-negative integer
            or is larger than MAX_COUNT
        
    Returns:
        Parsed value or default
    """
    text = text.strip()
    if not _COUNT_RE.fullmatch(text):
        return default
    value = int(text)
    if value > MAX_COUNT:
        return default
    return value


def prompt_creature(input_func: InputFunc = input) -> Creature:
    """
    Ask for every attribute of a new creature.
    
    Unparsable level or experience fall back to 1 and 0; an unknown kind
    or gender choice falls back to Fire or Male with a notice.
    
    Args:
        input_func: Source of user input lines
        
    Returns:
        The creature described by the user
    """
    name = read_input("Enter the Pokemon's name: ", input_func)
    level = parse_count(read_input("Enter the initial level: ", input_func), 1)
    
    print("Choose the Pokemon's type:")
    for choice, kind in KIND_CHOICES.items():
        print(f"{choice} - {kind}")
    kind = KIND_CHOICES.get(read_input("Your choice (1-4): ", input_func))
    if kind is None:
        print(f"Invalid choice, default type: {CreatureKind.FIRE}")
        kind = CreatureKind.FIRE
    
    experience = parse_count(read_input("Enter the initial XP: ", input_func), 0)
    
    print("Choose the gender:")
    for choice, gender in GENDER_CHOICES.items():
        print(f"{choice} - {gender}")
    gender = GENDER_CHOICES.get(read_input("Your choice (1-2): ", input_func))
    if gender is None:
        print(f"Invalid choice, default gender: {Gender.MALE}")
        gender = Gender.MALE
    
    return Creature(name, level, kind, experience, gender)


def dispatch(choice: str, elevage: Elevage, input_func: InputFunc = input) -> bool:
    """
    Run one menu choice against the collection.
    
    Every choice that changes the collection saves it right after.
    
    Args:
        choice: Menu choice as typed, already stripped
        elevage: Collection to operate on
        input_func: Source of follow-up input lines
        
    Returns:
        False when the user chose to quit, True otherwise
        
    Raises:
        PersistenceError: If saving fails
    """
    if choice == "1":
        elevage.add(prompt_creature(input_func))
        print("Pokemon added!")
        elevage.persist()
    elif choice == "2":
        print("All Pokemon:")
        elevage.display()
    elif choice == "3":
        points = parse_count(
            read_input("Enter the XP to give to each Pokemon: ", input_func), 0
        )
        elevage.train(points)
        print("All Pokemon have been trained!")
        elevage.persist()
    elif choice == "4":
        index1 = parse_count(
            read_input("Enter the index of the first Pokemon (starts at 1): ", input_func), 0
        )
        index2 = parse_count(
            read_input("Enter the index of the second Pokemon (starts at 1): ", input_func), 0
        )
        if index1 == 0 or index2 == 0:
            print("Invalid indices.")
        else:
            elevage.breed(index1 - 1, index2 - 1)
            elevage.persist()
    elif choice == "5":
        elevage.sort_by_level()
        print("Pokemon sorted by level.")
        elevage.persist()
    elif choice == "6":
        elevage.sort_by_type()
        print("Pokemon sorted by type.")
        elevage.persist()
    elif choice == "7":
        print("Goodbye!")
        return False
    else:
        print("Invalid choice, please try again.")
    return True


def run_shell(elevage: Optional[Elevage] = None, input_func: InputFunc = input) -> Elevage:
    """
    Loop over menu choices until the user quits or input ends.
    
    Args:
        elevage: Collection to operate on (new empty one if omitted)
        input_func: Source of user input lines
        
    Returns:
        The collection in its final state
    """
    if elevage is None:
        elevage = Elevage()
    
    while True:
        print(MENU)
        try:
            choice = read_input("Enter your choice: ", input_func)
            if not dispatch(choice, elevage, input_func):
                break
        except EOFError:
            print()
            print("Goodbye!")
            break
    
    return elevage
