"""Tests for Elevage collection model."""

import pytest
from elevage.config import ElevageConfig
from elevage.models.creature import Creature
from elevage.models.elevage import Elevage
from elevage.models.types import CreatureKind, Gender


@pytest.fixture
def breeding_pair(tmp_path):
    """Create a collection holding a compatible Fire pair."""
    elevage = Elevage(ElevageConfig(save_path=str(tmp_path / "elevage.txt")))
    elevage.add(Creature("A", 5, CreatureKind.FIRE, 0, Gender.MALE))
    elevage.add(Creature("B", 5, CreatureKind.FIRE, 0, Gender.FEMALE))
    return elevage


@pytest.fixture
def mixed():
    """Create a collection with varied kinds and levels."""
    elevage = Elevage()
    for name, level, kind in [
        ("e1", 3, CreatureKind.ELECTRIC),
        ("f1", 7, CreatureKind.FIRE),
        ("g1", 3, CreatureKind.GRASS),
        ("w1", 1, CreatureKind.WATER),
        ("f2", 3, CreatureKind.FIRE),
        ("e2", 7, CreatureKind.ELECTRIC),
    ]:
        elevage.add(Creature(name, level, kind, 0, Gender.MALE))
    return elevage


def names(elevage):
    return [c.name for c in elevage.creatures]


def test_add_appends_in_order(breeding_pair):
    """Test add keeps insertion order."""
    breeding_pair.add(Creature("C", 1, CreatureKind.WATER, 0, Gender.MALE))
    assert names(breeding_pair) == ["A", "B", "C"]
    assert len(breeding_pair) == 3


def test_display_empty(capsys):
    """Test display notice on an empty collection."""
    Elevage().display()
    assert capsys.readouterr().out == "The collection is empty.\n"


def test_display_headers(breeding_pair, capsys):
    """Test display numbers creatures from 1."""
    breeding_pair.display()
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "=== Pokemon 1 ==="
    assert out[1] == "Nom   : A"
    assert out[6] == "----------------------"
    assert out[7] == "=== Pokemon 2 ==="
    assert out.count("----------------------") == 2


def test_train_all(breeding_pair, capsys):
    """Test training applies experience to every creature in order."""
    breeding_pair.creatures[1].experience = 50
    breeding_pair.train(60)
    
    a, b = breeding_pair.creatures
    assert (a.level, a.experience) == (5, 60)
    assert (b.level, b.experience) == (6, 10)
    assert capsys.readouterr().out == "B reaches level 6\n"


def test_breed_success(breeding_pair, capsys):
    """Test a valid pair appends a Mystere offspring."""
    offspring = breeding_pair.breed(0, 1)
    
    assert len(breeding_pair) == 3
    assert breeding_pair.creatures[2] is offspring
    assert offspring.name == "Mystere"
    assert offspring.level == 1
    assert offspring.kind == CreatureKind.FIRE
    assert offspring.gender == Gender.MALE
    out = capsys.readouterr().out
    assert "Breeding succeeded!" in out
    assert "Nom   : Mystere" in out


def test_breed_invalid_index(breeding_pair, capsys):
    """Test out-of-range indices leave the collection unchanged."""
    assert breeding_pair.breed(5, 0) is None
    assert len(breeding_pair) == 2
    assert capsys.readouterr().out == "Invalid index.\n"


def test_breed_negative_index(breeding_pair, capsys):
    """Test negative indices are rejected rather than wrapping."""
    assert breeding_pair.breed(-1, 0) is None
    assert len(breeding_pair) == 2
    assert "Invalid index." in capsys.readouterr().out


def test_breed_self(breeding_pair, capsys):
    """Test breeding a creature with itself fails on gender."""
    assert breeding_pair.breed(0, 0) is None
    assert len(breeding_pair) == 2
    assert capsys.readouterr().out == "Breeding impossible between A and A\n"


def test_breed_uses_config():
    """Test configured breeding level and offspring name."""
    elevage = Elevage(ElevageConfig(min_breeding_level=2, offspring_name="Oeuf"))
    elevage.add(Creature("A", 2, CreatureKind.WATER, 0, Gender.FEMALE))
    elevage.add(Creature("B", 2, CreatureKind.WATER, 0, Gender.MALE))
    
    offspring = elevage.breed(0, 1)
    assert offspring.name == "Oeuf"
    assert offspring.kind == CreatureKind.WATER


def test_sort_by_level_is_stable(mixed):
    """Test level sort keeps prior order among ties."""
    mixed.sort_by_level()
    assert names(mixed) == ["w1", "e1", "g1", "f2", "f1", "e2"]
    
    mixed.sort_by_level()
    assert names(mixed) == ["w1", "e1", "g1", "f2", "f1", "e2"]


def test_sort_by_type_is_stable(mixed):
    """Test kind sort follows Fire < Water < Grass < Electric."""
    mixed.sort_by_type()
    assert names(mixed) == ["f1", "f2", "w1", "g1", "e1", "e2"]
    
    mixed.sort_by_type()
    assert names(mixed) == ["f1", "f2", "w1", "g1", "e1", "e2"]


def test_persist_writes_blocks(breeding_pair, tmp_path, capsys):
    """Test persist writes to the configured path."""
    breeding_pair.persist()
    
    content = (tmp_path / "elevage.txt").read_text(encoding="utf-8")
    assert content.count("Nom   :") == 2
    assert f"Data saved to file '{tmp_path / 'elevage.txt'}'" in capsys.readouterr().out


def test_persist_explicit_path(breeding_pair, tmp_path):
    """Test persist to an explicit path."""
    target = tmp_path / "other.txt"
    breeding_pair.persist(str(target))
    assert target.exists()
    assert not (tmp_path / "elevage.txt").exists()
