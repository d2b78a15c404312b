"""
Pokemon breeding collection

Main API:
    Elevage - Ordered creature collection
    Creature - Individual creature
    CreatureKind, Gender - Creature enumerations
    run_shell - Interactive text menu
    load_config - Configuration loading helper
"""

from .models import Creature, CreatureKind, Elevage, Gender
from .config import ElevageConfig, load_config
from .shell import run_shell

__all__ = [
    'Creature', 'CreatureKind', 'Elevage', 'Gender',
    'ElevageConfig', 'load_config', 'run_shell',
]
__version__ = '0.1.0'
