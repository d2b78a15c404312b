"""Command-line entry point for elevage."""

import sys

from .config import load_default_config
from .exceptions import ElevageError
from .models.elevage import Elevage
from .shell import run_shell


def main() -> None:
    """Run the interactive menu; abort on configuration or save failure."""
    try:
        config = load_default_config()
        run_shell(Elevage(config))
    except ElevageError as e:
        sys.exit(f"Fatal error: {e}")


if __name__ == '__main__':
    main()
