"""Allow running the CLI with ``python -m solid_principles``."""
import sys

from solid_principles.cli.main import main

sys.exit(main())
