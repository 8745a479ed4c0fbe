"""Allow running as ``python -m rummy_score``."""

import sys

from .cli import main

sys.exit(main())
