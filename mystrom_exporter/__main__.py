"""Allow running the exporter with ``python -m mystrom_exporter``."""

import sys

from .cli import main

sys.exit(main())
