"""Allow `python -m mathroll`."""

import sys

from .cli import main

sys.exit(main())
