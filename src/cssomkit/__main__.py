"""Allow ``python -m cssomkit``."""

import sys

from .cli import main

sys.exit(main())
