"""Run: python -m relay_router [--short | --fast] [-v] [input]"""

import sys

from relay_router.cli import main

sys.exit(main())
