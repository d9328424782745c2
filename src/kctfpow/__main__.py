"""Entry point for python -m kctfpow."""

import sys

from .cli import main

sys.exit(main())
