"""Allow ``python -m streakviz``."""

import sys

from .cli import main

sys.exit(main())
