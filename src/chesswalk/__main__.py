"""Allow ``python -m chesswalk``."""

import sys

from chesswalk.app import main

sys.exit(main())
