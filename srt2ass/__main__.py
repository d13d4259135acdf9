"""Allow ``python -m srt2ass``."""

import sys

from srt2ass.cli import main

sys.exit(main())
