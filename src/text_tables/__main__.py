"""Allow ``python -m text_tables``."""

import sys

from text_tables.cli import main

sys.exit(main())
