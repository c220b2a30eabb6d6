"""Allow ``python -m token_sorter``."""

import sys

from token_sorter.cli import main

sys.exit(main())
