"""Allow ``python -m copd_prs``."""

import sys

from copd_prs.cli import main

sys.exit(main())
