"""Allow ``python -m make_ca``."""

import sys

from make_ca.cli import main

sys.exit(main())
