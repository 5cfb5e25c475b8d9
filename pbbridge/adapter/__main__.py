"""Allow ``python -m pbbridge.adapter``."""

import sys

from pbbridge.adapter.cli import main

sys.exit(main())
