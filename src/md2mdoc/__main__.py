"""Allow ``python -m md2mdoc``."""

import sys

from md2mdoc.cli import main

sys.exit(main())
