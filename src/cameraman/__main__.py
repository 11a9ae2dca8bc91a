"""Allow `python -m cameraman`."""

import sys

from cameraman.cli import main

sys.exit(main())
