"""Allow ``python -m cmus_notify``."""

import sys

from cmus_notify.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
