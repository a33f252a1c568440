"""Package entry point for ``python -m numf``.

WHY: Lets users run numf without installing the console script.

HOW: Delegates straight to the CLI's main() and exits with its status.
"""

import sys

from numf.cli import main

if __name__ == "__main__":
    sys.exit(main())
