"""helperdocs executable module.

Error handling lives in cli.main(); this module only forwards its exit code.
"""

from __future__ import annotations

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
