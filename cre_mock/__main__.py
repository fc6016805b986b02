"""Allow ``python -m cre_mock``."""

import sys

from cre_mock.cli import main

sys.exit(main())
