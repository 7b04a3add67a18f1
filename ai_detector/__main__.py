"""Allow ``python -m ai_detector``."""

import sys

from ai_detector.cli import main

sys.exit(main())
