"""Allow ``python -m radio_browser.cli`` execution."""

import sys

from radio_browser.cli.search import main

sys.exit(main())
