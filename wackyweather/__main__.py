# ABOUTME: Module entry point so the tool runs as `python -m wackyweather CITY...`.
# ABOUTME: Delegates to the CLI and exits with its status code.

import sys

from wackyweather.cli import main

sys.exit(main())
