"""Allow running the planner with ``python -m csv_split_planner``."""

import sys

from csv_split_planner.cli import main

sys.exit(main())
