#!/usr/bin/env python3
"""
Find the shortest path between two vertices (see pathfinder.cli).

Usage:
    python scripts/find_path.py --start s --target t
    python scripts/find_path.py --graph data/roads.json --start Lviv --target Kyiv
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathfinder.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
