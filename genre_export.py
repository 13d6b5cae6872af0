#!/usr/bin/env python3
"""
Entry point wrapper that can be run from the project root directory.
"""

import sys
from pathlib import Path


def setup_and_run():
    """Put src on the Python path and run the exporter."""
    project_root = Path(__file__).parent
    sys.path.insert(0, str(project_root / "src"))

    from tubegenre.main import main

    sys.exit(main())


if __name__ == "__main__":
    setup_and_run()
