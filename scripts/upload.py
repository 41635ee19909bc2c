#!/usr/bin/env python3
"""
Upload release artifacts to S3.

CLI wrapper for release_uploader.cli, runnable from a checkout without
installing the package.

Usage:
    python scripts/upload.py --channel dev --source ../browser-laptop
    python scripts/upload.py --channel beta --source /full/path/to/browser-laptop --send
"""

import sys
from pathlib import Path

# Add project root to path for imports (before other imports)
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from release_uploader.cli import main  # noqa: E402


if __name__ == "__main__":
    sys.exit(main())
