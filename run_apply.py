#!/usr/bin/env python3
"""Entry point: apply to matching Easy Apply jobs and report the results."""
from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from easy_apply.main import main

if __name__ == "__main__":
    sys.exit(main())
