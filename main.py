#!/usr/bin/env python3
"""
Entry point for the Go safe enum generator.

This file allows running the tool directly from the project root:
    python main.py -f <file.go> [-o <output.go>] [--yaml]
"""

import sys
from pathlib import Path

# Add src to path for development mode
project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from go_safe_enum_generator.main import main

if __name__ == "__main__":
    main()
