#!/usr/bin/env python3
"""PixelArt Studio Application Launcher

This script sets up the Python path and launches the PixelArt Studio window.

Usage:
    python launch_app.py                          # Launch with configs/default.yaml
    python launch_app.py --config my_config.yaml  # Launch with a custom configuration
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

if __name__ == "__main__":
    from ui.main_window import main
    sys.exit(main())
