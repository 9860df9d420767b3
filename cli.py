"""
UniFi CLI launcher.

Runs the command-line client from a source checkout without installing it.

Usage:
    python cli.py --help
    python cli.py --action GetDevices
    python cli.py --action GetDevices --debug
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from unifi_cli.cli import main

if __name__ == "__main__":
    main()
