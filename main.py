#!/usr/bin/env python3
"""
Baseline Screenshot Capture
Main entry point: captures every page at every viewport into one directory.

Usage: python main.py [output_dir]
       capture-screenshots [output_dir]

Run as a script, pages are read from this file's directory. The installed
capture-screenshots command reads them from the current working directory.
"""

import json
import logging
import sys
from pathlib import Path

from visual.capture_config import DEFAULT_OUTPUT_DIR, default_config
from visual.generate_screenshots import capture_screenshots

logger = logging.getLogger(__name__)

SCRIPT_DIR = Path(__file__).resolve().parent

def main(argv=None, base_dir=None) -> int:
    """Main execution function."""
    args = sys.argv[1:] if argv is None else argv
    output_dir = args[0] if args else DEFAULT_OUTPUT_DIR
    base_dir = SCRIPT_DIR if base_dir is None else Path(base_dir)

    logging.basicConfig(level=logging.INFO, format='%(message)s')

    try:
        report = capture_screenshots(output_dir, default_config(base_dir))
        if not report.ok:
            logger.info(json.dumps(report.to_dict(), indent=2))
        report.raise_for_failure()
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0

def run() -> int:
    """Console entry: pages resolve against the current working directory."""
    return main(base_dir=Path.cwd())

if __name__ == "__main__":
    sys.exit(main())
