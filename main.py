#!/usr/bin/env python3
"""
nocta-ui init
Main entry point: prepares the current project to use nocta-ui components.
"""

import logging
import os
import sys

from scaffold.init_command import run_init
from scaffold.report_builder import ReportBuilder

LOG_LEVEL_ENV = 'NOCTA_LOG_LEVEL'

def configure_logging() -> None:
    level = os.environ.get(LOG_LEVEL_ENV, 'WARNING').upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING),
                        format='%(levelname)s %(name)s: %(message)s')

def main() -> int:
    """Run init in the current directory and print the summary."""
    configure_logging()
    print("Initializing nocta-ui...")
    try:
        result = run_init()
    except Exception as e:
        logging.getLogger(__name__).debug("init failed", exc_info=True)
        print("❌ Failed to initialize nocta-ui")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(ReportBuilder().generate_text_report(result))
    return 0

if __name__ == "__main__":
    sys.exit(main())
