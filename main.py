#!/usr/bin/env python3
"""
Command-line entry point for Log Triage Analyzer

Usage:
    python main.py <file.log> [--json]
"""

import json
import logging
import sys
from typing import List, Optional

from log_triage_analyzer.config import Config
from log_triage_analyzer.controller import UploadController
from log_triage_analyzer.models import SelectedFile
from log_triage_analyzer.report import build_markdown_report

USAGE = "Usage: python main.py <file.log> [--json]"


def setup_logging():
    """Setup logging configuration"""
    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def main(argv: Optional[List[str]] = None, controller: Optional[UploadController] = None) -> int:
    """Analyze one log file and print the report; returns the process exit code"""
    args = sys.argv[1:] if argv is None else argv
    as_json = '--json' in args
    paths = [arg for arg in args if arg != '--json']

    if len(paths) != 1 or any(path.startswith('--') for path in paths):
        print(USAGE, file=sys.stderr)
        return 2

    setup_logging()
    logger = logging.getLogger(__name__)

    if not as_json:
        print("🔍 Log File Triage Analyzer")
        print("=" * 50)
        print("📋 Configuration Summary:")
        for key, value in Config.get_summary().items():
            print(f"   {key}: {value}")
        print()

    try:
        candidate = SelectedFile.from_path(paths[0])
    except OSError as e:
        logger.error(f"Failed to read {paths[0]}: {e}")
        print(f"❌ Cannot read {paths[0]}: {e}", file=sys.stderr)
        return 1

    controller = controller or UploadController()
    if not controller.select_file(candidate):
        print(f"❌ {controller.state.error}", file=sys.stderr)
        return 1

    outcome = controller.submit()
    if outcome is None or not outcome.ok:
        print(f"❌ Analysis failed: {controller.state.error}", file=sys.stderr)
        return 1

    if as_json:
        print(json.dumps(outcome.result.model_dump(), indent=2))
    else:
        print(build_markdown_report(outcome.result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
