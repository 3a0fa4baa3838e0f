"""Command line entry point.

Usage:
    panel-coder house_blocks.json
    panel-coder house_blocks.json -o out/house.csv --block-name Door
    panel-coder house_blocks.json --no-write-back -v
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import Config
from .pipeline import run_naming
from .report.csv_writer import default_report_path
from .sources.json_export import JsonBlockSource


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="panel-coder",
        description="Give panel blocks dimension-coded names and export an area report",
    )
    parser.add_argument("export", help="JSON export of the drawing's block references")
    parser.add_argument("-o", "--output", help="CSV path (default: <drawing>_Panels.csv next to the drawing)")
    parser.add_argument("--block-name", default=Config.target_block_name, help="Block name to process")
    parser.add_argument("--save-to", help="Write the renamed export here instead of overwriting it")
    parser.add_argument("--no-write-back", action="store_true", help="Report only; leave the export untouched")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = Config(target_block_name=args.block_name)
    write_back = not args.no_write_back

    try:
        source = JsonBlockSource(args.export, config)
        report_path = args.output or default_report_path(source.drawing_path, config)
        result = run_naming(source, report_path, config, write_back=write_back)
        if write_back and result.processed:
            source.save(args.save_to)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for line in result.summary_lines():
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
