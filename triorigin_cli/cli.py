"""
triorigin CLI - Main entry point.

Counts the triangles in a file that contain the origin, or classifies a
single triangle given on the command line.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from triorigin.errors import TriangleError
from triorigin.geometry.detector import ContainmentDetector
from triorigin.geometry.shapes import Triangle
from triorigin.logging import LogEvent, create_logger
from triorigin_processor.config import ProcessorConfig
from triorigin_processor.service import BatchProcessorService


def load_config(config_path: Optional[str]) -> ProcessorConfig:
    """Load YAML config, or defaults when no path is given."""
    if config_path is None:
        return ProcessorConfig()

    config = ProcessorConfig.from_yaml(Path(config_path))
    logger = create_logger("cli", level=config.logging.effective_level)
    logger.info(
        event=LogEvent.CONFIG_LOADED,
        message=f"Loaded {config_path}",
        metadata={'config_path': config_path}
    )
    return config


def run_count(args: argparse.Namespace) -> int:
    config = load_config(args.config).with_overrides(
        input_path=args.input,
        error_policy=args.policy,
        workers=args.workers,
        chunk_size=args.chunk_size,
        level=args.log_level,
        trace=True if args.trace else None,
    )

    stats = BatchProcessorService(config).run()

    if args.summary:
        print(json.dumps(stats.to_dict(), indent=2))
    else:
        print(stats.contained)
    return 0


def run_classify(args: argparse.Namespace) -> int:
    try:
        triangle = Triangle.from_record(args.coords)
    except TriangleError as e:
        print(f"{e.kind}: {e}", file=sys.stderr)
        return 1

    result = ContainmentDetector.classify(triangle)
    verdict = "contains" if result.contains else "does not contain"
    print(f"{triangle} {verdict} the origin ({result.reason.value})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="triorigin",
        description="triorigin - Count triangles that contain the origin",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Count triangles in a file (one "ax,ay,bx,by,cx,cy" per line)
  triorigin count triangles.txt

  # Use a YAML config, override the error policy
  triorigin count --config config/batch.yaml --policy abort

  # Full statistics, four worker threads
  triorigin count triangles.txt --summary --workers 4

  # Classify one triangle
  triorigin classify -- -340 495 -153 -910 835 -947
"""
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    count = subparsers.add_parser('count', help='Count triangles containing the origin')
    count.add_argument('input', nargs='?', help='Triangle file (overrides config input_path)')
    count.add_argument('--config', help='Path to batch config YAML')
    count.add_argument('--policy', choices=['skip', 'abort'], help='Error policy for bad records')
    count.add_argument('--workers', type=int, help='Worker threads')
    count.add_argument('--chunk-size', type=int, help='Triangles per chunk')
    count.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='Log level')
    count.add_argument('--trace', action='store_true', help='Log every triangle classification')
    count.add_argument('--summary', action='store_true', help='Print full statistics as JSON')

    classify = subparsers.add_parser('classify', help='Classify one triangle')
    classify.add_argument('coords', nargs=6, metavar='N', help='ax ay bx by cx cy')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == 'count':
            return run_count(args)
        elif args.command == 'classify':
            return run_classify(args)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 1


if __name__ == '__main__':
    sys.exit(main())
