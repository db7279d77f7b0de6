"""
Command line interface for Lottiepress.
"""

import argparse
import sys
from pathlib import Path
from typing import Dict, List, Optional

from lottiepress.core.batch_optimizer import BatchOptimizer
from lottiepress.core.config import OptimizerConfig
from lottiepress.utils.format import format_size
from lottiepress.utils.logger import get_logger


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="lottiepress",
        description="Shrink Lottie JSON animations: embedded images to WebP, default fields removed, "
        "numbers rounded, output minified.",
    )
    parser.add_argument(
        "input_dir",
        nargs="?",
        type=Path,
        default=Path("inputs"),
        help="Folder containing the Lottie JSON files (default: ./inputs)",
    )
    parser.add_argument(
        "output_dir",
        nargs="?",
        type=Path,
        default=Path("outputs"),
        help="Folder to write optimized files to (default: ./outputs)",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=4,
        help="Maximum number of images recoded at the same time within one file (default: 4)",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=3,
        help="Decimal places kept for numbers (default: 3)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument("--log-dir", default="logs", help="Folder for log files (default: ./logs)")
    parser.add_argument("--no-log-file", action="store_true", help="Disable writing a log file")
    parser.add_argument(
        "--log-rotate",
        action="store_true",
        help="Rotate the log file once it reaches --log-max-bytes",
    )
    parser.add_argument(
        "--log-max-bytes",
        type=int,
        default=10485760,
        help="Log file size that triggers rotation (default: 10 MB)",
    )
    parser.add_argument(
        "--log-backup-count",
        type=int,
        default=5,
        help="Number of rotated log files to keep (default: 5)",
    )
    return parser


def print_summary(stats: Dict) -> None:
    """Print a summary of a finished run."""
    print("=" * 60)
    print("Optimization Summary")
    print("=" * 60)
    print(f"Files processed: {stats['processed']}")
    print(f"Errors: {stats['errors']}")
    print(f"Images converted: {stats['images_converted']}")
    print(f"Sequences optimized: {stats['sequences_optimized']}")
    print(f"Assets skipped: {stats['assets_skipped']}")
    if stats["processed"]:
        print(
            f"Total size: {format_size(stats['total_original_size'])} → "
            f"{format_size(stats['total_optimized_size'])}"
        )
        print(f"Space saved: {format_size(stats['space_saved'])}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run Lottiepress from the command line.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    logger = get_logger()
    logger.configure(
        log_level=args.log_level,
        log_dir=args.log_dir,
        enable_file=not args.no_log_file,
        rotation_enabled=args.log_rotate,
        max_bytes=args.log_max_bytes,
        backup_count=args.log_backup_count,
    )

    config = OptimizerConfig(
        input_dir=args.input_dir,
        output_dir=args.output_dir,
        max_workers=args.max_workers,
        precision=args.precision,
    )

    try:
        stats = BatchOptimizer(config).optimize()
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    except OSError as error:
        logger.error(f"Error during initialization: {error}")
        return 1

    print_summary(stats)
    return 0
