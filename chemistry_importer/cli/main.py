"""
Command Line Interface for the chemistry importer.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from ..config import load_config
from ..errors import FormatNotRecognizedError
from ..file_processing import select_formats
from ..importer import detect_formats, load_file
from ..utils.logging import configure_logging, log_system_info

logger = logging.getLogger(__name__)

OUTPUT_MODES = ("pretty", "wire")


def build_parser():
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="chemistry-importer",
        description="Import computational chemistry files into a normalized JSON tree",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    # General options
    parser.add_argument("--config", help="Path to configuration file")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level (overrides the configuration)")
    parser.add_argument("--log-file", help="Path to log file")
    parser.add_argument("--no-console", action="store_true", help="Disable console logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    load_parser = subparsers.add_parser("load", help="Import a single file")
    load_parser.add_argument("input", help="Input file")
    load_parser.add_argument("--output", help="Write the JSON tree to this file instead of stdout")
    load_parser.add_argument("--mode", choices=OUTPUT_MODES,
                             help="pretty: decoded payloads, wire: payloads as byte arrays")
    load_parser.add_argument("--indent", type=int, help="JSON indentation")

    detect_parser = subparsers.add_parser("detect", help="List the formats that recognize a file")
    detect_parser.add_argument("input", help="Input file")

    subparsers.add_parser("formats", help="List the configured formats in dispatch order")

    batch_parser = subparsers.add_parser("batch", help="Import every matching file in a directory")
    batch_parser.add_argument("input", help="Input directory")
    batch_parser.add_argument("--output", help="Output directory (default: <input>/imported)")
    batch_parser.add_argument("--pattern", help="Glob pattern of files to import")
    batch_parser.add_argument("--mode", choices=OUTPUT_MODES, help="Output mode")
    batch_parser.add_argument("--no-progress", action="store_true", help="Disable the progress bar")

    subparsers.add_parser("version", help="Show version information")

    return parser


def parse_args(argv=None):
    """
    Parse command line arguments.

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    return build_parser().parse_args(argv)


def _render(node, mode, indent):
    tree = node.describe() if mode == "pretty" else node.to_dict()
    return json.dumps(tree, indent=indent)


def _report_failure(error):
    print(f"\nError: {error}", file=sys.stderr)
    if error.attempts:
        names = ", ".join(name for name, _ in error.attempts)
        print(f"Note: the file was recognized as {names} but could not be parsed; "
              f"it may be a damaged file of that format.", file=sys.stderr)


def run_load_command(args, config):
    """
    Run the load command.

    Args:
        args (argparse.Namespace): Command line arguments.
        config (ConfigManager): Configuration.

    Returns:
        int: Exit code.
    """
    input_path = Path(args.input).expanduser()
    mode = args.mode or config.get("output.mode", "pretty")
    indent = args.indent if args.indent is not None else config.get("output.indent", 2)
    formats = select_formats(config.get("importer.formats"))

    try:
        node = load_file(input_path, formats)
    except FormatNotRecognizedError as e:
        _report_failure(e)
        return 1
    except OSError as e:
        logger.error(f"Failed to read file {input_path}: {e}")
        print(f"\nError: Failed to read file: {e}", file=sys.stderr)
        return 1

    text = _render(node, mode, indent)
    if args.output:
        output_path = Path(args.output).expanduser()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text + "\n", encoding="utf-8")
        print(f"Wrote {output_path}")
    else:
        print(text)
    return 0


def run_detect_command(args, config):
    input_path = Path(args.input).expanduser()
    formats = select_formats(config.get("importer.formats"))

    try:
        names = detect_formats(input_path, formats)
    except OSError as e:
        print(f"\nError: Failed to read file: {e}", file=sys.stderr)
        return 1

    if not names:
        print(f"{input_path.name}: no format recognized")
        return 1
    for name in names:
        print(f"{input_path.name}: {name}")
    return 0


def run_formats_command(config):
    for position, fmt in enumerate(select_formats(config.get("importer.formats")), start=1):
        print(f"{position}. {fmt.name}")
    return 0


def run_batch_command(args, config):
    """
    Run the batch command.

    Every file matching the pattern is imported; successes are written as
    ``<file name>.json`` into the output directory.

    Returns:
        int: 0 if every file was imported, 1 otherwise.
    """
    input_dir = Path(args.input).expanduser().resolve()
    if not input_dir.is_dir():
        logger.error(f"Input directory does not exist or is not a directory: {input_dir}")
        print(f"\nInput directory does not exist: {input_dir}", file=sys.stderr)
        return 1

    output_dir = (Path(args.output).expanduser() if args.output else input_dir / "imported").resolve()
    output_dir.mkdir(parents=True, exist_ok=True)
    pattern = args.pattern or config.get("batch.pattern", "*")
    mode = args.mode or config.get("output.mode", "pretty")
    indent = config.get("output.indent", 2)
    show_progress = config.get("batch.progress", True) and not args.no_progress
    formats = select_formats(config.get("importer.formats"))

    # Results from earlier runs are never imported again
    files = sorted(
        p for p in input_dir.glob(pattern) if p.is_file() and output_dir not in p.parents
    )
    logger.info(f"Found {len(files)} files matching {pattern} in {input_dir}")

    failures = []
    for file_path in tqdm(files, desc="Importing files", unit="file", disable=not show_progress):
        try:
            node = load_file(file_path, formats)
        except (FormatNotRecognizedError, OSError) as e:
            logger.warning(f"Failed to import {file_path.name}: {e}")
            failures.append((file_path, e))
            continue
        out_file = output_dir / f"{file_path.name}.json"
        out_file.write_text(_render(node, mode, indent) + "\n", encoding="utf-8")

    print(f"\nImported {len(files) - len(failures)} of {len(files)} files into {output_dir}")
    for file_path, error in failures:
        print(f"  {file_path.name}: {error}")
    return 1 if failures else 0


def show_version():
    """
    Show version information.

    Returns:
        int: Exit code.
    """
    from .. import __version__
    print(f"chemistry-importer v{__version__}")
    return 0


def main(argv=None):
    """
    Main entry point for the CLI.

    Returns:
        int: Exit code.
    """
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        select_formats(config.get("importer.formats"))
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    configure_logging(
        level=args.log_level or config.get("logging.level", "INFO"),
        log_file=args.log_file or config.get("logging.file"),
        console=config.get("logging.console", True) and not args.no_console,
        log_format=config.get("logging.format"),
    )
    log_system_info()

    if args.command == "load":
        return run_load_command(args, config)

    elif args.command == "detect":
        return run_detect_command(args, config)

    elif args.command == "formats":
        return run_formats_command(config)

    elif args.command == "batch":
        return run_batch_command(args, config)

    elif args.command == "version":
        return show_version()

    else:
        build_parser().print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
