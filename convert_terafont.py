#!/usr/bin/env python3
"""
Convert Terafont Gujarati text files to Unicode.

This script converts plain text files typed with the legacy Terafont
Gujarati keyboard encoding into Unicode Gujarati text files.

Pipeline (per file):
1. Read the Terafont text (UTF-8)
2. Convert with terafont_converter.convert
3. Write the Unicode text next to the source, or mirrored under an
   output directory for batch runs

Usage:
    # Convert a string and print the result:
    python convert_terafont.py --text "Af"

    # Convert a single file:
    python convert_terafont.py --single letter.txt -o letter.unicode.txt

    # Convert all files in a directory tree:
    python convert_terafont.py --all --input-dir terafont/ --output-dir unicode/

    # Adjust worker count, replace existing outputs:
    python convert_terafont.py --all --workers 4 --overwrite
"""

import sys
import logging
import argparse
import multiprocessing
from pathlib import Path
from collections import Counter
from concurrent.futures import ThreadPoolExecutor, as_completed

from natsort import natsorted

from terafont_converter import convert, find_unmapped_characters
from terafont_mapping import count_gujarati_chars

# Configure logging with immediate output
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)
logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================

# Default directories for batch conversion
INPUT_DIR = Path.cwd() / "terafont"
OUTPUT_DIR = Path.cwd() / "unicode"

# Number of parallel workers (default: CPU count - 1, min 1)
DEFAULT_WORKERS = max(1, multiprocessing.cpu_count() - 1)

# Supported file extensions
SUPPORTED_EXTENSIONS = {'.txt'}

# Replaces the source extension on converted files
OUTPUT_SUFFIX = '.unicode.txt'

FILE_ENCODING = 'utf-8'

# Log progress every N files in batch mode
PROGRESS_EVERY = 10


# =============================================================================
# Text Conversion
# =============================================================================

def read_terafont_file(path: Path) -> str:
    """Read a Terafont text file."""
    with open(path, 'r', encoding=FILE_ENCODING) as f:
        return f.read()


def convert_text(text: str) -> str:
    """
    Convert Terafont text to Unicode, warning when there is nothing to do.

    Args:
        text: Terafont encoded text

    Returns:
        Unicode text, or the input unchanged if it is empty or whitespace
    """
    if not text or not text.strip():
        logger.warning("No content to process")
        return text

    return convert(text)


# =============================================================================
# Discovery Functions
# =============================================================================

def is_output_file(path: Path) -> bool:
    return path.name.endswith(OUTPUT_SUFFIX)


def find_terafont_files(directory: Path, extensions: set = None) -> list:
    """
    Recursively find all Terafont text files in directory.

    Files produced by this script (ending in OUTPUT_SUFFIX) are skipped so
    that converting in place can be repeated.

    Args:
        directory: Directory to search
        extensions: Set of file extensions (e.g., {'.txt'})

    Returns:
        List of Path objects, naturally sorted
    """
    if extensions is None:
        extensions = SUPPORTED_EXTENSIONS

    files = set()
    for ext in extensions:
        files.update(directory.rglob(f"*{ext}"))
        files.update(directory.rglob(f"*{ext.upper()}"))

    files = [f for f in files if f.is_file() and not is_output_file(f)]
    return natsorted(files, key=lambda p: str(p.relative_to(directory)))


def get_output_path(input_path: Path, input_dir: Path = None, output_dir: Path = None) -> Path:
    """
    Get the output path for a converted file.

    letter.txt -> letter.unicode.txt

    With both directories given, the path relative to input_dir is kept
    under output_dir:
        terafont/a/b.txt -> unicode/a/b.unicode.txt
    """
    name = input_path.stem + OUTPUT_SUFFIX

    if input_dir is None or output_dir is None:
        return input_path.with_name(name)

    relative = input_path.relative_to(input_dir)
    return output_dir / relative.parent / name


# =============================================================================
# Single File Conversion
# =============================================================================

def convert_single_file(input_path: Path, output_path: Path = None, overwrite: bool = False) -> dict:
    """
    Convert a single Terafont file to Unicode.

    Args:
        input_path: Path to the Terafont text file
        output_path: Where to write the result (default: next to the input)
        overwrite: Replace an existing output file

    Returns:
        dict with results: {file, output, status, chars, unmapped, error}
        where status is 'converted', 'skipped', 'empty' or 'failed'
    """
    if output_path is None:
        output_path = get_output_path(input_path)

    result = {
        "file": str(input_path),
        "output": str(output_path),
        "status": "failed",
        "chars": 0,
        "unmapped": Counter(),
        "error": None
    }

    if output_path.exists() and not overwrite:
        logger.debug(f"SKIP (output exists): {input_path}")
        result["status"] = "skipped"
        return result

    try:
        text = read_terafont_file(input_path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading {input_path}: {e}")
        result["error"] = str(e)
        return result

    if not text.strip():
        logger.warning(f"No content to process: {input_path}")
        result["status"] = "empty"
        return result

    unicode_text = convert(text)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding=FILE_ENCODING) as f:
            f.write(unicode_text)
    except OSError as e:
        logger.error(f"Error writing {output_path}: {e}")
        result["error"] = str(e)
        return result

    result["status"] = "converted"
    result["chars"] = count_gujarati_chars(unicode_text)
    result["unmapped"] = find_unmapped_characters(text)

    logger.debug(f"  {input_path} -> {output_path} ({result['chars']} Gujarati chars)")
    return result


# =============================================================================
# Batch Conversion
# =============================================================================

def convert_all_files(input_dir: Path = None, output_dir: Path = None,
                      workers: int = DEFAULT_WORKERS, overwrite: bool = False) -> dict:
    """
    Convert all Terafont files under input_dir using a thread pool.

    Args:
        input_dir: Directory containing Terafont text files
        output_dir: Output directory (relative paths are mirrored)
        workers: Number of parallel workers
        overwrite: Replace existing output files

    Returns:
        dict with totals: {converted, skipped, empty, failed, unmapped}
    """
    if input_dir is None:
        input_dir = INPUT_DIR
    if output_dir is None:
        output_dir = OUTPUT_DIR

    logger.info("=" * 60)
    logger.info("TERAFONT TO UNICODE CONVERTER")
    logger.info("=" * 60)
    logger.info(f"Input directory: {input_dir}")
    logger.info(f"Output directory: {output_dir}")
    logger.info(f"Workers: {workers}")

    totals = {
        "converted": 0,
        "skipped": 0,
        "empty": 0,
        "failed": 0,
        "unmapped": Counter()
    }

    files = find_terafont_files(input_dir)
    if not files:
        logger.warning(f"No Terafont files found in {input_dir}")
        return totals

    logger.info(f"Found {len(files)} files to process")

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {
            executor.submit(
                convert_single_file,
                path,
                get_output_path(path, input_dir, output_dir),
                overwrite
            ): path
            for path in files
        }

        completed = 0
        for future in as_completed(futures):
            result = future.result()
            totals[result["status"]] += 1
            totals["unmapped"].update(result["unmapped"])

            if result["status"] == "failed":
                logger.error(f"  [FAIL] {futures[future].name}: {result['error']}")

            completed += 1
            if completed % PROGRESS_EVERY == 0:
                logger.info(f"[Progress] {completed}/{len(files)} files completed")

    # Summary
    logger.info("=" * 60)
    logger.info("Conversion complete!")
    logger.info(f"  Converted: {totals['converted']}")
    logger.info(f"  Skipped (output exists): {totals['skipped']}")
    logger.info(f"  Empty: {totals['empty']}")
    logger.info(f"  Failed: {totals['failed']}")
    logger.info(f"  Output: {output_dir}")
    logger.info("=" * 60)

    if totals["unmapped"]:
        logger.info("Characters passed through unchanged:")
        for char, count in totals["unmapped"].most_common(20):
            logger.info(f"  {char!r} (U+{ord(char):04X}): {count}")

    return totals


# =============================================================================
# Main Entry Point
# =============================================================================

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Convert Terafont Gujarati text to Unicode"
    )

    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--text", "-t",
        metavar="STRING",
        help="Convert a string and print the result"
    )
    group.add_argument(
        "--single", "-s",
        metavar="FILE",
        type=Path,
        help="Convert a single Terafont text file"
    )
    group.add_argument(
        "--all", "-a",
        action="store_true",
        help="Convert all Terafont files under --input-dir"
    )

    parser.add_argument(
        "--output", "-o",
        metavar="FILE",
        type=Path,
        help="Output file for --single (default: next to the input)"
    )
    parser.add_argument(
        "--input-dir",
        type=Path,
        default=INPUT_DIR,
        help=f"Input directory for --all (default: {INPUT_DIR})"
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=OUTPUT_DIR,
        help=f"Output directory for --all (default: {OUTPUT_DIR})"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=DEFAULT_WORKERS,
        help=f"Number of parallel workers (default: {DEFAULT_WORKERS})"
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Replace existing output files"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every converted file"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.text is not None:
        print(convert_text(args.text))
        return 0

    if args.single:
        if not args.single.exists():
            logger.error(f"File not found: {args.single}")
            return 1

        result = convert_single_file(args.single, args.output, overwrite=args.overwrite)
        if result["status"] == "failed":
            return 1
        logger.info(f"{result['status'].capitalize()}: {args.single} -> {result['output']}")
        return 0

    if not args.input_dir.exists():
        logger.error(f"Input directory not found: {args.input_dir}")
        return 1

    totals = convert_all_files(args.input_dir, args.output_dir, args.workers, args.overwrite)
    return 1 if totals["failed"] else 0


if __name__ == "__main__":
    sys.exit(main())
