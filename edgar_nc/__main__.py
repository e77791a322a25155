"""
CLI entry point for the `.nc` submission parser.

Usage:
    # Describe one archive
    python -m edgar_nc describe data/0000950123-21-000001.nc
    python -m edgar_nc describe data/0000950123-21-000001.nc --json

    # Parse every archive in a directory
    python -m edgar_nc batch data/
    python -m edgar_nc batch data/ --workers 4 --quiet
"""

import argparse
import logging
import sys
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import List, Optional

from edgar_nc.config import settings
from edgar_nc.parsing import ParseError, SubmissionParser
from edgar_nc.utils.reporting import SubmissionFormatter

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Per-file worker
# ---------------------------------------------------------------------------

def _process_one(parser: SubmissionParser, file_path: Path) -> dict:
    """Parse one archive and summarise the outcome as a dict."""
    start = time.time()
    try:
        submission = parser.parse_file(file_path)
    except (ParseError, OSError, UnicodeDecodeError) as exc:
        return {
            'status': 'error',
            'file': file_path.name,
            'error': f"{type(exc).__name__}: {exc}",
            'elapsed_time': time.time() - start,
        }
    return {
        'status': 'success',
        'file': file_path.name,
        'accession_number': submission.accession_number,
        'filing_type': submission.filing_type,
        'num_documents': len(submission.documents),
        'elapsed_time': time.time() - start,
    }


def _collect_files(directory: Path) -> List[Path]:
    extensions = {f".{ext.lstrip('.').lower()}" for ext in settings.parser.input_file_extensions}
    return sorted(
        p for p in directory.iterdir()
        if p.is_file() and p.suffix.lower() in extensions
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def _run_describe(args: argparse.Namespace) -> int:
    parser = SubmissionParser()
    try:
        submission = parser.parse_file(Path(args.file))
    except (ParseError, OSError, UnicodeDecodeError) as exc:
        logger.error("Failed to parse %s: %s", args.file, exc)
        return 1

    if args.json:
        print(submission.model_dump_json(indent=2))
    else:
        print(SubmissionFormatter.format_submission(submission))
    return 0


def _run_batch(args: argparse.Namespace) -> int:
    directory = Path(args.directory)
    if not directory.is_dir():
        logger.error("Not a directory: %s", directory)
        return 1

    files = _collect_files(directory)
    if not files:
        print(f"No archives found in {directory}")
        return 0

    parser = SubmissionParser()
    total = len(files)
    max_workers = args.workers or settings.parser.default_workers
    results = []

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {executor.submit(_process_one, parser, f): f for f in files}
        for idx, future in enumerate(as_completed(futures), 1):
            result = future.result()
            results.append(result)
            if result['status'] == 'success':
                if not args.quiet:
                    logger.info(
                        "[%d/%d] OK: %s -> %s, %d documents, %.2fs",
                        idx, total, result['file'], result['filing_type'],
                        result['num_documents'], result['elapsed_time'],
                    )
            else:
                logger.error("[%d/%d] FAIL: %s - %s", idx, total, result['file'], result['error'])

    results.sort(key=lambda r: r['file'])
    SubmissionFormatter.print_summary(results, verbose=args.verbose)
    return 0 if all(r['status'] == 'success' for r in results) else 1


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="edgar_nc",
        description="EDGAR .nc submission parser: Lex -> Build tree -> Bind"
    )
    subcommands = ap.add_subparsers(dest='command', required=True)

    describe = subcommands.add_parser('describe', help='Parse one archive and describe it')
    describe.add_argument('file', help='Path to a .nc archive')
    describe.add_argument('--json', action='store_true',
                          help='Print the parsed model as JSON')

    batch = subcommands.add_parser('batch', help='Parse every archive in a directory')
    batch.add_argument('directory', help='Directory of .nc archives')
    batch.add_argument('--workers', type=int, default=None,
                       help='Concurrent workers (default: parser.default_workers)')
    batch.add_argument('--quiet', action='store_true', help='Only log failures')
    batch.add_argument('--verbose', action='store_true', help='Print per-file results')

    args = ap.parse_args(argv)

    if args.command == 'describe':
        return _run_describe(args)
    return _run_batch(args)


if __name__ == '__main__':
    sys.exit(main())
