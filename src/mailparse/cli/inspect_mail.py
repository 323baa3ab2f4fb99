"""
Command-line interface for inspecting .eml files.

Parses messages and prints their structure (headers, content types, decoded
bodies, nested parts) as JSON.

Usage:
    # Single file
    python -m mailparse.cli.inspect_mail input.eml

    # Directory batch processing
    python -m mailparse.cli.inspect_mail emails/ --output results.jsonl

    # Structure only, no body text
    python -m mailparse.cli.inspect_mail input.eml --no-body --format json
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from mailparse.config import settings
from mailparse.errors import MailParseError
from mailparse.logging_config import setup_logging
from mailparse.models.summary import ParseReport
from mailparse.parsing.mail_parser import parse_mail
from mailparse.parsing.mime_utils import summarize_message
from mailparse.version import PARSER_VERSION

logger = structlog.get_logger(__name__)


# ============================================================================
# CLI FUNCTIONS
# ============================================================================

def process_single_file(
    eml_path: Path,
    include_body: bool = True,
    max_depth: Optional[int] = None,
    verbose: bool = False,
) -> dict:
    """
    Parse a single .eml file.

    Args:
        eml_path: Path to .eml file
        include_body: Include decoded body text of leaf parts
        max_depth: Multipart nesting limit (default from settings)
        verbose: Enable verbose output

    Returns:
        ParseReport as dict

    Raises:
        ValueError: If the file exceeds max_email_size_mb
        MailParseError: If the message cannot be parsed
    """
    if verbose:
        logger.info("processing_file", path=str(eml_path))

    eml_bytes = eml_path.read_bytes()
    max_bytes = settings.max_email_size_mb * 1024 * 1024
    if len(eml_bytes) > max_bytes:
        raise ValueError(
            f"File is {len(eml_bytes)} bytes, limit is {settings.max_email_size_mb} MB"
        )

    mail = parse_mail(eml_bytes, max_depth=max_depth)
    summary = summarize_message(mail, include_body=include_body)

    if verbose:
        logger.info(
            "file_parsed",
            path=str(eml_path),
            mimetype=mail.ctype.mimetype,
            parts=sum(1 for _ in mail.walk()),
        )

    report = ParseReport(
        source=str(eml_path),
        parser_version=PARSER_VERSION,
        raw_size_bytes=len(eml_bytes),
        message=summary,
    )
    return report.model_dump()


def process_directory(
    dir_path: Path,
    include_body: bool = True,
    max_depth: Optional[int] = None,
    verbose: bool = False,
) -> List[dict]:
    """
    Parse all .eml files below a directory.

    Files that fail are reported with their error instead of a message tree.

    Args:
        dir_path: Directory path
        include_body: Include decoded body text of leaf parts
        max_depth: Multipart nesting limit (default from settings)
        verbose: Enable verbose output

    Returns:
        List of ParseReport dicts, sorted by path
    """
    eml_files = sorted(dir_path.glob("**/*.eml"))

    if not eml_files:
        logger.warning("no_eml_files_found", directory=str(dir_path))
        return []

    logger.info("processing_directory", files_count=len(eml_files))

    results = []
    errors = 0

    for idx, eml_file in enumerate(eml_files, 1):
        if verbose:
            print(
                f"[{idx}/{len(eml_files)}] Processing {eml_file.name}...",
                file=sys.stderr,
            )

        try:
            result = process_single_file(
                eml_path=eml_file,
                include_body=include_body,
                max_depth=max_depth,
                verbose=verbose,
            )
        except (MailParseError, ValueError, OSError) as e:
            logger.error("file_processing_failed", file=str(eml_file), error=str(e))
            errors += 1
            result = ParseReport(
                source=str(eml_file),
                parser_version=PARSER_VERSION,
                raw_size_bytes=eml_file.stat().st_size,
                error=str(e),
            ).model_dump()

        results.append(result)

    logger.info(
        "directory_processing_completed",
        total=len(eml_files),
        success=len(eml_files) - errors,
        errors=errors,
    )

    return results


def write_output(results: List[dict], output_path: Optional[Path], format: str = "jsonl"):
    """
    Write results to file.

    Args:
        results: List of parse reports
        output_path: Output file path (None for stdout)
        format: Output format ("json" or "jsonl")
    """
    if not output_path:
        if format == "jsonl":
            for result in results:
                print(json.dumps(result, ensure_ascii=False))
        else:
            print(json.dumps(results, ensure_ascii=False, indent=2))
        return

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        if format == "jsonl":
            for result in results:
                f.write(json.dumps(result, ensure_ascii=False) + "\n")
        else:
            json.dump(results, f, ensure_ascii=False, indent=2)

    logger.info("output_written", path=str(output_path), count=len(results))


# ============================================================================
# MAIN CLI
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Inspect .eml files - print headers, content types and bodies as JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Single file
  %(prog)s input.eml

  # Process directory, save to file
  %(prog)s emails/ --output results.jsonl

  # Structure only
  %(prog)s input.eml --no-body

  # Stricter nesting limit
  %(prog)s input.eml --max-depth 8
        """,
    )

    parser.add_argument(
        "input",
        type=str,
        help="Path to .eml file or directory containing .eml files",
    )

    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output file path (default: stdout). A .json suffix selects json format",
    )

    parser.add_argument(
        "--format",
        "-f",
        type=str,
        choices=["json", "jsonl"],
        default="jsonl",
        help="Output format (default: jsonl)",
    )

    parser.add_argument(
        "--no-body",
        action="store_true",
        help="Leave decoded body text out of the output",
    )

    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help=f"Maximum multipart nesting depth (default: {settings.max_nesting_depth})",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None)

    input_path = Path(args.input)

    if not input_path.exists():
        print(f"Error: Path not found: {input_path}", file=sys.stderr)
        sys.exit(1)

    try:
        if input_path.is_file():
            result = process_single_file(
                eml_path=input_path,
                include_body=not args.no_body,
                max_depth=args.max_depth,
                verbose=args.verbose,
            )
            results = [result]

        elif input_path.is_dir():
            results = process_directory(
                dir_path=input_path,
                include_body=not args.no_body,
                max_depth=args.max_depth,
                verbose=args.verbose,
            )

        else:
            print(f"Error: Invalid input path: {input_path}", file=sys.stderr)
            sys.exit(1)

        output_path = Path(args.output) if args.output else None

        # Auto-detect format from file extension
        if output_path and args.format == "jsonl" and output_path.suffix == ".json":
            format = "json"
        else:
            format = args.format

        write_output(results, output_path, format)

        if args.verbose:
            print(f"\nParsed {len(results)} messages", file=sys.stderr)

    except (MailParseError, ValueError, OSError) as e:
        logger.error("cli_failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
