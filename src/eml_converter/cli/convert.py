"""
Command-line interface for converting .eml files.

Usage:
    # Single file into a new temporary directory
    eml-convert input.eml

    # Into a chosen directory, with header block and attachments
    eml-convert input.eml --output-dir out/ --headers --attachments

    # Every .eml file below a directory, one sub-directory per message
    eml-convert emails/ --output-dir out/

    # HTML only (no PDF rendering)
    eml-convert input.eml --html-only
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional
import structlog

from eml_converter.config import settings
from eml_converter.converter import EmlConverter
from eml_converter.logging_config import bind_conversion_context, setup_logging

logger = structlog.get_logger(__name__)


# ============================================================================
# CLI FUNCTIONS
# ============================================================================

def convert_single_file(
    eml_path: Path,
    output_dir: Optional[Path] = None,
    html_name: Optional[str] = None,
    pdf_name: Optional[str] = None,
    add_headers: bool = False,
    download_attachments: bool = False,
    html_only: bool = False,
) -> dict:
    """
    Convert one .eml file.

    Args:
        eml_path: Path to .eml file
        output_dir: Output directory (created if missing), temporary if None
        html_name: HTML file name override
        pdf_name: PDF file name override
        add_headers: Prepend the header block to the PDF
        download_attachments: Write attachments next to the output
        html_only: Skip PDF rendering

    Returns:
        Result as dict with the written paths
    """
    bind_conversion_context(source=str(eml_path))
    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)

    converter = EmlConverter.from_file(
        eml_path,
        download_attachments=download_attachments,
        add_email_headers=add_headers,
    )
    converted = converter.create_file(
        output_dir, html_name, pdf_name, render_pdf_file=not html_only
    )

    return {
        "input": str(eml_path),
        "success": True,
        "charset": converter.charset,
        **converted.model_dump(mode="json"),
    }


def convert_directory(dir_path: Path, output_dir: Optional[Path] = None, **options) -> List[dict]:
    """
    Convert every .eml file below a directory.

    Each message is written into its own sub-directory (named after the file)
    of ``output_dir``. Failures are reported per file and do not stop the batch.
    """
    eml_files = sorted(dir_path.glob("**/*.eml"))

    if not eml_files:
        logger.warning("no_eml_files_found", directory=str(dir_path))
        return []

    logger.info("processing_directory", files_count=len(eml_files))

    results = []
    for eml_file in eml_files:
        target = None
        if output_dir is not None:
            target = output_dir / eml_file.relative_to(dir_path).with_suffix("")
        try:
            results.append(convert_single_file(eml_file, target, **options))
        except Exception as e:
            logger.error("file_conversion_failed", file=str(eml_file), error=str(e))
            results.append({"input": str(eml_file), "success": False, "error": str(e)})

    logger.info(
        "directory_processing_completed",
        total=len(eml_files),
        success=sum(1 for r in results if r["success"]),
        errors=sum(1 for r in results if not r["success"]),
    )
    return results


# ============================================================================
# MAIN CLI
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eml-convert",
        description="Convert .eml files into self-contained HTML and PDF documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "input",
        type=str,
        help="Path to .eml file or directory containing .eml files",
    )
    parser.add_argument(
        "--output-dir",
        "-o",
        type=str,
        default=None,
        help="Output directory (default: a new temporary directory per message)",
    )
    parser.add_argument("--html-name", type=str, default=None, help="HTML file name")
    parser.add_argument("--pdf-name", type=str, default=None, help="PDF file name")
    parser.add_argument(
        "--headers",
        action=argparse.BooleanOptionalAction,
        default=settings.add_email_headers,
        help="Prepend From/To/Cc/Date/Subject to the PDF",
    )
    parser.add_argument(
        "--attachments",
        action=argparse.BooleanOptionalAction,
        default=settings.download_attachments,
        help="Write the message attachments next to the output",
    )
    parser.add_argument(
        "--html-only",
        action="store_true",
        help="Only write the HTML file",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    setup_logging(level="DEBUG" if args.verbose else None)

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Path not found: {input_path}", file=sys.stderr)
        return 1

    options = dict(
        html_name=args.html_name,
        pdf_name=args.pdf_name,
        add_headers=args.headers,
        download_attachments=args.attachments,
        html_only=args.html_only,
    )
    output_dir = Path(args.output_dir) if args.output_dir else None

    if input_path.is_dir():
        results = convert_directory(input_path, output_dir, **options)
    else:
        try:
            results = [convert_single_file(input_path, output_dir, **options)]
        except Exception as e:
            logger.error("cli_failed", error=str(e), exc_info=True)
            print(f"Error: {e}", file=sys.stderr)
            return 1

    print(json.dumps(results, ensure_ascii=False, indent=2))
    return 0 if all(r["success"] for r in results) else 2


if __name__ == "__main__":
    sys.exit(main())
