"""Convert a PDF into a plain-text file for AI processing."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pymupdf as fitz

__version__ = "1.0"

HEADER = (
    "=== PDF TEXT EXTRACTION ===\n"
    "This text was extracted from a PDF file for AI processing.\n"
    "Some formatting and layout information may be lost.\n"
    "=== CONTENT BEGINS ===\n\n"
)
FOOTER = "\n\n=== CONTENT ENDS ===\n"


def extract_text_from_pdf(pdf_path: str | Path) -> str:
    doc = fitz.open(pdf_path)
    try:
        parts: list[str] = [page.get_text("text") for page in doc]
    finally:
        doc.close()
    return "\n".join(parts)


def process_extracted_text(raw_text: str) -> str:
    """Join layout-broken lines, squeeze whitespace and wrap with the header/footer.

    Blank lines are first kept as at most one paragraph break, but the final
    whitespace squeeze turns every newline into a single space, so the
    content region always comes out as one line.
    """
    pieces: list[str] = []
    newlines = 0
    # Line breaks and whitespace are Python's own sets (str.splitlines, str.isspace),
    # so \x1c-\x1f separate words too.
    for line in raw_text.splitlines():
        stripped = line.strip()
        if not stripped:
            if pieces and newlines < 2:
                pieces.append("\n")
                newlines += 1
            continue

        if pieces and not newlines:
            last = pieces[-1][-1]
            first = stripped[0]
            if (last.isalnum() and first.isalnum()) or not last.isspace():
                pieces.append(" ")

        pieces.append(stripped)
        newlines = 0

    cleaned = " ".join("".join(pieces).split())
    return f"{HEADER}{cleaned}{FOOTER}"


def default_output_path(input_path: str | Path) -> Path:
    # Lands in the working directory, not next to the PDF.
    return Path(f"{Path(input_path).stem}.txt")


def write_output(out_path: Path, text: str) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text, encoding="utf-8", errors="replace")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="pdf-to-text",
        description="Converts PDF files to text format for AI processing",
    )
    ap.add_argument("-i", "--input", metavar="FILE", required=True, help="Input PDF file path")
    ap.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="Output text file path (optional, defaults to input name with .txt extension)",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    input_path: str = args.input
    verbose: bool = args.verbose

    if not Path(input_path).exists():
        print(f"Error: Input file '{input_path}' does not exist", file=sys.stderr)
        return 1

    out_path = Path(args.output) if args.output else default_output_path(input_path)

    if verbose:
        print(f"Input file: {input_path}")
        print(f"Output file: {out_path}")
        print("Starting PDF text extraction...")

    try:
        text = extract_text_from_pdf(input_path)
    except Exception as exc:
        print(f"Error extracting text from PDF: {exc}", file=sys.stderr)
        return 1

    if verbose:
        print(f"Successfully extracted {len(text)} characters")

    processed = process_extracted_text(text)

    try:
        write_output(out_path, processed)
    except OSError as exc:
        print(f"Error writing to output file: {exc}", file=sys.stderr)
        return 1

    print(f"Successfully converted '{input_path}' to '{out_path}'")
    if verbose:
        print("Text extraction complete!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
