"""Medical OCR Text Structured Data Extraction CLI.

Usage:
    python -m medtext_extractor --input <file.txt> [options]
    python -m medtext_extractor --batch <dir> [options]
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path

from medtext_extractor.schemas.medical_data import ReportCategory


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="medtext_extractor",
        description="Extract lab values, prescriptions and vitals from OCR text",
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--input",
        metavar="PATH",
        help="Path to a single OCR text file",
    )
    group.add_argument(
        "--batch", metavar="DIR", help="Directory of OCR text files (*.txt) to process"
    )

    parser.add_argument(
        "--type",
        dest="category",
        metavar="HINT",
        default=None,
        help=(
            "Report category hint ("
            + ", ".join(c.value for c in ReportCategory)
            + "); omit to try every extractor"
        ),
    )
    parser.add_argument(
        "--output",
        metavar="PATH",
        default=None,
        help="Write JSON output to file (default: stdout)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print extraction details to stderr",
    )
    parser.add_argument(
        "--format",
        choices=["json", "summary"],
        default="json",
        help="Output format: json (machine-readable) or summary (human-readable table)",
    )
    return parser


def format_summary(result) -> str:
    """Format DocumentResult as human-readable text table."""
    lines = []
    name = Path(result.source_path).name
    lines.append(f"Medical Document Analysis -- {name}")
    lines.append("=" * (len(lines[0])))

    if result.category:
        lines.append(f"Category: {result.category}")
    if result.validation:
        verdict = "medical" if result.validation.is_valid else "not medical"
        lines.append(
            f"Text validity: {verdict} (confidence: {result.validation.confidence:.0%})"
        )
    if not result.success:
        lines.append(f"Error: {result.error}")
        return "\n".join(lines)

    data = result.parsed.to_dict()
    values = {}
    values.update(data.get("bloodTest", {}))
    vitals = dict(data.get("vitals", {}))
    blood_pressure = vitals.pop("bloodPressure", None)
    values.update(vitals)

    if values or blood_pressure:
        col_widths = [18, 10, 12, 22, 10]
        lines.append("")
        lines.append("Values:")
        header = f"| {'Name':<{col_widths[0]}} | {'Value':<{col_widths[1]}} | {'Unit':<{col_widths[2]}} | {'Normal range':<{col_widths[3]}} | {'Status':<{col_widths[4]}} |"
        separator = "|" + "|".join("-" * (w + 2) for w in col_widths) + "|"
        lines.append(header)
        lines.append(separator)
        for key, value in values.items():
            lines.append(
                f"| {key:<{col_widths[0]}} "
                f"| {str(value['value']):<{col_widths[1]}} "
                f"| {value['unit']:<{col_widths[2]}} "
                f"| {value.get('normalRange', ''):<{col_widths[3]}} "
                f"| {value.get('status', '').upper():<{col_widths[4]}} |"
            )
        if blood_pressure:
            lines.append(f"Blood pressure: {blood_pressure}")

    prescription = data.get("prescription")
    if prescription and prescription["medications"]:
        lines.append("")
        lines.append("Medications:")
        for med in prescription["medications"]:
            line = f"- {med['name']} {med['dosage']}: {med['frequency']}"
            if med.get("duration"):
                line += f" ({med['duration']})"
            lines.append(line)
    if prescription:
        if prescription["doctor"]:
            lines.append(f"Doctor: {prescription['doctor']}")
        if prescription["clinic"]:
            lines.append(f"Clinic: {prescription['clinic']}")

    if result.parsed.is_empty():
        lines.append("")
        lines.append("No medical values detected.")

    return "\n".join(lines)


def process_single(path: str, args, config):
    """Process a single text file and return DocumentResult."""
    from medtext_extractor.pipeline.runner import parse_medical_text
    from medtext_extractor.pipeline.validate import validate_medical_text
    from medtext_extractor.schemas.document import DocumentResult
    from medtext_extractor.schemas.medical_data import ParsedMedicalData

    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logging.getLogger(__name__).error("read failed - %s", exc)
        return DocumentResult(
            source_path=str(path),
            category=args.category,
            parsed=ParsedMedicalData(),
            success=False,
            error=str(exc),
        )

    result = DocumentResult(
        source_path=str(path),
        category=args.category,
        parsed=parse_medical_text(text, args.category, config),
        validation=validate_medical_text(text, config),
        success=True,
    )

    if args.verbose:
        for suggestion in result.validation.suggestions:
            print(f"[validate] {suggestion}", file=sys.stderr)

    return result


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=log_level, format="%(levelname)s: %(message)s", stream=sys.stderr
    )

    from medtext_extractor.schemas.config import ParserConfig

    config = ParserConfig()

    results = []

    if args.input:
        input_path = Path(args.input)
        if not input_path.exists():
            print(f"Error: input file not found: {args.input}", file=sys.stderr)
            return 2

        results = [process_single(str(input_path), args, config)]

    elif args.batch:
        batch_dir = Path(args.batch)
        if not batch_dir.is_dir():
            print(f"Error: batch directory not found: {args.batch}", file=sys.stderr)
            return 2

        text_files = sorted(batch_dir.glob("*.txt"))
        if not text_files:
            print(f"Error: no text files found in {args.batch}", file=sys.stderr)
            return 2

        for text_path in text_files:
            results.append(process_single(str(text_path), args, config))

    if args.format == "summary":
        output_text = "\n\n".join(format_summary(r) for r in results)
    else:
        if len(results) == 1:
            output_data = results[0].model_dump(mode="json", by_alias=True, exclude_none=True)
        else:
            output_data = [
                r.model_dump(mode="json", by_alias=True, exclude_none=True) for r in results
            ]
        output_text = json.dumps(output_data, indent=2)

    if args.output:
        Path(args.output).write_text(output_text, encoding="utf-8")
    else:
        print(output_text)

    if any(not r.success for r in results):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
