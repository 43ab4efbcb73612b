"""CLI entry point for IntakeForms."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import TYPE_CHECKING

from intakeforms import __version__, logger
from intakeforms.importer import import_schema
from intakeforms.logging import configure_logging, form_log_context
from intakeforms.processing.serialization import dump_schema_json, export_filename
from intakeforms.processing.validation import validate_form
from intakeforms.processing.visibility import compute_visibility
from intakeforms.settings import get_settings

if TYPE_CHECKING:
    from intakeforms.settings import Settings
    from intakeforms.typing.models import FormSchema


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser.

    Returns:
        argparse.ArgumentParser: The configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="intakeforms")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    check_parser = subparsers.add_parser("check", help="Check that a schema JSON file is well formed")
    check_parser.add_argument("--input", required=True, type=Path, dest="input_path")

    normalize_parser = subparsers.add_parser("normalize", help="Write the normalized form of a schema JSON file")
    normalize_parser.add_argument("--input", required=True, type=Path, dest="input_path")
    normalize_parser.add_argument("--output", type=Path, default=None, dest="output_path")

    evaluate_parser = subparsers.add_parser(
        "evaluate",
        help="Compute field visibility and validation errors for a set of answers",
    )
    evaluate_parser.add_argument("--schema", required=True, type=Path, dest="schema_path")
    evaluate_parser.add_argument("--answers", required=True, type=Path, dest="answers_path")
    evaluate_parser.add_argument("--output", type=Path, default=None, dest="output_path")

    return parser


def _load_schema(path: Path) -> FormSchema | None:
    """Import a schema file, logging every rejection reason.

    Args:
        path (Path): Schema JSON file.

    Returns:
        FormSchema | None: Imported schema, or None when it was rejected.
    """
    result = import_schema(path.read_text(encoding="utf-8-sig"))
    if not result.ok:
        for reason in result.reasons:
            logger.error("Schema rejected", extra={"input_path": str(path), "reason": reason})
        return None
    return result.unwrap()


def _run_check(args: argparse.Namespace) -> int:
    schema = _load_schema(args.input_path)
    if schema is None:
        return 1
    logger.info("Schema is valid", extra={"title": schema.title, "field_count": len(schema.fields)})
    return 0


def _run_normalize(args: argparse.Namespace, settings: Settings) -> int:
    schema = _load_schema(args.input_path)
    if schema is None:
        return 1

    output_path = args.output_path or Path(settings.results_dir) / export_filename(schema.title)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dump_schema_json(schema), encoding="utf-8")
    logger.info("Normalized schema written", extra={"output_path": str(output_path)})
    return 0


def _run_evaluate(args: argparse.Namespace, settings: Settings) -> int:
    schema = _load_schema(args.schema_path)
    if schema is None:
        return 1

    answers = json.loads(args.answers_path.read_text(encoding="utf-8-sig"))
    if not isinstance(answers, dict):
        logger.error("Answers file must contain a JSON object", extra={"answers_path": str(args.answers_path)})
        return 1

    with form_log_context(schema.title):
        visible = compute_visibility(schema, answers)
        errors = validate_form(schema, answers, visible)
        report = {"visible": visible, "errors": errors, "valid": not errors}

        output_path = args.output_path or Path(settings.results_dir) / export_filename(schema.title, suffix="report")
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(report, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.info(
            "Evaluation report written",
            extra={"output_path": str(output_path), "valid": not errors, "error_count": len(errors)},
        )
    return 0 if not errors else 1


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv (list[str] | None): Arguments to parse, defaults to `sys.argv[1:]`.

    Returns:
        int: Exit code (0 for success, 1 for rejected input or error).
    """
    settings = get_settings()
    configure_logging(settings=settings)

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "check":
            return _run_check(args)
        if args.command == "normalize":
            return _run_normalize(args, settings)
        if args.command == "evaluate":
            return _run_evaluate(args, settings)
    except (OSError, json.JSONDecodeError):
        logger.exception("Could not read input file")
        return 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
