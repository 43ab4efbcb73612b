from __future__ import annotations

import json

from intakeforms import logger as package_logger
from intakeforms.logging import configure_logging, form_log_context, get_logger
from intakeforms.settings import Settings


def test_stdlib_logger_is_configured(capsys) -> None:
    configure_logging(settings=Settings(log_json=False, log_level="INFO"), force=True)
    logger = get_logger("tests")
    logger.info("hello")

    captured = capsys.readouterr()
    assert "hello" in captured.err.lower()


def test_form_log_context_tags_events(capsys) -> None:
    configure_logging(settings=Settings(log_json=True, log_level="INFO"), force=True)
    logger = get_logger("tests.context")

    with form_log_context("Patient Intake"):
        logger.info("inside")
    logger.info("outside")

    lines = [json.loads(line) for line in capsys.readouterr().err.splitlines() if line.startswith("{")]
    inside = next(line for line in lines if line["message"] == "inside")
    outside = next(line for line in lines if line["message"] == "outside")
    assert inside["form_title"] == "Patient Intake"
    assert "form_title" not in outside


def test_package_logger_created_on_import() -> None:
    assert callable(getattr(package_logger, "info", None))
