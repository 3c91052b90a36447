"""Tests for triage report formatting."""

import pytest

from log_triage_analyzer.models import TriageResult
from log_triage_analyzer.report import (
    build_markdown_report,
    category_color,
    format_bytes,
    humanize,
    severity_icon,
    yes_no,
)


@pytest.mark.parametrize("size, expected", [
    (0, "0 B"),
    (1023, "1023 B"),
    (1024, "1.00 KB"),
    (1536, "1.50 KB"),
    (1024 * 1024, "1.00 MB"),
    (5 * 1024 * 1024 + 512 * 1024, "5.50 MB"),
])
def test_format_bytes(size, expected):
    assert format_bytes(size) == expected


def test_humanize_replaces_first_underscore_only():
    assert humanize("intermittent_failure") == "Intermittent Failure"
    assert humanize("always") == "Always"
    assert humanize("only_on_ci") == "Only On_ci"


def test_lookups_have_defaults():
    assert severity_icon("fatal") != severity_icon("warning")
    assert severity_icon("unknown") == severity_icon("info")
    assert category_color("BUG") == "red"
    assert category_color("OTHER") == "blue"
    assert yes_no(True) == "Yes"
    assert yes_no(False) == "No"


def _leaves(value, key=None):
    if isinstance(value, dict):
        for k, v in value.items():
            yield from _leaves(v, k)
    elif isinstance(value, list):
        for item in value:
            yield from _leaves(item, key)
    else:
        yield key, value


def test_markdown_report_contains_every_field(triage_payload):
    report = build_markdown_report(TriageResult.model_validate(triage_payload))

    for key, value in _leaves(triage_payload):
        if isinstance(value, bool):
            continue
        if key == "size_bytes":
            assert format_bytes(value) in report
        elif key == "reproducibility":
            assert humanize(value) in report
        else:
            assert str(value) in report, key

    assert "Blocking Issue" in report
    assert "## Timeline" in report
    assert "## Related Failures" in report
    assert "1. Invalidate the certificate cache on key rotation" in report
    assert "- Blocks Testing: Yes" in report


def test_markdown_report_omits_empty_sections(triage_payload):
    triage_payload["triage"]["analysis"]["timeline"] = []
    triage_payload["triage"]["related_failures"] = []
    triage_payload["triage"]["recommendations"]["blocking"] = False

    report = build_markdown_report(TriageResult.model_validate(triage_payload))

    assert "## Timeline" not in report
    assert "## Related Failures" not in report
    assert "Blocking Issue" not in report
