"""Tests for the data models."""

import pytest
from pydantic import ValidationError

from log_triage_analyzer.models import SelectedFile, TriageResult, UploadPhase, UploadState


class FakeUpload:
    """Stand-in for Streamlit's UploadedFile."""

    def __init__(self, name, content):
        self.name = name
        self.size = len(content)
        self._content = content

    def getvalue(self):
        return self._content


def test_selected_file_from_upload():
    selected = SelectedFile.from_upload(FakeUpload("run.log", b"abc"))

    assert selected.name == "run.log"
    assert selected.size == 3
    assert selected.content == b"abc"


def test_selected_file_from_path(tmp_path):
    path = tmp_path / "service.log"
    path.write_bytes(b"ERROR boom\n")

    selected = SelectedFile.from_path(str(path))

    assert selected.name == "service.log"
    assert selected.size == 11
    assert selected.content == b"ERROR boom\n"


def test_triage_result_is_immutable(triage_payload):
    result = TriageResult.model_validate(triage_payload)

    with pytest.raises(ValidationError):
        result.status = "changed"


@pytest.mark.parametrize("confidence", [-1, 100.5, 250])
def test_confidence_outside_percent_range_is_rejected(triage_payload, confidence):
    triage_payload["triage"]["classification"]["confidence"] = confidence

    with pytest.raises(ValidationError):
        TriageResult.model_validate(triage_payload)


def test_unknown_timeline_severity_is_rejected(triage_payload):
    triage_payload["triage"]["analysis"]["timeline"][0]["severity"] = "debug"

    with pytest.raises(ValidationError):
        TriageResult.model_validate(triage_payload)


def test_missing_section_is_rejected(triage_payload):
    del triage_payload["time_savings"]

    with pytest.raises(ValidationError):
        TriageResult.model_validate(triage_payload)


def test_upload_phase_uploading_wins(log_file):
    state = UploadState(file=log_file, uploading=True, error="stale")
    assert state.phase == UploadPhase.UPLOADING
    assert not state.is_empty()
