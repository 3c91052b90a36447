"""Pytest configuration and fixtures."""

import copy
from unittest.mock import MagicMock

import pytest

from log_triage_analyzer.client import TriageClient
from log_triage_analyzer.controller import UploadController
from log_triage_analyzer.models import SelectedFile

BASE_URL = "http://triage.test:8000"

SAMPLE_TRIAGE_RESULT = {
    "status": "success",
    "message": "Triage analysis completed",
    "request_id": "req-7f3a9c",
    "metadata": {
        "processing_time_ms": 1834,
        "model_used": "claude-sonnet",
        "api_version": "v1",
        "timestamp": "2025-01-15T10:32:11Z",
        "log_file": {
            "filename": "nightly_regression.log",
            "size_bytes": 2048,
            "format": "pytest",
        },
    },
    "triage": {
        "test_name": "test_secure_boot_handshake",
        "error_type": "AssertionError",
        "location": "tests/boot/test_handshake.py:142",
        "classification": {
            "category": "BUG",
            "priority": "HIGH",
            "confidence": 87,
            "severity": "critical",
        },
        "summary": "Handshake rejects valid certificates after key rotation.",
        "analysis": {
            "reasoning": "The certificate cache is not invalidated.\nThe stale key is used for verification.",
            "timeline": [
                {"timestamp": "10:31:02", "event": "Key rotation started", "severity": "info"},
                {"timestamp": "10:31:05", "event": "Cache hit for stale key", "severity": "warning"},
                {"timestamp": "10:31:07", "event": "Handshake verification failed", "severity": "fatal"},
            ],
            "failure_signature": {
                "error_message": "AssertionError: signature mismatch",
                "instance_count": 3,
                "first_occurrence": "10:31:07",
                "pattern": "signature mismatch",
            },
            "context": {
                "test_phase": "execution",
                "subsystem": "secure-boot",
                "security_related": True,
            },
        },
        "recommendations": {
            "owner": "platform-security",
            "actions": [
                "Invalidate the certificate cache on key rotation",
                "Add a regression test for rotated keys",
            ],
            "priority_justification": "Blocks secure boot on rotated devices",
            "estimated_effort_hours": "2-4",
            "blocking": True,
        },
        "related_failures": ["test_secure_boot_resume", "test_key_rotation_cycle"],
        "impact": {
            "blocks_testing": True,
            "affects_security": True,
            "reproducibility": "always",
        },
    },
    "time_savings": {
        "manual_triage_minutes": 45,
        "automated_triage_seconds": 1.8,
        "time_saved_minutes": 44.97,
        "efficiency_gain_percent": 99.93,
    },
}


def make_response(status_code=200, json_data=None, reason="OK", json_error=None):
    """Fake requests.Response"""
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def triage_payload():
    """Provide a fresh copy of a well-formed triage response body."""
    return copy.deepcopy(SAMPLE_TRIAGE_RESULT)


@pytest.fixture
def log_file():
    content = b"[10:31:07] ERROR handshake failed: signature mismatch\n"
    return SelectedFile(name="nightly_regression.log", size=len(content), content=content)


@pytest.fixture
def session():
    """Mocked requests.Session, no network."""
    return MagicMock()


@pytest.fixture
def client(session):
    return TriageClient(base_url=BASE_URL, timeout=None, session=session)


@pytest.fixture
def controller(client):
    return UploadController(client=client, suffix=".log")
