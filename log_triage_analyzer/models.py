"""
Data models for log triage analyzer
"""

import os
from enum import Enum
from typing import List, Optional, Literal, Union
from pydantic import BaseModel, ConfigDict, field_validator


Number = Union[int, float]


class SelectedFile(BaseModel):
    """A log file chosen by the user, held in memory until it is submitted"""
    name: str
    size: int
    content: bytes

    @classmethod
    def from_upload(cls, uploaded) -> "SelectedFile":
        """Build from a Streamlit UploadedFile (anything with name, size and getvalue())"""
        content = uploaded.getvalue()
        return cls(name=uploaded.name, size=getattr(uploaded, 'size', len(content)), content=content)

    @classmethod
    def from_path(cls, path: str) -> "SelectedFile":
        """Read a file from disk"""
        with open(path, 'rb') as f:
            content = f.read()
        return cls(name=os.path.basename(path), size=len(content), content=content)


class TriageModel(BaseModel):
    """Base for the triage response schema: immutable, unknown keys preserved"""
    model_config = ConfigDict(frozen=True, extra='allow', protected_namespaces=())


class LogFileInfo(TriageModel):
    filename: str
    size_bytes: int
    format: str  # detected server-side, may differ from the extension


class TriageMetadata(TriageModel):
    processing_time_ms: int
    model_used: str
    api_version: str
    timestamp: str
    log_file: LogFileInfo


class Classification(TriageModel):
    category: Literal['BUG', 'INFRA', 'TEST']
    priority: Literal['HIGH', 'MEDIUM', 'LOW']
    confidence: Number  # percent
    severity: str

    @field_validator('confidence')
    @classmethod
    def confidence_in_range(cls, value):
        if not 0 <= value <= 100:
            raise ValueError(f"confidence must be between 0 and 100, got {value}")
        return value


class TimelineEvent(TriageModel):
    timestamp: str
    event: str
    severity: Literal['fatal', 'warning', 'info']


class FailureSignature(TriageModel):
    error_message: str
    instance_count: int
    first_occurrence: str
    pattern: str


class FailureContext(TriageModel):
    test_phase: str
    subsystem: str
    security_related: bool


class Analysis(TriageModel):
    reasoning: str
    timeline: List[TimelineEvent]
    failure_signature: FailureSignature
    context: FailureContext


class Recommendations(TriageModel):
    owner: str
    actions: List[str]
    priority_justification: str
    estimated_effort_hours: str
    blocking: bool


class Impact(TriageModel):
    blocks_testing: bool
    affects_security: bool
    reproducibility: str


class Triage(TriageModel):
    test_name: str
    error_type: str
    location: str
    classification: Classification
    summary: str
    analysis: Analysis
    recommendations: Recommendations
    related_failures: List[str]
    impact: Impact


class TimeSavings(TriageModel):
    """Precomputed by the server, displayed as-is"""
    manual_triage_minutes: Number
    automated_triage_seconds: Number
    time_saved_minutes: Number
    efficiency_gain_percent: Number


class TriageResult(TriageModel):
    """Complete response of the triage service"""
    status: str
    message: str
    request_id: str
    metadata: TriageMetadata
    triage: Triage
    time_savings: TimeSavings


class UploadPhase(str, Enum):
    IDLE = 'idle'
    FILE_SELECTED = 'file_selected'
    UPLOADING = 'uploading'
    SUCCESS = 'success'
    ERROR = 'error'


class UploadState(BaseModel):
    """Upload controller state, mutated only by UploadController"""
    file: Optional[SelectedFile] = None
    uploading: bool = False
    result: Optional[TriageResult] = None
    error: Optional[str] = None

    @property
    def phase(self) -> UploadPhase:
        if self.uploading:
            return UploadPhase.UPLOADING
        if self.error is not None:
            return UploadPhase.ERROR
        if self.result is not None:
            return UploadPhase.SUCCESS
        if self.file is not None:
            return UploadPhase.FILE_SELECTED
        return UploadPhase.IDLE

    def is_empty(self) -> bool:
        return self.file is None and self.result is None and self.error is None and not self.uploading
