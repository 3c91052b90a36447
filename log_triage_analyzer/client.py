"""
TriageClient - Module for sending log files to the remote triage service
"""

import json
import logging
import requests
from typing import Optional, Any
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator
from .config import Config
from .models import SelectedFile, TriageResult

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = 'Failed to analyze log file'


class TriageApiError(Exception):
    """The single error type surfaced by TriageClient"""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status

    def __repr__(self) -> str:
        return f"TriageApiError(message={self.message!r}, status={self.status!r})"


class AnalysisOutcome(BaseModel):
    """Either a TriageResult or a TriageApiError, never both"""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    result: Optional[TriageResult] = None
    error: Optional[TriageApiError] = None

    @model_validator(mode='after')
    def exactly_one(self) -> "AnalysisOutcome":
        if (self.result is None) == (self.error is None):
            raise ValueError("AnalysisOutcome needs exactly one of result or error")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None


class TriageClient:
    """Uploads a log file to POST {base_url}/triage/analyze and parses the triage report"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the triage client

        Args:
            base_url: Triage service base URL (uses config default if None)
            timeout: Request timeout in seconds (uses config default if None; no timeout when unset)
            session: HTTP session to send requests with
        """
        self.base_url = (base_url or Config.TRIAGE_API_BASE_URL).rstrip('/')
        self.timeout = timeout if timeout is not None else Config.get_timeout()
        self.session = session or requests.Session()

        logger.info(f"Triage client initialized for {self.endpoint}")

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}{Config.TRIAGE_ANALYZE_PATH}"

    def analyze(self, file: SelectedFile) -> TriageResult:
        """
        Send a log file to the triage service

        Args:
            file: The selected log file

        Returns:
            TriageResult exactly as returned by the service

        Raises:
            TriageApiError: For any failure (rejected request, network error,
                malformed response or anything unexpected)
        """
        filename = getattr(file, 'name', '<unknown file>')
        try:
            logger.info(f"Uploading {file.name} ({file.size} bytes) to {self.endpoint}")

            response = self.session.post(
                self.endpoint,
                files={'file': (file.name, file.content)},
                timeout=self.timeout
            )

            if not 200 <= response.status_code < 300:
                message = self._error_message(response)
                logger.error(f"Triage request rejected with status {response.status_code}: {message}")
                raise TriageApiError(message, response.status_code)

            result = self._parse_result(response)
            logger.info(f"Triage completed for {file.name}: request_id={result.request_id}")
            return result

        except TriageApiError:
            raise
        except requests.RequestException as e:
            logger.error(f"Failed to reach triage service at {self.base_url}: {e}")
            raise TriageApiError(
                f"Network error: {e}. Make sure the API server is running at {self.base_url}"
            ) from e
        except Exception as e:
            logger.exception(f"Unexpected error while analyzing {filename}")
            raise TriageApiError(f"An unexpected error occurred: {e}") from e

    def analyze_safely(self, file: SelectedFile) -> AnalysisOutcome:
        """Same as analyze(), but returns the error as a value instead of raising it"""
        try:
            return AnalysisOutcome(result=self.analyze(file))
        except TriageApiError as e:
            return AnalysisOutcome(error=e)

    def _error_message(self, response: requests.Response) -> str:
        """Pick the error text from a rejected response: detail, then message, then status text"""
        try:
            data = response.json()
        except ValueError:
            return f"{GENERIC_ERROR_MESSAGE}: {response.reason}"

        if not isinstance(data, dict):
            return f"{GENERIC_ERROR_MESSAGE}: {response.reason}"

        return _as_text(data.get('detail')) or _as_text(data.get('message')) or GENERIC_ERROR_MESSAGE

    def _parse_result(self, response: requests.Response) -> TriageResult:
        try:
            return TriageResult.model_validate(response.json())
        except ValueError as e:
            # pydantic's ValidationError is a ValueError too
            kind = 'schema mismatch' if isinstance(e, ValidationError) else 'body is not JSON'
            logger.error(f"Invalid triage response ({kind}): {e}")
            raise TriageApiError(f"Invalid triage response: {e}", response.status_code) from e


def _as_text(value: Any) -> Optional[str]:
    """FastAPI-style details may be lists or objects; keep strings as-is and JSON-encode the rest"""
    if not value:
        return None
    if isinstance(value, str):
        return value
    return json.dumps(value)
