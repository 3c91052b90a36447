"""
UploadController - Drives the select / submit / reset lifecycle of a log upload
"""

import logging
from typing import Optional
from .client import TriageClient, AnalysisOutcome
from .config import Config
from .models import SelectedFile, UploadState

logger = logging.getLogger(__name__)


class UploadController:
    """
    Owns the UploadState. Only select_file(), submit() and reset() change it,
    and at most one request is in flight at a time.
    """

    def __init__(self, client: Optional[TriageClient] = None, suffix: Optional[str] = None):
        """
        Args:
            client: Triage client used by submit() (built from config if None)
            suffix: Required filename suffix (uses config default if None)
        """
        self.client = client or TriageClient()
        self.suffix = suffix or Config.LOG_FILE_SUFFIX
        self.state = UploadState()

    @property
    def validation_message(self) -> str:
        return f"Only {self.suffix} files are allowed"

    def select_file(self, candidate: SelectedFile) -> bool:
        """
        Select a file for analysis

        Returns:
            True if the file was accepted, False if it failed validation
        """
        if not candidate.name.endswith(self.suffix):
            logger.warning(f"Rejected file {candidate.name}: name does not end with {self.suffix}")
            self.state.error = self.validation_message
            self.state.file = None
            return False

        logger.info(f"Selected {candidate.name} ({candidate.size} bytes)")
        self.state.file = candidate
        self.state.error = None
        self.state.result = None
        return True

    def submit(self) -> Optional[AnalysisOutcome]:
        """
        Send the selected file to the triage service

        Returns:
            The outcome, or None if there was nothing to submit or an upload is already running
        """
        if self.state.file is None:
            logger.debug("Submit ignored: no file selected")
            return None
        if self.state.uploading:
            logger.debug("Submit ignored: upload already in progress")
            return None

        file = self.state.file
        self.state.uploading = True
        self.state.error = None
        self.state.result = None

        try:
            outcome = self.client.analyze_safely(file)
        finally:
            self.state.uploading = False

        # reset() or a new selection during the request makes this outcome stale
        if self.state.file is not file:
            logger.info(f"Discarding outcome for {file.name}: selection changed while uploading")
            return outcome

        if outcome.ok:
            self.state.result = outcome.result
        else:
            logger.warning(f"Analysis of {file.name} failed: {outcome.error.message}")
            self.state.error = outcome.error.message
        return outcome

    def reset(self):
        """Clear file, result and error"""
        self.state.file = None
        self.state.result = None
        self.state.error = None
