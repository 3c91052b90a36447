"""
Configuration module for Log Triage Analyzer
"""

import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Configuration settings for the log triage analyzer"""
    
    # Triage API Configuration
    TRIAGE_API_BASE_URL: str = os.getenv('TRIAGE_API_BASE_URL', 'https://byzantex-poc.onrender.com')
    TRIAGE_API_TIMEOUT: Optional[str] = os.getenv('TRIAGE_API_TIMEOUT')  # unset means wait indefinitely
    TRIAGE_ANALYZE_PATH: str = '/triage/analyze'
    
    # Upload Configuration
    LOG_FILE_SUFFIX: str = os.getenv('LOG_FILE_SUFFIX', '.log')
    
    # Logging Configuration
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')
    
    @classmethod
    def get_timeout(cls) -> Optional[float]:
        """Request timeout in seconds, or None when no timeout is configured"""
        if not cls.TRIAGE_API_TIMEOUT:
            return None
        try:
            timeout = float(cls.TRIAGE_API_TIMEOUT)
        except ValueError:
            raise ValueError(f"TRIAGE_API_TIMEOUT must be a number, got {cls.TRIAGE_API_TIMEOUT!r}")
        return timeout if timeout > 0 else None
    
    @classmethod
    def get_summary(cls) -> dict:
        """Get configuration summary for debugging"""
        return {
            'triage_api_base_url': cls.TRIAGE_API_BASE_URL,
            'triage_api_timeout': cls.get_timeout(),
            'log_file_suffix': cls.LOG_FILE_SUFFIX,
            'log_level': cls.LOG_LEVEL
        }
