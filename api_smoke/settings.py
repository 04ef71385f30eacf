"""
Smoke-test configuration
Environment-driven settings and logging setup for the harness
"""

import os
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"


@dataclass
class SmokeConfig:
    """Smoke-test configuration read from the environment"""

    api_base_url: str = field(default_factory=lambda: os.getenv('SMOKE_API_BASE_URL', DEFAULT_BASE_URL))

    # Unset means the HTTP client's own default timeout applies
    http_timeout: Optional[str] = field(default_factory=lambda: os.getenv('SMOKE_HTTP_TIMEOUT'))

    log_level: str = field(default_factory=lambda: os.getenv('SMOKE_LOG_LEVEL', 'INFO'))

    @property
    def timeout_seconds(self) -> Optional[float]:
        if self.http_timeout in (None, ''):
            return None
        return float(self.http_timeout)

    def url_for(self, endpoint: str) -> str:
        """Join an endpoint path onto the base URL"""
        return f"{self.api_base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors"""
        errors = []

        if not self.api_base_url.startswith(('http://', 'https://')):
            errors.append(f"SMOKE_API_BASE_URL must be an http(s) URL, got '{self.api_base_url}'")

        if self.http_timeout not in (None, ''):
            try:
                if float(self.http_timeout) <= 0:
                    errors.append("SMOKE_HTTP_TIMEOUT must be positive")
            except ValueError:
                errors.append(f"SMOKE_HTTP_TIMEOUT must be a number, got '{self.http_timeout}'")

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            errors.append(f"SMOKE_LOG_LEVEL is not a logging level: '{self.log_level}'")

        return errors


def get_config() -> SmokeConfig:
    """Get validated smoke-test configuration"""
    config = SmokeConfig()
    errors = config.validate()

    if errors:
        raise ValueError(f"Configuration errors: {', '.join(errors)}")

    return config


def configure_logging(config: Optional[SmokeConfig] = None):
    """Configure harness logging"""
    config = config or get_config()
    logging.basicConfig(level=config.log_level.upper())
    logger.info(f"Smoke target: {config.api_base_url}")
