"""
Data model for smoke scenarios and the diagnostics they produce
"""

import json
from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


class HttpMethod(str, Enum):
    """HTTP verbs the harness knows how to send"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class MimeType(str, Enum):
    TEXT = "text/plain"
    JSON = "application/json"


@dataclass(frozen=True)
class Scenario:
    """
    One fixed request/verification case

    `body_contains` lists substrings that must all appear in the response
    body; `body_equals_any`, when set, lists the only bodies accepted.
    """
    name: str
    method: HttpMethod
    endpoint: str
    expected_status: Tuple[int, ...]
    description: str
    body_check_title: str
    payload: Optional[Dict[str, Any]] = None
    body_contains: Tuple[str, ...] = ()
    body_equals_any: Optional[Tuple[str, ...]] = None


@dataclass(frozen=True)
class RequestRecord:
    """Request details captured before a call for diagnostics"""
    method: HttpMethod
    url: str
    payload: Optional[str] = None

    @classmethod
    def build(cls, method: HttpMethod, url: str, payload: Optional[Dict[str, Any]] = None) -> "RequestRecord":
        serialized = json.dumps(payload) if payload is not None else None
        return cls(method, url, serialized)

    def render(self) -> str:
        return (
            f"Request Method: {self.method.value}\n"
            f"Request URL: {self.url}\n"
            f"Payload: {self.payload or ''}"
        )


@dataclass(frozen=True)
class ResponseRecord:
    """Status code and body text of one HTTP exchange"""
    status_code: int
    body: str
    elapsed: float = 0.0


@dataclass(frozen=True)
class Attachment:
    """Write-once diagnostic artifact sent to the report"""
    label: str
    mime_type: MimeType
    content: str


@dataclass
class ScenarioResult:
    """Outcome of a single scenario execution"""
    scenario: str
    method: HttpMethod
    success: bool
    duration: float
    status_code: Optional[int] = None
    errors: List[str] = field(default_factory=list)
