"""
Response verification helpers
Status code and lenient body checks shared by every scenario
"""

from typing import Iterable, Optional, Union

from .models import MimeType, ResponseRecord
from .reporting import Reporter


def _allowed_codes(expected: Union[int, Iterable[int]]) -> tuple:
    if isinstance(expected, int):
        return (expected,)
    return tuple(expected)


def verify_status_code(
    reporter: Reporter,
    response: Optional[ResponseRecord],
    expected: Union[int, Iterable[int]],
):
    """Attach the observed status code and fail unless it is allowed"""
    allowed = _allowed_codes(expected)

    if response is None:
        reporter.attach("Response status code", MimeType.TEXT, "Status code: none")
        raise AssertionError("Response is missing. Request failed.")

    reporter.attach("Response status code", MimeType.TEXT, f"Status code: {response.status_code}")

    if response.status_code not in allowed:
        if len(allowed) == 1:
            raise AssertionError(f"Expected status code {allowed[0]}, but got {response.status_code}.")
        expected_text = " or ".join(str(code) for code in allowed)
        raise AssertionError(f"Response status code is not {expected_text}. Got {response.status_code}.")


def verify_body_contains(body: str, *expected_fields: str):
    """Fail when the body is empty or misses any field (case-insensitive)"""
    if not body:
        raise AssertionError("Response body is unexpectedly empty.")

    lowered = body.lower()
    for field in expected_fields:
        if field.lower() not in lowered:
            raise AssertionError(f"Response body should contain '{field}'.")


def verify_body_equals_any(body: str, *allowed_bodies: str):
    """Fail unless the body is exactly one of the allowed bodies"""
    if body not in allowed_bodies:
        shown = " or ".join(f"'{allowed}'" if allowed else "empty" for allowed in allowed_bodies)
        raise AssertionError(f"Response body should be {shown}. Got: '{body}'")
