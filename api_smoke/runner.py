"""
Smoke scenario runner
Drives one scenario through send, status check and body check as report steps
"""

import time
import logging
from typing import Any, Dict, List, Optional

from .models import MimeType, ResponseRecord, Scenario, ScenarioResult
from .reporting import Reporter
from .rest_client import RestClient
from .verifiers import verify_body_contains, verify_body_equals_any, verify_status_code

logger = logging.getLogger(__name__)


class ScenarioRunner:
    """Executes smoke scenarios with a test-scoped REST client"""

    def __init__(self, rest_client: RestClient, reporter: Reporter):
        self.rest_client = rest_client
        self.reporter = reporter
        self.config = rest_client.config
        self.results: List[ScenarioResult] = []

    async def run(self, scenario: Scenario) -> ResponseRecord:
        """Run a scenario end to end, returning the captured response"""
        self.reporter.describe(scenario)
        url = self.config.url_for(scenario.endpoint)
        start_time = time.monotonic()
        response: Optional[ResponseRecord] = None

        try:
            response = await self.reporter.step(
                f"Send {scenario.method.value} request",
                lambda: self.rest_client.send(scenario.method, url, scenario.payload),
            )

            await self.reporter.step(
                "Log and verify response status code",
                lambda: verify_status_code(self.reporter, response, scenario.expected_status),
            )

            body = await self.reporter.step("Log response body", lambda: self._attach_body(response))

            await self.reporter.step(scenario.body_check_title, lambda: self._verify_body(scenario, body))
        except Exception as e:
            if response is None:
                self.reporter.attach("Response status code", MimeType.TEXT, "Status code: none")
            self._record(scenario, response, start_time, error=e)
            raise

        self._record(scenario, response, start_time)
        return response

    def _attach_body(self, response: ResponseRecord) -> str:
        self.reporter.attach("Response body", MimeType.JSON, response.body)
        return response.body

    def _verify_body(self, scenario: Scenario, body: str):
        if scenario.body_equals_any is not None:
            verify_body_equals_any(body, *scenario.body_equals_any)
        if scenario.body_contains:
            verify_body_contains(body, *scenario.body_contains)

    def _record(
        self,
        scenario: Scenario,
        response: Optional[ResponseRecord],
        start_time: float,
        error: Optional[BaseException] = None,
    ):
        result = ScenarioResult(
            scenario=scenario.name,
            method=scenario.method,
            success=error is None,
            duration=time.monotonic() - start_time,
            status_code=response.status_code if response is not None else None,
            errors=[f"{type(error).__name__}: {error}"] if error is not None else [],
        )
        self.results.append(result)

        if result.success:
            logger.info(f"Scenario '{scenario.name}' passed in {result.duration:.3f}s")
        else:
            logger.warning(f"Scenario '{scenario.name}' failed: {result.errors[0]}")

    def get_success_summary(self) -> Dict[str, Any]:
        """Get success/failure summary"""
        total = len(self.results)
        successful = len([r for r in self.results if r.success])

        return {
            "total_scenarios": total,
            "successful": successful,
            "failed": total - successful,
            "success_rate": successful / total if total > 0 else 0
        }
