"""
Allure reporting adapter
Attachments, named steps and per-test metadata for the smoke report
"""

import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, List, Union

import allure

from .models import Attachment, MimeType, Scenario

logger = logging.getLogger(__name__)

SUITE_NAME = "Simple tests to verify the RESTful API of the JSONPlaceholder site"
SMOKE_TAGS = ("API", "SmokeTest")

_ATTACHMENT_TYPES: Dict[MimeType, allure.attachment_type] = {
    MimeType.TEXT: allure.attachment_type.TEXT,
    MimeType.JSON: allure.attachment_type.JSON,
}


class Reporter:
    """Sends attachments and steps to Allure and keeps what it emitted"""

    def __init__(self):
        self.attachments: List[Attachment] = []

    def attach(self, label: str, mime_type: MimeType, content: str) -> Attachment:
        """Emit one attachment to the report"""
        attachment = Attachment(label, mime_type, content)
        allure.attach(content, name=label, attachment_type=_ATTACHMENT_TYPES[mime_type])
        self.attachments.append(attachment)
        logger.debug(f"Attached '{label}' ({mime_type.value}, {len(content)} chars)")
        return attachment

    async def step(self, title: str, action: Callable[[], Union[Any, Awaitable[Any]]]) -> Any:
        """
        Run `action` inside a named report step and return its result

        Awaitable results are awaited inside the step, so failures from
        async actions are recorded against the step as well.
        """
        with allure.step(title):
            result = action()
            if inspect.isawaitable(result):
                result = await result
            return result

    def describe(self, scenario: Scenario):
        """Attach suite, description, tags and severity for the running test"""
        allure.dynamic.suite(SUITE_NAME)
        allure.dynamic.description(scenario.description)
        allure.dynamic.tag(*SMOKE_TAGS)
        allure.dynamic.severity(allure.severity_level.CRITICAL)

    def labels(self) -> List[str]:
        return [attachment.label for attachment in self.attachments]
