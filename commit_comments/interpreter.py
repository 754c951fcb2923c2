"""
Response interpretation module.

Maps GitHub status codes to user-facing outcomes and decodes commit
messages out of successful responses.
"""

import json
import logging
from typing import List

from .constants import (
    INTERNAL_SERVER_ERROR_MESSAGE,
    LOGGER_NAME,
    REPO_NOT_FOUND_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
)
from .models import CommitListing, HttpOutcome, StatusCheck

logger = logging.getLogger(f"{LOGGER_NAME}.interpreter")


class ResponseInterpreter:
    """
    Turn an HttpOutcome into a CommitListing.

    Error statuses become a listing carrying a message for the user. A 2xx
    body that is not a JSON array of commit objects raises, since GitHub is
    expected to always send well-formed commits.
    """

    @staticmethod
    def check_status(code: int) -> StatusCheck:
        """
        Map an HTTP status code to success or a user-facing error.

        Args:
            code: Status code of the commits response

        Returns:
            StatusCheck that is ok for 2xx, otherwise carries the message to print
        """
        if 200 <= code <= 299:
            return StatusCheck(ok=True)
        if code == 404:
            return StatusCheck(ok=False, error=REPO_NOT_FOUND_MESSAGE)
        if code == 500:
            return StatusCheck(ok=False, error=INTERNAL_SERVER_ERROR_MESSAGE)
        return StatusCheck(ok=False, error=UNKNOWN_ERROR_MESSAGE.format(code=code))

    @staticmethod
    def extract_messages(body: str) -> List[str]:
        """
        Decode a commit list body.

        Args:
            body: JSON array as returned by the commits endpoint

        Returns:
            The ``commit.message`` of every element, in array order

        Raises:
            ValueError: If the body is not valid JSON or not an array
            KeyError: If an element lacks ``commit`` or ``message``
            TypeError: If an element or message has the wrong type
        """
        data = json.loads(body)
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array of commits, got {type(data).__name__}")

        messages: List[str] = []
        for element in data:
            message = element["commit"]["message"]
            if not isinstance(message, str):
                raise TypeError(f"Commit message must be a string, got {type(message).__name__}")
            messages.append(message)
        return messages

    def interpret(self, outcome: HttpOutcome) -> CommitListing:
        check = self.check_status(outcome.status_code)
        if not check.ok:
            logger.info("Request failed with status %d: %s", outcome.status_code, check.error)
            return CommitListing(error=check.error)

        messages = self.extract_messages(outcome.body)
        logger.info("Decoded %d commit messages", len(messages))
        return CommitListing(messages=messages)
