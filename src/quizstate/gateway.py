"""
Validation gateway.

Sends the selected answer ids to the validation endpoint and reports
whether it accepted them.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

import requests
from requests import RequestException

from .config import settings
from .errors import GatewayError
from .models import ValidationRequest

logger = logging.getLogger(__name__)


class QuestionGateway(ABC):
    """Abstract Base Class for question validation backends."""

    @abstractmethod
    def validate(self, answers_ids: List[str]) -> bool:
        pass


class HttpQuestionGateway(QuestionGateway):
    """Posts `{"answersIds": [...]}` to the validation endpoint."""

    def __init__(self, url: Optional[str] = None):
        self.url = url or settings.VALIDATION_URL

    def validate(self, answers_ids: List[str]) -> bool:
        """
        Ask the endpoint to validate the given answers.

        Args:
            answers_ids: Ids of the selected answers, in question order.

        Returns:
            True when the endpoint answered with a 2xx status.

        Raises:
            GatewayError: When the endpoint cannot be reached.
        """
        payload = ValidationRequest(answers_ids=answers_ids)

        logger.info(f"Validating {len(answers_ids)} answer(s) at {self.url}")

        try:
            response = requests.post(
                self.url,
                json=payload.model_dump(by_alias=True),
                headers={"content-type": "application/json"},
            )
        except RequestException as exc:
            logger.exception(f"Validation request to {self.url} failed")
            raise GatewayError("Failed to reach validation endpoint") from exc

        ok = 200 <= response.status_code < 300
        if not ok:
            logger.warning(f"Validation rejected with status {response.status_code}")
        return ok
