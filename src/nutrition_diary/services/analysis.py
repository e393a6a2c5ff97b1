"""Free-text food analysis backed by a text-completion model."""

import logging
from dataclasses import dataclass
from typing import Protocol

from nutrition_diary.domain.errors import AnalysisUnavailableError

_logger = logging.getLogger(__name__)


class AnalysisClient(Protocol):
    """Interface for text-completion requests."""

    async def complete(self, *, model: str, prompt: str, max_output_tokens: int) -> str:
        """Return the model's text answer or raise AnalysisUnavailableError."""


@dataclass
class FoodAnalysisService:
    """Service that estimates nutrition for a meal description."""

    client: AnalysisClient
    model: str
    max_output_tokens: int = 100

    async def analyze(self, description: str) -> str:
        """Return an estimate, or the placeholder when the model is unavailable."""
        text = description.strip()
        if not text:
            _logger.warning("Food analysis skipped: empty description")
            return placeholder_estimate(description)
        try:
            return await self.client.complete(
                model=self.model,
                prompt=(
                    f"Estimate the calories, proteins, fats and carbs for {text}. "
                    "Answer briefly."
                ),
                max_output_tokens=self.max_output_tokens,
            )
        except AnalysisUnavailableError as exc:
            _logger.warning("Food analysis unavailable, using placeholder: %s", exc)
            return placeholder_estimate(text)


def placeholder_estimate(description: str) -> str:
    """Return the fixed estimate shown when no model answer is available."""
    return (
        f"Analysis for {description}:\n"
        "Calories: 350 kcal\n"
        "Proteins: 25 g\n"
        "Fats: 12 g\n"
        "Carbs: 35 g\n"
        "(Test data)"
    )
