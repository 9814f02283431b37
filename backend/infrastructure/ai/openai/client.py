"""OpenAI nutrition client - implements IAdviceGenerator, IPfcEstimator and IImageAnalyzer.

Key Features:
- Structured outputs (native Pydantic support) for PFC estimates and photos
- Circuit breaker (5 failures → 60s timeout)
- Retry logic (exponential backoff)
"""

# mypy: warn-unused-ignores=False

import base64
import time
from typing import Any, Dict, List, Sequence

import structlog
from circuitbreaker import circuit
from openai import APIError, AsyncOpenAI
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from domain.advice.core.ports.advice_generator import IAdviceGenerator
from domain.record.core.ports.image_analyzer import IImageAnalyzer
from domain.record.core.ports.pfc_estimator import IPfcEstimator
from domain.record.core.value_objects.analyzed_item import AnalyzedItem
from domain.record.core.value_objects.pfc import Pfc
from domain.shared.errors import FieldValidationError
from infrastructure.ai.openai.models import ImageAnalysisResponse, PfcEstimateResponse
from infrastructure.ai.prompts.nutrition import (
    ADVICE_SYSTEM_PROMPT,
    IMAGE_ANALYSIS_SYSTEM_PROMPT,
    PFC_ESTIMATE_SYSTEM_PROMPT,
    build_pfc_estimate_prompt,
)

logger = structlog.get_logger(__name__, layer="infrastructure")


class OpenAINutritionClient(IAdviceGenerator, IPfcEstimator, IImageAnalyzer):
    """
    OpenAI chat client implementing the advice, PFC estimation and image
    analysis ports.

    Follows Dependency Inversion Principle:
    - Domain defines IAdviceGenerator / IPfcEstimator / IImageAnalyzer (ports)
    - Infrastructure provides OpenAINutritionClient (adapter)

    Example:
        >>> client = OpenAINutritionClient(api_key="sk-...")
        >>> pfc = await client.estimate(["rice", "grilled salmon"])
        >>> advice = await client.generate_advice(prompt)
        >>> items = await client.analyze(image_b64, "image/jpeg")
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        temperature: float = 0.2,
    ):
        """
        Initialize OpenAI client.

        Args:
            api_key: OpenAI API key
            model: Chat model name
            temperature: Sampling temperature
        """
        self._client = AsyncOpenAI(api_key=api_key)
        self._model = model
        self._temperature = temperature

    @circuit(failure_threshold=5, recovery_timeout=60, name="openai_advice")  # type: ignore[misc]
    @retry(  # type: ignore[misc]
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type((TimeoutError, ConnectionError, APIError)),
    )
    async def generate_advice(self, prompt: str) -> str:
        """
        Generate dietary advice text.

        Raises:
            APIError: On OpenAI API failures
            ValueError: On an empty completion
        """
        start_time = time.time()

        response = await self._client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": ADVICE_SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            temperature=self._temperature,
        )
        self._log_usage(response, operation="generate_advice", start_time=start_time)

        content = response.choices[0].message.content
        if not content:
            raise ValueError("OpenAI returned empty advice")
        return content.strip()

    @circuit(failure_threshold=5, recovery_timeout=60, name="openai_pfc")  # type: ignore[misc]
    @retry(  # type: ignore[misc]
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type((TimeoutError, ConnectionError, APIError)),
    )
    async def estimate(self, item_names: Sequence[str]) -> Pfc:
        """
        Estimate total PFC grams of the given foods.

        Raises:
            APIError: On OpenAI API failures
            ValueError: On an empty parsed response
        """
        start_time = time.time()

        messages: List[Dict[str, Any]] = [
            {"role": "system", "content": PFC_ESTIMATE_SYSTEM_PROMPT},
            {"role": "user", "content": build_pfc_estimate_prompt(item_names)},
        ]

        response = await self._client.chat.completions.parse(
            model=self._model,
            messages=messages,  # type: ignore[arg-type]
            response_format=PfcEstimateResponse,
            temperature=self._temperature,
        )
        self._log_usage(response, operation="estimate_pfc", start_time=start_time)

        parsed = response.choices[0].message.parsed
        if not parsed:
            raise ValueError("OpenAI returned empty parsed response")

        return Pfc.create(parsed.protein, parsed.fat, parsed.carbs)

    @circuit(failure_threshold=5, recovery_timeout=60, name="openai_vision")  # type: ignore[misc]
    @retry(  # type: ignore[misc]
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type((TimeoutError, ConnectionError, APIError)),
    )
    async def analyze(self, image_data: str, mime_type: str) -> List[AnalyzedItem]:
        """
        Recognize foods and calories in a base64-encoded meal photo.

        Items with an empty name or non-positive calories are skipped.

        Raises:
            ValueError: If image_data is not valid base64, or on an
                empty parsed response
            APIError: On OpenAI API failures
        """
        try:
            base64.b64decode(image_data, validate=True)
        except ValueError as e:
            raise ValueError("image data is not valid base64") from e

        start_time = time.time()

        user_message: Dict[str, Any] = {
            "role": "user",
            "content": [
                {
                    "type": "image_url",
                    "image_url": {"url": f"data:{mime_type};base64,{image_data}"},
                }
            ],
        }

        response = await self._client.chat.completions.parse(
            model=self._model,
            messages=[  # type: ignore[list-item]
                {"role": "system", "content": IMAGE_ANALYSIS_SYSTEM_PROMPT},
                user_message,
            ],
            response_format=ImageAnalysisResponse,
            temperature=self._temperature,
        )
        self._log_usage(response, operation="analyze_image", start_time=start_time)

        parsed = response.choices[0].message.parsed
        if not parsed:
            raise ValueError("OpenAI returned empty parsed response")

        items: List[AnalyzedItem] = []
        for item in parsed.items:
            try:
                items.append(AnalyzedItem.create(item.name, item.calories))
            except FieldValidationError as e:
                logger.warning(
                    "invalid analyzed item skipped",
                    operation="analyze_image",
                    name=item.name,
                    calories=item.calories,
                    error=e.message,
                )
        return items

    def _log_usage(self, response: Any, operation: str, start_time: float) -> None:
        usage = getattr(response, "usage", None)
        logger.info(
            "OpenAI response received",
            operation=operation,
            model=self._model,
            total_tokens=getattr(usage, "total_tokens", None),
            processing_time_ms=int((time.time() - start_time) * 1000),
        )
