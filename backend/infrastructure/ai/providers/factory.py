"""Provider factory for AI services.

Environment-based provider selection with graceful fallback to stubs.
Strategy:
- .env (runtime): AI_PROVIDER=openai, OPENAI_API_KEY=sk-...
- .env.test (pytest): AI_PROVIDER=stub
- Default: stub (safe fallback if env vars not set)
"""

from typing import Tuple

from domain.advice.core.ports.advice_generator import IAdviceGenerator
from domain.record.core.ports.image_analyzer import IImageAnalyzer
from domain.record.core.ports.pfc_estimator import IPfcEstimator
from infrastructure.ai.openai.client import OpenAINutritionClient
from infrastructure.ai.providers.stub_advice_generator import StubAdviceGenerator
from infrastructure.ai.providers.stub_image_analyzer import StubImageAnalyzer
from infrastructure.ai.providers.stub_pfc_estimator import StubPfcEstimator
from infrastructure.config import Settings


def create_ai_providers(
    settings: Settings,
) -> Tuple[IAdviceGenerator, IPfcEstimator, IImageAnalyzer]:
    """Create advice generator, PFC estimator and image analyzer from settings.

    Values of ``settings.ai_provider``:
        - "openai": One OpenAI client for all three (requires OPENAI_API_KEY)
        - "stub": Stub providers (default)

    Raises:
        ValueError: If openai is selected without an API key
    """
    if settings.ai_provider == "openai":
        if not settings.openai_api_key:
            raise ValueError(
                "AI_PROVIDER=openai but OPENAI_API_KEY not set. "
                "Set OPENAI_API_KEY in .env or use AI_PROVIDER=stub"
            )
        client = OpenAINutritionClient(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
        )
        return client, client, client

    # Default: stub (safe fallback)
    return StubAdviceGenerator(), StubPfcEstimator(), StubImageAnalyzer()
