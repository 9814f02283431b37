"""OpenAI client implementation for nutrition advice and PFC estimation."""

from infrastructure.ai.openai.client import OpenAINutritionClient
from infrastructure.ai.openai.models import PfcEstimateResponse

__all__ = [
    "OpenAINutritionClient",
    "PfcEstimateResponse",
]
