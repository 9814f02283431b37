"""AI provider adapters (stubs and factory)."""

from infrastructure.ai.providers.factory import create_ai_providers
from infrastructure.ai.providers.stub_advice_generator import StubAdviceGenerator
from infrastructure.ai.providers.stub_image_analyzer import StubImageAnalyzer
from infrastructure.ai.providers.stub_pfc_estimator import StubPfcEstimator

__all__ = ["StubAdviceGenerator", "StubImageAnalyzer", "StubPfcEstimator", "create_ai_providers"]
