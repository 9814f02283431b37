"""Stub advice generator for testing.

Returns canned advice without calling external APIs.
"""

from typing import List

from domain.advice.core.ports.advice_generator import IAdviceGenerator

STUB_ADVICE = (
    "Good balance so far today. Add a portion of vegetables and some "
    "lean protein at your next meal, and keep an eye on snacks."
)


class StubAdviceGenerator(IAdviceGenerator):
    """
    Stub implementation of IAdviceGenerator.

    Records every prompt it receives so tests can inspect them.
    """

    def __init__(self, advice: str = STUB_ADVICE) -> None:
        self._advice = advice
        self.prompts: List[str] = []

    async def generate_advice(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self._advice
