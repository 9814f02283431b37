"""Advice generator port (AI text provider)."""

from abc import ABC, abstractmethod


class IAdviceGenerator(ABC):
    """Generates dietary advice text from a prompt."""

    @abstractmethod
    async def generate_advice(self, prompt: str) -> str:
        """Generate advice.

        Args:
            prompt: Fully rendered prompt describing the user's day

        Returns:
            Advice text

        Raises:
            Exception: Provider failures propagate unchanged
        """
        pass
