"""PFC estimator port."""

from abc import ABC, abstractmethod
from typing import Sequence

from domain.record.core.value_objects.pfc import Pfc


class IPfcEstimator(ABC):
    """Estimates macronutrients of a meal from its item names."""

    @abstractmethod
    async def estimate(self, item_names: Sequence[str]) -> Pfc:
        """Estimate total protein/fat/carbs grams of the items.

        Raises:
            Exception: Provider failures propagate unchanged
        """
        pass
