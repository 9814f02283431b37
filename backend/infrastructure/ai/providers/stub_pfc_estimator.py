"""Stub PFC estimator for testing.

Returns deterministic PFC values without calling external APIs.
"""

from typing import Dict, Sequence

from domain.record.core.ports.pfc_estimator import IPfcEstimator
from domain.record.core.value_objects.pfc import Pfc

# Per item (grams), keyed by lowercase name
STUB_PFC_MAP: Dict[str, Pfc] = {
    "rice": Pfc(protein=3.8, fat=0.5, carbs=55.7),
    "miso soup": Pfc(protein=2.2, fat=1.2, carbs=2.7),
    "grilled salmon": Pfc(protein=22.3, fat=8.4, carbs=0.1),
    "natto": Pfc(protein=6.6, fat=4.0, carbs=4.8),
    "egg": Pfc(protein=6.2, fat=5.2, carbs=0.2),
    "ramen": Pfc(protein=24.0, fat=20.0, carbs=80.0),
}

# Fallback for unknown items
DEFAULT_ITEM_PFC = Pfc(protein=10.0, fat=10.0, carbs=30.0)


class StubPfcEstimator(IPfcEstimator):
    """
    Stub implementation of IPfcEstimator.

    Sums a fixed PFC per item; unknown items use a generic default.
    """

    async def estimate(self, item_names: Sequence[str]) -> Pfc:
        total = Pfc.zero()
        for name in item_names:
            total = total.add(STUB_PFC_MAP.get(name.strip().lower(), DEFAULT_ITEM_PFC))
        return total
