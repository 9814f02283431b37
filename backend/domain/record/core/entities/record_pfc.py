"""RecordPfc entity - estimated macronutrients of a record."""

from dataclasses import dataclass

from domain.record.core.value_objects.pfc import Pfc
from domain.shared.validation import ValidationErrors
from domain.shared.value_objects.identifiers import RecordId, RecordPfcId


@dataclass
class RecordPfc:
    """Protein/fat/carbs estimate attached 1:1 to a record."""

    id: RecordPfcId
    record_id: RecordId
    pfc: Pfc

    @classmethod
    def create(cls, record_id: RecordId, protein: float, fat: float, carbs: float) -> "RecordPfc":
        """Raises ``DomainValidationError`` when any amount is negative."""
        errors = ValidationErrors()
        pfc = errors.capture(Pfc.create, protein, fat, carbs)
        errors.raise_if_any()

        return cls(id=RecordPfcId.generate(), record_id=record_id, pfc=pfc)

    @classmethod
    def reconstruct(
        cls, id: str, record_id: str, protein: float, fat: float, carbs: float
    ) -> "RecordPfc":
        return cls(
            id=RecordPfcId.reconstruct(id),
            record_id=RecordId.reconstruct(record_id),
            pfc=Pfc.reconstruct(protein, fat, carbs),
        )

    @property
    def protein(self) -> float:
        return self.pfc.protein

    @property
    def fat(self) -> float:
        return self.pfc.fat

    @property
    def carbs(self) -> float:
        return self.pfc.carbs

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecordPfc):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
