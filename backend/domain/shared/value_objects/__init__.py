from .identifiers import (
    AdviceCacheId,
    Identifier,
    RecordId,
    RecordItemId,
    RecordPfcId,
    UserId,
)

__all__ = [
    "AdviceCacheId",
    "Identifier",
    "RecordId",
    "RecordItemId",
    "RecordPfcId",
    "UserId",
]
