"""Entities for the record domain."""

from .record import Record
from .record_item import RecordItem, RecordItemInput
from .record_pfc import RecordPfc

__all__ = ["Record", "RecordItem", "RecordItemInput", "RecordPfc"]
