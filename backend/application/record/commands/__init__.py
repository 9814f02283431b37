"""Commands for the record context."""

from .create_record import CreateRecordCommand, CreateRecordHandler, CreateRecordResult

__all__ = ["CreateRecordCommand", "CreateRecordHandler", "CreateRecordResult"]
