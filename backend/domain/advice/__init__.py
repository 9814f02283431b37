"""Advice domain - AI dietary advice cached per user and day."""
