"""Logging and settings helpers shared across optionstore."""
