"""Declarative block animations: validation, sanitization and playback instructions."""
