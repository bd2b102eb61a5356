"""Core value types: the outcome type and the plain result it converts to."""
