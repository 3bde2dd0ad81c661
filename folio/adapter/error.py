"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class FrontmatterError(AdapterError):
    """Document metadata block could not be parsed."""

    pass
