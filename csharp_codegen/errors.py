"""Exceptions raised while constructing code elements."""


class CodeModelError(ValueError):
    """Base class for code model errors."""


class ValidationError(CodeModelError):
    """Raised when an element is constructed from invalid values."""


class SanitizationError(CodeModelError):
    """Raised when an identifier stays invalid even after escaping."""
