class CalpickError(Exception):
    """Base error."""

class UnknownPickerError(CalpickError, KeyError):
    """Raised when a picker name is not in the registry."""

class UnknownPresetError(CalpickError, KeyError):
    """Raised when a preset id is not in the catalog."""

class UnknownFieldError(CalpickError, ValueError):
    """Raised when a time field kind is not hours, minutes or seconds."""

class FormatParseError(CalpickError, ValueError):
    """Raised when display text cannot be parsed back into a value."""

class PickerKindError(CalpickError, TypeError):
    """Raised when a picker is given a value of the wrong type."""

class GridRangeError(CalpickError, ValueError):
    """Raised for a month whose 6-week grid would leave the representable date range."""
