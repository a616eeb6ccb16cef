class CalconvError(Exception):
    """Base error."""

class DomainError(CalconvError, ValueError):
    """Raised when a date field lies outside its calendar's legal range."""

class NonexistentDateError(DomainError):
    """Raised when a well-formed date never occurs (e.g. an expunged Hindu tithi)."""

class OutOfRangeError(CalconvError, ValueError):
    """Raised for fixed dates before the epoch of an epoch-bounded calendar."""

class NotInvertibleError(CalconvError):
    """Raised when a cyclic calendar (haab, tzolkin) is inverted without an anchor date."""

class SearchLimitError(CalconvError, RuntimeError):
    """Raised when a bounded search exhausts its iteration budget."""

class UnknownCalendarError(CalconvError, KeyError):
    """Raised when a calendar name is not registered."""
