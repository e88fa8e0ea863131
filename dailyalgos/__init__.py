"""Classic search, bit, array and linked-list algorithms."""

__version__ = "0.1.0"
__all__ = ["searching", "numbers", "arrays", "linked"]