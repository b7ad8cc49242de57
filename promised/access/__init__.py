from .backing import PendingAccess
from .cursor import Cursor

__all__ = ("Cursor", "PendingAccess")
