from .drive import drive
from .envelope import DriveContext, Envelope

__all__ = ("DriveContext", "Envelope", "drive")
