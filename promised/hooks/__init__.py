from .logged import compose, logged
from .trace import Trace, Visit, traced

__all__ = ("Trace", "Visit", "compose", "logged", "traced")
