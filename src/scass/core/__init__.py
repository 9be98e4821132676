from .settings import settings
from .models import Match, SearchOptions
from .patterns import Pattern, compile_patterns
from .channel import ResultChannel

__all__ = [
    "settings",
    "Match",
    "SearchOptions",
    "Pattern",
    "compile_patterns",
    "ResultChannel",
]
