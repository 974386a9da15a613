"""Property listing catalog backed by a generic JSON properties API"""

__all__ = [
    "app",
    "config",
    "coordinator",
    "exceptions",
    "filters",
    "format",
    "log",
    "models",
    "store",
    "summary",
]
