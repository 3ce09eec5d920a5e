"""Building blocks for command-line applications: typed values, timestamps, help text layout, suggestions and ordering."""

__version__ = "0.1.0"

__all__ = [
    "ordering",
    "suggestions",
    "text",
    "timestamp",
    "values",
]