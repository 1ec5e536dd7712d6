"""
Application package containing configuration, the in-memory store, and the
service layers for the card/list board API.
"""

__all__ = [
    "config",
    "time_utils",
    "store",
    "repositories",
    "services",
    "schemas",
]
