"""
dicegraph
GraphQL API over dice rolls, greetings and an in-memory message store
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
