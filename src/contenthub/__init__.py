"""
contenthub backend
GraphQL API for blog posts, video games and listings
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
