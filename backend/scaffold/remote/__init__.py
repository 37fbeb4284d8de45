"""
Remote Client Module Initialization
"""

from scaffold.remote.client import RemoteClient
from scaffold.remote.category_client import CategoryClient

__all__ = [
    "RemoteClient",
    "CategoryClient",
]
