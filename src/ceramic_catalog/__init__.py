"""Ceramic Catalog - product collections with client-based exclusivity.

Collections are GENERAL, EXCLUSIVE to one client, or shared with every
client in the same region and department (EXCLUSIVE_GROUP).
"""

__version__ = "0.1.0"

from ceramic_catalog.infrastructure.api.app import app

__all__ = ["app", "__version__"]
