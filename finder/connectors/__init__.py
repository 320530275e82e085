"""Recipe search API connectors."""

from .base import BaseRecipeConnector
from .edamam_connector import EdamamConnector

__all__ = ["BaseRecipeConnector", "EdamamConnector"]
