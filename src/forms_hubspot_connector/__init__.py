"""
Forms to HubSpot connector.

Forwards CMS form submissions to HubSpot's CRM contacts API.
"""

__version__ = "1.0.0"

from .base import BaseConnector, ConnectorRegistry
from .connector import HubspotConnector
from .models.submission import Submission


def default_registry() -> ConnectorRegistry:
    """Registry holding the connectors shipped with this package."""
    registry = ConnectorRegistry()
    registry.register(HubspotConnector())
    return registry


__all__ = [
    "BaseConnector",
    "ConnectorRegistry",
    "HubspotConnector",
    "Submission",
    "default_registry",
]
