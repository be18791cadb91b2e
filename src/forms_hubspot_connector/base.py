#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Base Connector - Abstract base class for form submission connectors.
"""

import abc
from typing import Dict, List, Any, Optional

from .models.submission import Submission


class BaseConnector(abc.ABC):
    """
    Abstract base class for all connectors. A connector receives every
    submission of the forms it is enabled on, together with the settings an
    editor entered through its fieldset.
    """

    @abc.abstractmethod
    def handle(self) -> str:
        """
        Machine name of the connector, used as its registry key.
        """
        pass

    @abc.abstractmethod
    def name(self) -> str:
        """
        Human readable name shown in the control panel.
        """
        pass

    @abc.abstractmethod
    def fieldset(self) -> List[Dict[str, Any]]:
        """
        Declaration of the editable settings for this connector.

        Returns:
            list: ``{"handle": ..., "field": {...}}`` entries
        """
        pass

    @abc.abstractmethod
    def process(self, submission: Submission, config: Dict[str, Any]) -> None:
        """
        Forward one submission. Must not raise; outcomes are logged.

        Args:
            submission: The submission to forward
            config: Raw settings saved from the fieldset
        """
        pass


class ConnectorRegistry:
    """Connectors available to the host, keyed by handle."""

    def __init__(self):
        self._connectors: Dict[str, BaseConnector] = {}

    def register(self, connector: BaseConnector) -> BaseConnector:
        handle = connector.handle()
        if handle in self._connectors:
            raise ValueError(f"Connector already registered: {handle}")
        self._connectors[handle] = connector
        return connector

    def get(self, handle: str) -> Optional[BaseConnector]:
        return self._connectors.get(handle)

    def handles(self) -> List[str]:
        return sorted(self._connectors)

    def __contains__(self, handle: str) -> bool:
        return handle in self._connectors

    def __len__(self) -> int:
        return len(self._connectors)
