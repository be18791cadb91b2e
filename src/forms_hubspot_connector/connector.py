#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
HubSpot Connector

Forwards CMS form submissions to HubSpot as contacts. The flow for one
submission is:

1. parse the saved settings into a ``ConnectorConfig``;
2. check the access token and the submitted email address;
3. map form fields to contact properties;
4. create the contact, or update it when HubSpot reports it already exists.

Outcomes are only visible through the log; ``process`` never raises.
"""

from typing import Dict, List, Any, Optional

import requests
from pydantic import ValidationError

from .base import BaseConnector
from .config import AppConfig, ConnectorConfig, config as default_settings
from .fieldset import get_fieldset
from .models.submission import Submission
from .reporter import ResultReporter
from .validation.submission_validator import SubmissionValidator
from .hubspot.property_mapper import PropertyMapper
from .hubspot.contacts_client import HubSpotContactsClient
from .hubspot.contact_upsert import ContactUpserter

INVALID_CONFIG_MESSAGE = "HubSpot connector: Invalid configuration"


class HubspotConnector(BaseConnector):
    """Connector that upserts a HubSpot contact for every submission."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        reporter: Optional[ResultReporter] = None,
        settings: Optional[AppConfig] = None,
    ):
        """
        Initialize the connector.

        Args:
            session: HTTP session used for HubSpot calls
            reporter: Destination of log entries
            settings: Process-wide settings (API root, timeout)
        """
        self.session = session or requests.Session()
        self.reporter = reporter or ResultReporter()
        self.settings = settings or default_settings

    def handle(self) -> str:
        return "hubspot"

    def name(self) -> str:
        return "HubSpot"

    def fieldset(self) -> List[Dict[str, Any]]:
        return get_fieldset()

    def process(self, submission: Submission, config: Dict[str, Any]) -> None:
        reporter = self.reporter.bind(**submission.context())

        try:
            connector_config = ConnectorConfig.from_mapping(config)
        except ValidationError as e:
            # Raw input values are left out so the token never reaches the log.
            problems = [".".join(str(part) for part in err["loc"]) + ": " + err["msg"] for err in e.errors()]
            reporter.warning(INVALID_CONFIG_MESSAGE, errors=problems)
            return

        email = SubmissionValidator(reporter).validate(submission, connector_config)
        if email is None:
            return

        if not connector_config.create_contact:
            reporter.debug("HubSpot contact sync disabled for this form", email=email)
            return

        properties = PropertyMapper(connector_config.field_mapping).map_properties(submission.data, email)
        self.upsert_contact(connector_config, email, properties, reporter)

    def upsert_contact(
        self,
        connector_config: ConnectorConfig,
        email: str,
        properties: Dict[str, Any],
        reporter: ResultReporter,
    ) -> None:
        client = HubSpotContactsClient(
            connector_config.access_token,
            session=self.session,
            base_url=self.settings.hubspot_api_base_url,
            timeout=self.settings.request_timeout,
        )
        ContactUpserter(client, reporter).upsert(email, properties)
