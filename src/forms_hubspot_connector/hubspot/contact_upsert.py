#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Contact upsert.

Creates a HubSpot contact and, when HubSpot answers 409 because the email is
already taken, looks the contact up by email and updates it instead. Every
outcome ends in a reporter entry; nothing is raised to the caller.
"""

from typing import Dict, Any

from ..reporter import ResultReporter
from .contacts_client import (
    HubSpotContactsClient,
    HubSpotError,
    HubSpotAPIError,
    ContactConflictError,
)

CREATED_MESSAGE = "HubSpot contact created/updated successfully"
UPDATED_MESSAGE = "HubSpot contact updated successfully"
API_ERROR_MESSAGE = "HubSpot API error"
EXCEPTION_MESSAGE = "HubSpot connector exception"
UPDATE_FAILED_MESSAGE = "HubSpot contact update failed"


class ContactUpserter:
    """Create-or-update of a single contact."""

    def __init__(self, client: HubSpotContactsClient, reporter: ResultReporter):
        """
        Args:
            client: Contacts API client
            reporter: Reporter already bound to the submission context
        """
        self.client = client
        self.reporter = reporter

    def upsert(self, email: str, properties: Dict[str, Any]) -> None:
        reporter = self.reporter.bind(email=email)

        try:
            contact = self.client.create_contact(properties)
        except ContactConflictError:
            self.update_existing(email, properties)
            return
        except HubSpotAPIError as e:
            reporter.error(
                API_ERROR_MESSAGE,
                status=e.status_code,
                error=e.message,
                errors=e.errors,
                full_response=e.payload,
            )
            return
        except HubSpotError as e:
            reporter.error(EXCEPTION_MESSAGE, error=str(e))
            return

        reporter.info(CREATED_MESSAGE, contact_id=contact.get("id"))

    def update_existing(self, email: str, properties: Dict[str, Any]) -> None:
        """
        Find the contact holding ``email`` and patch it with ``properties``.

        A failed search, an empty result or a rejected update is only recorded
        at debug level.
        """
        reporter = self.reporter.bind(email=email)

        try:
            contacts = self.client.search_contacts_by_email(email)
            if not contacts:
                reporter.debug("HubSpot contact search returned no results")
                return

            contact_id = contacts[0]["id"]
            self.client.update_contact(contact_id, properties)
        except HubSpotAPIError as e:
            reporter.debug("HubSpot contact update skipped", status=e.status_code, error=e.message)
            return
        except (HubSpotError, KeyError, TypeError) as e:
            reporter.error(UPDATE_FAILED_MESSAGE, error=str(e))
            return

        reporter.info(UPDATED_MESSAGE, contact_id=contact_id)
