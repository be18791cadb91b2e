#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Unit tests for the contact upsert flow, with the API client mocked out.
"""

from unittest.mock import MagicMock

import pytest

from forms_hubspot_connector.hubspot.contact_upsert import (
    ContactUpserter,
    CREATED_MESSAGE,
    UPDATED_MESSAGE,
    UPDATE_FAILED_MESSAGE,
)
from forms_hubspot_connector.hubspot.contacts_client import (
    HubSpotContactsClient,
    HubSpotAPIError,
    ContactConflictError,
)

PROPERTIES = {"email": "u@e.com", "firstname": "Jane"}


@pytest.fixture
def client():
    return MagicMock(spec=HubSpotContactsClient)


@pytest.fixture
def upserter(client, reporter):
    return ContactUpserter(client, reporter.bind(form="test_form", submission_id="test_id"))


class TestContactUpserter:
    """Tests for the ContactUpserter class."""

    def test_create_does_not_search(self, upserter, client, mock_logger):
        client.create_contact.return_value = {"id": "42"}

        upserter.upsert("u@e.com", PROPERTIES)

        client.create_contact.assert_called_once_with(PROPERTIES)
        client.search_contacts_by_email.assert_not_called()
        client.update_contact.assert_not_called()
        assert mock_logger.info.call_args.args[0].startswith(CREATED_MESSAGE)

    def test_conflict_updates_with_same_properties(self, upserter, client, mock_logger):
        client.create_contact.side_effect = ContactConflictError(409, {})
        client.search_contacts_by_email.return_value = [{"id": "99", "properties": {}}]

        upserter.upsert("u@e.com", PROPERTIES)

        client.search_contacts_by_email.assert_called_once_with("u@e.com")
        client.update_contact.assert_called_once_with("99", PROPERTIES)
        assert mock_logger.info.call_count == 1
        assert mock_logger.info.call_args.args[0].startswith(UPDATED_MESSAGE)
        assert mock_logger.info.call_args.kwargs["extra"]["context"] == {
            "form": "test_form",
            "submission_id": "test_id",
            "email": "u@e.com",
            "contact_id": "99",
        }

    def test_rejected_update_is_only_debug_logged(self, upserter, client, mock_logger):
        client.create_contact.side_effect = ContactConflictError(409, {})
        client.search_contacts_by_email.return_value = [{"id": "99"}]
        client.update_contact.side_effect = HubSpotAPIError(400, {"message": "invalid"})

        upserter.upsert("u@e.com", PROPERTIES)

        mock_logger.info.assert_not_called()
        mock_logger.error.assert_not_called()
        assert mock_logger.debug.call_count == 1

    def test_search_result_without_id(self, upserter, client, mock_logger):
        client.create_contact.side_effect = ContactConflictError(409, {})
        client.search_contacts_by_email.return_value = [{"properties": {}}]

        upserter.upsert("u@e.com", PROPERTIES)

        client.update_contact.assert_not_called()
        assert mock_logger.error.call_count == 1
        assert mock_logger.error.call_args.args[0].startswith(UPDATE_FAILED_MESSAGE)
