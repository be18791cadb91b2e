#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
HubSpot Contacts API client.

Thin wrapper around the three CRM v3 contact endpoints the connector needs:
create, search and update by id. Non-2xx responses and transport failures are
raised as ``HubSpotError`` subclasses; the caller decides how to report them.
"""

import logging
from typing import Dict, List, Any, Optional

import requests

from ..config import DEFAULT_API_BASE_URL, DEFAULT_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)

CONTACTS_PATH = "/crm/v3/objects/contacts"
SEARCH_PATH = "/crm/v3/objects/contacts/search"


class HubSpotError(Exception):
    """Base exception for HubSpot client errors."""
    pass


class HubSpotConnectionError(HubSpotError):
    """Raised when the request could not be completed (timeout, DNS, reset...)."""
    pass


class HubSpotRequestError(HubSpotError):
    """Raised when the request body cannot be encoded as JSON."""
    pass


class HubSpotResponseError(HubSpotError):
    """Raised when a successful response does not carry the expected JSON."""
    pass


class HubSpotAPIError(HubSpotError):
    """Raised for non-2xx responses; keeps the status and decoded body."""

    def __init__(self, status_code: int, payload: Optional[Any] = None):
        self.status_code = status_code
        self.payload = payload
        super().__init__(f"HubSpot API error ({status_code}): {self.message}")

    @property
    def message(self) -> str:
        if isinstance(self.payload, dict) and self.payload.get("message"):
            return str(self.payload["message"])
        return "Unknown error"

    @property
    def errors(self) -> List[Any]:
        if isinstance(self.payload, dict) and isinstance(self.payload.get("errors"), list):
            return self.payload["errors"]
        return []


class ContactConflictError(HubSpotAPIError):
    """Raised on 409: a contact with this email already exists."""
    pass


def email_search_request(email: str) -> Dict[str, Any]:
    """Search body matching contacts whose email equals ``email``."""
    return {
        "filterGroups": [
            {
                "filters": [
                    {
                        "propertyName": "email",
                        "operator": "EQ",
                        "value": email,
                    }
                ]
            }
        ]
    }


class HubSpotContactsClient:
    """Client for the HubSpot CRM v3 contacts endpoints."""

    def __init__(
        self,
        access_token: str,
        session: Optional[requests.Session] = None,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ):
        """
        Initialize the client.

        Args:
            access_token: Private app access token sent as a bearer token
            session: HTTP session to send requests through
            base_url: API root, without trailing slash
            timeout: Per-request timeout in seconds
        """
        if not access_token:
            raise ValueError("HubSpot access token is required")

        self.access_token = access_token
        self.session = session or requests.Session()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.access_token}",
            "Content-Type": "application/json",
        }

    def _request(
        self,
        method: str,
        path: str,
        payload: Dict[str, Any],
        require_body: bool = True,
    ) -> Dict[str, Any]:
        """
        Send one request and decode the JSON body.

        Args:
            require_body: When False, a 2xx body that is not a JSON object
                is returned as an empty dict instead of raising

        Raises:
            ContactConflictError: On 409
            HubSpotAPIError: On any other non-2xx status
            HubSpotRequestError: If the payload cannot be encoded as JSON
            HubSpotConnectionError: If the request could not be completed
            HubSpotResponseError: If a 2xx body is not a JSON object
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method,
                url,
                json=payload,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.exceptions.InvalidJSONError as e:
            raise HubSpotRequestError(f"Could not encode request body: {e}") from e
        except requests.RequestException as e:
            raise HubSpotConnectionError(f"Request failed: {e}") from e
        except (TypeError, ValueError) as e:
            # Submitted values that json.dumps cannot handle (dates, sets...).
            raise HubSpotRequestError(f"Could not encode request body: {e}") from e

        status_code = response.status_code
        if not 200 <= status_code < 300:
            try:
                error_payload = response.json()
            except ValueError:
                error_payload = None

            if status_code == 409:
                raise ContactConflictError(status_code, error_payload)
            raise HubSpotAPIError(status_code, error_payload)

        if not response.content:
            return {}

        try:
            body = response.json()
        except ValueError as e:
            if not require_body:
                return {}
            raise HubSpotResponseError(f"Invalid JSON response: {e}") from e

        if not isinstance(body, dict):
            if not require_body:
                return {}
            raise HubSpotResponseError(f"Unexpected response body: {body!r}")
        return body

    def create_contact(self, properties: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a contact.

        Args:
            properties: Contact properties, including ``email``

        Returns:
            Dict: The created contact as returned by HubSpot
        """
        return self._request("POST", CONTACTS_PATH, {"properties": properties})

    def search_contacts_by_email(self, email: str) -> List[Dict[str, Any]]:
        """
        Find contacts whose email equals ``email``.

        Returns:
            List[Dict]: Matching contacts, possibly empty
        """
        body = self._request("POST", SEARCH_PATH, email_search_request(email))
        results = body.get("results") or []
        if not isinstance(results, list):
            raise HubSpotResponseError(f"Unexpected search results: {results!r}")
        return results

    def update_contact(self, contact_id: str, properties: Dict[str, Any]) -> Dict[str, Any]:
        """
        Update an existing contact's properties.

        Args:
            contact_id: HubSpot contact id
            properties: Properties to set

        Returns:
            Dict: The updated contact, or an empty dict when a successful
            response carries no JSON object
        """
        return self._request(
            "PATCH",
            f"{CONTACTS_PATH}/{contact_id}",
            {"properties": properties},
            require_body=False,
        )
