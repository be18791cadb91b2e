#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Submission Validator

Checks that a submission can be forwarded to HubSpot: the connector must have
an access token, and the submission must carry a well-formed email address in
the configured field. Failures are reported as warnings and never raised.
"""

from typing import Any, Optional

from email_validator import validate_email, EmailNotValidError

from ..config import ConnectorConfig
from ..models.submission import Submission
from ..reporter import ResultReporter

MISSING_TOKEN_MESSAGE = "HubSpot connector: Missing access token"
INVALID_EMAIL_MESSAGE = "HubSpot connector: Invalid or missing email"


def is_valid_email(value: Any) -> bool:
    """
    Check that ``value`` is a syntactically valid email address.

    Deliverability (DNS) checks are disabled: a form submission must not
    trigger network lookups before the HubSpot call.
    """
    if not value or not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


class SubmissionValidator:
    """Gatekeeper run before any request is sent to HubSpot."""

    def __init__(self, reporter: ResultReporter):
        self.reporter = reporter

    def has_access_token(self, submission: Submission, config: ConnectorConfig) -> bool:
        if config.access_token:
            return True
        self.reporter.warning(MISSING_TOKEN_MESSAGE, **submission.context())
        return False

    def resolve_email(self, submission: Submission, config: ConnectorConfig) -> Optional[str]:
        """
        Look up the email address in the configured field.

        Returns:
            The submitted address, or None after logging a warning
        """
        email = submission.get(config.email_field)
        if is_valid_email(email):
            return email

        self.reporter.warning(
            INVALID_EMAIL_MESSAGE,
            **submission.context(),
            email_field=config.email_field,
            email=email,
        )
        return None

    def validate(self, submission: Submission, config: ConnectorConfig) -> Optional[str]:
        """
        Run all checks in order.

        Returns:
            The validated email, or None when processing must stop
        """
        if not self.has_access_token(submission, config):
            return None
        return self.resolve_email(submission, config)
