#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Unit tests for the submission validator.
"""

import pytest

from forms_hubspot_connector.config import ConnectorConfig
from forms_hubspot_connector.validation.submission_validator import (
    SubmissionValidator,
    is_valid_email,
    MISSING_TOKEN_MESSAGE,
    INVALID_EMAIL_MESSAGE,
)


@pytest.mark.parametrize("value", [
    "u@e.com",
    "jane.doe+forms@acme.io",
    "first_last@sub.domain.co.uk",
])
def test_valid_emails(value):
    assert is_valid_email(value)


@pytest.mark.parametrize("value", [
    None,
    "",
    "invalid-email",
    "missing-domain@",
    "@missing-local.com",
    "two@@signs.com",
    "spaces in@local.com",
    "u@e",
    42,
    ["u@e.com"],
])
def test_invalid_emails(value):
    assert not is_valid_email(value)


class TestSubmissionValidator:
    """Tests for the SubmissionValidator class."""

    def test_returns_email_when_valid(self, reporter, mock_logger, make_submission):
        config = ConnectorConfig(access_token="t")
        validator = SubmissionValidator(reporter)

        assert validator.validate(make_submission({"email": "u@e.com"}), config) == "u@e.com"
        mock_logger.warning.assert_not_called()

    def test_token_is_checked_first(self, reporter, mock_logger, make_submission):
        validator = SubmissionValidator(reporter)

        assert validator.validate(make_submission({"email": "invalid"}), ConnectorConfig()) is None
        assert mock_logger.warning.call_count == 1
        assert mock_logger.warning.call_args.args[0].startswith(MISSING_TOKEN_MESSAGE)

    def test_warning_carries_field_and_value(self, reporter, mock_logger, make_submission):
        config = ConnectorConfig(access_token="t", email_field="contact_email")
        validator = SubmissionValidator(reporter)

        assert validator.validate(make_submission({"contact_email": "nope"}), config) is None

        message = mock_logger.warning.call_args.args[0]
        context = mock_logger.warning.call_args.kwargs["extra"]["context"]
        assert message.startswith(INVALID_EMAIL_MESSAGE)
        assert context == {
            "form": "test_form",
            "submission_id": "test_id",
            "email_field": "contact_email",
            "email": "nope",
        }

    def test_missing_email_reports_none(self, reporter, mock_logger, make_submission):
        validator = SubmissionValidator(reporter)

        assert validator.resolve_email(make_submission({}), ConnectorConfig(access_token="t")) is None
        assert mock_logger.warning.call_args.kwargs["extra"]["context"]["email"] is None

    def test_original_value_is_returned(self, reporter, make_submission):
        validator = SubmissionValidator(reporter)

        email = validator.resolve_email(make_submission({"email": "Jane@ACME.io"}), ConnectorConfig(access_token="t"))

        assert email == "Jane@ACME.io"
