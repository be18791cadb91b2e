#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Configuration management for the Forms to HubSpot connector.

Two layers of configuration live here:

* ``AppConfig`` holds process-wide settings loaded from environment variables
  (and a ``.env`` file), such as the API root and request timeout.
* ``ConnectorConfig`` holds the per-form settings an editor fills in through
  the connector fieldset: access token, email field, create toggle and the
  field mapping grid.
"""

import os
import json
import logging
from pathlib import Path
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional
from urllib.parse import urlparse

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_BASE_URL = "https://api.hubapi.com"
DEFAULT_REQUEST_TIMEOUT = 10  # seconds
DEFAULT_EMAIL_FIELD = "email"

# Log levels
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass
class AppConfig:
    """Application configuration."""

    # HubSpot
    hubspot_api_base_url: str = field(
        default_factory=lambda: os.getenv("HUBSPOT_API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/")
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.getenv("HUBSPOT_REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT)))
    )

    # Logging
    log_level: int = field(
        default_factory=lambda: LOG_LEVELS.get(
            os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO
        )
    )
    log_file_path: Optional[Path] = field(
        default_factory=lambda: Path(os.environ["LOG_FILE_PATH"]) if os.getenv("LOG_FILE_PATH") else None
    )
    json_logs: bool = field(
        default_factory=lambda: os.getenv("LOG_JSON", "false").lower() == "true"
    )

    def validate(self) -> List[str]:
        """
        Validate configuration values.

        Returns:
            List[str]: List of validation errors, empty if valid
        """
        errors = []

        parsed = urlparse(self.hubspot_api_base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            errors.append(f"HUBSPOT_API_BASE_URL is not a valid http(s) URL: {self.hubspot_api_base_url}")

        if self.request_timeout <= 0:
            errors.append("HUBSPOT_REQUEST_TIMEOUT must be positive")

        if self.log_file_path is not None and not self.log_file_path.parent.exists():
            errors.append(f"Log file path parent does not exist: {self.log_file_path.parent}")

        return errors

    def load_json_file(self, path: Path) -> Dict[str, Any]:
        """
        Load a JSON document used by the command-line interface.

        Args:
            path: Path to the file

        Returns:
            Dict: Loaded document or empty dict if the file doesn't exist
        """
        if not path.exists():
            return {}
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)


class FieldMapping(BaseModel):
    """One row of the field mapping grid."""

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    form_field: str = ""
    hubspot_property: str = ""

    @field_validator("form_field", "hubspot_property", mode="before")
    @classmethod
    def _blank_when_missing(cls, value: Any) -> Any:
        return "" if value is None else value


class ConnectorConfig(BaseModel):
    """Per-form connector settings as edited through the fieldset."""

    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    access_token: Optional[str] = None
    email_field: str = DEFAULT_EMAIL_FIELD
    create_contact: bool = True
    field_mapping: List[FieldMapping] = []

    @field_validator("email_field", mode="before")
    @classmethod
    def _default_email_field(cls, value: Any) -> Any:
        return DEFAULT_EMAIL_FIELD if value is None else value

    @field_validator("create_contact", mode="before")
    @classmethod
    def _default_create_contact(cls, value: Any) -> Any:
        if value is None:
            return True
        # An empty toggle value means off.
        if value == "":
            return False
        return value

    @field_validator("field_mapping", mode="before")
    @classmethod
    def _default_field_mapping(cls, value: Any) -> Any:
        return [] if value is None else value

    @classmethod
    def from_mapping(cls, data: Optional[Dict[str, Any]]) -> "ConnectorConfig":
        """
        Build a config from the raw mapping the host passes to ``process``.

        Raises:
            pydantic.ValidationError: If a value has the wrong shape
        """
        return cls.model_validate(data or {})


# Create a global config instance
config = AppConfig()
