#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Submission Model - one filled-in instance of a CMS form.
"""

import uuid
from dataclasses import dataclass, field
from typing import Dict, Any, Optional


@dataclass(frozen=True)
class Submission:
    """
    Form submission as handed over by the host CMS.

    Only the pieces the connector reads are modelled: the submission id, the
    handle of the form it belongs to, and the submitted values keyed by field
    handle.
    """

    form_handle: str
    data: Dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def get(self, field_name: str, default: Any = None) -> Any:
        """Value submitted for ``field_name``, or ``default``."""
        return self.data.get(field_name, default)

    def has(self, field_name: str) -> bool:
        """True when the field was submitted with a non-null value."""
        return self.data.get(field_name) is not None

    def context(self) -> Dict[str, Any]:
        """Identifiers attached to every log entry about this submission."""
        return {"form": self.form_handle, "submission_id": self.id}

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Submission":
        """
        Build a submission from a JSON payload.

        Accepts ``{"id": ..., "form": ..., "data": {...}}``; ``form_handle`` is
        accepted as an alias of ``form``.

        Raises:
            ValueError: If the payload is not an object or lacks the form handle
        """
        if not isinstance(payload, dict):
            raise ValueError("Submission payload must be an object")

        form_handle: Optional[str] = payload.get("form") or payload.get("form_handle")
        if not form_handle:
            raise ValueError("Submission payload is missing the form handle")

        data = payload.get("data") or {}
        if not isinstance(data, dict):
            raise ValueError("Submission data must be an object")

        submission_id = payload.get("id")
        if submission_id is None:
            return cls(form_handle=form_handle, data=dict(data))
        return cls(form_handle=form_handle, data=dict(data), id=str(submission_id))

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "form": self.form_handle, "data": dict(self.data)}
