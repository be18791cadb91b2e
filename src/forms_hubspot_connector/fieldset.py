#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Editable settings of the HubSpot connector, in the blueprint format the
control panel renders.
"""

import copy
from typing import Dict, List, Any

from .config import DEFAULT_EMAIL_FIELD

FIELDSET: List[Dict[str, Any]] = [
    {
        "handle": "access_token",
        "field": {
            "type": "text",
            "display": "Access Token",
            "instructions": "Your HubSpot private app access token",
            "validate": "required",
        },
    },
    {
        "handle": "email_field",
        "field": {
            "type": "text",
            "display": "Email Field",
            "instructions": "Form field containing the email address",
            "default": DEFAULT_EMAIL_FIELD,
        },
    },
    {
        "handle": "create_contact",
        "field": {
            "type": "toggle",
            "display": "Create Contact",
            "instructions": "Create or update contact in HubSpot",
            "default": True,
        },
    },
    {
        "handle": "field_mapping",
        "field": {
            "type": "grid",
            "display": "Field Mapping",
            "instructions": "Map form fields to HubSpot contact properties",
            "fields": [
                {
                    "handle": "form_field",
                    "field": {
                        "type": "text",
                        "display": "Form Field",
                        "width": 50,
                    },
                },
                {
                    "handle": "hubspot_property",
                    "field": {
                        "type": "text",
                        "display": "HubSpot Property",
                        "instructions": "e.g. firstname, lastname, phone, company",
                        "width": 50,
                    },
                },
            ],
        },
    },
]


def get_fieldset() -> List[Dict[str, Any]]:
    """Fresh copy of the fieldset; callers may mutate it freely."""
    return copy.deepcopy(FIELDSET)
