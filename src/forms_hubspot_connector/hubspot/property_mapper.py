#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
HubSpot Property Mapper

Maps submitted form values to HubSpot contact properties using the
connector's field mapping grid.
"""

from typing import Dict, Any, Iterable, Mapping

from ..config import FieldMapping


class PropertyMapper:
    """
    Maps submission data to HubSpot contact properties.

    The resulting map always contains ``email``. Rows are applied in order, so
    a later row targeting the same property wins.
    """

    def __init__(self, field_mapping: Iterable[FieldMapping]):
        self.field_mapping = list(field_mapping)

    def map_properties(self, data: Mapping[str, Any], email: str) -> Dict[str, Any]:
        """
        Build the contact properties for one submission.

        Args:
            data: Submitted values keyed by form field handle
            email: Already validated email address

        Returns:
            Dict[str, Any]: HubSpot contact properties
        """
        properties: Dict[str, Any] = {"email": email}

        for mapping in self.field_mapping:
            form_field = mapping.form_field
            hubspot_property = mapping.hubspot_property

            if not form_field or not hubspot_property:
                continue

            # Fields that were not submitted (or submitted empty-as-null) are skipped.
            if data.get(form_field) is None:
                continue

            properties[hubspot_property] = data[form_field]

        return properties
