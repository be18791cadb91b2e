#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
HubSpot integration package.

Provides the contacts API client, the field-to-property mapper and the
create-or-update flow used by the connector.
"""
