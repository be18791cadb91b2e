"""
Validation module for the HubSpot connector.

Checks settings and submissions before anything is sent to HubSpot.
"""

__all__ = ['submission_validator']
