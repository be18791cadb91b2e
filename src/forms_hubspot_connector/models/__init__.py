"""Data models shared by the connector."""
