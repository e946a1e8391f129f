"""Publish Maven and MTA build artifacts to a Nexus repository."""
