"""Artifact resolution and upload orchestration for Nexus."""
