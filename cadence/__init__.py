"""Cadence training schedule service."""
