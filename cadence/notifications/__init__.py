"""Outbound notifications: messages, delivery adapters and dispatch."""
