"""Shared helpers for the wire representation."""
