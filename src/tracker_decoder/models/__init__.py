"""Decoded packet models."""

from .frame import DecodedFrame
