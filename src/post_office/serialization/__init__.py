"""Serialization of expression trees to notation text."""

from post_office.serialization.serialize import serialize

__all__ = ["serialize"]
