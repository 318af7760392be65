"""Keygraph custom exceptions."""


class KeyGraphError(Exception):
    """Base exception for keygraph errors."""


class NodeNotFoundError(KeyGraphError):
    """Node key not present in the graph."""


class InvalidKeyError(KeyGraphError):
    """Key is not an unsigned 64-bit integer."""


class EdgeSpecError(KeyGraphError):
    """Error parsing an edge spec."""
