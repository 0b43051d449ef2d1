"""threatmap: persistence layer for asset inventory and threat-intelligence correlation."""

__version__ = "0.1.0"
