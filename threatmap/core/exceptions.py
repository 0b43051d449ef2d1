"""
Custom exceptions for the persistence layer
"""


class ThreatMapError(Exception):
    """Base exception for the threatmap package"""


class ValidationError(ThreatMapError, ValueError):
    """A required field is missing or blank, or a value is outside its domain"""

    def __init__(self, entity: str, field: str, message: str):
        self.entity = entity
        self.field = field
        super().__init__(f"{entity}.{field}: {message}")


class NotFoundError(ThreatMapError, LookupError):
    """Entity not found error"""

    def __init__(self, entity: str, key):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found: {key!r}")
