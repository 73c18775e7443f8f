"""
Exception hierarchy for the clinic registry.
"""

from typing import Any, Dict, List, Optional


class RegistryError(Exception):
    """Base exception for all registry errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format"""
        return {
            "error": self.message,
            "error_type": self.__class__.__name__,
            "details": self.details,
        }


class CoercionError(RegistryError, ValueError):
    """
    Raised when raw input fields cannot be interpreted as their types.

    All failing fields of one record are reported together in
    ``details["fields"]`` as ``{"field": ..., "input": ..., "reason": ...}``.
    """

    def __init__(self, entity: str, fields: List[Dict[str, Any]]):
        names = ", ".join(str(f["field"]) for f in fields)
        super().__init__(
            f"Cannot build {entity} from raw record: invalid {names}",
            details={"entity": entity, "fields": fields},
        )
        self.entity = entity
        self.fields = fields


class EmptyCollectionError(RegistryError, LookupError):
    """Raised when an extremum query runs on a collection with no candidates"""

    def __init__(self, query: str):
        super().__init__(
            f"{query} requires at least one record", details={"query": query}
        )
        self.query = query
