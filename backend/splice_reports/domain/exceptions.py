"""Domain-specific exceptions, independent of the web framework."""


class NotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.message = f"{entity_type} with id '{entity_id}' not found"
        super().__init__(self.message)


class ValidationError(Exception):
    """Raised when an inbound payload fails shape, type, or required-field checks.

    Only the first violation is carried. ``field`` is the wire (camelCase)
    name of the offending field, or ``None`` when the payload as a whole is
    malformed (e.g. not a JSON object).
    """

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(message)
