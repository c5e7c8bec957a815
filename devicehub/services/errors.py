from typing import Optional


class InventoryError(Exception):
    """Base class for every failure the inventory core reports."""
    status_code = 500

    def __init__(self, message: str, payload: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.payload = payload or {}

    def to_dict(self):
        return {"message": self.message, "detail": dict(self.payload) or None}


class NotFound(InventoryError):
    """No record with the requested identifier."""
    status_code = 404

    def __init__(self, entity: str, record_id):
        super().__init__(f"{entity} {record_id} not found", {"entity": entity, "id": record_id})
        self.entity = entity
        self.record_id = record_id


class ValidationFailure(InventoryError):
    """Payload references something that does not exist."""
    status_code = 422

    def __init__(self, entity: str, field: str, value):
        super().__init__(
            f"{entity}.{field} references missing record {value}",
            {"entity": entity, "field": field, "value": value},
        )
        self.field = field


class IntegrityViolation(InventoryError):
    """The store refused a write because of a constraint."""
    status_code = 409


class ReferentialIntegrityViolation(IntegrityViolation):
    """Delete refused while other records still point at the target."""

    def __init__(self, entity: str, record_id, dependents: dict):
        listed = ", ".join(f"{table} ({count})" for table, count in dependents.items()) or "unknown dependents"
        super().__init__(
            f"{entity} {record_id} is still referenced by {listed}",
            {"entity": entity, "id": record_id, "dependents": dict(dependents)},
        )
        self.dependents = dict(dependents)


class UniqueConstraintViolation(IntegrityViolation):
    """Another record already holds a value that must be unique."""

    def __init__(self, entity: str, field: str, value):
        super().__init__(
            f"{entity}.{field} = {value} is already taken",
            {"entity": entity, "field": field, "value": value},
        )
        self.field = field
