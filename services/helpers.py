"""Small argument helpers shared by the services."""

from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from app.exceptions import ServiceValidationError

SchemaType = TypeVar("SchemaType", bound=BaseModel)


def parse_id(raw: Any, label: str = "ID") -> int:
    """Parse a client-supplied identifier into a positive integer."""
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        raise ServiceValidationError(f"Invalid {label} provided.", details={"value": raw})
    if value < 1:
        raise ServiceValidationError(f"Invalid {label} provided.", details={"value": raw})
    return value


def check_page_args(limit: int, offset: int = 0, max_page_size: Optional[int] = None) -> None:
    """Reject limits below 1, negative offsets and limits above the page cap."""
    if limit is None or offset is None or limit < 1 or offset < 0:
        raise ServiceValidationError(
            "Invalid limit or offset value.",
            details={"limit": limit, "offset": offset},
        )
    if max_page_size is not None and limit > max_page_size:
        raise ServiceValidationError(
            f"limit must not exceed {max_page_size}.",
            details={"limit": limit, "max": max_page_size},
        )


def validate_schema(schema: Type[SchemaType], data: Any, message: str) -> SchemaType:
    """Validate ``data`` against a pydantic schema, turning failures into BAD_REQUEST."""
    if isinstance(data, schema):
        return data
    try:
        if isinstance(data, BaseModel):
            data = data.model_dump(exclude_unset=True)
        return schema.model_validate(data)
    except ValidationError as exc:
        errors = [
            {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ]
        raise ServiceValidationError(message, details={"errors": errors}) from exc
