"""Base service class for domain services."""

from pydantic import ValidationError as PydanticValidationError


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span several entities: vote
    replacement, acceptance and pin bookkeeping, notification fan-out and
    the soft-delete cascade.
    """

    pass


def describe_validation_error(error: PydanticValidationError) -> str:
    """Flatten a pydantic error into a single readable message."""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        parts.append(f"{location}: {item['msg']}" if location else item["msg"])
    return "; ".join(parts)
