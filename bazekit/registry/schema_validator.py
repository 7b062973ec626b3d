"""Registry JSON schema validation."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from bazekit.errors import RegistrySchemaError
from bazekit.models.registry import RawRegistry

logger = logging.getLogger(__name__)


def _format_error(error: dict) -> str:
    loc = ".".join(str(part) for part in error.get("loc", ()))
    return f"{loc}: {error['msg']}" if loc else error["msg"]


def validate_registry(data: Any) -> RawRegistry:
    """Validate a parsed registry document, raising on the first violation."""
    if not isinstance(data, dict):
        raise RegistrySchemaError(
            f"Registry must be a JSON object, got {type(data).__name__}"
        )
    try:
        raw = RawRegistry.model_validate(data)
    except ValidationError as e:
        errors = e.errors()
        logger.debug("Registry failed validation with %d error(s)", len(errors))
        raise RegistrySchemaError(_format_error(errors[0])) from e
    return raw
