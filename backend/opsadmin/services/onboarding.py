"""Validation of onboarding screen options against their component's schema.

A screen's ``options`` payload has a different shape for each component, so
the component catalogue stores one JSON Schema per component and the schema
selected by ``component_id`` decides what the payload must look like.
"""
import logging
from typing import Any, Optional

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import OnboardingComponent
from ..utils.errors import BadRequestError

logger = logging.getLogger(__name__)


def options_errors(schema: Optional[dict], options: Any) -> list[str]:
    """List ``"path: message"`` problems with ``options`` under ``schema``."""
    if not schema:
        return []
    Draft202012Validator.check_schema(schema)
    validator = Draft202012Validator(schema)
    errors = []
    for error in sorted(validator.iter_errors(options), key=lambda e: list(e.path)):
        path = ".".join(str(p) for p in error.path) if error.path else "root"
        errors.append(f"{path}: {error.message}")
    return errors


async def validate_screen_options(
    db: AsyncSession,
    component_id: Optional[str],
    options: Any,
    screen_type: str,
) -> None:
    """Check a screen's options against its component before persisting.

    Raises BadRequestError for an unknown component, a component not offered
    for this screen type, or options that fail the component's schema.
    """
    if not component_id:
        return

    component = await db.get(OnboardingComponent, component_id)
    if component is None:
        raise BadRequestError(f"Unknown onboarding component: {component_id}")

    if component.categories and screen_type not in component.categories:
        raise BadRequestError(
            f"Component {component.component_key} is not available for {screen_type} screens"
        )

    if options is None:
        return

    try:
        errors = options_errors(component.props_schema, options)
    except SchemaError as e:
        logger.error(f"Component {component.component_key} has an invalid props schema: {e.message}")
        raise BadRequestError("Component schema is invalid", details=e.message)

    if errors:
        raise BadRequestError("Invalid options for component", details=errors)
