"""Projection of the free/occupied flag into display text."""

from .models import DisplayConfiguration, StatusProjection

DEFAULT_AVAILABLE_TEXT = "Ledigt"
DEFAULT_UNAVAILABLE_TEXT = "Optaget"


def project_status(is_free: bool, config: DisplayConfiguration) -> StatusProjection:
    """Map the availability flag to a label and a style class."""
    if is_free:
        return StatusProjection(
            label=config.resourceAvailableText or DEFAULT_AVAILABLE_TEXT,
            styleClass="free",
        )
    return StatusProjection(
        label=config.resourceUnavailableText or DEFAULT_UNAVAILABLE_TEXT,
        styleClass="occupied",
    )
