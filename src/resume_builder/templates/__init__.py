"""Template registry for PDF resume rendering."""

from __future__ import annotations

import logging
from enum import StrEnum

from resume_builder.templates.base import TemplateDefinition
from resume_builder.templates.classic import CLASSIC_TEMPLATE
from resume_builder.templates.creative import CREATIVE_TEMPLATE
from resume_builder.templates.minimal import MINIMAL_TEMPLATE
from resume_builder.templates.modern import MODERN_TEMPLATE
from resume_builder.templates.professional import PROFESSIONAL_TEMPLATE

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_TEMPLATE_ID",
    "TemplateDefinition",
    "TemplateId",
    "get_template",
    "list_templates",
    "resolve_template_id",
]


class TemplateId(StrEnum):
    """Closed set of known template identifiers."""

    MODERN = "modern"
    CLASSIC = "classic"
    MINIMAL = "minimal"
    CREATIVE = "creative"
    PROFESSIONAL = "professional"

    @property
    def definition(self) -> TemplateDefinition:
        return _REGISTRY[self]


DEFAULT_TEMPLATE_ID = TemplateId.MODERN

_REGISTRY: dict[TemplateId, TemplateDefinition] = {
    TemplateId.MODERN: MODERN_TEMPLATE,
    TemplateId.CLASSIC: CLASSIC_TEMPLATE,
    TemplateId.MINIMAL: MINIMAL_TEMPLATE,
    TemplateId.CREATIVE: CREATIVE_TEMPLATE,
    TemplateId.PROFESSIONAL: PROFESSIONAL_TEMPLATE,
}


def resolve_template_id(template_id: str | None) -> TemplateId:
    """Return the :class:`TemplateId` for *template_id*.

    Unknown or missing identifiers fall back to :data:`DEFAULT_TEMPLATE_ID`
    instead of raising.
    """
    try:
        return TemplateId(template_id)
    except ValueError:
        logger.debug("Unknown template %r, using %s", template_id, DEFAULT_TEMPLATE_ID)
        return DEFAULT_TEMPLATE_ID


def get_template(template_id: str | None) -> TemplateDefinition:
    """Return the template registered under *template_id*, or the default one."""
    return resolve_template_id(template_id).definition


def list_templates() -> list[dict[str, str]]:
    """Describe every registered template for a template picker."""
    return [
        {
            "id": template_id.value,
            "name": definition.name,
            "headerStyle": definition.layout.header_style.value,
            "sectionStyle": definition.layout.section_style.value,
        }
        for template_id, definition in _REGISTRY.items()
    ]
