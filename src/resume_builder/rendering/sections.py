"""Section renderers.

Each renderer takes the :class:`RenderContext` and its slice of the resume,
skips itself when that slice has no content, and otherwise draws a heading
followed by its entries.  Every atomic block asks the document for space
before it is drawn.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_builder.rendering.sanitize import sanitize_text
from resume_builder.rendering.text import wrap_text
from resume_builder.templates.base import RGB, WHITE, HeaderStyle, SectionStyle

if TYPE_CHECKING:
    from resume_builder.rendering.context import RenderContext
    from resume_builder.services.resume_data import (
        CertificationEntry,
        EducationEntry,
        ExperienceEntry,
        PersonalInfo,
        ProjectEntry,
    )

__all__ = [
    "SEPARATOR",
    "clean",
    "format_date_range",
    "join_present",
    "render_certifications",
    "render_education",
    "render_experience",
    "render_header",
    "render_projects",
    "render_skills",
    "render_summary",
]

SEPARATOR = " | "

_CONTACT_GREY = RGB(0.9, 0.9, 0.9)
_BAND_HEIGHT = 90.0
_HEADING_SPACE = 40.0
_EXPERIENCE_BLOCK = 60.0
_PROJECT_BLOCK = 50.0
_EDUCATION_BLOCK = 40.0
_TITLE_STEP = 14.0
_SMALL_STEP = 12.0


# ----------------------------------------------------------------------
# shared helpers
# ----------------------------------------------------------------------


def clean(value: object) -> str:
    """Sanitize a field and strip surrounding whitespace."""
    return sanitize_text(value).strip()


def join_present(*parts: str, separator: str = SEPARATOR) -> str:
    """Join the non-blank *parts*; never yields a dangling separator."""
    return separator.join(part for part in parts if part)


def format_date_range(start: str, end: str, current: bool = False) -> str:
    """Return ``"start - end"``, with ``Present`` as the end when *current*.

    Either side may be missing; when both are, the result is empty.
    """
    start = clean(start)
    end = "Present" if current else clean(end)
    if start and end:
        return f"{start} - {end}"
    return start or end


def _draw_section_heading(ctx: RenderContext, title: str) -> None:
    doc = ctx.document
    style = ctx.style
    colors = style.colors
    header_font = style.fonts.header
    label = title.upper()

    doc.ensure_space(_HEADING_SPACE)
    section_style = style.layout.section_style

    if section_style is SectionStyle.UNDERLINED:
        doc.draw_text(label, ctx.margin, header_font, 12, colors.primary)
        doc.advance(4)
        doc.draw_line(
            ctx.margin,
            doc.cursor_y,
            ctx.margin + ctx.content_width,
            doc.cursor_y,
            color=colors.primary,
        )
        doc.advance(14)
    elif section_style is SectionStyle.COLORED:
        doc.draw_rect(
            ctx.margin - 5,
            doc.cursor_y - 5,
            ctx.content_width + 10,
            20,
            fill=colors.primary.tint(0.1),
        )
        doc.draw_text(label, ctx.margin, header_font, 12, colors.primary)
        doc.advance(22)
    elif section_style is SectionStyle.BOXED:
        doc.draw_rect(
            ctx.margin - 5,
            doc.cursor_y - 5,
            ctx.content_width + 10,
            20,
            stroke=colors.primary,
        )
        doc.draw_text(label, ctx.margin + 5, header_font, 11, colors.primary)
        doc.advance(22)
    else:
        doc.draw_text(label, ctx.margin, header_font, 12, colors.primary)
        doc.advance(18)


def _end_section(ctx: RenderContext) -> None:
    ctx.document.advance(ctx.section_gap)


# ----------------------------------------------------------------------
# header
# ----------------------------------------------------------------------


def render_header(ctx: RenderContext, info: PersonalInfo) -> None:
    """Draw the identity block, the links row and the divider under them."""
    doc = ctx.document
    style = ctx.style
    colors = style.colors
    fonts = style.fonts
    header_style = style.layout.header_style

    name = clean(info.name.upper())
    contact = join_present(clean(info.email), clean(info.phone), clean(info.location))

    if header_style is HeaderStyle.COLORED_BAR:
        doc.draw_rect(
            0,
            ctx.page_height - _BAND_HEIGHT,
            ctx.page_width,
            _BAND_HEIGHT,
            fill=colors.header_bg,
        )
        doc.draw_text(name, ctx.margin, fonts.header, 26, WHITE, y=ctx.page_height - 50)
        doc.draw_text(contact, ctx.margin, fonts.body, 10, _CONTACT_GREY, y=ctx.page_height - 72)
        doc.move_cursor_to(ctx.page_height - 110)
    elif header_style is HeaderStyle.CENTERED:
        if name:
            x = ctx.centered_x(name, fonts.header, 24)
            doc.draw_text(name, x, fonts.header, 24, colors.primary)
            doc.advance(30)
        if contact:
            x = ctx.centered_x(contact, fonts.body, 10)
            doc.draw_text(contact, x, fonts.body, 10, colors.secondary)
            doc.advance(20)
    else:
        # sidebar and two-column headers share the left-aligned layout.
        if name:
            doc.draw_text(name, ctx.margin, fonts.header, 24, colors.primary)
            doc.advance(30)
        if contact:
            doc.draw_text(contact, ctx.margin, fonts.body, 10, colors.secondary)
            doc.advance(15)

    links = join_present(
        _labelled("LinkedIn", info.linkedin),
        _labelled("GitHub", info.github),
        _labelled("Portfolio", info.portfolio),
    )
    if links:
        if header_style is HeaderStyle.CENTERED:
            for line in wrap_text(links, ctx.content_width, fonts.body, 9, sanitize=False):
                x = ctx.centered_x(line, fonts.body, 9)
                doc.draw_text(line, x, fonts.body, 9, colors.accent)
                doc.advance(_SMALL_STEP)
        else:
            ctx.draw_wrapped(links, size=9, color=colors.accent, line_height=_SMALL_STEP)

    doc.draw_line(
        ctx.margin,
        doc.cursor_y,
        ctx.page_width - ctx.margin,
        doc.cursor_y,
        color=colors.accent,
    )
    _end_section(ctx)


def _labelled(label: str, value: str) -> str:
    value = clean(value)
    return f"{label}: {value}" if value else ""


# ----------------------------------------------------------------------
# body sections
# ----------------------------------------------------------------------


def render_summary(ctx: RenderContext, summary: str) -> None:
    text = clean(summary)
    if not text:
        return
    _draw_section_heading(ctx, "Professional Summary")
    ctx.draw_wrapped(text)
    _end_section(ctx)


def render_skills(ctx: RenderContext, skills: list[str]) -> None:
    names = [name for name in (clean(skill) for skill in skills) if name]
    if not names:
        return
    _draw_section_heading(ctx, "Skills")
    ctx.draw_wrapped(f" {ctx.style.bullet} ".join(names))
    _end_section(ctx)


def render_experience(ctx: RenderContext, entries: list[ExperienceEntry]) -> None:
    entries = [entry for entry in entries if not entry.is_empty()]
    if not entries:
        return

    doc = ctx.document
    style = ctx.style
    _draw_section_heading(ctx, "Experience")

    for entry in entries:
        doc.ensure_space(_EXPERIENCE_BLOCK)
        title = clean(entry.title) or "Position"
        doc.draw_text(title, ctx.margin, style.fonts.header, 11, style.colors.text)
        doc.advance(_TITLE_STEP)

        meta = join_present(
            clean(entry.company),
            clean(entry.location),
            format_date_range(entry.start_date, entry.end_date, entry.current),
        )
        if meta:
            doc.ensure_space(_TITLE_STEP)
            doc.draw_text(meta, ctx.margin, style.fonts.body, 10, style.colors.secondary)
            doc.advance(_TITLE_STEP)

        ctx.draw_wrapped(clean(entry.description), indent=10)

        for highlight in entry.highlights:
            text = clean(highlight)
            if text:
                ctx.draw_wrapped(f"{style.bullet} {text}", indent=15, wrap_inset=20)
        doc.advance(10)

    doc.advance(10)


def render_projects(ctx: RenderContext, entries: list[ProjectEntry]) -> None:
    entries = [entry for entry in entries if not entry.is_empty()]
    if not entries:
        return

    doc = ctx.document
    style = ctx.style
    _draw_section_heading(ctx, "Projects")

    for entry in entries:
        doc.ensure_space(_PROJECT_BLOCK)
        name = clean(entry.name) or "Project"
        doc.draw_text(name, ctx.margin, style.fonts.header, 11, style.colors.text)
        doc.advance(_TITLE_STEP)

        technologies = join_present(*(clean(t) for t in entry.technologies), separator=", ")
        if technologies:
            ctx.draw_wrapped(
                f"Technologies: {technologies}",
                indent=10,
                font=style.fonts.accent,
                size=9,
                color=style.colors.secondary,
                line_height=_SMALL_STEP,
            )

        ctx.draw_wrapped(clean(entry.description), indent=10)

        links = join_present(_labelled("URL", entry.url), _labelled("GitHub", entry.github))
        if links:
            ctx.draw_wrapped(
                links,
                indent=10,
                size=9,
                color=style.colors.accent,
                line_height=_SMALL_STEP,
            )
        doc.advance(8)

    doc.advance(10)


def _degree_heading(entry: EducationEntry) -> str:
    degree = clean(entry.degree)
    field = clean(entry.field)
    if degree and field:
        return f"{degree} in {field}"
    return degree or field or "Degree"


def render_education(ctx: RenderContext, entries: list[EducationEntry]) -> None:
    entries = [entry for entry in entries if not entry.is_empty()]
    if not entries:
        return

    doc = ctx.document
    style = ctx.style
    _draw_section_heading(ctx, "Education")

    for entry in entries:
        doc.ensure_space(_EDUCATION_BLOCK)
        doc.draw_text(_degree_heading(entry), ctx.margin, style.fonts.header, 11, style.colors.text)
        doc.advance(_TITLE_STEP)

        gpa = clean(entry.gpa)
        details = join_present(
            clean(entry.institution),
            clean(entry.location),
            format_date_range(entry.start_date, entry.end_date),
            f"GPA: {gpa}" if gpa else "",
        )
        ctx.draw_wrapped(details, color=style.colors.secondary, line_height=_TITLE_STEP)
        doc.advance(6)

    doc.advance(10)


def render_certifications(ctx: RenderContext, entries: list[CertificationEntry]) -> None:
    entries = [entry for entry in entries if not entry.is_empty()]
    if not entries:
        return

    doc = ctx.document
    style = ctx.style
    _draw_section_heading(ctx, "Certifications")

    for entry in entries:
        line = f"{style.bullet} {clean(entry.name) or 'Certification'}"
        issuer = clean(entry.issuer)
        if issuer:
            line += f" - {issuer}"
        date = clean(entry.date)
        if date:
            line += f" ({date})"
        ctx.draw_wrapped(line)
