"""Template-agnostic structured resume model.

These models define the shape of data that flows from the API and the
resume store into every PDF template.  They are deliberately forgiving:
``null`` values, missing keys and numeric scalars are normalised so that
renderers only ever see strings and lists, never ``None``.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

__all__ = [
    "CertificationEntry",
    "EducationEntry",
    "ExperienceEntry",
    "PersonalInfo",
    "ProjectEntry",
    "ResumeData",
]


def _to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else ""
    if isinstance(value, int | float):
        return str(value)
    return value


def _compact(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, list | tuple):
        return [item for item in value if item is not None]
    if isinstance(value, str):
        return [value]
    return value


Text = Annotated[str, BeforeValidator(_to_text)]
TextList = Annotated[list[Text], BeforeValidator(_compact)]


class _ResumeModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def is_empty(self) -> bool:
        """True when no field carries any non-blank content."""
        for value in self.model_dump().values():
            if isinstance(value, str) and value.strip():
                return False
            if isinstance(value, list) and any(str(item).strip() for item in value):
                return False
        return True


class PersonalInfo(_ResumeModel):
    """Name and contact links shown in the resume header."""

    name: Text = ""
    email: Text = ""
    phone: Text = ""
    location: Text = ""
    linkedin: Text = ""
    github: Text = ""
    portfolio: Text = ""


class ExperienceEntry(_ResumeModel):
    title: Text = ""
    company: Text = ""
    location: Text = ""
    start_date: Text = ""
    end_date: Text = ""
    current: bool = False
    description: Text = ""
    highlights: TextList = Field(default_factory=list)


class ProjectEntry(_ResumeModel):
    name: Text = ""
    description: Text = ""
    technologies: TextList = Field(default_factory=list)
    url: Text = ""
    github: Text = ""


class EducationEntry(_ResumeModel):
    degree: Text = ""
    field: Text = ""
    institution: Text = ""
    location: Text = ""
    start_date: Text = ""
    end_date: Text = ""
    gpa: Text = ""


class CertificationEntry(_ResumeModel):
    name: Text = ""
    issuer: Text = ""
    date: Text = ""
    url: Text = ""


class ResumeData(_ResumeModel):
    """Top-level bundle passed to the PDF renderer."""

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: Text = ""
    skills: TextList = Field(default_factory=list)
    experience: Annotated[list[ExperienceEntry], BeforeValidator(_compact)] = Field(
        default_factory=list
    )
    projects: Annotated[list[ProjectEntry], BeforeValidator(_compact)] = Field(
        default_factory=list
    )
    education: Annotated[list[EducationEntry], BeforeValidator(_compact)] = Field(
        default_factory=list
    )
    certifications: Annotated[list[CertificationEntry], BeforeValidator(_compact)] = Field(
        default_factory=list
    )

    @classmethod
    def coerce(cls, data: ResumeData | dict[str, Any] | None) -> ResumeData:
        """Return *data* as a :class:`ResumeData`, validating plain dicts."""
        if isinstance(data, cls):
            return data
        return cls.model_validate(data or {})

    def to_wire(self) -> dict[str, Any]:
        """Dump using the camelCase keys of the JSON wire format."""
        return self.model_dump(by_alias=True)
