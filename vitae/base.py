"""
Core protocols and the section schema set for the vitae package.

Define:
- ContentSource: Protocol for sources of candidate resume data
- Transformer: Protocol for passes that fill the ``computed`` fields
- SectionRegistry: section id -> section schema (one pydantic model per section)
- The section schemas themselves, e.g. ``LocationSection`` for ``{location: ...}``
"""

from typing import Protocol, Any
from collections.abc import Mapping
from pydantic import BaseModel
from vitae.models import (
    AwardItem,
    BasicsItem,
    CertificateItem,
    EducationItem,
    InterestItem,
    LanguageItem,
    LocationItem,
    ProfileItem,
    ProjectItem,
    PublicationItem,
    ReferenceItem,
    ResumeContent,
    SkillItem,
    VolunteerItem,
    WorkItem,
)


class ContentSource(Protocol):
    """Protocol for sources that provide resume data."""

    def read(self) -> Mapping[str, Any]: ...


class Transformer(Protocol):
    """Protocol for passes that populate ``computed`` fields of resume content."""

    def __call__(self, content: ResumeContent) -> ResumeContent: ...


class SectionRegistry:
    """Registry of section schemas, keyed by section id."""

    def __init__(self):
        self._sections: dict[str, type[BaseModel]] = {}

    def register(self, section_id: str, schema: type[BaseModel]) -> None:
        """Register the schema validating section ``section_id``."""
        if section_id in self._sections:
            raise ValueError(f"Section '{section_id}' is already registered")
        self._sections[section_id] = schema

    def get_schema(self, section_id: str) -> type[BaseModel]:
        """Get the schema for the specified section."""
        if section_id not in self._sections:
            raise KeyError(
                f"No schema registered for section: {section_id}. "
                f"Known sections: {', '.join(self._sections)}"
            )
        return self._sections[section_id]

    def list_sections(self) -> list[str]:
        """List all registered section ids."""
        return list(self._sections.keys())

    def is_registered(self, section_id: str) -> bool:
        return section_id in self._sections

    def __iter__(self):
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)


# Global section registry instance
_section_registry = SectionRegistry()


def register_section(section_id: str):
    """Decorator for registering section schema classes."""

    def decorator(schema: type[BaseModel]):
        _section_registry.register(section_id, schema)
        return schema

    return decorator


def get_section_registry() -> SectionRegistry:
    """Get the global section registry."""
    return _section_registry


# --------------------------------------------------------------------------------------
# Section schemas. Each one validates the slice ``{section_id: ...}`` of a
# resume's content.


@register_section('basics')
class BasicsSection(BaseModel):
    basics: BasicsItem


@register_section('location')
class LocationSection(BaseModel):
    location: LocationItem | None = None


@register_section('profiles')
class ProfilesSection(BaseModel):
    profiles: list[ProfileItem] | None = None


@register_section('education')
class EducationSection(BaseModel):
    education: list[EducationItem]


@register_section('work')
class WorkSection(BaseModel):
    work: list[WorkItem] | None = None


@register_section('languages')
class LanguagesSection(BaseModel):
    languages: list[LanguageItem] | None = None


@register_section('skills')
class SkillsSection(BaseModel):
    skills: list[SkillItem] | None = None


@register_section('awards')
class AwardsSection(BaseModel):
    awards: list[AwardItem] | None = None


@register_section('certificates')
class CertificatesSection(BaseModel):
    certificates: list[CertificateItem] | None = None


@register_section('publications')
class PublicationsSection(BaseModel):
    publications: list[PublicationItem] | None = None


@register_section('references')
class ReferencesSection(BaseModel):
    references: list[ReferenceItem] | None = None


@register_section('projects')
class ProjectsSection(BaseModel):
    projects: list[ProjectItem] | None = None


@register_section('interests')
class InterestsSection(BaseModel):
    interests: list[InterestItem] | None = None


@register_section('volunteer')
class VolunteerSection(BaseModel):
    volunteer: list[VolunteerItem] | None = None
