"""ACF custom post types: ``portfolio``, ``skill`` and ``experience``."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from .base import AcfFields, Rendered, acf_or_empty


# ── portfolio ───────────────────────────────────────────────────────


class ProjectFields(AcfFields):
    project_url: str = ""
    github_url: str = ""
    description: str = ""
    technologies: str = ""  # comma separated
    featured_image: str = ""
    year: str = ""
    category: str = ""


class Project(BaseModel):
    """Portfolio project (CPT ``portfolio``)."""

    id: int
    title: Rendered
    acf: ProjectFields = Field(default_factory=ProjectFields)

    normalize_acf = field_validator("acf", mode="before")(acf_or_empty)


# ── skill ───────────────────────────────────────────────────────────


class SkillFields(AcfFields):
    level: Union[int, float] = 0  # 0-100, not range checked
    category: Optional[str] = None  # Frontend / Backend / DevOps / Tools
    icon: str = ""  # icon name or SVG URL

    @field_validator("level", mode="before")
    @classmethod
    def blank_level_is_zero(cls, value):
        return 0 if value == "" else value


class Skill(BaseModel):
    """Skill entry (CPT ``skill``)."""

    id: int
    title: Rendered
    acf: SkillFields = Field(default_factory=SkillFields)

    normalize_acf = field_validator("acf", mode="before")(acf_or_empty)


# ── experience ──────────────────────────────────────────────────────


class ExperienceFields(AcfFields):
    company: str = ""
    position: str = ""
    start_date: str = ""  # YYYY-MM
    end_date: str = ""  # YYYY-MM | "presente"
    description: str = ""
    technologies: str = ""
    company_url: str = ""


class Experience(BaseModel):
    """Work experience entry (CPT ``experience``)."""

    id: int
    title: Rendered
    acf: ExperienceFields = Field(default_factory=ExperienceFields)

    normalize_acf = field_validator("acf", mode="before")(acf_or_empty)
