"""Typed records for the WordPress content the site consumes."""

from .base import AcfFields, Rendered
from .portfolio import (
    Experience,
    ExperienceFields,
    Project,
    ProjectFields,
    Skill,
    SkillFields,
)
from .post import Category, Embedded, FeaturedMedia, Post, Term

__all__ = [
    "AcfFields",
    "Rendered",
    "Post",
    "Embedded",
    "FeaturedMedia",
    "Term",
    "Category",
    "Project",
    "ProjectFields",
    "Skill",
    "SkillFields",
    "Experience",
    "ExperienceFields",
]
