"""
Pydantic schemas for Projects API.

Defines request/response models with validation.
"""
from typing import Optional
from pydantic import Field

from apps.shared.schemas import CamelModel, RecordResponse


class ProjectBase(CamelModel):
    """Base schema with common project fields."""
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    long_description: Optional[str] = None
    technologies: list[str] = Field(default_factory=list)
    image_url: Optional[str] = None
    github_url: Optional[str] = Field(None, max_length=500)
    live_url: Optional[str] = Field(None, max_length=500)
    featured: bool = False
    order: int = 0


class ProjectCreate(ProjectBase):
    """Schema for creating a new project."""
    pass


class ProjectUpdate(CamelModel):
    """Schema for updating a project. All fields optional."""
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1)
    long_description: Optional[str] = None
    technologies: Optional[list[str]] = None
    image_url: Optional[str] = None
    github_url: Optional[str] = Field(None, max_length=500)
    live_url: Optional[str] = Field(None, max_length=500)
    featured: Optional[bool] = None
    order: Optional[int] = None


class ProjectResponse(ProjectBase, RecordResponse):
    """Schema for project responses."""
    pass
