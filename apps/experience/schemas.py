"""
Pydantic schemas for Experience API.
"""
from datetime import date
from typing import Optional
from pydantic import Field, model_validator

from apps.shared.schemas import CamelModel, RecordResponse


class ExperienceBase(CamelModel):
    company: str = Field(..., min_length=1, max_length=200)
    position: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    technologies: list[str] = Field(default_factory=list)
    start_date: date
    end_date: Optional[date] = None
    current: bool = False
    order: int = 0


class ExperienceCreate(ExperienceBase):
    pass


class ExperienceUpdate(CamelModel):
    """All fields optional; only the ones sent are changed."""
    company: Optional[str] = Field(None, min_length=1, max_length=200)
    position: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1)
    technologies: Optional[list[str]] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    current: Optional[bool] = None
    order: Optional[int] = None


class ExperienceResponse(ExperienceBase, RecordResponse):
    @model_validator(mode="after")
    def hide_end_date_when_current(self):
        # A current position has no end, whatever is stored
        if self.current:
            self.end_date = None
        return self
