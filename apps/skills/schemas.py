"""
Pydantic schemas for Skills API.

proficiency is deliberately unbounded here; the range policy (reject or
clamp) is applied by the router, see apps.skills.main.
"""
from typing import Literal, Optional
from pydantic import Field

from apps.shared.schemas import CamelModel, RecordResponse

SkillCategory = Literal["ml", "frontend", "backend", "database", "tools", "other"]


class SkillBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    category: SkillCategory
    proficiency: int = 50
    order: int = 0


class SkillCreate(SkillBase):
    pass


class SkillUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    category: Optional[SkillCategory] = None
    proficiency: Optional[int] = None
    order: Optional[int] = None


class SkillResponse(SkillBase, RecordResponse):
    pass
