"""
Skills API

CRUD endpoints for skills. Out-of-range proficiency is handled according to
PROFICIENCY_POLICY:
- "reject" (default): 400 for values outside [1, 100]
- "clamp": values are clamped into [1, 100]
"""
import os
import logging
from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from apps.shared.database import get_db
from apps.shared.auth import require_admin
from apps.shared.crud import create_record, delete_record, get_or_404, update_record
from apps.shared.errors import ValidationError
from apps.shared.schemas import AckResponse
from apps.skills.models import Skill
from apps.skills.schemas import SkillCreate, SkillUpdate, SkillResponse

logger = logging.getLogger(__name__)

PROFICIENCY_MIN = 1
PROFICIENCY_MAX = 100
PROFICIENCY_POLICY = os.getenv("PROFICIENCY_POLICY", "reject")

router = APIRouter(prefix="/skills", tags=["skills"])


def apply_proficiency_policy(proficiency: Optional[int]) -> Optional[int]:
    """Reject or clamp a proficiency outside [1, 100]; None passes through."""
    if proficiency is None or PROFICIENCY_MIN <= proficiency <= PROFICIENCY_MAX:
        return proficiency

    if PROFICIENCY_POLICY == "clamp":
        return max(PROFICIENCY_MIN, min(PROFICIENCY_MAX, proficiency))
    if PROFICIENCY_POLICY == "reject":
        raise ValidationError(
            f"proficiency must be between {PROFICIENCY_MIN} and {PROFICIENCY_MAX}"
        )
    raise RuntimeError(
        f"Unknown PROFICIENCY_POLICY '{PROFICIENCY_POLICY}', expected 'reject' or 'clamp'"
    )


@router.get("", response_model=list[SkillResponse])
def list_skills(db: Session = Depends(get_db)):
    """List skills by order, newest first within a tie."""
    return (
        db.query(Skill)
        .order_by(Skill.order.asc(), Skill.created_at.desc(), Skill.id.desc())
        .all()
    )


@router.get("/{skill_id}", response_model=SkillResponse)
def get_skill(skill_id: int, db: Session = Depends(get_db)):
    return get_or_404(db, Skill, skill_id, "Skill")


@router.post("", response_model=SkillResponse, status_code=201)
def create_skill(
    skill_data: SkillCreate,
    admin_id: str = Depends(require_admin),
    db: Session = Depends(get_db),
):
    data = skill_data.model_dump()
    data["proficiency"] = apply_proficiency_policy(data["proficiency"])
    skill = create_record(db, Skill, data)
    logger.info(f"Skill {skill.id} created")
    return skill


@router.put("/{skill_id}", response_model=SkillResponse)
def update_skill(
    skill_id: int,
    skill_data: SkillUpdate,
    admin_id: str = Depends(require_admin),
    db: Session = Depends(get_db),
):
    skill = get_or_404(db, Skill, skill_id, "Skill")
    update_data = skill_data.model_dump(exclude_unset=True)
    if "proficiency" in update_data:
        update_data["proficiency"] = apply_proficiency_policy(update_data["proficiency"])
    return update_record(db, skill, update_data)


@router.delete("/{skill_id}", response_model=AckResponse)
def delete_skill(
    skill_id: int,
    admin_id: str = Depends(require_admin),
    db: Session = Depends(get_db),
):
    skill = get_or_404(db, Skill, skill_id, "Skill")
    delete_record(db, skill)
    logger.info(f"Skill {skill_id} deleted")
    return {"message": "Skill deleted successfully"}
