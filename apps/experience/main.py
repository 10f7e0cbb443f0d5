"""
Experience API

CRUD endpoints for the work history timeline.
"""
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from apps.shared.database import get_db
from apps.shared.auth import require_admin
from apps.shared.crud import create_record, delete_record, get_or_404, update_record
from apps.shared.schemas import AckResponse
from apps.experience.models import Experience
from apps.experience.schemas import ExperienceCreate, ExperienceUpdate, ExperienceResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/experience", tags=["experience"])


@router.get("", response_model=list[ExperienceResponse])
def list_experience(db: Session = Depends(get_db)):
    """List all positions by order, most recent start first within the same order."""
    return (
        db.query(Experience)
        .order_by(Experience.order.asc(), Experience.start_date.desc(), Experience.id.desc())
        .all()
    )


@router.get("/{experience_id}", response_model=ExperienceResponse)
def get_experience(experience_id: int, db: Session = Depends(get_db)):
    return get_or_404(db, Experience, experience_id, "Experience")


@router.post("", response_model=ExperienceResponse, status_code=201)
def create_experience(
    experience_data: ExperienceCreate,
    admin_id: str = Depends(require_admin),
    db: Session = Depends(get_db),
):
    experience = create_record(db, Experience, experience_data.model_dump())
    logger.info(f"Experience {experience.id} created")
    return experience


@router.put("/{experience_id}", response_model=ExperienceResponse)
def update_experience(
    experience_id: int,
    experience_data: ExperienceUpdate,
    admin_id: str = Depends(require_admin),
    db: Session = Depends(get_db),
):
    experience = get_or_404(db, Experience, experience_id, "Experience")
    return update_record(db, experience, experience_data.model_dump(exclude_unset=True))


@router.delete("/{experience_id}", response_model=AckResponse)
def delete_experience(
    experience_id: int,
    admin_id: str = Depends(require_admin),
    db: Session = Depends(get_db),
):
    experience = get_or_404(db, Experience, experience_id, "Experience")
    delete_record(db, experience)
    logger.info(f"Experience {experience_id} deleted")
    return {"message": "Experience deleted successfully"}
