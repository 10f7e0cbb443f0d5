"""
Projects API

CRUD endpoints for portfolio projects. Reads are public, writes need an
admin session.
"""
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from apps.shared.database import get_db
from apps.shared.auth import require_admin
from apps.shared.crud import create_record, delete_record, get_or_404, update_record
from apps.shared.schemas import AckResponse
from apps.projects.models import Project
from apps.projects.schemas import ProjectCreate, ProjectUpdate, ProjectResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["projects"])


# ──────────────────────────────────────────────────────────────────────────────
# Public endpoints (no auth required)
# ──────────────────────────────────────────────────────────────────────────────

@router.get("", response_model=list[ProjectResponse])
def list_projects(db: Session = Depends(get_db)):
    """
    List all projects.
    Sorted by order (ascending), then by created_at (descending).
    """
    return (
        db.query(Project)
        .order_by(Project.order.asc(), Project.created_at.desc(), Project.id.desc())
        .all()
    )


@router.get("/{project_id}", response_model=ProjectResponse)
def get_project(project_id: int, db: Session = Depends(get_db)):
    """Get a single project by id."""
    return get_or_404(db, Project, project_id, "Project")


# ──────────────────────────────────────────────────────────────────────────────
# Admin endpoints (session required)
# ──────────────────────────────────────────────────────────────────────────────

@router.post("", response_model=ProjectResponse, status_code=201)
def create_project(
    project_data: ProjectCreate,
    admin_id: str = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Create a new project."""
    project = create_record(db, Project, project_data.model_dump())
    logger.info(f"Project {project.id} created")
    return project


@router.put("/{project_id}", response_model=ProjectResponse)
def update_project(
    project_id: int,
    project_data: ProjectUpdate,
    admin_id: str = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Update an existing project. Only provided fields change."""
    project = get_or_404(db, Project, project_id, "Project")
    return update_record(db, project, project_data.model_dump(exclude_unset=True))


@router.delete("/{project_id}", response_model=AckResponse)
def delete_project(
    project_id: int,
    admin_id: str = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Delete a project."""
    project = get_or_404(db, Project, project_id, "Project")
    delete_record(db, project)
    logger.info(f"Project {project_id} deleted")
    return {"message": "Project deleted successfully"}
