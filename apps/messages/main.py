"""
Messages API

The contact inbox. Submitting a message is public; everything else needs an
admin session. Replying happens client-side through a mailto link.
"""
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from apps.shared.database import get_db
from apps.shared.auth import require_admin
from apps.shared.crud import create_record, delete_record, get_or_404, update_record
from apps.shared.schemas import AckResponse
from apps.messages.models import Message
from apps.messages.schemas import (
    ContactMessageCreate,
    ContactMessageUpdate,
    ContactMessageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/messages", tags=["messages"])
contact_router = APIRouter(prefix="/contact", tags=["messages"])


@contact_router.post("", response_model=ContactMessageResponse, status_code=201)
def submit_contact_message(
    message_data: ContactMessageCreate,
    db: Session = Depends(get_db),
):
    """Store a contact form submission."""
    message = create_record(db, Message, message_data.model_dump())
    logger.info(f"Contact message {message.id} received")
    return message


@router.get("", response_model=list[ContactMessageResponse])
def list_messages(
    admin_id: str = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """List all messages, newest first."""
    return db.query(Message).order_by(Message.created_at.desc(), Message.id.desc()).all()


@router.get("/{message_id}", response_model=ContactMessageResponse)
def get_message(
    message_id: int,
    admin_id: str = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return get_or_404(db, Message, message_id, "Message")


@router.put("/{message_id}", response_model=ContactMessageResponse)
def update_message(
    message_id: int,
    message_data: ContactMessageUpdate,
    admin_id: str = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Partial update, typically toggling `read`."""
    message = get_or_404(db, Message, message_id, "Message")
    return update_record(db, message, message_data.model_dump(exclude_unset=True))


@router.delete("/{message_id}", response_model=AckResponse)
def delete_message(
    message_id: int,
    admin_id: str = Depends(require_admin),
    db: Session = Depends(get_db),
):
    message = get_or_404(db, Message, message_id, "Message")
    delete_record(db, message)
    logger.info(f"Message {message_id} deleted")
    return {"message": "Message deleted successfully"}
