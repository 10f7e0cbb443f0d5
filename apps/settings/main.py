"""
Settings API

Generic key/value store behind the admin Settings screen. Reads are public
(the site fetches its images and resume from here); writes need a session.
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse, Response
from sqlalchemy.orm import Session

from apps.shared.database import get_db
from apps.shared.auth import require_admin
from apps.shared.crud import commit_or_raise
from apps.shared.errors import NotFound, ValidationError
from apps.shared.schemas import AckResponse
from apps.shared.upsert import atomic_upsert
from apps.settings.models import SiteSetting
from apps.settings.schemas import SettingResponse, SettingUpsert
from apps.settings.values import InlineBlob, is_redirect_target, parse_setting_value

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("")
def get_settings(
    key: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """
    Fetch all settings, or a single one with ?key=.

    A missing key returns {"key": key, "value": null} instead of a 404 so
    the frontend can fall back to its default without error handling.
    """
    if key:
        setting = db.query(SiteSetting).filter(SiteSetting.key == key).first()
        if not setting:
            return {"key": key, "value": None}
        return SettingResponse.model_validate(setting)

    settings = db.query(SiteSetting).order_by(SiteSetting.key.asc()).all()
    return [SettingResponse.model_validate(s) for s in settings]


@router.post("", response_model=SettingResponse)
def upsert_setting(
    setting_data: SettingUpsert,
    admin_id: str = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Create or replace a setting. At most one row exists per key."""
    parsed = parse_setting_value(setting_data.value)

    update_data = {
        "type": setting_data.type or "text",
        "label": setting_data.label or setting_data.key,
    }
    if isinstance(parsed, InlineBlob):
        update_data.update(
            value_kind="inline",
            ref_value=None,
            mime_type=parsed.mime_type,
            blob=parsed.data,
            data_uri_header=parsed.header,
            data_uri_payload=parsed.payload,
        )
    else:
        update_data.update(
            value_kind="ref",
            ref_value=parsed.value,
            mime_type=None,
            blob=None,
            data_uri_header=None,
            data_uri_payload=None,
        )

    atomic_upsert(db, SiteSetting, "key", setting_data.key, update_data)
    commit_or_raise(db, f"save setting '{setting_data.key}'")

    setting = db.query(SiteSetting).filter(SiteSetting.key == setting_data.key).one()
    logger.info(f"Setting '{setting.key}' saved ({setting.value_kind}, {setting.size} bytes)")
    return setting


@router.delete("", response_model=AckResponse)
def delete_setting(
    key: Optional[str] = Query(None),
    admin_id: str = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Delete a setting. Deleting a key that does not exist still succeeds."""
    if not key:
        raise ValidationError("Key is required")

    deleted = db.query(SiteSetting).filter(SiteSetting.key == key).delete()
    commit_or_raise(db, f"delete setting '{key}'")
    if deleted:
        logger.info(f"Setting '{key}' deleted")
    return {"message": "Setting deleted"}


@router.get("/{key}/raw")
def get_setting_raw(key: str, db: Session = Depends(get_db)):
    """
    Serve a setting as a file: inline blobs with their MIME type, URL
    references as a redirect.
    """
    setting = db.query(SiteSetting).filter(SiteSetting.key == key).first()
    if not setting:
        raise NotFound("Setting not found")

    stored = setting.stored_value
    if isinstance(stored, InlineBlob):
        return Response(content=stored.data, media_type=stored.mime_type)
    if is_redirect_target(stored.value):
        return RedirectResponse(url=stored.value)
    raise NotFound("Setting has no file content")
