"""
Site settings database models.

An open-ended key/value store for the site: profile and hero images,
resume file, free text. Keys are a convention of the admin UI
(e.g. profile_image, hero_photo, hero_background, resume_file).
"""
from sqlalchemy import Column, Integer, String, Text, LargeBinary, DateTime

from apps.shared.database import Base, utcnow
from apps.settings.values import InlineBlob, RefValue


class SiteSetting(Base):
    """
    One setting. The value is stored as a tagged union:
    - value_kind "ref": ref_value holds a URL or plain text
    - value_kind "inline": blob holds decoded bytes, mime_type their type,
      data_uri_header/data_uri_payload rebuild the submitted data URI
    """
    __tablename__ = "site_settings"

    id = Column(Integer, primary_key=True)
    key = Column(String(100), unique=True, index=True, nullable=False)
    value_kind = Column(String(10), nullable=False, default="ref")
    ref_value = Column(Text)
    mime_type = Column(String(100))
    blob = Column(LargeBinary)
    data_uri_header = Column(Text)
    data_uri_payload = Column(Text)
    type = Column(String(10), nullable=False, default="text")  # image, text, json, file
    label = Column(String(200), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    @property
    def stored_value(self):
        if self.value_kind == "inline":
            return InlineBlob(
                mime_type=self.mime_type,
                data=self.blob or b"",
                header=self.data_uri_header,
                payload=self.data_uri_payload,
            )
        return RefValue(value=self.ref_value or "")

    @property
    def value(self) -> str:
        """The value as the frontend submitted it (URL, text or data URI)."""
        stored = self.stored_value
        if isinstance(stored, InlineBlob):
            return stored.to_data_uri()
        return stored.value

    @property
    def size(self) -> int:
        if self.value_kind == "inline":
            return len(self.blob or b"")
        return len((self.ref_value or "").encode())
