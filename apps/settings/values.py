"""
Setting values as a tagged union.

A stored value is either a reference (a URL or plain text, kept as-is) or an
inline blob decoded from a data URI. Inline blobs are capped in size so an
upload cannot grow the table without bound.
"""
import base64
import binascii
import os
from typing import Annotated, Literal, Optional, Union
from urllib.parse import unquote_to_bytes

from pydantic import BaseModel, Field

from apps.shared.errors import ValidationError

# Upper bound for decoded inline blobs (default 5 MiB)
SETTINGS_MAX_BLOB_BYTES = int(os.getenv("SETTINGS_MAX_BLOB_BYTES", str(5 * 1024 * 1024)))

DATA_URI_PREFIX = "data:"
DEFAULT_MIME_TYPE = "text/plain"


class RefValue(BaseModel):
    kind: Literal["ref"] = "ref"
    value: str


class InlineBlob(BaseModel):
    kind: Literal["inline"] = "inline"
    mime_type: str
    data: bytes
    # Header text between "data:" and ",", exactly as submitted
    header: Optional[str] = None
    # Submitted payload text, kept only when re-encoding would not reproduce it
    payload: Optional[str] = None

    def to_data_uri(self) -> str:
        header = self.header if self.header is not None else f"{self.mime_type};base64"
        if self.payload is not None:
            return f"{DATA_URI_PREFIX}{header},{self.payload}"
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"{DATA_URI_PREFIX}{header},{encoded}"


SettingValue = Annotated[Union[RefValue, InlineBlob], Field(discriminator="kind")]


def parse_setting_value(raw: str, max_bytes: Optional[int] = None) -> SettingValue:
    """
    Classify a submitted value.

    "data:<mime>[;base64],<payload>" becomes an InlineBlob; anything else is a
    RefValue. Raises ValidationError for a malformed data URI or a blob over
    the size cap.
    """
    if not raw.startswith(DATA_URI_PREFIX):
        return RefValue(value=raw)

    limit = SETTINGS_MAX_BLOB_BYTES if max_bytes is None else max_bytes

    header, sep, payload = raw[len(DATA_URI_PREFIX):].partition(",")
    if not sep:
        raise ValidationError("Malformed data URI: missing ','")

    params = header.split(";")
    mime_type = params[0].strip().lower() or DEFAULT_MIME_TYPE
    is_base64 = "base64" in (p.strip().lower() for p in params[1:])

    if is_base64:
        # Cheap bound before decoding: 4 base64 chars carry 3 bytes
        if len(payload) // 4 * 3 > limit + 3:
            raise ValidationError(f"Inline file exceeds the {limit} byte limit")
        try:
            data = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError):
            raise ValidationError("Malformed data URI: invalid base64 payload")
    else:
        data = unquote_to_bytes(payload)

    if len(data) > limit:
        raise ValidationError(f"Inline file exceeds the {limit} byte limit")

    # Percent-encoding is not canonical, and base64 may carry non-zero pad bits
    if is_base64 and base64.b64encode(data).decode("ascii") == payload:
        kept_payload = None
    else:
        kept_payload = payload

    return InlineBlob(mime_type=mime_type, data=data, header=header, payload=kept_payload)


def is_redirect_target(value: str) -> bool:
    """True for absolute http(s) URLs and same-site paths like "/files/cv.pdf"."""
    if value.startswith(("http://", "https://")):
        return True
    # "//host" and "/\host" are treated as protocol-relative by browsers
    return value.startswith("/") and not value.startswith(("//", "/\\"))
