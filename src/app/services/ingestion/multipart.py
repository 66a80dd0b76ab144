"""Multipart extraction for recipe submissions.

The form carries a ``data`` field holding the recipe as a JSON string, and
optional ``coverImage`` / ``galleryImage`` / ``galleryImages`` files.
Extraction never fails: undecodable or non-object ``data`` becomes ``{}``
and is left for validation to reject.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import orjson
from starlette.datastructures import UploadFile

from app.services.cms.schemas import MediaFile
from app.services.ingestion.models import Submission


if TYPE_CHECKING:
    from starlette.datastructures import FormData


FILE_FIELDS = ("coverImage", "galleryImage", "galleryImages")


def decode_data_field(raw: Any) -> dict[str, Any]:
    """Decode the ``data`` form value into a dict, or ``{}``."""
    if isinstance(raw, (str, bytes)):
        try:
            raw = orjson.loads(raw)
        except orjson.JSONDecodeError:
            return {}
    return raw if isinstance(raw, dict) else {}


async def read_media_file(upload: UploadFile) -> MediaFile:
    content = await upload.read()
    return MediaFile(
        filename=upload.filename or "upload",
        content=content,
        content_type=upload.content_type or "application/octet-stream",
    )


async def parse_submission(form: FormData) -> Submission:
    """Extract the recipe JSON and uploaded files from a submitted form."""
    files: dict[str, list[MediaFile]] = {}
    for name in FILE_FIELDS:
        uploads = [value for value in form.getlist(name) if isinstance(value, UploadFile)]
        if uploads:
            files[name] = [await read_media_file(upload) for upload in uploads]

    return Submission(data=decode_data_field(form.get("data")), files=files)
