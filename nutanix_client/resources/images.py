"""Disk image resource client."""

from __future__ import annotations

from typing import IO

from nutanix_client.core.context import RequestContext
from nutanix_client.resources.base import CreateMixin
from nutanix_client.resources.base import DeleteMixin
from nutanix_client.resources.base import NamedResourceClient
from nutanix_client.resources.base import UpdateMixin
from nutanix_client.resources.base import entity_uuid
from nutanix_client.schemas.image import ImageIntent
from nutanix_client.schemas.image import ImageListIntent
from nutanix_client.transport.builder import MEDIA_TYPE_UPLOAD
from nutanix_client.transport.builder import UploadFile
from nutanix_client.transport.builder import format_path


class ImageClient(
    CreateMixin[ImageIntent],
    UpdateMixin[ImageIntent],
    DeleteMixin,
    NamedResourceClient[ImageIntent, ImageListIntent],
):
    kind = "image"
    base_path = "/images"
    entity_type = ImageIntent
    list_type = ImageListIntent

    def upload(
        self,
        image: ImageIntent | str,
        body: bytes | IO[bytes],
        *,
        content_type: str = MEDIA_TYPE_UPLOAD,
        ctx: RequestContext | None = None,
    ) -> None:
        """Stream raw image content into an existing image entity."""
        path = format_path(f"{self.base_path}/%s/file", entity_uuid(image))
        self._client.request("PUT", path, UploadFile(body=body, content_type=content_type), ctx=ctx)
