# repositories/properties.py

from dataclasses import dataclass
from typing import Optional

from core.errors import GatewayError, PayloadError
from core.gateway import Collection
from core.logging_config import get_logger
from core.utils import safe_filename, timestamp_ms
from models.property import PropertyForm, PropertyUpdate
from repositories.base import EntityRepository, Payload, shape

log = get_logger("repositories.properties")

MODEL_EXTENSIONS = (".glb", ".gltf")


@dataclass
class BlobFile:
    """An uploaded file as received from the form."""

    filename: str
    data: bytes
    content_type: Optional[str] = None


class PropertyRepository(EntityRepository):
    """
    Properties carry two optional blobs: a 3D model and a thumbnail.

    Uploads happen before the document write and are not atomic with it.
    If the write fails the uploaded blobs stay behind; their keys are
    logged so they can be cleaned up.
    """

    collection = Collection.properties
    create_model = PropertyForm
    update_model = PropertyUpdate

    # ---------------------------------------------------------
    # Blob keys: <prefix>/<upload ms>_<original filename>
    # ---------------------------------------------------------
    @staticmethod
    def blob_key(prefix: str, filename: str) -> str:
        return f"{prefix}/{timestamp_ms()}_{safe_filename(filename)}"

    def _upload(self, model_file: Optional[BlobFile], thumbnail_file: Optional[BlobFile]) -> dict:
        if model_file is not None and not model_file.filename.lower().endswith(MODEL_EXTENSIONS):
            raise PayloadError("model must be a .glb or .gltf file", field="modelUrl")
        if thumbnail_file is not None and thumbnail_file.content_type and not thumbnail_file.content_type.startswith("image/"):
            raise PayloadError("thumbnail must be an image", field="thumbnail")

        urls = {}
        if model_file is not None:
            key = self.blob_key("properties", model_file.filename)
            urls["modelUrl"] = self.gateway.upload_blob(key, model_file.data, model_file.content_type)
            urls["_keys"] = [key]
        if thumbnail_file is not None:
            key = self.blob_key("thumbnails", thumbnail_file.filename)
            urls["thumbnail"] = self.gateway.upload_blob(key, thumbnail_file.data, thumbnail_file.content_type)
            urls.setdefault("_keys", []).append(key)
        return urls

    def create(
        self,
        payload: Payload,
        model_file: Optional[BlobFile] = None,
        thumbnail_file: Optional[BlobFile] = None,
    ) -> dict:
        document = self.prepare_create(shape(self.create_model, payload))
        uploaded = self._upload(model_file, thumbnail_file)
        keys = uploaded.pop("_keys", [])

        document.setdefault("modelUrl", None)
        document.setdefault("thumbnail", None)
        document.update(uploaded)

        try:
            return self._insert(document)
        except GatewayError:
            if keys:
                log.warning("Property write failed; orphaned blobs: %s", keys)
            raise

    def update(
        self,
        doc_id: str,
        payload: Payload,
        model_file: Optional[BlobFile] = None,
        thumbnail_file: Optional[BlobFile] = None,
    ) -> dict:
        # Existing URLs are kept unless a new file replaces them.
        changes = shape(self.update_model, payload, partial=True)
        uploaded = self._upload(model_file, thumbnail_file)
        keys = uploaded.pop("_keys", [])
        changes.update(uploaded)

        try:
            return self._merge(doc_id, changes)
        except GatewayError:
            if keys:
                log.warning("Property %s write failed; orphaned blobs: %s", doc_id, keys)
            raise
