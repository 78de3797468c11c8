# repositories/base.py

"""
Shared CRUD for entity repositories.

Each repository owns one collection. Payloads are validated and shaped
into store documents before anything is written; ids and timestamps are
assigned here, client-side. Every write invalidates the collection's
cached snapshot so the next ``list_all`` goes back to the store.
"""

from typing import Any, Dict, List, Mapping, Optional, Type, Union

from pydantic import ValidationError

from core.cache import cache_get, cache_set, invalidate_collection, snapshot_key
from core.config import settings
from core.errors import NotFound, PayloadError
from core.gateway import Collection, RemoteDataGateway
from core.logging_config import get_logger
from core.utils import new_document_id, utc_now_iso
from models.base import StoreModel

log = get_logger("repositories")

Payload = Union[Mapping[str, Any], StoreModel]


def shape(model: Type[StoreModel], payload: Payload, partial: bool = False) -> Dict[str, Any]:
    """Validate ``payload`` against ``model`` and return the store document."""
    if isinstance(payload, model):
        return payload.to_document(partial=partial)
    if isinstance(payload, StoreModel):
        payload = payload.model_dump(by_alias=True, exclude_unset=partial)

    try:
        obj = model.model_validate(dict(payload))
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(p) for p in first.get("loc", ())) or None
        raise PayloadError(first.get("msg", "Invalid payload"), field=field) from e

    return obj.to_document(partial=partial)


class EntityRepository:
    collection: Collection
    create_model: Type[StoreModel]
    update_model: Type[StoreModel]

    def __init__(self, gateway: RemoteDataGateway):
        self.gateway = gateway

    # ---------------------------------------------------------
    # Reads
    # ---------------------------------------------------------
    def list_all(self) -> List[dict]:
        """The full collection. No filtering, paging or ordering."""
        key = snapshot_key(self.collection)
        cached = cache_get(key)
        if cached is not None:
            return cached

        documents = self.gateway.get_all(self.collection)
        cache_set(key, documents, settings.LIST_CACHE_TTL_SECONDS)
        return documents

    def get_one(self, doc_id: str) -> dict:
        document = self.gateway.get_one(self.collection, doc_id)
        if document is None:
            raise NotFound(str(self.collection), doc_id)
        return document

    def find(self, doc_id: str) -> Optional[dict]:
        return self.gateway.get_one(self.collection, doc_id)

    # ---------------------------------------------------------
    # Hooks
    # ---------------------------------------------------------
    def prepare_create(self, document: dict) -> dict:
        return document

    def prepare_update(self, doc_id: str, changes: dict) -> dict:
        return changes

    # ---------------------------------------------------------
    # Writes
    # ---------------------------------------------------------
    def create(self, payload: Payload) -> dict:
        return self._insert(self.prepare_create(shape(self.create_model, payload)))

    def update(self, doc_id: str, payload: Payload) -> dict:
        """Write only the given fields plus ``updatedAt``."""
        return self._merge(doc_id, shape(self.update_model, payload, partial=True))

    def _insert(self, document: dict) -> dict:
        document["createdAt"] = utc_now_iso()
        doc_id = new_document_id()

        try:
            stored = self.gateway.set_or_merge(self.collection, doc_id, document)
        finally:
            invalidate_collection(self.collection)

        log.info("Created %s/%s", self.collection, doc_id)
        return stored

    def _merge(self, doc_id: str, changes: dict) -> dict:
        if not changes:
            raise PayloadError("No fields to update")

        changes = self.prepare_update(doc_id, changes)
        changes["updatedAt"] = utc_now_iso()

        try:
            stored = self.gateway.set_or_merge(self.collection, doc_id, changes, merge=True)
        finally:
            invalidate_collection(self.collection)

        if stored is None:
            raise NotFound(str(self.collection), doc_id)

        log.info("Updated %s/%s fields=%s", self.collection, doc_id, sorted(changes))
        return stored

    def delete(self, doc_id: str) -> None:
        """Hard delete. Irreversible; callers gate it behind a confirmation."""
        try:
            deleted = self.gateway.delete_one(self.collection, doc_id)
        finally:
            invalidate_collection(self.collection)

        if not deleted:
            raise NotFound(str(self.collection), doc_id)

        log.info("Deleted %s/%s", self.collection, doc_id)
