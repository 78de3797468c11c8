# core/gateway.py

"""
Remote data gateway.

Thin typed wrapper over the two remote services the application talks to:

* Supabase tables, used as a document store (one table per collection,
  one row per document, keyed by ``id``)
* S3, used as the blob store for property models and thumbnails

Every method is exactly one round trip. There is no retry, no backoff and
no batching; failures are raised as the matching ``GatewayError`` subclass
for the caller to log and abort on.
"""

from typing import Any, Callable, Dict, List, Optional, Union

from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError

from core.errors import (
    GatewayError,
    StoreReadError,
    StoreWriteError,
    UploadError,
    extract_supabase_error,
)
from core.logging_config import get_logger
from core.s3_client import get_s3, public_url
from core.supabase_client import get_supabase_client
from models.enums import BaseStrEnum

log = get_logger("gateway")

Document = Dict[str, Any]


class Collection(BaseStrEnum):
    """Named sets of documents in the store."""

    users = "users"
    properties = "properties"
    units = "units"
    tickets = "tickets"
    payments = "payments"
    guest_requests = "guestRequests"
    settings = "settings"


class RemoteDataGateway:
    def __init__(
        self,
        client_factory: Callable = get_supabase_client,
        s3_factory: Callable = get_s3,
    ):
        self._client_factory = client_factory
        self._s3_factory = s3_factory
        self._client = None

    # ---------------------------------------------------------
    # Plumbing
    # ---------------------------------------------------------
    def _table(self, collection: Union[Collection, str], failure: type):
        if self._client is None:
            self._client = self._client_factory()
        if self._client is None:
            raise failure("Supabase client not configured")
        return self._client.table(str(collection))

    # ---------------------------------------------------------
    # Reads
    # ---------------------------------------------------------
    def get_all(self, collection: Union[Collection, str]) -> List[Document]:
        table = self._table(collection, StoreReadError)
        try:
            result = table.select("*").execute()
        except Exception as e:
            raise StoreReadError(
                f"Failed to list {collection}: {extract_supabase_error(e)}", cause=e
            ) from e

        log.debug("get_all %s -> %d documents", collection, len(result.data or []))
        return result.data or []

    def get_one(self, collection: Union[Collection, str], doc_id: str) -> Optional[Document]:
        table = self._table(collection, StoreReadError)
        try:
            result = table.select("*").eq("id", doc_id).limit(1).execute()
        except Exception as e:
            raise StoreReadError(
                f"Failed to fetch {collection}/{doc_id}: {extract_supabase_error(e)}", cause=e
            ) from e

        return result.data[0] if result.data else None

    # ---------------------------------------------------------
    # Writes
    # ---------------------------------------------------------
    def set_or_merge(
        self,
        collection: Union[Collection, str],
        doc_id: str,
        doc: Document,
        merge: bool = False,
    ) -> Optional[Document]:
        """
        merge=False writes the whole document under ``doc_id`` (upsert).
        merge=True updates only the given fields of an existing document
        and returns None when there is no document with that id.
        """
        table = self._table(collection, StoreWriteError)
        try:
            if merge:
                result = table.update(doc).eq("id", doc_id).execute()
            else:
                result = table.upsert({**doc, "id": doc_id}).execute()
        except Exception as e:
            raise StoreWriteError(
                f"Failed to write {collection}/{doc_id}: {extract_supabase_error(e)}", cause=e
            ) from e

        if result.data:
            return result.data[0]
        if merge:
            return None
        return {**doc, "id": doc_id}

    def delete_one(self, collection: Union[Collection, str], doc_id: str) -> bool:
        table = self._table(collection, StoreWriteError)
        try:
            result = table.delete().eq("id", doc_id).execute()
        except Exception as e:
            raise StoreWriteError(
                f"Failed to delete {collection}/{doc_id}: {extract_supabase_error(e)}", cause=e
            ) from e

        return bool(result.data)

    # ---------------------------------------------------------
    # Blobs
    # ---------------------------------------------------------
    def upload_blob(self, path: str, data: bytes, content_type: Optional[str] = None) -> str:
        """Store ``data`` under ``path`` and return its resolvable URL."""
        try:
            s3, bucket, region = self._s3_factory()
        except RuntimeError as e:
            raise UploadError(str(e), cause=e) from e

        extra = {"ContentType": content_type} if content_type else {}
        try:
            s3.put_object(Bucket=bucket, Key=path, Body=data, **extra)
        except (ClientError, NoCredentialsError, BotoCoreError) as e:
            raise UploadError(f"Failed to upload {path}: {e}", cause=e) from e

        log.info("Uploaded blob %s (%d bytes)", path, len(data))
        return public_url(path, bucket, region)


__all__ = ["Collection", "Document", "GatewayError", "RemoteDataGateway"]
