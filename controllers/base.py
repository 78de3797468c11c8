# controllers/base.py

"""
Screen controllers for the admin panel.

A controller owns one screen's snapshot of a collection: it loads it once,
filters it locally by free-text search, opens create/edit drafts and pushes
them through the repository, then re-fetches. Nothing is updated
optimistically; when an action fails the snapshot is left as it was and
the error goes up to the HTTP layer.

Store calls are blocking SDK calls, so they run in worker threads. Every
fetch is tied to the controller's ``CancellationToken``: once the
controller is closed, results that come back are dropped.
"""

import asyncio
import copy
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from core.errors import (
    ConfirmationRequired,
    FetchCancelled,
    GatewayError,
    NotFound,
    PayloadError,
    ReadOnlyCollection,
)
from core.logging_config import get_logger
from core.utils import filter_documents

log = get_logger("controllers")

ACTION_ERRORS = (GatewayError, PayloadError, NotFound, ReadOnlyCollection)


class CancellationToken:
    """Flipped once, when the owning controller goes away."""

    def __init__(self):
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self):
        self._cancelled = True

    def raise_if_cancelled(self):
        if self._cancelled:
            raise FetchCancelled()


@dataclass
class Draft:
    """Local copy of a form. ``doc_id`` is None for a new document."""

    values: Dict[str, Any]
    doc_id: Optional[str] = None
    original: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_new(self) -> bool:
        return self.doc_id is None

    def changed_fields(self) -> Dict[str, Any]:
        return {k: v for k, v in self.values.items() if self.original.get(k) != v}


class ViewController:
    label: str = "documents"
    search_fields: Sequence[str] = ()
    form_fields: Sequence[str] = ()
    form_defaults: Dict[str, Any] = {}

    def __init__(self, repository):
        self.repository = repository
        self.token = CancellationToken()
        self.documents: List[dict] = []
        self.loaded = False
        self.search = ""

    # ---------------------------------------------------------
    # Lifetime
    # ---------------------------------------------------------
    def close(self):
        self.token.cancel()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        self.close()

    # ---------------------------------------------------------
    # Store calls
    # ---------------------------------------------------------
    async def _fetch_with(self, fn: Callable, *args):
        """Run a read in a worker thread; drop its result if we were closed meanwhile."""
        self.token.raise_if_cancelled()
        result = await asyncio.to_thread(fn, *args)
        self.token.raise_if_cancelled()
        return result

    async def _write_with(self, fn: Callable, *args):
        self.token.raise_if_cancelled()
        return await asyncio.to_thread(fn, *args)

    async def fetch(self) -> List[dict]:
        return await self._fetch_with(self.repository.list_all)

    # ---------------------------------------------------------
    # Loading
    # ---------------------------------------------------------
    async def load(self) -> List[dict]:
        if self.loaded:
            return self.documents

        try:
            documents = await self.fetch()
        except FetchCancelled:
            log.debug("Discarded %s fetch after close", self.label)
            raise
        except GatewayError as e:
            log.error(f"Error fetching {self.label}: {e}")
            raise

        self.documents = documents
        self.loaded = True
        return self.documents

    async def refresh(self) -> List[dict]:
        self.loaded = False
        return await self.load()

    async def _refresh_after_write(self):
        if self.token.cancelled:
            return
        was_loaded = self.loaded
        try:
            await self.refresh()
        except FetchCancelled:
            pass
        except GatewayError as e:
            # The write is already stored; keep the previous snapshot.
            log.error(f"Error re-fetching {self.label} after write: {e}")
            self.loaded = was_loaded

    # ---------------------------------------------------------
    # Search
    # ---------------------------------------------------------
    @property
    def filtered(self) -> List[dict]:
        return filter_documents(self.documents, self.search_fields, self.search)

    def set_search(self, term: Optional[str]) -> List[dict]:
        self.search = (term or "").strip()
        return self.filtered

    # ---------------------------------------------------------
    # Detail + drafts
    # ---------------------------------------------------------
    def detail(self, doc_id: str) -> dict:
        for document in self.documents:
            if document.get("id") == doc_id:
                return document
        raise NotFound(self.label, doc_id)

    def open_create(self) -> Draft:
        return Draft(values={name: self.form_defaults.get(name, "") for name in self.form_fields})

    def open_edit(self, doc_id: str) -> Draft:
        document = self.detail(doc_id)
        values = {name: copy.deepcopy(document.get(name)) for name in self.form_fields}
        return Draft(values=values, doc_id=doc_id, original=copy.deepcopy(values))

    # ---------------------------------------------------------
    # Writes
    # ---------------------------------------------------------
    async def submit(self, draft: Draft) -> dict:
        try:
            if draft.is_new:
                stored = await self._write_with(self.repository.create, draft.values)
            else:
                stored = await self._write_with(self.repository.update, draft.doc_id, draft.changed_fields())
        except ACTION_ERRORS as e:
            log.error(f"Error saving {self.label}: {e}")
            raise

        await self._refresh_after_write()
        return stored

    async def delete(self, doc_id: str, confirmed: bool = False) -> None:
        if not confirmed:
            raise ConfirmationRequired(self.label, doc_id)

        try:
            await self._write_with(self.repository.delete, doc_id)
        except ACTION_ERRORS as e:
            log.error(f"Error deleting {self.label}/{doc_id}: {e}")
            raise

        await self._refresh_after_write()


class StatusController(ViewController):
    """Screens whose only write is a status change (tickets, guest requests)."""

    async def update_status(self, doc_id: str, status) -> dict:
        try:
            stored = await self._write_with(self.repository.update_status, doc_id, status)
        except ACTION_ERRORS as e:
            log.error(f"Error updating {self.label}/{doc_id} status: {e}")
            raise

        await self._refresh_after_write()
        return stored
