# repositories/system_settings.py

from core.cache import invalidate_collection
from core.gateway import Collection, RemoteDataGateway
from core.utils import utc_now_iso
from models.system_settings import SystemSettings
from repositories.base import Payload, shape

SETTINGS_DOC_ID = "system"


class SystemSettingsRepository:
    """Single settings document; defaults apply until it is first saved."""

    collection = Collection.settings

    def __init__(self, gateway: RemoteDataGateway):
        self.gateway = gateway

    def get(self) -> dict:
        stored = self.gateway.get_one(self.collection, SETTINGS_DOC_ID) or {}
        stored.pop("id", None)
        stored.pop("updatedAt", None)
        return SystemSettings.model_validate(stored).to_document()

    def save(self, payload: Payload) -> dict:
        document = shape(SystemSettings, payload)
        document["updatedAt"] = utc_now_iso()
        try:
            return self.gateway.set_or_merge(self.collection, SETTINGS_DOC_ID, document)
        finally:
            invalidate_collection(self.collection)
