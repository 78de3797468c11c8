# repositories/users.py

from typing import Optional

from core.cache import invalidate_collection
from core.errors import PayloadError
from core.gateway import Collection
from core.utils import utc_now_iso
from models.user import ProfileCreate, ProfileUpdate
from repositories.base import EntityRepository, Payload, shape


class UserRepository(EntityRepository):
    """
    Profile documents, keyed by the Supabase Auth principal id.

    Deleting a profile does not delete the auth principal; that identity
    belongs to the auth service.
    """

    collection = Collection.users
    create_model = ProfileCreate
    update_model = ProfileUpdate

    def create(self, payload: Payload, principal_id: Optional[str] = None) -> dict:
        if not principal_id:
            raise PayloadError("Profiles are keyed by principal id", field="id")

        document = shape(self.create_model, payload)
        document["createdAt"] = utc_now_iso()

        try:
            stored = self.gateway.set_or_merge(self.collection, principal_id, document)
        finally:
            invalidate_collection(self.collection)

        return stored

    def create_profile(self, principal_id: str, email: str, fields: dict) -> dict:
        """Profile written at sign-up with role-agnostic defaults."""
        payload = {
            **fields,
            "email": email,
            "linkedProperties": [],
            "favorites": [],
            "language": "en",
        }
        return self.create(payload, principal_id=principal_id)
