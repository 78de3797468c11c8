# controllers/properties.py

from typing import Optional

from controllers.base import ACTION_ERRORS, Draft, ViewController, log
from repositories.properties import BlobFile, PropertyRepository


class PropertiesController(ViewController):
    label = "properties"
    search_fields = ("name", "city")
    form_fields = ("name", "city", "description", "managerId")

    def __init__(self, repository: PropertyRepository):
        super().__init__(repository)

    async def submit(
        self,
        draft: Draft,
        model_file: Optional[BlobFile] = None,
        thumbnail_file: Optional[BlobFile] = None,
    ) -> dict:
        # Without a new file the stored modelUrl/thumbnail stay as they are.
        try:
            if draft.is_new:
                stored = await self._write_with(
                    self.repository.create, draft.values, model_file, thumbnail_file
                )
            else:
                stored = await self._write_with(
                    self.repository.update, draft.doc_id, draft.changed_fields(), model_file, thumbnail_file
                )
        except ACTION_ERRORS as e:
            log.error(f"Error saving property: {e}")
            raise

        await self._refresh_after_write()
        return stored
