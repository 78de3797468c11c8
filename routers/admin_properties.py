# routers/admin_properties.py

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile

from controllers.properties import PropertiesController
from core.logging_config import logger
from core.session import SessionContext
from dependencies.auth import get_repositories, require_manager
from repositories import BlobFile, Repositories

router = APIRouter(
    prefix="/admin/properties",
    tags=["Admin - Properties"],
)


async def to_blob(upload: Optional[UploadFile]) -> Optional[BlobFile]:
    """An empty file input arrives as an upload without a filename."""
    if upload is None or not upload.filename:
        return None
    return BlobFile(
        filename=upload.filename,
        data=await upload.read(),
        content_type=upload.content_type,
    )


def form_values(**fields) -> dict:
    return {k: v for k, v in fields.items() if v is not None}


@router.get("", summary="List properties")
async def list_properties(
    search: Optional[str] = Query(None, description="Matches name or city"),
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with PropertiesController(repositories.properties) as controller:
        await controller.load()
        return controller.set_search(search)


@router.get("/new", summary="Blank property form")
def new_property_form(session: SessionContext = Depends(require_manager)):
    return PropertiesController(None).open_create().values


@router.get("/{property_id}", summary="Open a property for editing")
async def get_property(
    property_id: str,
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with PropertiesController(repositories.properties) as controller:
        await controller.load()
        return {"item": controller.detail(property_id), "form": controller.open_edit(property_id).values}


@router.post("", status_code=201, summary="Create a property (multipart form)")
async def create_property(
    name: Optional[str] = Form(None),
    city: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    managerId: Optional[str] = Form(None),
    model: Optional[UploadFile] = File(None, description=".glb / .gltf"),
    thumbnail: Optional[UploadFile] = File(None, description="Image"),
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with PropertiesController(repositories.properties) as controller:
        draft = controller.open_create()
        draft.values.update(form_values(name=name, city=city, description=description, managerId=managerId))

        stored = await controller.submit(draft, await to_blob(model), await to_blob(thumbnail))

        logger.info(f"User {session.principal.id} created property {stored.get('id')}")
        return {"item": stored, "items": controller.documents}


@router.patch("/{property_id}", summary="Update a property (multipart form)")
async def update_property(
    property_id: str,
    name: Optional[str] = Form(None),
    city: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    managerId: Optional[str] = Form(None),
    model: Optional[UploadFile] = File(None, description=".glb / .gltf"),
    thumbnail: Optional[UploadFile] = File(None, description="Image"),
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with PropertiesController(repositories.properties) as controller:
        await controller.load()
        draft = controller.open_edit(property_id)
        draft.values.update(form_values(name=name, city=city, description=description, managerId=managerId))

        stored = await controller.submit(draft, await to_blob(model), await to_blob(thumbnail))

        logger.info(f"User {session.principal.id} updated property {property_id}")
        return {"item": stored, "items": controller.documents}


@router.delete("/{property_id}", summary="Delete a property")
async def delete_property(
    property_id: str,
    confirm: bool = Query(False, description="Must be true; deletion is irreversible"),
    session: SessionContext = Depends(require_manager),
    repositories: Repositories = Depends(get_repositories),
):
    async with PropertiesController(repositories.properties) as controller:
        await controller.delete(property_id, confirmed=confirm)

        logger.info(f"User {session.principal.id} deleted property {property_id}")
        return {"success": True, "items": controller.documents}
