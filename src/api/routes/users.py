"""
User directory API routes
All list state goes through the directory sync controller.
"""

import logging
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from models.user import SubmitResponse, SyncResult, UserForm, UserTableResponse
from services.directory_sync import DirectorySyncController, get_directory_sync
from services.table_renderer import TableRenderer

router = APIRouter()
logger = logging.getLogger(__name__)

def _table(controller: DirectorySyncController) -> UserTableResponse:
    renderer = controller.renderer
    if not isinstance(renderer, TableRenderer):
        raise HTTPException(status_code=500, detail="User list renderer does not produce table rows")

    last = renderer.last_result
    return UserTableResponse(
        rows=renderer.rows,
        count=len(renderer.rows),
        status_message=last.message if last else None,
        status_outcome=last.outcome if last else None
    )

@router.get("", response_model=UserTableResponse)
async def list_users(controller: DirectorySyncController = Depends(get_directory_sync)):
    """Current user table and the last status message"""
    return _table(controller)

@router.post("/reload", response_model=SyncResult)
async def reload_users(controller: DirectorySyncController = Depends(get_directory_sync)):
    """Reload the full list from the directory"""
    return await controller.load()

@router.post("/submit", response_model=SubmitResponse)
async def submit_form(
    form: UserForm,
    controller: DirectorySyncController = Depends(get_directory_sync)
):
    """Validate the form, then update the edited user or add a new one"""
    response = await controller.submit(form)
    if not response.ok:
        # Field errors are returned inline, all five slots included
        return JSONResponse(status_code=422, content=response.model_dump(mode="json"))
    return response

@router.get("/{user_id}/edit", response_model=UserForm)
async def edit_user(
    user_id: int,
    controller: DirectorySyncController = Depends(get_directory_sync)
):
    """Form prefilled with the user's current values"""
    form = controller.edit(user_id)
    if form is None:
        raise HTTPException(status_code=404, detail=f"User {user_id} not found")
    return form

@router.delete("/{user_id}", response_model=SyncResult)
async def delete_user(
    user_id: int,
    controller: DirectorySyncController = Depends(get_directory_sync)
):
    """Delete the user remotely and locally"""
    return await controller.delete(user_id)
