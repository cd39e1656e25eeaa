from fastapi import APIRouter, Depends, HTTPException, WebSocket, WebSocketDisconnect
from pydantic import BaseModel, ValidationError
from typing import Literal, Optional

from helper.auto_save import AutoSaver, DraftUpsertCoordinator, SaveResult
from helper.draft_schema import Draft
from helper.draft_store import DraftStore, TortoiseDraftStore
from helper.exceptions import DraftStoreError
from helper.log_helper import get_logger
from helper.settings_helper import get_auto_save_enabled, get_quiet_period

router = APIRouter()
logger = get_logger("draft_controller")


class AutoSaveMessage(BaseModel):
    action: Literal["update", "flush"] = "update"
    draft: Optional[dict] = None


def get_draft_store() -> DraftStore:
    return TortoiseDraftStore()


async def get_session_auto_save(user_id: str) -> bool:
    # read once per session, a preference change applies to the next session
    return await get_auto_save_enabled(user_id)


def get_autosave_quiet_period() -> float:
    return get_quiet_period()


@router.get("/drafts/{user_id}")
async def get_draft(user_id: str, store: DraftStore = Depends(get_draft_store)):
    try:
        draft = await store.get_draft(user_id)
    except DraftStoreError as e:
        raise HTTPException(status_code=500, detail=f"Error fetching draft: {str(e)}")
    if not draft:
        return {"message": "No draft found", "draft": None}
    return {"draft": draft}


@router.put("/drafts/{user_id}")
async def save_draft(user_id: str, request: Draft, store: DraftStore = Depends(get_draft_store)):
    if request.user_id != user_id:
        raise HTTPException(status_code=400, detail="user_id in body does not match the URL")
    try:
        row, created = await store.upsert_draft(user_id, request.to_record())
    except DraftStoreError as e:
        raise HTTPException(status_code=500, detail=f"Error saving draft: {str(e)}")
    return {"message": "Draft saved", "draft_id": row["id"], "created": created, "draft": row}


@router.delete("/drafts/{user_id}")
async def delete_draft(user_id: str, store: DraftStore = Depends(get_draft_store)):
    try:
        deleted = await store.delete_draft(user_id)
    except DraftStoreError as e:
        raise HTTPException(status_code=500, detail=f"Error deleting draft: {str(e)}")
    return {"message": "Draft deleted" if deleted else "No draft found", "deleted": deleted}


@router.websocket("/drafts/{user_id}/autosave")
async def autosave_draft(
    websocket: WebSocket,
    user_id: str,
    store: DraftStore = Depends(get_draft_store),
    enabled: bool = Depends(get_session_auto_save),
    quiet_period: float = Depends(get_autosave_quiet_period),
):
    """
    One connection is one open wizard. Every "update" message carries the whole
    draft; the save happens once the quiet period passes without another update.
    Closing the socket drops a pending save.
    """
    await websocket.accept()

    async def notify(result: SaveResult):
        try:
            await websocket.send_json({"event": "autosave", **result.to_dict()})
        except (WebSocketDisconnect, RuntimeError):
            logger.info(f"Auto-save result for user {user_id} not delivered, socket closed")

    saver = AutoSaver(DraftUpsertCoordinator(store, enabled=enabled), quiet_period, on_result=notify)
    await websocket.send_json({"event": "session", "auto_save_enabled": enabled})

    try:
        while True:
            frame = await websocket.receive()
            if frame["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(frame.get("code", 1000))
            raw = frame.get("text") or frame.get("bytes") or ""
            try:
                message = AutoSaveMessage.model_validate_json(raw)
                if message.action == "flush":
                    await saver.flush()
                    continue
                draft = Draft.model_validate({**(message.draft or {}), "user_id": user_id})
            except ValidationError as e:
                await websocket.send_json({"event": "error", "error": f"Invalid message: {e.errors()[0]['msg']}"})
                continue
            saver.update(draft)
    except WebSocketDisconnect:
        logger.info(f"Auto-save session closed for user {user_id}")
    finally:
        saver.close()
