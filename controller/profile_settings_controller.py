from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel
from tortoise.exceptions import BaseORMException
from typing import Optional

from helper.settings_helper import get_profile_settings
from models.profile import Profile

router = APIRouter()


class ProfileSettingsRequest(BaseModel):
    user_id: str
    auto_save_enabled: Optional[bool] = None
    wordpress_url: Optional[str] = None
    wordpress_username: Optional[str] = None
    wordpress_app_password: Optional[str] = None


@router.get("/profile-settings")
async def get_settings(user_id: str = Query(...)):
    try:
        return await get_profile_settings(user_id)
    except BaseORMException as e:
        raise HTTPException(status_code=500, detail=f"Error fetching profile settings: {str(e)}")


@router.post("/profile-settings")
async def update_settings(data: ProfileSettingsRequest):
    changes = data.model_dump(exclude={"user_id"}, exclude_none=True)
    try:
        profile = await Profile.filter(user_id=data.user_id).first()
        if not profile:
            await Profile.create(user_id=data.user_id, **changes)
        else:
            profile.update_from_dict(changes)
            await profile.save()
        return await get_profile_settings(data.user_id)
    except BaseORMException as e:
        raise HTTPException(status_code=500, detail=f"Error saving profile settings: {str(e)}")
