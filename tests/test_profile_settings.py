import pytest
from fastapi import HTTPException
from tortoise.exceptions import OperationalError

from controller import profile_settings_controller, wordpress_controller
from controller.profile_settings_controller import ProfileSettingsRequest, get_settings, update_settings
from controller.wordpress_controller import PublishPost, PublishRequest, publish_to_wordpress
from helper.settings_helper import get_auto_save_enabled
from models.profile import Profile


async def test_defaults_without_profile(db):
    assert await get_settings(user_id="new-user") == {
        "auto_save_enabled": True,
        "wordpress_url": "",
        "wordpress_username": "",
        "wordpress_app_password": "",
    }
    assert await get_auto_save_enabled("new-user") is True


async def test_update_keeps_fields_not_sent(db):
    await update_settings(ProfileSettingsRequest(
        user_id="u1", wordpress_url="https://blog.example.com", wordpress_username="editor",
    ))
    settings = await update_settings(ProfileSettingsRequest(user_id="u1", auto_save_enabled=False))

    assert settings["auto_save_enabled"] is False
    assert settings["wordpress_url"] == "https://blog.example.com"
    assert settings["wordpress_username"] == "editor"
    assert await get_auto_save_enabled("u1") is False


async def _broken_settings(user_id):
    raise OperationalError("database is locked")


async def test_settings_read_failure_is_a_500(monkeypatch):
    monkeypatch.setattr(profile_settings_controller, "get_profile_settings", _broken_settings)

    with pytest.raises(HTTPException) as info:
        await get_settings(user_id="u1")

    assert info.value.status_code == 500
    assert info.value.detail == "Error fetching profile settings: database is locked"


async def test_settings_write_failure_is_a_500(monkeypatch):
    def broken_filter(**kwargs):
        raise OperationalError("database is locked")

    monkeypatch.setattr(Profile, "filter", broken_filter)

    with pytest.raises(HTTPException) as info:
        await update_settings(ProfileSettingsRequest(user_id="u1", auto_save_enabled=False))

    assert info.value.status_code == 500
    assert info.value.detail.startswith("Error saving profile settings")


async def test_wordpress_settings_failure_is_a_500(monkeypatch):
    monkeypatch.setattr(wordpress_controller, "get_profile_settings", _broken_settings)
    request = PublishRequest(user_id="u1", post=PublishPost(title="T", content="C"))

    with pytest.raises(HTTPException) as info:
        await publish_to_wordpress(request)

    assert info.value.status_code == 500
    assert info.value.detail == "Error loading WordPress settings: database is locked"
