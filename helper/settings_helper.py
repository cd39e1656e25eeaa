import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_GATEWAY_URL = "https://ai.gateway.lovable.dev/v1"
DEFAULT_GATEWAY_MODEL = "google/gemini-2.5-flash"
DEFAULT_QUIET_PERIOD_MS = 2000


def get_gateway_settings():
    """Gateway settings from .env, read on every call so key rotation needs no restart"""
    return {
        "api_key": os.getenv("AI_GATEWAY_API_KEY", ""),
        "base_url": os.getenv("AI_GATEWAY_URL", DEFAULT_GATEWAY_URL),
        "model": os.getenv("AI_GATEWAY_MODEL", DEFAULT_GATEWAY_MODEL),
        "timeout": float(os.getenv("AI_GATEWAY_TIMEOUT", "120")),
    }


def get_quiet_period() -> float:
    """Auto-save quiet period in seconds."""
    return int(os.getenv("AUTO_SAVE_QUIET_PERIOD_MS", DEFAULT_QUIET_PERIOD_MS)) / 1000.0


async def get_profile_settings(user_id: str):
    # imported here so the pure helpers above don't pull in the ORM
    from models.profile import Profile

    profile = await Profile.filter(user_id=user_id).first()
    if not profile:
        return {
            "auto_save_enabled": True,
            "wordpress_url": "",
            "wordpress_username": "",
            "wordpress_app_password": "",
        }
    return {
        "auto_save_enabled": profile.auto_save_enabled,
        "wordpress_url": profile.wordpress_url or "",
        "wordpress_username": profile.wordpress_username or "",
        "wordpress_app_password": profile.wordpress_app_password or "",
    }


async def get_auto_save_enabled(user_id: str) -> bool:
    settings = await get_profile_settings(user_id)
    return bool(settings["auto_save_enabled"])
