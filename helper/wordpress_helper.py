import base64
import json
import os
from typing import Any, Dict, Optional

import httpx

from helper.exceptions import WordPressError
from helper.log_helper import get_logger, log_http_request, log_http_response

logger = get_logger("wordpress")

WORDPRESS_TIMEOUT = float(os.getenv("WORDPRESS_TIMEOUT", "30"))


def _basic_auth(username: str, app_password: str) -> str:
    token = base64.b64encode(f"{username}:{app_password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def _format_body_error(body):
    """Extract readable error from a WordPress JSON error body."""
    if not body:
        return "Empty response body"
    if isinstance(body, dict):
        if body.get("message"):
            return str(body["message"])
        if body.get("error"):
            return str(body["error"])
        return json.dumps(body, ensure_ascii=False)[:300]
    return str(body)


def _handle_http_error(r: httpx.Response, action: str) -> WordPressError:
    status = r.status_code
    try:
        msg = _format_body_error(r.json())
    except ValueError:
        msg = r.text or r.reason_phrase

    if not msg or not msg.strip():
        msg = {
            400: "Invalid request sent to WordPress.",
            401: "WordPress rejected the username or application password.",
            403: "The WordPress user is not allowed to do this.",
            404: "WordPress REST API not found at this site URL.",
        }.get(status, f"Unexpected error (HTTP {status})")

    logger.error(f"WordPress {action} failed: {status} {msg}")
    return WordPressError(f"Failed to {action}: {msg}", status_code=status)


class WordPressClient:
    def __init__(self, site_url: str, username: str, app_password: str, client: httpx.AsyncClient = None):
        if not site_url or not username or not app_password:
            raise WordPressError("WordPress credentials not configured", status_code=400)
        self.site_url = site_url.rstrip("/")
        self.username = username
        self.app_password = app_password
        self._client = client

    @property
    def api_url(self) -> str:
        return f"{self.site_url}/wp-json/wp/v2"

    def _headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = {"Authorization": _basic_auth(self.username, self.app_password)}
        if extra:
            headers.update(extra)
        return headers

    async def _send(self, method: str, url: str, action: str, **kwargs) -> httpx.Response:
        log_http_request(f"wordpress.{action}", url, method)
        try:
            if self._client is not None:
                r = await self._client.request(method, url, **kwargs)
            else:
                async with httpx.AsyncClient(timeout=WORDPRESS_TIMEOUT) as client:
                    r = await client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise WordPressError(f"Unable to reach WordPress: {e}", status_code=502) from e
        log_http_response(f"wordpress.{action}", r.status_code, r.text)
        if not r.is_success:
            raise _handle_http_error(r, action)
        return r

    async def publish_post(self, title: str, content: str, meta_description: str = "", slug: str = "") -> Dict[str, Any]:
        payload = {
            "title": title,
            "content": content,
            "status": "draft",
            "meta": {"description": meta_description},
            "slug": slug,
        }
        r = await self._send(
            "POST", f"{self.api_url}/posts", "publish to WordPress",
            json=payload, headers=self._headers({"Content-Type": "application/json"}),
        )
        data = r.json()
        return {"success": True, "post_id": data.get("id"), "post_url": data.get("link")}

    async def upload_image(self, image_url: str, file_name: Optional[str] = None) -> Dict[str, Any]:
        if not image_url:
            raise WordPressError("Missing required parameters", status_code=400)
        image = await self._send("GET", image_url, "download image")
        content_type = image.headers.get("content-type", "image/jpeg")
        r = await self._send(
            "POST", f"{self.api_url}/media", "upload image",
            content=image.content,
            headers=self._headers({
                "Content-Disposition": f'attachment; filename="{file_name or "blog-image.jpg"}"',
                "Content-Type": content_type,
            }),
        )
        data = r.json()
        return {"success": True, "media_id": data.get("id"), "media_url": data.get("source_url")}
