import os
from typing import Any, Dict, Optional, Tuple

import httpx
from tortoise.exceptions import BaseORMException, IntegrityError

from helper.exceptions import DraftStoreError
from helper.log_helper import get_logger
from models.blog_draft import BlogDraft

logger = get_logger("draft_store")

DRAFT_COLUMNS = ("keywords", "meta_tags", "headings", "short_intro", "content", "faq_content")


def draft_to_dict(draft: BlogDraft) -> Dict[str, Any]:
    return {
        "id": draft.id,
        "user_id": draft.user_id,
        **{col: getattr(draft, col) for col in DRAFT_COLUMNS},
        "created_at": draft.created_at.isoformat() if draft.created_at else None,
        "updated_at": draft.updated_at.isoformat() if draft.updated_at else None,
    }


class DraftStore:
    """Persistence for the single blog_drafts row of each user."""

    async def get_draft(self, user_id: str) -> Optional[Dict[str, Any]]:
        raise NotImplementedError

    async def upsert_draft(self, user_id: str, record: Dict[str, Any]) -> Tuple[Dict[str, Any], bool]:
        """Write ``record`` for ``user_id``; returns the row and whether it was inserted."""
        raise NotImplementedError

    async def delete_draft(self, user_id: str) -> bool:
        raise NotImplementedError


class TortoiseDraftStore(DraftStore):

    async def get_draft(self, user_id: str) -> Optional[Dict[str, Any]]:
        try:
            draft = await BlogDraft.filter(user_id=user_id).first()
        except BaseORMException as e:
            raise DraftStoreError(f"Could not load draft: {e}") from e
        return draft_to_dict(draft) if draft else None

    async def upsert_draft(self, user_id: str, record: Dict[str, Any]) -> Tuple[Dict[str, Any], bool]:
        fields = {col: record.get(col) for col in DRAFT_COLUMNS}
        try:
            draft = await BlogDraft.filter(user_id=user_id).first()
            if draft is None:
                try:
                    draft = await BlogDraft.create(user_id=user_id, **fields)
                    logger.info(f"Created draft {draft.id} for user {user_id}")
                    return draft_to_dict(draft), True
                except IntegrityError:
                    # unique(user_id): another session inserted first, fall through to update
                    logger.warning(f"Concurrent draft insert for user {user_id}, updating instead")
                    draft = await BlogDraft.get(user_id=user_id)
            draft.update_from_dict(fields)
            await draft.save()
            logger.info(f"Updated draft {draft.id} for user {user_id}")
            return draft_to_dict(draft), False
        except BaseORMException as e:
            raise DraftStoreError(f"Could not save draft: {e}") from e

    async def delete_draft(self, user_id: str) -> bool:
        try:
            deleted = await BlogDraft.filter(user_id=user_id).delete()
        except BaseORMException as e:
            raise DraftStoreError(f"Could not delete draft: {e}") from e
        return deleted > 0


class HttpDraftStore(DraftStore):
    """Draft store backed by the /api/drafts routes of a remote backend."""

    def __init__(self, base_url: str = None, client: httpx.AsyncClient = None, timeout: float = 30.0):
        self.base_url = (base_url or os.getenv("API_URL", "http://127.0.0.1:8000")).rstrip("/")
        self.client = client
        self.timeout = timeout

    def _url(self, user_id: str) -> str:
        return f"{self.base_url}/api/drafts/{user_id}"

    async def _request(self, method: str, user_id: str, json_body: dict = None) -> dict:
        headers = {"Accept": "application/json", "Content-Type": "application/json"}
        try:
            if self.client is not None:
                r = await self.client.request(method, self._url(user_id), json=json_body, headers=headers)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    r = await client.request(method, self._url(user_id), json=json_body, headers=headers)
            r.raise_for_status()
            body = r.json()
        except ValueError as e:
            raise DraftStoreError(f"Draft store answered with a non-JSON body: {e}") from e
        except httpx.HTTPStatusError as e:
            raise DraftStoreError(f"Draft store answered HTTP {e.response.status_code}: {e.response.text}") from e
        except httpx.HTTPError as e:
            raise DraftStoreError(f"Unable to reach draft store: {e}") from e
        if not isinstance(body, dict):
            raise DraftStoreError("Draft store reply is not a JSON object")
        return body

    async def get_draft(self, user_id: str) -> Optional[Dict[str, Any]]:
        body = await self._request("GET", user_id)
        return body.get("draft")

    async def upsert_draft(self, user_id: str, record: Dict[str, Any]) -> Tuple[Dict[str, Any], bool]:
        body = await self._request("PUT", user_id, {"user_id": user_id, **record})
        if not isinstance(body.get("draft"), dict):
            raise DraftStoreError("Draft store reply has no saved draft")
        return body["draft"], bool(body.get("created"))

    async def delete_draft(self, user_id: str) -> bool:
        body = await self._request("DELETE", user_id)
        return bool(body.get("deleted"))
