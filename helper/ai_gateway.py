import openai
from langchain_core.exceptions import OutputParserException
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI
from pydantic import BaseModel, ValidationError
from typing import Optional, Type, TypeVar

from helper.exceptions import GatewayConfigError, GatewayRequestError, GatewayResponseError
from helper.log_helper import ai_err, ai_span, ai_warn
from helper.settings_helper import get_gateway_settings

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class AIGateway:
    """Chat-completions client for the hosted model gateway (OpenAI-compatible API)."""

    def __init__(self, settings: dict = None):
        self._settings = settings

    def _llm(self) -> ChatOpenAI:
        settings = self._settings or get_gateway_settings()
        if not settings.get("api_key"):
            raise GatewayConfigError("AI_GATEWAY_API_KEY not configured")
        return ChatOpenAI(
            model=settings["model"],
            api_key=settings["api_key"],
            base_url=settings["base_url"],
            timeout=settings.get("timeout", 120),
            max_retries=0,
        )

    @staticmethod
    def _messages(user: str, system: Optional[str] = None):
        messages = []
        if system:
            messages.append(SystemMessage(content=system))
        messages.append(HumanMessage(content=user))
        return messages

    async def complete(self, tag: str, user: str, system: Optional[str] = None) -> str:
        """Plain text completion. ``tag`` names the wizard step in logs and errors."""
        llm = self._llm()
        with ai_span(f"gateway.{tag}", {"chars": len(user)}):
            try:
                response = await llm.ainvoke(self._messages(user, system))
            except openai.APIStatusError as e:
                ai_err("gateway.status", {"tag": tag, "status": e.status_code})
                raise GatewayRequestError(f"Failed to {tag}", e.status_code) from e
            except openai.APIError as e:
                raise GatewayRequestError(f"Failed to {tag}: {e}") from e

        content = response.content
        if not isinstance(content, str) or not content.strip():
            ai_warn("gateway.empty", {"tag": tag, "model": llm.model_name})
            raise GatewayResponseError(f"Empty response from gateway while trying to {tag}")
        return content

    async def structured(self, tag: str, user: str, schema: Type[SchemaT], system: Optional[str] = None) -> SchemaT:
        """Force a tool call whose arguments follow ``schema`` and parse them."""
        llm = self._llm().with_structured_output(schema, method="function_calling")
        with ai_span(f"gateway.{tag}", {"chars": len(user), "schema": schema.__name__}):
            try:
                result = await llm.ainvoke(self._messages(user, system))
            except openai.APIStatusError as e:
                ai_err("gateway.status", {"tag": tag, "status": e.status_code})
                raise GatewayRequestError(f"Failed to {tag}", e.status_code) from e
            except openai.APIError as e:
                raise GatewayRequestError(f"Failed to {tag}: {e}") from e
            except (OutputParserException, ValidationError) as e:
                raise GatewayResponseError(f"Malformed tool call while trying to {tag}: {e}") from e

        if result is None:
            raise GatewayResponseError(f"Gateway returned no tool call while trying to {tag}")
        return result
