"""
Main client implementation for the AGiXT Python client.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from agixt_client.agents import AgentsMixin
from agixt_client.base import BaseClient
from agixt_client.chains import ChainsMixin
from agixt_client.config import ClientConfig
from agixt_client.conversations import ConversationsMixin
from agixt_client.exceptions import AGiXTClientError, ResponseDecodeError
from agixt_client.models import ChatCompletions, ChatResponse
from agixt_client.providers import ProvidersMixin

logger = logging.getLogger(__name__)


class AGiXTClient(AgentsMixin, ConversationsMixin, ProvidersMixin, ChainsMixin, BaseClient):
    """
    Async client for the AGiXT /v1 REST API.

    Agents, conversations, chains and prompts are addressed by ID; the
    *_id_by_name helpers resolve names to IDs.

    Example:
        ```python
        async with AGiXTClient("http://localhost:7437", api_key="...") as client:
            agent_id = await client.get_agent_id_by_name("XT")
            conversation = await client.new_conversation(agent_id, "My Chat")
            reply = await client.chat(agent_id, "Hello!", conversation["id"])
            print(reply)
        ```
    """

    @classmethod
    def from_config(cls, config: ClientConfig) -> "AGiXTClient":
        return cls(
            base_url=config.base_url,
            api_key=config.api_key,
            verbose=config.verbose,
            timeout=config.timeout,
            verify_ssl=config.verify_ssl,
        )

    # Authentication

    async def login(self, email: str, otp: str) -> Optional[str]:
        """
        Log in with an email address and one-time password.

        On success the server answers with a magic link whose "token" query
        parameter becomes this client's Authorization header.

        Returns:
            The session token, or None if the reply carried no login link
        """
        data = await self._request(
            "POST",
            "/v1/login",
            body={"email": email, "token": otp},
            authenticated=False,
        )
        detail = data.get("detail") if isinstance(data, dict) else None
        if not isinstance(detail, str) or "?token=" not in detail:
            return None

        token = detail.partition("token=")[2]
        self.headers["Authorization"] = token
        logger.info("Log in at %s", detail)
        return token

    async def register_user(self, email: str, first_name: str, last_name: str) -> str:
        """
        Register a user and log in with the MFA secret from the returned OTP URI.

        Returns:
            The otpauth:// URI to enrol in an authenticator app, or the raw
            reply when the server sent no URI

        Raises:
            AGiXTClientError: If the OTP URI carries no secret
        """
        data = await self._request(
            "POST",
            "/v1/user",
            body={"email": email, "first_name": first_name, "last_name": last_name},
            authenticated=False,
        )
        otp_uri = data.get("otp_uri") if isinstance(data, dict) else None
        if not isinstance(otp_uri, str):
            return json.dumps(data)

        if "secret=" not in otp_uri:
            raise AGiXTClientError("Invalid OTP URI format", otp_uri)
        mfa_token = otp_uri.split("secret=", 1)[1].split("&", 1)[0]
        await self.login(email, mfa_token)
        return otp_uri

    async def user_exists(self, email: str) -> bool:
        data = await self._request(
            "GET", "/v1/user/exists", params={"email": email}, authenticated=False
        )
        return data if isinstance(data, bool) else False

    async def update_user(self, **updates: Any) -> Any:
        return await self._request("PUT", "/v1/user", body=updates)

    async def get_user(self) -> Any:
        return await self._request("GET", "/v1/user")

    # Companies and invitations

    async def get_companies(self) -> List[Dict[str, Any]]:
        data = await self._request("GET", "/v1/companies")
        return self._list(data, "companies")

    async def get_company(self, company_id: str) -> Dict[str, Any]:
        return await self._request(
            "GET", self._path("/v1/company/{company_id}", company_id=company_id)
        )

    async def create_invitation(self, email: str, role: str = "user") -> Dict[str, Any]:
        return await self._request(
            "POST", "/v1/invitation", body={"email": email, "role": role}
        )

    async def delete_invitation(self, invitation_id: str) -> str:
        data = await self._request(
            "DELETE",
            self._path("/v1/invitation/{invitation_id}", invitation_id=invitation_id),
        )
        return self._message(data)

    async def get_oauth_providers(self) -> List[Dict[str, Any]]:
        data = await self._request("GET", "/v1/oauth")
        return self._list(data)

    # Completions and media

    async def chat_completions(self, request: ChatCompletions) -> ChatResponse:
        """
        Call the OpenAI-compatible chat completions endpoint.

        Args:
            request: Completion request; `model` names the agent and `user`
                the conversation

        Returns:
            ChatResponse with choices and token usage

        Raises:
            ResponseDecodeError: If the reply is not a chat completion
        """
        data = await self._request(
            "POST",
            "/v1/chat/completions",
            body=request.model_dump(exclude_none=True, by_alias=True),
        )
        try:
            return ChatResponse.model_validate(data)
        except ValidationError as e:
            raise ResponseDecodeError("Malformed chat completion", str(e)) from e

    async def text_to_speech(self, text: str, voice: str = "default") -> bytes:
        """Synthesize speech and return the raw audio bytes."""
        return await self._request(
            "POST",
            "/v1/audio/speech",
            body={"input": text, "voice": voice},
            raw=True,
        )

    async def generate_image(self, prompt: str, n: int = 1) -> Dict[str, Any]:
        return await self._request(
            "POST", "/v1/images/generations", body={"prompt": prompt, "n": n}
        )
