"""
Conversation endpoints.
"""

from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from agixt_client.exceptions import ResponseDecodeError
from agixt_client.models import Message


class ConversationsMixin:
    """Conversation history and message management."""

    async def get_conversations(self) -> List[Any]:
        """
        List conversations.

        Accepts both the list reply and the older {"conversations": [...]} form.
        """
        data = await self._request("GET", "/v1/conversations")
        return self._list(data, "conversations")

    async def get_conversations_with_ids(self) -> List[Dict[str, str]]:
        """List conversations as {"id", "name"} pairs, dropping entries that are not objects."""
        data = await self._request("GET", "/v1/conversations")
        if isinstance(data, dict) and "conversations_with_ids" in data:
            conversations = self._list(data, "conversations_with_ids")
        else:
            conversations = self._list(data, "conversations")

        result = []
        for conversation in conversations:
            if not isinstance(conversation, dict):
                continue
            entry = {}
            for key in ("id", "name"):
                if isinstance(conversation.get(key), str):
                    entry[key] = conversation[key]
            result.append(entry)
        return result

    async def get_conversation_id_by_name(self, conversation_name: str) -> Optional[str]:
        for conversation in await self.get_conversations_with_ids():
            if conversation.get("name") == conversation_name:
                return conversation.get("id")
        return None

    async def get_conversation(
        self,
        conversation_id: str,
        limit: int = 100,
        page: int = 1,
    ) -> List[Message]:
        """
        Fetch one page of a conversation's history.

        Args:
            conversation_id: Conversation to read
            limit: Messages per page (default: 100)
            page: 1-based page number

        Returns:
            Messages in the order the server returns them

        Raises:
            ResponseDecodeError: If the history cannot be parsed
        """
        data = await self._request(
            "GET",
            self._path("/v1/conversation/{conversation_id}", conversation_id=conversation_id),
            params={"limit": limit, "page": page},
        )
        history = self._field(data, "conversation_history")
        try:
            return [Message.model_validate(item) for item in history]
        except (ValidationError, TypeError) as e:
            raise ResponseDecodeError("Malformed conversation history", str(e)) from e

    async def fork_conversation(self, conversation_id: str, message_id: str) -> Dict[str, Any]:
        """Copy a conversation up to and including message_id into a new one."""
        return await self._request(
            "POST",
            self._path(
                "/v1/conversation/fork/{conversation_id}/{message_id}",
                conversation_id=conversation_id,
                message_id=message_id,
            ),
        )

    async def new_conversation(
        self,
        agent_id: str,
        conversation_name: str,
        conversation_content: Optional[List[Message]] = None,
    ) -> Dict[str, Any]:
        content = [
            message.model_dump(exclude_none=True) for message in conversation_content or []
        ]
        return await self._request(
            "POST",
            "/v1/conversation",
            body={
                "conversation_name": conversation_name,
                "agent_id": agent_id,
                "conversation_content": content,
            },
        )

    async def rename_conversation(self, conversation_id: str, new_name: str) -> Dict[str, Any]:
        return await self._request(
            "PUT",
            self._path("/v1/conversation/{conversation_id}", conversation_id=conversation_id),
            body={"new_conversation_name": new_name},
        )

    async def delete_conversation(self, conversation_id: str) -> str:
        data = await self._request(
            "DELETE",
            self._path("/v1/conversation/{conversation_id}", conversation_id=conversation_id),
        )
        return self._message(data)

    async def delete_conversation_message(self, conversation_id: str, message_id: str) -> str:
        data = await self._request(
            "DELETE",
            self._path(
                "/v1/conversation/{conversation_id}/message/{message_id}",
                conversation_id=conversation_id,
                message_id=message_id,
            ),
        )
        return self._message(data)

    async def update_conversation_message(
        self,
        conversation_id: str,
        message_id: str,
        new_message: str,
    ) -> str:
        data = await self._request(
            "PUT",
            self._path(
                "/v1/conversation/{conversation_id}/message/{message_id}",
                conversation_id=conversation_id,
                message_id=message_id,
            ),
            body={"new_message": new_message},
        )
        return self._message(data)

    async def new_conversation_message(self, role: str, message: str, conversation_id: str) -> str:
        data = await self._request(
            "POST",
            self._path(
                "/v1/conversation/{conversation_id}/message",
                conversation_id=conversation_id,
            ),
            body={"role": role, "message": message},
        )
        return self._message(data)
