"""
Agent endpoints: lifecycle, commands, prompting, feedback, learning and memory.

Every agent is addressed by its ID; use get_agent_id_by_name() to resolve one.
"""

from typing import Any, Dict, List, Optional


class AgentsMixin:
    """Agent operations."""

    # Lifecycle

    async def get_agents(self) -> List[Dict[str, Any]]:
        """List all agents, each with its "id" and "name"."""
        data = await self._request("GET", "/v1/agent")
        return self._field(data, "agents")

    async def get_agent_id_by_name(self, agent_name: str) -> Optional[str]:
        """Return the ID of the first agent called agent_name, or None."""
        for agent in await self.get_agents():
            if isinstance(agent, dict) and agent.get("name") == agent_name:
                agent_id = agent.get("id")
                return agent_id if isinstance(agent_id, str) else None
        return None

    async def add_agent(
        self,
        agent_name: str,
        settings: Optional[Dict[str, Any]] = None,
        commands: Optional[Dict[str, Any]] = None,
        training_urls: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """
        Create an agent.

        Returns:
            The server reply, which includes the new agent's ID
        """
        return await self._request(
            "POST",
            "/v1/agent",
            body={
                "agent_name": agent_name,
                "settings": settings or {},
                "commands": commands or {},
                "training_urls": training_urls or [],
            },
        )

    async def import_agent(
        self,
        agent_name: str,
        settings: Optional[Dict[str, Any]] = None,
        commands: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        return await self._request(
            "POST",
            "/v1/agent/import",
            body={
                "agent_name": agent_name,
                "settings": settings or {},
                "commands": commands or {},
            },
        )

    async def rename_agent(self, agent_id: str, new_name: str) -> Dict[str, Any]:
        return await self._request(
            "PATCH",
            self._path("/v1/agent/{agent_id}", agent_id=agent_id),
            body={"new_name": new_name},
        )

    async def update_agent_settings(
        self,
        agent_id: str,
        settings: Dict[str, Any],
        agent_name: str = "",
    ) -> str:
        data = await self._request(
            "PUT",
            self._path("/v1/agent/{agent_id}", agent_id=agent_id),
            body={
                "agent_name": agent_name,
                "settings": settings,
                "commands": {},
                "training_urls": [],
            },
        )
        return self._message(data)

    async def update_agent_commands(self, agent_id: str, commands: Dict[str, Any]) -> str:
        data = await self._request(
            "PUT",
            self._path("/v1/agent/{agent_id}/commands", agent_id=agent_id),
            body={"commands": commands},
        )
        return self._message(data)

    async def delete_agent(self, agent_id: str) -> str:
        data = await self._request(
            "DELETE", self._path("/v1/agent/{agent_id}", agent_id=agent_id)
        )
        return self._message(data)

    async def get_agentconfig(self, agent_id: str) -> Dict[str, Any]:
        """Full configuration (settings, commands) of an agent."""
        data = await self._request(
            "GET", self._path("/v1/agent/{agent_id}", agent_id=agent_id)
        )
        return self._field(data, "agent")

    # Commands

    async def get_commands(self, agent_id: str) -> Dict[str, Any]:
        """Command names mapped to their enabled state."""
        data = await self._request(
            "GET", self._path("/v1/agent/{agent_id}/command", agent_id=agent_id)
        )
        return self._field(data, "commands")

    async def toggle_command(self, agent_id: str, command_name: str, enable: bool) -> str:
        data = await self._request(
            "PATCH",
            self._path("/v1/agent/{agent_id}/command", agent_id=agent_id),
            body={"command_name": command_name, "enable": enable},
        )
        return self._message(data)

    async def execute_command(
        self,
        agent_id: str,
        command_name: str,
        command_args: Dict[str, Any],
        conversation_id: str = "",
    ) -> Any:
        data = await self._request(
            "POST",
            self._path("/v1/agent/{agent_id}/command", agent_id=agent_id),
            body={
                "command_name": command_name,
                "command_args": command_args,
                "conversation_name": conversation_id,
            },
        )
        return self._field(data, "response")

    # Prompting

    async def prompt_agent(
        self,
        agent_id: str,
        prompt_name: str,
        prompt_args: Dict[str, Any],
    ) -> str:
        """
        Run a named prompt template through an agent.

        Args:
            agent_id: Agent to prompt
            prompt_name: Prompt template name (e.g. "Chat", "instruct")
            prompt_args: Template arguments, including "user_input"

        Returns:
            The agent's reply text
        """
        data = await self._request(
            "POST",
            self._path("/v1/agent/{agent_id}/prompt", agent_id=agent_id),
            body={"prompt_name": prompt_name, "prompt_args": prompt_args},
        )
        return self._field(data, "response")

    async def instruct(self, agent_id: str, user_input: str, conversation_id: str) -> str:
        return await self.prompt_agent(
            agent_id,
            "instruct",
            {
                "user_input": user_input,
                "disable_memory": True,
                "conversation_name": conversation_id,
            },
        )

    async def chat(
        self,
        agent_id: str,
        user_input: str,
        conversation_id: str,
        context_results: int = 4,
    ) -> str:
        """Send a chat message to an agent and return its reply."""
        return await self.prompt_agent(
            agent_id,
            "Chat",
            {
                "user_input": user_input,
                "context_results": context_results,
                "conversation_name": conversation_id,
                "disable_memory": True,
            },
        )

    # Persona

    async def get_persona(self, agent_id: str) -> Any:
        data = await self._request(
            "GET", self._path("/v1/agent/{agent_id}/persona", agent_id=agent_id)
        )
        return self._message(data)

    async def update_persona(self, agent_id: str, persona: str) -> str:
        data = await self._request(
            "PUT",
            self._path("/v1/agent/{agent_id}/persona", agent_id=agent_id),
            body={"persona": persona},
        )
        return self._message(data)

    async def get_agent_extensions(self, agent_id: str) -> List[Dict[str, Any]]:
        data = await self._request(
            "GET", self._path("/v1/agent/{agent_id}/extensions", agent_id=agent_id)
        )
        return self._field(data, "extensions")

    # Feedback

    async def submit_feedback(
        self,
        agent_id: str,
        message: str,
        user_input: str,
        feedback: str,
        positive: bool = True,
        conversation_id: str = "",
    ) -> str:
        data = await self._request(
            "POST",
            self._path("/v1/agent/{agent_id}/feedback", agent_id=agent_id),
            body={
                "user_input": user_input,
                "message": message,
                "feedback": feedback,
                "positive": positive,
                "conversation_name": conversation_id,
            },
        )
        return self._message(data)

    async def positive_feedback(
        self,
        agent_id: str,
        message: str,
        user_input: str,
        feedback: str,
        conversation_id: str = "",
    ) -> str:
        return await self.submit_feedback(
            agent_id, message, user_input, feedback, True, conversation_id
        )

    async def negative_feedback(
        self,
        agent_id: str,
        message: str,
        user_input: str,
        feedback: str,
        conversation_id: str = "",
    ) -> str:
        return await self.submit_feedback(
            agent_id, message, user_input, feedback, False, conversation_id
        )

    # Learning

    async def learn_text(
        self,
        agent_id: str,
        user_input: str,
        text: str,
        collection_number: str = "0",
    ) -> str:
        data = await self._request(
            "POST",
            self._path("/v1/agent/{agent_id}/learn/text", agent_id=agent_id),
            body={
                "user_input": user_input,
                "text": text,
                "collection_number": collection_number,
            },
        )
        return self._message(data)

    async def learn_url(self, agent_id: str, url: str, collection_number: str = "0") -> str:
        data = await self._request(
            "POST",
            self._path("/v1/agent/{agent_id}/learn/url", agent_id=agent_id),
            body={"url": url, "collection_number": collection_number},
        )
        return self._message(data)

    async def learn_file(
        self,
        agent_id: str,
        file_name: str,
        file_content: str,
        collection_number: str = "0",
    ) -> str:
        """
        Teach an agent the contents of a file.

        Args:
            file_content: Base64-encoded file contents
        """
        data = await self._request(
            "POST",
            self._path("/v1/agent/{agent_id}/learn/file", agent_id=agent_id),
            body={
                "file_name": file_name,
                "file_content": file_content,
                "collection_number": collection_number,
            },
        )
        return self._message(data)

    # Memory

    async def get_agent_memories(
        self,
        agent_id: str,
        user_input: str,
        limit: int = 10,
        min_relevance_score: float = 0.0,
        collection_number: str = "0",
    ) -> List[Dict[str, Any]]:
        """Query an agent's memories for entries relevant to user_input."""
        data = await self._request(
            "POST",
            self._path("/v1/agent/{agent_id}/memory/query", agent_id=agent_id),
            body={
                "user_input": user_input,
                "limit": limit,
                "min_relevance_score": min_relevance_score,
                "collection_number": collection_number,
            },
        )
        return self._field(data, "memories")

    async def delete_agent_memory(
        self,
        agent_id: str,
        memory_id: str,
        collection_number: str = "0",
    ) -> str:
        data = await self._request(
            "DELETE",
            self._path(
                "/v1/agent/{agent_id}/memory/{memory_id}",
                agent_id=agent_id,
                memory_id=memory_id,
            ),
            body={"collection_number": collection_number},
        )
        return self._message(data)

    async def wipe_agent_memory(self, agent_id: str, collection_number: str = "") -> str:
        """Delete all memories of an agent; an empty collection means every collection."""
        data = await self._request(
            "DELETE",
            self._path("/v1/agent/{agent_id}/memory", agent_id=agent_id),
            body={"collection_number": collection_number},
        )
        return self._message(data)
