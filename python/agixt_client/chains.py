"""
Chain and prompt endpoints.
"""

from typing import Any, Dict, List, Optional

from agixt_client.exceptions import ResponseDecodeError


class ChainsMixin:
    """Chains, chain steps and prompt templates."""

    # Chains

    async def get_chains(self) -> List[Dict[str, Any]]:
        data = await self._request("GET", "/v1/chains")
        return self._list(data)

    async def get_chain_id_by_name(self, chain_name: str) -> Optional[str]:
        for chain in await self.get_chains():
            if isinstance(chain, dict) and chain.get("name") == chain_name:
                chain_id = chain.get("id")
                return chain_id if isinstance(chain_id, str) else None
        return None

    async def get_chain(self, chain_id: str) -> Any:
        """
        Fetch a chain definition.

        The server wraps the chain as {chain_name: chain_data}; a single-key
        reply is unwrapped to chain_data, anything else is returned as is.
        """
        data = await self._request(
            "GET", self._path("/v1/chain/{chain_id}", chain_id=chain_id)
        )
        if isinstance(data, dict) and len(data) == 1:
            return next(iter(data.values()))
        return data

    async def get_chain_responses(self, chain_id: str) -> Any:
        data = await self._request(
            "GET", self._path("/v1/chain/{chain_id}/responses", chain_id=chain_id)
        )
        return self._field(data, "chain")

    async def get_chain_args(self, chain_id: str) -> List[str]:
        data = await self._request(
            "GET", self._path("/v1/chain/{chain_id}/args", chain_id=chain_id)
        )
        if not isinstance(data, list) or not all(isinstance(arg, str) for arg in data):
            raise ResponseDecodeError("Chain arguments are not a list of strings", repr(data)[:200])
        return data

    async def run_chain(
        self,
        chain_id: str,
        user_input: str,
        agent_id: Optional[str] = None,
        all_responses: bool = False,
        from_step: int = 1,
        chain_args: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Run a chain.

        Args:
            chain_id: Chain to run
            user_input: Input passed to the first step as "prompt"
            agent_id: Agent overriding the one configured on each step
            all_responses: Return every step's response instead of the last
            from_step: 1-based step to start from
            chain_args: Extra arguments for the chain's prompts
        """
        return await self._request(
            "POST",
            self._path("/v1/chain/{chain_id}/run", chain_id=chain_id),
            body={
                "prompt": user_input,
                "agent_override": agent_id or "",
                "all_responses": all_responses,
                "from_step": from_step,
                "chain_args": chain_args or {},
            },
        )

    async def run_chain_step(
        self,
        chain_id: str,
        step_number: int,
        user_input: str,
        agent_id: Optional[str] = None,
        chain_args: Optional[Dict[str, Any]] = None,
    ) -> Any:
        return await self._request(
            "POST",
            self._path(
                "/v1/chain/{chain_id}/run/step/{step_number}",
                chain_id=chain_id,
                step_number=step_number,
            ),
            body={
                "prompt": user_input,
                "agent_override": agent_id,
                "chain_args": chain_args or {},
            },
        )

    async def add_chain(self, chain_name: str) -> Dict[str, Any]:
        return await self._request("POST", "/v1/chain", body={"chain_name": chain_name})

    async def import_chain(self, chain_name: str, steps: Any) -> str:
        data = await self._request(
            "POST", "/v1/chain/import", body={"chain_name": chain_name, "steps": steps}
        )
        return self._message(data)

    async def rename_chain(self, chain_id: str, new_name: str) -> str:
        data = await self._request(
            "PUT",
            self._path("/v1/chain/{chain_id}", chain_id=chain_id),
            body={"new_name": new_name},
        )
        return self._message(data)

    async def delete_chain(self, chain_id: str) -> str:
        data = await self._request(
            "DELETE", self._path("/v1/chain/{chain_id}", chain_id=chain_id)
        )
        return self._message(data)

    # Steps

    async def add_step(
        self,
        chain_id: str,
        step_number: int,
        agent_id: str,
        prompt_type: str,
        prompt: Any,
    ) -> str:
        data = await self._request(
            "POST",
            self._path("/v1/chain/{chain_id}/step", chain_id=chain_id),
            body={
                "step_number": step_number,
                "agent_id": agent_id,
                "prompt_type": prompt_type,
                "prompt": prompt,
            },
        )
        return self._message(data)

    async def update_step(
        self,
        chain_id: str,
        step_number: int,
        agent_id: str,
        prompt_type: str,
        prompt: Any,
    ) -> str:
        data = await self._request(
            "PUT",
            self._path(
                "/v1/chain/{chain_id}/step/{step_number}",
                chain_id=chain_id,
                step_number=step_number,
            ),
            body={
                "step_number": step_number,
                "agent_id": agent_id,
                "prompt_type": prompt_type,
                "prompt": prompt,
            },
        )
        return self._message(data)

    async def move_step(self, chain_id: str, old_step_number: int, new_step_number: int) -> str:
        data = await self._request(
            "PATCH",
            self._path("/v1/chain/{chain_id}/step/move", chain_id=chain_id),
            body={
                "old_step_number": old_step_number,
                "new_step_number": new_step_number,
            },
        )
        return self._message(data)

    async def delete_step(self, chain_id: str, step_number: int) -> str:
        data = await self._request(
            "DELETE",
            self._path(
                "/v1/chain/{chain_id}/step/{step_number}",
                chain_id=chain_id,
                step_number=step_number,
            ),
        )
        return self._message(data)

    # Prompts

    async def add_prompt(
        self,
        prompt_name: str,
        prompt: str,
        prompt_category: str = "Default",
    ) -> Dict[str, Any]:
        return await self._request(
            "POST",
            "/v1/prompt",
            body={
                "prompt_name": prompt_name,
                "prompt": prompt,
                "prompt_category": prompt_category,
            },
        )

    async def get_prompt(self, prompt_id: str) -> Dict[str, Any]:
        return await self._request(
            "GET", self._path("/v1/prompt/{prompt_id}", prompt_id=prompt_id)
        )

    async def get_prompts(self, prompt_category: str = "Default") -> List[Dict[str, Any]]:
        data = await self._request(
            "GET", "/v1/prompts", params={"prompt_category": prompt_category}
        )
        return self._field(data, "prompts")

    async def get_all_prompts(self) -> Any:
        """Global and user prompts with their IDs."""
        return await self._request("GET", "/v1/prompt/all")

    async def get_prompt_id_by_name(
        self, prompt_name: str, prompt_category: str = "Default"
    ) -> Optional[str]:
        for prompt in await self.get_prompts(prompt_category):
            if isinstance(prompt, dict) and prompt.get("name") == prompt_name:
                prompt_id = prompt.get("id")
                return prompt_id if isinstance(prompt_id, str) else None
        return None

    async def get_prompt_categories(self) -> List[Dict[str, Any]]:
        data = await self._request("GET", "/v1/prompt/categories")
        return self._field(data, "categories")

    async def get_prompts_by_category_id(self, category_id: str) -> List[Dict[str, Any]]:
        data = await self._request(
            "GET", self._path("/v1/prompt/category/{category_id}", category_id=category_id)
        )
        return self._field(data, "prompts")

    async def get_prompt_args(self, prompt_id: str) -> Any:
        data = await self._request(
            "GET", self._path("/v1/prompt/{prompt_id}/args", prompt_id=prompt_id)
        )
        return self._field(data, "prompt_args")

    async def delete_prompt(self, prompt_id: str) -> str:
        data = await self._request(
            "DELETE", self._path("/v1/prompt/{prompt_id}", prompt_id=prompt_id)
        )
        return self._message(data)

    async def update_prompt(self, prompt_id: str, prompt: str) -> str:
        data = await self._request(
            "PUT",
            self._path("/v1/prompt/{prompt_id}", prompt_id=prompt_id),
            body={"prompt": prompt},
        )
        return self._message(data)

    async def rename_prompt(self, prompt_id: str, new_name: str) -> str:
        data = await self._request(
            "PATCH",
            self._path("/v1/prompt/{prompt_id}", prompt_id=prompt_id),
            body={"prompt_name": new_name},
        )
        return self._message(data)
