"""
Provider and extension endpoints.
"""

from typing import Any, Dict, List


class ProvidersMixin:
    """Providers, embedders and extensions."""

    async def get_providers(self) -> List[Dict[str, Any]]:
        """
        List available providers.

        Accepts both the list reply and the older {"providers": [...]} form.
        """
        data = await self._request("GET", "/v1/provider")
        return self._list(data, "providers")

    async def get_providers_by_service(self, service: str) -> List[Dict[str, Any]]:
        """List providers offering a service (e.g. "llm", "tts", "image")."""
        data = await self._request(
            "GET", self._path("/v1/providers/service/{service}", service=service)
        )
        return self._list(data, "providers")

    async def get_provider_settings(self, provider_name: str) -> Dict[str, Any]:
        data = await self._request(
            "GET", self._path("/v1/provider/{name}", name=provider_name)
        )
        return self._field(data, "settings")

    async def get_embed_providers(self) -> List[str]:
        """Names of the providers that support embeddings."""
        return list((await self.get_embedders()).keys())

    async def get_embedders(self) -> Dict[str, Dict[str, Any]]:
        """Embedding-capable providers keyed by name."""
        embedders = {}
        for provider in await self.get_providers():
            if not isinstance(provider, dict):
                continue
            name = provider.get("name")
            if provider.get("supports_embeddings") is True and isinstance(name, str):
                embedders[name] = provider
        return embedders

    async def get_extension_settings(self) -> Any:
        data = await self._request("GET", "/v1/extensions/settings")
        return self._field(data, "extension_settings")

    async def get_extensions(self) -> List[Dict[str, Any]]:
        data = await self._request("GET", "/v1/extensions")
        return self._list(data, "extensions")

    async def get_command_args(self, command_name: str) -> Any:
        """Argument names and defaults for an extension command."""
        data = await self._request(
            "GET", self._path("/v1/extensions/{command}/args", command=command_name)
        )
        return self._field(data, "command_args")
