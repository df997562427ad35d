"""
Client configuration.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "http://localhost:7437"
DEFAULT_TIMEOUT = 300.0

_TRUTHY = {"1", "true", "yes", "on"}


class ClientConfig(BaseModel):
    """Connection settings for an AGiXT server."""

    base_url: str = Field(DEFAULT_BASE_URL, description="AGiXT server URL")
    api_key: Optional[str] = Field(None, description="API key or JWT")
    verbose: bool = Field(False, description="Log every response status and body to the agixt_client logger")
    timeout: float = Field(DEFAULT_TIMEOUT, description="Request timeout in seconds")
    verify_ssl: bool = Field(True, description="Verify TLS certificates")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """
        Build a config from AGIXT_URI, AGIXT_API_KEY and AGIXT_VERBOSE.

        Unset variables fall back to the field defaults.
        """
        env = os.environ if environ is None else environ
        values = {}
        if env.get("AGIXT_URI"):
            values["base_url"] = env["AGIXT_URI"]
        if env.get("AGIXT_API_KEY"):
            values["api_key"] = env["AGIXT_API_KEY"]
        if env.get("AGIXT_VERBOSE"):
            values["verbose"] = env["AGIXT_VERBOSE"].strip().lower() in _TRUTHY
        return cls(**values)
