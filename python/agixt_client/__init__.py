"""
agixt-client - Python client for the AGiXT agent platform

An async-first Python client for managing agents, conversations, chains,
prompts and providers through the AGiXT /v1 REST API.
"""

import logging

from agixt_client.client import AGiXTClient
from agixt_client.config import ClientConfig
from agixt_client.exceptions import (
    AGiXTClientError,
    ApiError,
    AuthenticationError,
    InvalidInputError,
    NotFoundError,
    RequestError,
    ResponseDecodeError,
)
from agixt_client.models import (
    Agent,
    Chain,
    ChainStep,
    ChatCompletions,
    ChatResponse,
    Choice,
    Company,
    ContentPart,
    Conversation,
    Extension,
    ExtensionCommand,
    FileUrl,
    ImageUrl,
    Message,
    Prompt,
    Provider,
    Tool,
    ToolFunction,
    Usage,
    User,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "AGiXTClient",
    "ClientConfig",
    "AGiXTClientError",
    "ApiError",
    "AuthenticationError",
    "InvalidInputError",
    "NotFoundError",
    "RequestError",
    "ResponseDecodeError",
    "Agent",
    "Chain",
    "ChainStep",
    "ChatCompletions",
    "ChatResponse",
    "Choice",
    "Company",
    "ContentPart",
    "Conversation",
    "Extension",
    "ExtensionCommand",
    "FileUrl",
    "ImageUrl",
    "Message",
    "Prompt",
    "Provider",
    "Tool",
    "ToolFunction",
    "Usage",
    "User",
]
