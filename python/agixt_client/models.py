"""
Data models for the AGiXT client.

These models follow the JSON shapes served by the AGiXT /v1 API. Endpoints
whose payloads are free-form return plain dicts and lists instead.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ImageUrl(BaseModel):
    """Image reference inside structured message content."""

    url: str


class FileUrl(BaseModel):
    """File reference inside structured message content."""

    url: str


class ContentPart(BaseModel):
    """One part of structured message content."""

    text: Optional[str] = None
    image_url: Optional[ImageUrl] = None
    file_url: Optional[FileUrl] = None


class Message(BaseModel):
    """A message in a conversation."""

    model_config = ConfigDict(populate_by_name=True)

    role: str = Field(..., description="Sender role (user, assistant, system)")
    # Conversation history rows name the text "message"; chat payloads use "content".
    content: Union[str, List[ContentPart]] = Field(
        ..., validation_alias=AliasChoices("content", "message")
    )
    id: Optional[str] = None
    timestamp: Optional[str] = None


class ToolFunction(BaseModel):
    """Function definition within a tool."""

    name: str
    description: str
    parameters: Dict[str, Any] = Field(default_factory=dict, description="JSON Schema")


class Tool(BaseModel):
    """Tool definition for function calling."""

    model_config = ConfigDict(populate_by_name=True)

    tool_type: str = Field("function", alias="type")
    function: ToolFunction


class ChatCompletions(BaseModel):
    """Request body for the OpenAI-compatible chat completions endpoint."""

    model: str = Field("gpt4free", description="Agent name to answer with")
    messages: Optional[List[Message]] = None
    temperature: Optional[float] = 0.9
    top_p: Optional[float] = 1.0
    tools: Optional[List[Tool]] = None
    tools_choice: Optional[str] = "auto"
    n: Optional[int] = 1
    stream: Optional[bool] = False
    stop: Optional[List[str]] = None
    max_tokens: Optional[int] = 4096
    presence_penalty: Optional[float] = 0.0
    frequency_penalty: Optional[float] = 0.0
    logit_bias: Optional[Dict[str, float]] = None
    user: Optional[str] = Field("Chat", description="Conversation name")


class Usage(BaseModel):
    """Token usage reported by a chat completion."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class Choice(BaseModel):
    index: int
    message: Message
    finish_reason: Optional[str] = None
    logprobs: Optional[Any] = None


class ChatResponse(BaseModel):
    """Response from the chat completions endpoint."""

    id: str
    object: str
    created: int
    model: str
    choices: List[Choice] = Field(default_factory=list)
    usage: Usage = Field(default_factory=Usage)

    @property
    def text(self) -> Optional[str]:
        """Text of the first choice, if it is plain text."""
        if not self.choices:
            return None
        content = self.choices[0].message.content
        return content if isinstance(content, str) else None


class Agent(BaseModel):
    id: str
    name: str
    settings: Dict[str, Any] = Field(default_factory=dict)
    commands: Dict[str, Any] = Field(default_factory=dict)


class Conversation(BaseModel):
    id: str
    name: str
    agent_id: Optional[str] = None


class ChainStep(BaseModel):
    step_number: int
    agent_id: str
    prompt_type: str
    prompt: Any = None


class Chain(BaseModel):
    id: str
    name: str
    steps: Optional[List[ChainStep]] = None


class Prompt(BaseModel):
    id: str
    name: str
    content: str
    category: Optional[str] = None


class Provider(BaseModel):
    name: str
    settings: Dict[str, Any] = Field(default_factory=dict)
    supports_embeddings: bool = False


class Company(BaseModel):
    id: str
    name: str
    agents: Optional[List[Agent]] = None


class User(BaseModel):
    id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class ExtensionCommand(BaseModel):
    name: str
    description: str = ""
    args: Dict[str, Any] = Field(default_factory=dict)


class Extension(BaseModel):
    name: str
    description: str = ""
    settings: Dict[str, Any] = Field(default_factory=dict)
    commands: List[ExtensionCommand] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error body returned by the API."""

    detail: Optional[Any] = Field(None, description="FastAPI error detail")
    message: Optional[str] = None
    error: Optional[str] = None

    def describe(self) -> Optional[str]:
        """Best human-readable message in the body, if any."""
        for value in (self.detail, self.message, self.error):
            if isinstance(value, str) and value:
                return value
        if self.detail is not None:
            return str(self.detail)
        return None
