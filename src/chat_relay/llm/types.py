"""Wire types for the chat-completions API.

Public API (the "studs"):
    Turn: A single role/content message in a conversation
    ChatRequest: Request payload sent to the provider
    Choice: One candidate completion in a response
    ChatCompletion: Successful response payload
    ErrorBody: Error payload reported by the provider
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

Role = Literal["user", "assistant"]

# Empty value per ChatCompletion field, used when the provider sends null
_EMPTY_VALUES: dict[str, Any] = {
    "id": str,
    "object": str,
    "created": int,
    "choices": list,
    "usage": dict,
}


class Turn(BaseModel):
    """Represents a single message in a conversation.

    Attributes:
        role: Message role ("user" or "assistant")
        content: Message content text
    """

    role: Role = Field(..., description="Message role: user or assistant")
    content: str = Field("", description="Message content")

    @field_validator("content", mode="before")
    @classmethod
    def coerce_null_content(cls, v: Any) -> Any:
        """Providers may send ``null`` content; treat it as empty text."""
        return "" if v is None else v


class ChatRequest(BaseModel):
    """Request payload for the chat-completions endpoint."""

    model: str = Field(..., description="Model identifier")
    messages: list[Turn] = Field(default_factory=list, description="Full conversation so far")


class Choice(BaseModel):
    """One candidate completion returned by the provider."""

    model_config = ConfigDict(extra="ignore")

    index: int = 0
    message: Turn
    finish_reason: str | None = None

    @field_validator("index", mode="before")
    @classmethod
    def coerce_null_index(cls, v: Any) -> Any:
        return 0 if v is None else v


class ChatCompletion(BaseModel):
    """Response payload for a chat completion.

    Every field defaults to empty so that error bodies, which carry none of
    them, still decode; callers check ``choices`` to tell the two apart.

    Attributes:
        id: Completion identifier
        object: Object type reported by the provider
        created: Creation timestamp (epoch seconds)
        choices: Candidate completions, possibly empty
        usage: Token usage statistics (provider-defined keys)
    """

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    object: str = ""
    created: int = 0
    choices: list[Choice] = Field(default_factory=list)
    usage: dict[str, Any] = Field(default_factory=dict)

    @field_validator("id", "object", "created", "choices", "usage", mode="before")
    @classmethod
    def coerce_null_to_empty(cls, v: Any, info: ValidationInfo) -> Any:
        """Decode JSON null as the field's empty value."""
        if v is None:
            return _EMPTY_VALUES[info.field_name]()
        return v


class ErrorBody(BaseModel):
    """Error payload: ``{"error": {"message": ..., ...}}``."""

    model_config = ConfigDict(extra="ignore")

    error: dict[str, Any] = Field(default_factory=dict)

    @field_validator("error", mode="before")
    @classmethod
    def coerce_null_error(cls, v: Any) -> Any:
        return {} if v is None else v

    @property
    def message(self) -> str | None:
        """Human-readable error message, if the provider sent one."""
        message = self.error.get("message")
        if message is None:
            return None
        return str(message)


__all__ = ["Role", "Turn", "ChatRequest", "Choice", "ChatCompletion", "ErrorBody"]
