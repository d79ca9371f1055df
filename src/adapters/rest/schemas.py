"""Pydantic models for REST API request/response validation."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import AliasChoices, BaseModel, Field, model_validator


# --- Run ---

class MessageIn(BaseModel):
    role: Literal["user", "assistant", "system"]
    content: str = ""


class RunAgentBody(BaseModel):
    """One conversation turn: prior messages plus the new user message last."""

    thread_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("thread_id", "threadId"),
    )
    run_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("run_id", "runId"),
    )
    messages: list[MessageIn] = Field(..., min_length=1)

    @model_validator(mode="after")
    def last_message_is_user_input(self) -> RunAgentBody:
        last = self.messages[-1]
        if last.role != "user" or not last.content.strip():
            raise ValueError("the last message must be a non-empty user message")
        return self

    @property
    def user_input(self) -> str:
        return self.messages[-1].content

    @property
    def history(self) -> list[MessageIn]:
        return self.messages[:-1]


class ToolCallOut(BaseModel):
    name: str
    arguments: dict[str, Any]
    output: Optional[dict[str, Any]] = None
    error: Optional[str] = None
    duration_ms: float


class ProverbsStateOut(BaseModel):
    proverbs: list[str]


class RunAgentOut(BaseModel):
    thread_id: str
    run_id: str
    reply: str
    failed: bool = False
    tool_calls: list[ToolCallOut]
    # Snapshot from the run's last successful mutation; null when nothing changed
    state: Optional[ProverbsStateOut] = None


# --- Catalog ---

class ToolOut(BaseModel):
    name: str
    description: str
    mutates_state: bool
    input_schema: dict[str, Any]
    output_schema: dict[str, Any]
