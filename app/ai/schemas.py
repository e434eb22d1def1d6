# Copyright (c) 2026 Tyler Martin
# Licensed under FSL-1.1-ALv2 (see LICENSE)

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.ai.models import Message, SuggestionParams

MAX_CONTENT_LENGTH = 5000
MAX_DRAFT_LENGTH = 2000
MAX_USER_NAME_LENGTH = 100
MAX_SUGGEST_MESSAGES = 50
MAX_ANALYZE_MESSAGES = 100
MAX_SUGGESTION_COUNT = 5
DEFAULT_SUGGESTION_COUNT = 3


class _Request(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ChatMessage(_Request):
    sender_id: str = Field(min_length=1)
    sender_name: str = Field(min_length=1)
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)

    def to_message(self) -> Message:
        return Message(
            sender_id=self.sender_id,
            sender_name=self.sender_name,
            content=self.content,
        )


class SuggestionRequest(_Request):
    draft_text: str = Field(
        default="",
        max_length=MAX_DRAFT_LENGTH,
        validation_alias=AliasChoices("draftText", "currentInput", "draft_text"),
    )
    messages: list[ChatMessage] = Field(default_factory=list, max_length=MAX_SUGGEST_MESSAGES)
    current_user_id: str = Field(min_length=1)
    current_user_name: str = Field(min_length=1, max_length=MAX_USER_NAME_LENGTH)

    def to_params(self) -> SuggestionParams:
        return SuggestionParams(
            messages=[m.to_message() for m in self.messages],
            current_user_id=self.current_user_id,
            current_user_name=self.current_user_name,
            draft_text=self.draft_text,
        )


class MultipleSuggestionRequest(SuggestionRequest):
    count: int = DEFAULT_SUGGESTION_COUNT

    @field_validator("count", mode="before")
    @classmethod
    def clamp_count(cls, value):
        try:
            count = int(value)
        except (TypeError, ValueError):
            return DEFAULT_SUGGESTION_COUNT
        if count == 0:
            return DEFAULT_SUGGESTION_COUNT
        return min(max(1, count), MAX_SUGGESTION_COUNT)


class AnalyzeRequest(_Request):
    messages: list[ChatMessage] = Field(min_length=1, max_length=MAX_ANALYZE_MESSAGES)
    current_user_id: str = Field(min_length=1)
    current_user_name: str = "User"

    def to_messages(self) -> list[Message]:
        return [m.to_message() for m in self.messages]
