# Copyright (c) 2026 Tyler Martin
# Licensed under FSL-1.1-ALv2 (see LICENSE)

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

SELF_SPEAKER = "self"
GENERAL_TOPIC = "general"
EMPTY_SUMMARY = "new conversation"


class Tone(str, Enum):
    FORMAL = "formal"
    INFORMAL = "informal"
    NEUTRAL = "neutral"


class Relationship(str, Enum):
    PROFESSIONAL = "professional"
    FAMILY = "family"
    COLLEAGUE = "colleague"
    COUPLE = "couple"
    FRIEND = "friend"


class EmotionalTone(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class ConversationFlow(str, Enum):
    START = "start"
    QUESTIONING = "questioning"
    ACTIVE = "active"
    PROLONGED = "prolonged"
    FLUID = "fluid"


class Urgency(str, Enum):
    URGENT = "urgent"
    NORMAL = "normal"
    LOW = "low"


class Mode(str, Enum):
    SUGGEST = "suggest"
    IMPROVE = "improve"


class ResponseKind(str, Enum):
    TEMPORAL = "temporal"
    LOCATION = "location"
    EXPLANATORY = "explanatory"
    PROPOSAL = "proposal"
    OPEN = "open"
    EXCLAMATION = "exclamation"
    VALIDATION = "validation"
    AFFIRMATION = "affirmation"


@dataclass(frozen=True)
class Message:
    sender_id: str
    sender_name: str
    content: str


@dataclass(frozen=True)
class ConversationContext:
    """Structured read of a transcript, rebuilt from scratch on every call."""

    tone: Tone = Tone.NEUTRAL
    relationship: Relationship = Relationship.FRIEND
    topics: tuple[str, ...] = (GENERAL_TOPIC,)
    emotional_tone: EmotionalTone = EmotionalTone.NEUTRAL
    conversation_flow: ConversationFlow = ConversationFlow.START
    urgency: Urgency = Urgency.NORMAL
    formality: float = 0.5
    conversation_summary: str = EMPTY_SUMMARY
    message_count: int = 0
    last_speaker: str = ""

    @classmethod
    def empty(cls) -> "ConversationContext":
        return cls()

    def to_dict(self) -> dict:
        return {
            "tone": self.tone.value,
            "relationship": self.relationship.value,
            "topics": list(self.topics),
            "emotional_tone": self.emotional_tone.value,
            "conversation_flow": self.conversation_flow.value,
            "urgency": self.urgency.value,
            "formality": self.formality,
            "conversation_summary": self.conversation_summary,
            "message_count": self.message_count,
            "last_speaker": self.last_speaker,
        }


@dataclass(frozen=True)
class ExpectedResponse:
    kind: ResponseKind
    description: str


@dataclass(frozen=True)
class PromptPair:
    system_prompt: str
    user_prompt: str


@dataclass(frozen=True)
class CompletionParams:
    model: str
    max_tokens: int = 300
    temperature: float = 0.7

    def with_temperature(self, temperature: float) -> "CompletionParams":
        return replace(self, temperature=temperature)


@dataclass
class SuggestionParams:
    messages: list[Message]
    current_user_id: str
    current_user_name: str
    draft_text: str = ""

    @property
    def mode(self) -> Mode:
        return Mode.IMPROVE if self.draft_text and self.draft_text.strip() else Mode.SUGGEST


@dataclass
class GenerationMetadata:
    model: str
    processing_time_ms: int
    tokens_used: Optional[int] = None
    temperature: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "model": self.model,
            "processing_time_ms": self.processing_time_ms,
            "tokens_used": self.tokens_used,
            "temperature": self.temperature,
        }


@dataclass
class GenerationResult:
    suggestion: str
    mode: Mode
    context: ConversationContext
    metadata: GenerationMetadata = field(
        default_factory=lambda: GenerationMetadata(model="", processing_time_ms=0)
    )

    def to_dict(self) -> dict:
        return {
            "suggestion": self.suggestion,
            "mode": self.mode.value,
            "context": self.context.to_dict(),
            "metadata": self.metadata.to_dict(),
        }
