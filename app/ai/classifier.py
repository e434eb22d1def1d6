# Copyright (c) 2026 Tyler Martin
# Licensed under FSL-1.1-ALv2 (see LICENSE)
#
# Heuristic conversation classifier. Every signal is a small pure function
# over the transcript; classify() only composes them.

import logging
import re
from functools import lru_cache
from typing import Optional, Sequence

from app.ai import lexicon
from app.ai.models import (
    GENERAL_TOPIC,
    SELF_SPEAKER,
    ConversationContext,
    ConversationFlow,
    EmotionalTone,
    ExpectedResponse,
    Message,
    Relationship,
    ResponseKind,
    Tone,
    Urgency,
)

logger = logging.getLogger(__name__)

RECENT_FLOW_WINDOW = 5
RECENT_URGENCY_WINDOW = 3
PROLONGED_AFTER = 20


def classify(
    messages: Sequence[Message],
    current_user_id: str,
    current_user_name: Optional[str] = None,
) -> ConversationContext:
    if not messages:
        logger.debug("classify: empty conversation")
        return ConversationContext.empty()

    tone = detect_tone(messages)
    topics = extract_topics(messages)
    last = messages[-1]

    context = ConversationContext(
        tone=tone,
        relationship=detect_relationship(messages, tone),
        topics=topics,
        emotional_tone=detect_emotional_tone(messages),
        conversation_flow=detect_flow(messages, current_user_id),
        urgency=detect_urgency(messages),
        formality=formality_score(messages),
        conversation_summary=summarize(messages, current_user_id, topics),
        message_count=len(messages),
        last_speaker=SELF_SPEAKER if last.sender_id == current_user_id else last.sender_name,
    )
    logger.debug("classify: %s (user=%s)", context.to_dict(), current_user_name or current_user_id)
    return context


def _transcript(messages: Sequence[Message], lower: bool = True) -> str:
    text = " ".join(m.content for m in messages)
    return text.lower() if lower else text


@lru_cache(maxsize=None)
def _word_pattern(word: str) -> re.Pattern:
    return re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE)


def _count_words(word: str, content: str) -> int:
    return len(_word_pattern(word).findall(content))


def detect_tone(messages: Sequence[Message]) -> Tone:
    content = _transcript(messages)
    formal = sum(_count_words(w, content) for w in lexicon.FORMAL_INDICATORS)
    informal = sum(_count_words(w, content) for w in lexicon.INFORMAL_INDICATORS)
    informal *= lexicon.INFORMAL_WEIGHT

    if formal > informal * lexicon.FORMAL_DOMINANCE:
        return Tone.FORMAL
    if informal > formal:
        return Tone.INFORMAL
    return Tone.NEUTRAL


def detect_relationship(messages: Sequence[Message], tone: Tone) -> Relationship:
    if tone is Tone.FORMAL:
        return Relationship.PROFESSIONAL

    content = _transcript(messages)
    for relationship, pattern in lexicon.RELATIONSHIP_PATTERNS:
        if re.search(pattern, content, re.IGNORECASE):
            return relationship
    return Relationship.FRIEND


def extract_topics(messages: Sequence[Message]) -> tuple[str, ...]:
    # Plain substring match so inflected forms ("projets", "vacances") still hit.
    content = _transcript(messages)
    topics = tuple(
        topic
        for topic, keywords in lexicon.TOPIC_KEYWORDS.items()
        if any(keyword in content for keyword in keywords)
    )
    return topics or (GENERAL_TOPIC,)


def detect_emotional_tone(messages: Sequence[Message]) -> EmotionalTone:
    raw = _transcript(messages, lower=False)
    content = raw.lower()

    positive = sum(content.count(w) for w in lexicon.POSITIVE_WORDS)
    positive += lexicon.EMOJI_WEIGHT * sum(raw.count(e) for e in lexicon.POSITIVE_EMOJIS)
    positive += min(raw.count("!"), lexicon.MAX_EXCLAMATION_BONUS)

    negative = sum(content.count(w) for w in lexicon.NEGATIVE_WORDS)
    negative += lexicon.EMOJI_WEIGHT * sum(raw.count(e) for e in lexicon.NEGATIVE_EMOJIS)

    if positive > negative * lexicon.POSITIVE_DOMINANCE:
        return EmotionalTone.POSITIVE
    if negative > positive:
        return EmotionalTone.NEGATIVE
    return EmotionalTone.NEUTRAL


def detect_flow(messages: Sequence[Message], current_user_id: str) -> ConversationFlow:
    if len(messages) < 2:
        return ConversationFlow.START

    recent = messages[-RECENT_FLOW_WINDOW:]
    questions = sum(1 for m in recent if "?" in m.content)
    mine = sum(1 for m in recent if m.sender_id == current_user_id)

    if questions >= 2:
        return ConversationFlow.QUESTIONING
    if mine >= 3:
        return ConversationFlow.ACTIVE
    if len(messages) > PROLONGED_AFTER:
        return ConversationFlow.PROLONGED
    return ConversationFlow.FLUID


def detect_urgency(messages: Sequence[Message]) -> Urgency:
    content = _transcript(messages[-RECENT_URGENCY_WINDOW:])
    if any(word in content for word in lexicon.HIGH_URGENCY):
        return Urgency.URGENT
    if any(word in content for word in lexicon.LOW_URGENCY):
        return Urgency.LOW
    return Urgency.NORMAL


def formality_score(messages: Sequence[Message]) -> float:
    """Share of distinct formal indicators among all distinct indicators found.

    Returns 0.5 when the transcript carries no register signal at all.
    """
    content = _transcript(messages)
    formal = sum(1 for w in lexicon.FORMAL_INDICATORS if w in content)
    informal = sum(1 for w in lexicon.INFORMAL_INDICATORS if w in content)
    total = formal + informal
    if total == 0:
        return 0.5
    return formal / total


def summarize(
    messages: Sequence[Message],
    current_user_id: str,
    topics: Sequence[str],
) -> str:
    if not messages:
        return ConversationContext.empty().conversation_summary

    count = len(messages)
    summary = next(
        (label for limit, label in lexicon.SUMMARY_BUCKETS if count <= limit),
        lexicon.LONG_DISCUSSION,
    )

    named = [t for t in topics if t != GENERAL_TOPIC][:2]
    if named:
        summary += f" about {' and '.join(named)}"

    others = [m for m in messages if m.sender_id != current_user_id]
    if others:
        last_other = others[-1].content.rstrip()
        if last_other.endswith("?"):
            summary += ", question awaiting reply"
        elif last_other.endswith("!"):
            summary += ", enthusiastic message received"

    return summary


def classify_expected_response(content: str) -> ExpectedResponse:
    """Guess what kind of answer a single incoming message calls for."""
    lower = content.lower()

    if "?" in content:
        for kind, pattern in lexicon.QUESTION_PATTERNS:
            if re.search(pattern, lower, re.IGNORECASE):
                return _expected(kind)
        return _expected(ResponseKind.OPEN)

    if content.rstrip().endswith("!"):
        return _expected(ResponseKind.EXCLAMATION)

    if re.search(lexicon.VALIDATION_PATTERN, lower, re.IGNORECASE):
        return _expected(ResponseKind.VALIDATION)

    return _expected(ResponseKind.AFFIRMATION)


def _expected(kind: ResponseKind) -> ExpectedResponse:
    return ExpectedResponse(kind=kind, description=lexicon.RESPONSE_DESCRIPTIONS[kind])
