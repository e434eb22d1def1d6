# Copyright (c) 2026 Tyler Martin
# Licensed under FSL-1.1-ALv2 (see LICENSE)

from typing import Optional, Sequence

from app.ai.classifier import classify_expected_response
from app.ai.models import (
    ConversationContext,
    EmotionalTone,
    Message,
    Mode,
    PromptPair,
    Relationship,
    Tone,
    Urgency,
)
from app.ai.prompts import (
    COLLAPSED_CONTEXT_HEADER,
    CONTEXT_LINE,
    EMPTY_CONTEXT,
    IMPROVE_MISSION_TEMPLATE,
    IMPROVE_USER_TEMPLATE,
    LENGTH_HINT_DEFAULT,
    LENGTH_HINT_SHORT,
    PERSONA_TEMPLATE,
    SELF_PREFIX,
    SUGGEST_MISSION_TEMPLATE,
    SUGGEST_REPLY_USER_TEMPLATE,
    SUGGEST_START_USER_TEMPLATE,
    URGENCY_PRINCIPLE,
)

DEFAULT_LANGUAGE = "French"
COLLAPSE_THRESHOLD = 8
RECENT_WINDOW = 6
UNKNOWN_CONTACT = "Contact"

TONE_GUIDELINES = {
    Tone.FORMAL: (
        "- Use polite, professional language",
        "- Avoid abbreviations and familiar language",
        "- Clear structure and complete sentences",
    ),
    Tone.INFORMAL: (
        "- Relaxed, natural language",
        "- Common abbreviations are fine (ok, rdv, etc.)",
        "- Be spontaneous and direct",
    ),
    Tone.NEUTRAL: (
        "- Balance simplicity and politeness",
        "- Friendly but respectful tone",
    ),
}

RELATIONSHIP_GUIDELINES = {
    Relationship.PROFESSIONAL: "- Keep an appropriate professional distance",
    Relationship.COUPLE: "- An affectionate tone is fine if it matches the conversation",
    Relationship.FAMILY: "- Warm, familiar tone",
}

EMOTION_GUIDELINES = {
    EmotionalTone.POSITIVE: "- Keep the positive energy going",
    EmotionalTone.NEGATIVE: "- Show empathy and support",
}


def build_prompts(
    mode: Mode,
    current_user_name: str,
    context: ConversationContext,
    messages: Sequence[Message],
    current_user_id: str,
    draft_text: Optional[str] = None,
    language: str = DEFAULT_LANGUAGE,
) -> PromptPair:
    return PromptPair(
        system_prompt=build_system_prompt(mode, current_user_name, context, language),
        user_prompt=build_user_prompt(
            mode, current_user_name, context, messages, current_user_id, draft_text,
        ),
    )


def build_system_prompt(
    mode: Mode,
    user_name: str,
    context: ConversationContext,
    language: str = DEFAULT_LANGUAGE,
) -> str:
    persona = PERSONA_TEMPLATE.format(
        user_name=user_name,
        tone=context.tone.value,
        relationship=context.relationship.value,
        topics=", ".join(context.topics),
        summary=context.conversation_summary,
        emotional_tone=context.emotional_tone.value,
        flow=context.conversation_flow.value,
        urgency=context.urgency.value,
        formality=round(context.formality * 100),
        message_count=context.message_count,
        last_speaker=context.last_speaker or "nobody yet",
    )

    if mode is Mode.SUGGEST:
        mission = SUGGEST_MISSION_TEMPLATE.format(
            user_name=user_name,
            tone=context.tone.value,
            relationship=context.relationship.value,
            topics=", ".join(context.topics),
            emotional_tone=context.emotional_tone.value,
            flow=context.conversation_flow.value,
            urgency_principle=URGENCY_PRINCIPLE if context.urgency is Urgency.URGENT else "",
            language=language,
            length_hint=LENGTH_HINT_SHORT if context.tone is Tone.INFORMAL else LENGTH_HINT_DEFAULT,
            style_guidelines=style_guidelines(context),
        )
    else:
        mission = IMPROVE_MISSION_TEMPLATE.format(
            user_name=user_name,
            tone=context.tone.value,
            emotional_tone=context.emotional_tone.value,
            language=language,
        )

    return f"{persona}\n\n{mission}"


def style_guidelines(context: ConversationContext) -> str:
    lines = list(TONE_GUIDELINES[context.tone])
    if context.relationship in RELATIONSHIP_GUIDELINES:
        lines.append(RELATIONSHIP_GUIDELINES[context.relationship])
    if context.emotional_tone in EMOTION_GUIDELINES:
        lines.append(EMOTION_GUIDELINES[context.emotional_tone])
    return "\n".join(lines)


def build_structured_context(
    messages: Sequence[Message],
    current_user_id: str,
    current_user_name: str,
) -> str:
    """Render the transcript for the user prompt.

    Long transcripts keep only the last RECENT_WINDOW messages verbatim; the
    older ones are reduced to a per-side message count.
    """
    if not messages:
        return EMPTY_CONTEXT

    lines = []
    recent = messages
    if len(messages) > COLLAPSE_THRESHOLD:
        older = messages[:-RECENT_WINDOW]
        recent = messages[-RECENT_WINDOW:]
        mine = sum(1 for m in older if m.sender_id == current_user_id)
        other_name = next(
            (m.sender_name for m in older if m.sender_id != current_user_id),
            UNKNOWN_CONTACT,
        )
        lines.append(COLLAPSED_CONTEXT_HEADER.format(
            count=len(older),
            mine=mine,
            others=len(older) - mine,
            other_name=other_name,
        ))

    for index, msg in enumerate(recent, 1):
        if msg.sender_id == current_user_id:
            prefix = SELF_PREFIX.format(user_name=current_user_name)
        else:
            prefix = msg.sender_name
        lines.append(CONTEXT_LINE.format(index=index, prefix=prefix, content=msg.content))

    return "\n".join(lines)


def build_user_prompt(
    mode: Mode,
    current_user_name: str,
    context: ConversationContext,
    messages: Sequence[Message],
    current_user_id: str,
    draft_text: Optional[str] = None,
) -> str:
    context_block = build_structured_context(messages, current_user_id, current_user_name)

    if mode is Mode.IMPROVE:
        return IMPROVE_USER_TEMPLATE.format(
            context_block=context_block,
            summary=context.conversation_summary,
            tone=context.tone.value,
            relationship=context.relationship.value,
            emotional_tone=context.emotional_tone.value,
            user_name=current_user_name,
            draft=draft_text or "",
        )

    others = [m for m in messages if m.sender_id != current_user_id]
    if not others:
        return SUGGEST_START_USER_TEMPLATE.format(
            context_block=context_block,
            summary=context.conversation_summary,
            relationship=context.relationship.value,
            tone=context.tone.value,
            emotional_tone=context.emotional_tone.value,
            user_name=current_user_name,
            action="start" if not messages else "relaunch",
        )

    last_other = others[-1]
    expected = classify_expected_response(last_other.content)
    return SUGGEST_REPLY_USER_TEMPLATE.format(
        context_block=context_block,
        summary=context.conversation_summary,
        sender_name=last_other.sender_name,
        last_content=last_other.content,
        expected_description=expected.description,
        expected_kind=expected.kind.value,
        tone=context.tone.value,
        emotional_tone=context.emotional_tone.value,
        message_count=context.message_count,
        topics=", ".join(context.topics),
        flow=context.conversation_flow.value,
        relationship=context.relationship.value,
        urgency=context.urgency.value,
        user_name=current_user_name,
    )
