# Copyright (c) 2026 Tyler Martin
# Licensed under FSL-1.1-ALv2 (see LICENSE)
#
# Demo: run the reply-suggestion engine against synthetic conversations.
# Without a provider key only the conversation analysis is printed.
#
# Usage:
#   GROQ_API_KEY=<key> python demo_suggest.py

import asyncio
import os
import sys

# Ensure app is on the path
sys.path.insert(0, os.path.dirname(__file__))

# Strip whitespace/newlines from API key if set via shell env
if "GROQ_API_KEY" in os.environ:
    os.environ["GROQ_API_KEY"] = "".join(os.environ["GROQ_API_KEY"].split())

CONVERSATIONS = [
    {
        "title": "Friends catching up",
        "request": {
            "currentUserId": "bob",
            "currentUserName": "Bob",
            "messages": [
                {"senderId": "alice", "senderName": "Alice", "content": "Salut, ça va ?"},
                {"senderId": "bob", "senderName": "Bob", "content": "Ouais tranquille et toi ?"},
                {"senderId": "alice", "senderName": "Alice", "content": "Super ! On se fait un resto samedi ?"},
            ],
        },
    },
    {
        "title": "Client request",
        "request": {
            "currentUserId": "me",
            "currentUserName": "Camille",
            "messages": [
                {
                    "senderId": "client-42",
                    "senderName": "M. Durand",
                    "content": "Bonjour, pourriez-vous m'envoyer le rapport ?",
                },
            ],
        },
    },
    {
        "title": "Draft improvement",
        "request": {
            "currentUserId": "me",
            "currentUserName": "Léa",
            "draftText": "dsl jpeux pas ce soir, on decale a demain ?",
            "messages": [
                {"senderId": "mum", "senderName": "Maman", "content": "Tu viens dîner ce soir avec papa ?"},
            ],
        },
    },
]


async def main():
    from app.ai.schemas import MultipleSuggestionRequest
    from app.ai.suggestions import SuggestionService
    from app.config import setup_logging

    setup_logging(os.environ.get("LOG_LEVEL", "WARNING"))
    service = SuggestionService()
    status = service.status()

    print("\n" + "═" * 62)
    print("  Reply Suggestion Engine - Demo")
    print(f"  Model: {status['model'] or 'provider not configured'}")
    print("═" * 62)

    for i, convo in enumerate(CONVERSATIONS, 1):
        request = MultipleSuggestionRequest.model_validate(convo["request"])
        params = request.to_params()

        print(f"\n[{i}/{len(CONVERSATIONS)}] {convo['title']} ({params.mode.value})")
        context = service.analyze_conversation(
            params.messages, params.current_user_id, params.current_user_name,
        )
        for key, value in context.to_dict().items():
            print(f"     {key:<22}: {value}")

        if not status["available"]:
            continue

        print("     Calling LLM...", end="", flush=True)
        result = await service.generate_suggestion(params)
        print(" done")
        print(f"     Suggestion : {result.suggestion}")
        print(f"     Time       : {result.metadata.processing_time_ms}ms")

        alternatives = await service.generate_multiple_suggestions(params, request.count)
        for alt in alternatives:
            print(f"       - {alt}")

    print("\n" + "═" * 62)
    if not status["available"]:
        print("  Set GROQ_API_KEY to generate suggestions")
        print("═" * 62)


if __name__ == "__main__":
    asyncio.run(main())
