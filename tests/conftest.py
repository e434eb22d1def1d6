import pytest

from app.ai.llm import LLMResponse
from app.ai.models import Message
from app.config import AIConfig


def msg(sender_id: str, content: str, sender_name: str = None) -> Message:
    return Message(
        sender_id=sender_id,
        sender_name=sender_name or sender_id.capitalize(),
        content=content,
    )


class FakeProvider:
    """Scripted completion provider: replays `replies` in order.

    An Exception instance in `replies` is raised instead of returned.
    """

    def __init__(self, replies=None, available=True):
        self.replies = list(replies or [])
        self.available = available
        self.calls = []

    def is_available(self) -> bool:
        return self.available

    async def complete(self, system_prompt, user_prompt, params):
        self.calls.append({
            "system_prompt": system_prompt,
            "user_prompt": user_prompt,
            "params": params,
        })
        reply = self.replies.pop(0) if self.replies else "ok"
        if isinstance(reply, Exception):
            raise reply
        return LLMResponse(
            content=reply,
            model=params.model,
            usage={"total_tokens": 42},
        )


@pytest.fixture
def config():
    return AIConfig(api_key="test-key", model="test-model")


@pytest.fixture
def friends_chat():
    return [
        msg("alice", "Salut, ça va ?"),
        msg("bob", "Ouais tranquille et toi ?"),
    ]


@pytest.fixture
def client_request():
    return [
        msg("client", "Bonjour, pourriez-vous m'envoyer le rapport ?", "M. Durand"),
    ]
