"""Test configuration and fixtures for the heritage chat assistant tests.

This module provides reusable test fixtures organized by functionality:
- Constants and test data
- Mock OpenAI chat responses
- Responder fixtures with deterministic greeting selection
- Conversation manager and chat archive fixtures
"""

import random
from contextlib import contextmanager
from unittest.mock import Mock, patch

import pytest

from ethioheritage import (
    ChatHistoryStore,
    ChatReply,
    ChatResult,
    ConversationManager,
    HistoryMessage,
    IntentResponder,
)
from ethioheritage.knowledge import GREETING_OPENERS


class TestConstants:
    """Centralized test constants to avoid repetition across test files."""

    TEST_API_KEY = "test-key"
    RNG_SEED = 1234
    SMALL_ARCHIVE_LIMIT = 3


class FixedChoice:
    """Choice source that always returns the item at a fixed index."""

    def __init__(self, index: int = 0) -> None:
        self.index = index
        self.calls = 0

    def choice(self, seq):  # noqa: ANN001, ANN201
        self.calls += 1
        return seq[self.index]


def create_mock_chat_response(content: str | None) -> Mock:
    """Create a mock OpenAI chat completion response.

    Args:
        content: The content for the chat completion response.

    Returns:
        Mock object representing OpenAI chat completion response.
    """
    mock_response = Mock()
    mock_response.choices = [Mock(message=Mock(content=content))]
    return mock_response


@pytest.fixture
def responder():
    """Responder with a seeded random source."""
    return IntentResponder(rng=random.Random(TestConstants.RNG_SEED))


@pytest.fixture
def fixed_choice():
    return FixedChoice(index=1)


@pytest.fixture
def fixed_responder(fixed_choice):
    """Responder that always picks the second greeting opener."""
    return IntentResponder(rng=fixed_choice)


@pytest.fixture(scope="session")
def greeting_openers():
    return GREETING_OPENERS


@pytest.fixture
def sample_history():
    """Twelve alternating messages, more than the responder looks at."""
    return [
        HistoryMessage(text=f"message {i}", sender="user" if i % 2 == 0 else "bot")
        for i in range(12)
    ]


@pytest.fixture
def temp_history_store(tmp_path) -> ChatHistoryStore:
    """Create temporary SQLite chat archive for testing."""
    return ChatHistoryStore(tmp_path / "chat_history.db")


@pytest.fixture
def small_history_store(tmp_path) -> ChatHistoryStore:
    """Chat archive that keeps only a few interactions per user."""
    return ChatHistoryStore(
        tmp_path / "small_history.db",
        archive_limit=TestConstants.SMALL_ARCHIVE_LIMIT,
    )


@pytest.fixture
def chat_result_factory():
    """Factory for ChatResult objects used to populate the archive."""

    def _create_result(
        text: str = "Test answer",
        source: str = "pattern_based",
        suggestions: list[str] | None = None,
        references: list | None = None,
        confidence: float = 0.5,
    ) -> ChatResult:
        return ChatResult(
            reply=ChatReply(
                text=text,
                suggestions=suggestions or [],
                references=references or [],
            ),
            source=source,
            context="general",
            intent=None,
            confidence=confidence,
            timestamp=None,
        )

    return _create_result


@pytest.fixture
def conversation_manager(fixed_responder):
    """ConversationManager with remote chat disabled."""
    manager = ConversationManager(
        responder=fixed_responder,
        openai_api_key=TestConstants.TEST_API_KEY,
    )
    manager.remote_enabled = False
    return manager


@pytest.fixture
def remote_conversation_manager(fixed_responder):
    """ConversationManager with remote chat enabled and the API mocked."""
    manager = ConversationManager(
        responder=fixed_responder,
        openai_api_key=TestConstants.TEST_API_KEY,
    )
    manager.remote_enabled = True
    with patch.object(
        manager.client.chat.completions,
        "create",
        return_value=create_mock_chat_response("Test response"),
    ):
        yield manager


@pytest.fixture
def conversation_manager_chat_mock_factory():
    """Factory mock fixture for ConversationManager's client.chat.completions.create."""

    @contextmanager
    def _mock_conversation_manager_chat(  # noqa: ANN202
        conversation_manager, content: str | None = "Test response", side_effect=None
    ):
        with patch.object(
            conversation_manager.client.chat.completions,
            "create",
        ) as mock_create:
            if side_effect is not None:
                mock_create.side_effect = side_effect
                mock_create.return_value = None
            else:
                mock_create.side_effect = None
                mock_create.return_value = create_mock_chat_response(content)
            yield mock_create

    return _mock_conversation_manager_chat
