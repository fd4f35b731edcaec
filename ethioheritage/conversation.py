"""Conversation management: remote model first, local responder as fallback."""

import datetime
import sqlite3
from typing import Any, Literal

from openai import OpenAI, OpenAIError

from .config import config
from .context import (
    GENERAL_CONTEXT,
    analyze_response,
    contextual_suggestions,
    detect_platform_context,
)
from .history import ChatHistoryStore
from .knowledge import CULTURE_FACTS, HERITAGE_SITES, PLATFORM_FEATURES
from .models import ChatReply, ChatResult, HistoryMessage, Role
from .responder import IntentResponder

logger = config.get_logger(__name__)

Source = Literal["knowledge_base", "openai_enhanced", "pattern_based"]

KNOWLEDGE_BASE_CONFIDENCE = 1.0
PATTERN_CONFIDENCE = 0.5

TOPIC_KEYWORDS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("lalibela", "church"), "Lalibela Churches"),
    (("coffee",), "Ethiopian Coffee"),
    (("tour",), "Tours"),
    (("museum",), "Museums"),
    (("artifact",), "Artifacts"),
)

CONTEXT_PROMPTS: dict[str, str] = {
    "museum_exploration": (
        "User is exploring virtual museums and artifact collections."
    ),
    "artifact_viewing": (
        "User is viewing specific artifacts and learning about their history."
    ),
    "tour_booking": "User is interested in booking tours or travel experiences.",
    "virtual_tour": (
        "User is taking or interested in virtual tours of heritage sites."
    ),
    "learning": "User is engaged with educational content and learning modules.",
    "admin_overview": "Museum administrator viewing dashboard and analytics.",
    "artifact_management": (
        "Museum administrator managing artifact uploads and curation."
    ),
    "visitor_analytics": (
        "Museum administrator reviewing visitor statistics and engagement."
    ),
    "staff_management": (
        "Museum administrator handling staff coordination and roles."
    ),
}

ROLE_PROMPTS: dict[Role, str] = {
    Role.MUSEUM_ADMIN: (
        "Museum administrator who needs help with platform management, staff "
        "coordination, visitor analytics, and artifact curation."
    ),
    Role.USER: (
        "Registered user interested in Ethiopian culture, heritage tours, and "
        "educational content."
    ),
    Role.VISITOR: (
        "General visitor exploring the platform and learning about Ethiopian "
        "heritage."
    ),
}


class ConversationManager:
    """Answers chat messages and keeps a short rolling history."""

    def __init__(
        self,
        responder: IntentResponder | None = None,
        openai_api_key: str | None = None,
        history_store: ChatHistoryStore | None = None,
    ) -> None:
        """Initialize ConversationManager.

        Args:
            responder: Local rule-based responder. A new one is created if None.
            openai_api_key: OpenAI API key. If None, reads OPENAI_API_KEY.
            history_store: Optional archive for signed-in users' interactions.
        """
        self.responder = responder or IntentResponder()
        self.history_store = history_store
        api_key = openai_api_key or config.get_openai_api_key()
        default_headers = config.get_api_headers()
        self.client = OpenAI(
            api_key=api_key,
            base_url=config.OPENAI_BASE_URL,
            default_headers=default_headers or None,
        )
        self.remote_enabled = config.REMOTE_CHAT_ENABLED and bool(api_key)
        self.conversation_history: list[HistoryMessage] = []
        self.max_history_messages = config.HISTORY_WINDOW

    @staticmethod
    def build_system_prompt(context: str, role: object = Role.VISITOR) -> str:
        """Build the system prompt describing the platform, page and role.

        Returns:
            str: System prompt for the remote chat model.
        """
        sites = ", ".join(
            f"{site.key.capitalize()} ({site.name})" for site in HERITAGE_SITES.values()
        )
        facts = "\n".join(
            f"- {fact}"
            for topic in CULTURE_FACTS.values()
            for fact in topic.values()
        )
        features = "\n".join(f"- {feature}" for feature in PLATFORM_FEATURES.values())

        prompt = (
            "You are an intelligent assistant for EthioHeritage360, a platform "
            "dedicated to Ethiopian cultural heritage preservation and education. "
            "You are knowledgeable, culturally respectful, and enthusiastic about "
            "Ethiopian history, culture, and heritage sites.\n\n"
            f"Ethiopian heritage sites: {sites}\n\n"
            f"Key Information:\n{facts}\n\n"
            f"Platform Features:\n{features}"
        )

        if context in CONTEXT_PROMPTS:
            prompt += f"\n\nCurrent Context: {CONTEXT_PROMPTS[context]}"

        resolved_role = Role.parse(role)
        role_prompt = ROLE_PROMPTS.get(resolved_role, ROLE_PROMPTS[Role.VISITOR])
        prompt += f"\n\nUser Role: {role_prompt}"

        return prompt + (
            "\n\nAlways provide helpful, accurate, and culturally respectful "
            "responses. Include practical suggestions for user actions."
        )

    def build_messages(
        self, user_input: str, context: str, role: object = Role.VISITOR
    ) -> list[dict[str, str]]:
        """Assemble chat-completion messages from the prompt and recent history.

        Returns:
            list[dict[str, str]]: System prompt, prior turns and the new message.
        """
        messages = [
            {"role": "system", "content": self.build_system_prompt(context, role)}
        ]
        for message in self.conversation_history[-config.PROMPT_HISTORY_MESSAGES :]:
            messages.append({
                "role": "user" if message.sender == "user" else "assistant",
                "content": message.text,
            })
        messages.append({"role": "user", "content": user_input})
        return messages

    def get_remote_reply(
        self, user_input: str, context: str, role: object = Role.VISITOR
    ) -> ChatReply | None:
        """Ask the remote chat model for a reply.

        Returns:
            ChatReply from the model, or None if remote chat is disabled,
            the request fails, or the model returns no content.
        """
        if not self.remote_enabled:
            return None

        try:
            response = self.client.chat.completions.create(
                model=config.CHAT_MODEL,
                messages=self.build_messages(user_input, context, role),
                max_tokens=config.CHAT_MAX_TOKENS,
                temperature=config.CHAT_TEMPERATURE,
                presence_penalty=config.CHAT_PRESENCE_PENALTY,
                frequency_penalty=config.CHAT_FREQUENCY_PENALTY,
            )
        except OpenAIError:
            logger.exception("Remote chat request failed; using local responder")
            return None

        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            logger.warning("Remote chat returned an empty reply")
            return None

        return ChatReply(
            text=content.strip(),
            suggestions=contextual_suggestions(context, role),
        )

    def answer(
        self,
        user_input: str,
        *,
        role: object = Role.VISITOR,
        path: str | None = None,
        context: str | None = None,
        user_id: str | None = None,
    ) -> ChatResult:
        """Answer a chat message.

        Curated knowledge is returned directly; otherwise the remote model is
        tried and the rule-based responder covers any failure.

        Raises:
            ValueError: If the message is empty.

        Returns:
            ChatResult: The reply with its source, context, intent and confidence.
        """
        message = (user_input or "").strip()
        if not message:
            msg = "Message is required"
            raise ValueError(msg)

        if len(message) > config.MESSAGE_MAX_LENGTH:
            logger.warning(
                "Truncating message from %d to %d characters",
                len(message),
                config.MESSAGE_MAX_LENGTH,
            )
            message = message[: config.MESSAGE_MAX_LENGTH]

        resolved_role = Role.parse(role)
        resolved_context = context or detect_platform_context(path)
        logger.info(
            "Processing message (role=%s, context=%s)", resolved_role, resolved_context
        )

        result = self._knowledge_result(message, resolved_context)
        if result is None:
            result = self._remote_result(message, resolved_context, resolved_role)
        if result is None:
            reply = self.responder.respond(
                message, resolved_role, self.conversation_history
            )
            result = self._build_result(
                reply, "pattern_based", resolved_context, None, PATTERN_CONFIDENCE
            )

        self._remember("user", message)
        self._remember("bot", result.reply.text)
        logger.info("Answered from %s", result.source)

        if user_id and self.history_store is not None:
            try:
                self.history_store.save_interaction(user_id, message, result)
            except sqlite3.Error as e:
                logger.warning("Failed to save chat interaction: %s", e)

        return result

    def _knowledge_result(self, message: str, context: str) -> ChatResult | None:
        reply = self.responder.find_direct_answer(message)
        if reply is None:
            return None
        return self._build_result(
            reply, "knowledge_base", context, "informational", KNOWLEDGE_BASE_CONFIDENCE
        )

    def _remote_result(
        self, message: str, context: str, role: Role
    ) -> ChatResult | None:
        reply = self.get_remote_reply(message, context, role)
        if reply is None:
            return None
        analysis = analyze_response(reply.text, context)
        return self._build_result(
            reply, "openai_enhanced", context, analysis.intent, analysis.confidence
        )

    @staticmethod
    def _build_result(
        reply: ChatReply,
        source: Source,
        context: str,
        intent: str | None,
        confidence: float,
    ) -> ChatResult:
        return ChatResult(
            reply=reply,
            source=source,
            context=context or GENERAL_CONTEXT,
            intent=intent,
            confidence=confidence,
            timestamp=datetime.datetime.now(tz=datetime.UTC).isoformat(),
        )

    def _remember(self, sender: Literal["user", "bot"], text: str) -> None:
        self.conversation_history.append(HistoryMessage(text=text, sender=sender))
        if len(self.conversation_history) > self.max_history_messages:
            self.conversation_history = self.conversation_history[
                -self.max_history_messages :
            ]

    def conversation_summary(self) -> dict[str, Any] | None:
        """Summarize the recent conversation.

        Returns:
            dict[str, Any] | None: Message count, recent topics and the last
                message, or None when there is no history.
        """
        if not self.conversation_history:
            return None

        recent = self.conversation_history[-4:]
        topics: list[str] = []
        for message in recent:
            if message.sender != "user":
                continue
            content = message.text.lower()
            for keywords, topic in TOPIC_KEYWORDS:
                if any(keyword in content for keyword in keywords):
                    topics.append(topic)

        return {
            "message_count": len(self.conversation_history),
            "recent_topics": list(dict.fromkeys(topics)),
            "last_message": recent[-1],
        }

    def clear_history(self) -> None:
        """Clear the conversation history."""
        self.conversation_history = []
        logger.info("Conversation history cleared.")
