"""Rule-based heritage chat responder used when no remote model answers."""

import random
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from .config import config
from .knowledge import COMMON_QUESTIONS, GREETING_OPENERS, HERITAGE_SITES
from .models import ChatReply, HistoryMessage, Role

logger = config.get_logger(__name__)

HISTORY_LIMIT = 10

SITE_SUGGESTIONS = (
    "Tell me more about visiting this site",
    "Are there virtual tours available?",
    "What other heritage sites can I explore?",
)


class ChoiceSource(Protocol):
    """Anything that can pick one item from a sequence."""

    def choice(self, seq: Sequence[str]) -> str: ...


@dataclass(frozen=True)
class CannedResponse:
    """Fixed response text and follow-up suggestions."""

    text: str
    suggestions: tuple[str, ...]

    def to_reply(self) -> ChatReply:
        return ChatReply(text=self.text, suggestions=list(self.suggestions))


@dataclass(frozen=True)
class KeywordRule:
    """Substring rule: fires when any keyword appears in the input."""

    keywords: tuple[str, ...]
    response: CannedResponse

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


@dataclass(frozen=True)
class PatternRule:
    """Whole-word rule evaluated with a case-insensitive regex."""

    pattern: re.Pattern[str]
    response: CannedResponse

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


ADMIN_RULES = (
    KeywordRule(
        ("upload", "artifact"),
        CannedResponse(
            "To upload artifacts, navigate to the 'Artifact Management' section in "
            "your dashboard. You can upload images, add descriptions, historical "
            "context, and categorize items. Make sure to include metadata like "
            "date, origin, and cultural significance. Need help with the upload "
            "process?",
            (
                "Show me artifact categories",
                "How to add historical context?",
                "Photo requirements for uploads",
            ),
        ),
    ),
    KeywordRule(
        ("visitor", "analytics"),
        CannedResponse(
            "Your visitor analytics dashboard shows engagement metrics, popular "
            "exhibits, tour bookings, and user feedback. You can track which "
            "artifacts get the most views, peak visiting hours, and visitor "
            "demographics. This helps optimize your museum's digital presence.",
            (
                "Show visitor statistics",
                "Most popular exhibits",
                "How to improve engagement",
            ),
        ),
    ),
    KeywordRule(
        ("staff", "manage"),
        CannedResponse(
            "The staff management system lets you add team members, assign roles, "
            "track activities, and manage permissions. You can create different "
            "access levels for curators, guides, and administrative staff.",
            (
                "How to add new staff?",
                "Role permissions explained",
                "Staff activity monitoring",
            ),
        ),
    ),
)

ADMIN_HELP = CannedResponse(
    "As a museum administrator, I can help you with artifact management, visitor "
    "analytics, staff coordination, virtual exhibit creation, and promotional "
    "activities. What specific area would you like assistance with?",
    (
        "Artifact upload process",
        "Visitor analytics overview",
        "Staff management tools",
    ),
)

VISITOR_RULES = (
    KeywordRule(
        ("tour", "visit"),
        CannedResponse(
            "We offer both virtual and physical tours of Ethiopia's heritage sites. "
            "Virtual tours let you explore from home with 3D experiences, while our "
            "guided physical tours provide in-person cultural immersion. Popular "
            "destinations include Lalibela, Aksum, Gondar, and Harar.",
            (
                "Available virtual tours",
                "Book a guided tour",
                "Tour scheduling and pricing",
            ),
        ),
    ),
    KeywordRule(
        ("learn", "course", "education"),
        CannedResponse(
            "Our educational platform offers courses on Ethiopian history, culture, "
            "archaeology, and languages. You can earn certificates, participate in "
            "interactive lessons, and join study groups. Courses range from "
            "beginner introductions to advanced cultural studies.",
            (
                "Browse available courses",
                "How to enroll in programs?",
                "Certificate requirements",
            ),
        ),
    ),
    KeywordRule(
        ("artifact", "museum", "collection"),
        CannedResponse(
            "Our virtual museum houses thousands of Ethiopian artifacts including "
            "ancient manuscripts, religious items, traditional crafts, "
            "archaeological finds, and cultural objects. Each item includes "
            "detailed descriptions, historical context, and high-resolution "
            "imagery.",
            (
                "Browse artifact collections",
                "Search for specific items",
                "Create personal favorites",
            ),
        ),
    ),
)

VISITOR_HELP = CannedResponse(
    "I'm here to help you discover Ethiopian heritage! You can explore virtual "
    "museums, take guided tours, learn about our rich culture and history, or plan "
    "visits to heritage sites. What interests you most?",
    (
        "Explore heritage sites",
        "Start a virtual tour",
        "Learn about Ethiopian culture",
    ),
)

GREETING_PATTERN = re.compile(r"\b(hi|hello|hey|greetings)\b", re.IGNORECASE)
GREETING_FOLLOW_UP = (
    "I can help you learn about Ethiopian heritage sites, plan tours, explore our "
    "virtual museum, or navigate the platform. What would you like to discover?"
)
GREETING_SUGGESTIONS = (
    "Tell me about Ethiopian heritage sites",
    "How do virtual tours work?",
    "What can I learn here?",
)

GENERAL_RULES = (
    PatternRule(
        re.compile(r"\b(help|assist|guide|how)\b", re.IGNORECASE),
        CannedResponse(
            "I'm here to guide you through EthioHeritage360! I can provide "
            "information about Ethiopian culture, heritage sites, virtual tours, "
            "educational programs, and help you navigate the platform. What "
            "specific help do you need?",
            (
                "Platform navigation help",
                "Ethiopian heritage information",
                "Technical support",
            ),
        ),
    ),
    PatternRule(
        re.compile(
            r"\b(culture|tradition|custom|festival|food|music|dance)\b",
            re.IGNORECASE,
        ),
        CannedResponse(
            "Ethiopian culture is incredibly rich and diverse! We have unique "
            "traditions like the coffee ceremony, colorful festivals like Timkat "
            "and Meskel, traditional music and dance, diverse cuisines, and over "
            "80 ethnic groups each with their own customs. What aspect of "
            "Ethiopian culture interests you most?",
            (
                "Tell me about Ethiopian festivals",
                "Traditional Ethiopian food",
                "Ethiopian music and dance",
            ),
        ),
    ),
    PatternRule(
        re.compile(r"\b(history|ancient|kingdom|empire|past)\b", re.IGNORECASE),
        CannedResponse(
            "Ethiopia has one of the longest and most fascinating histories in the "
            "world! From the ancient Kingdom of Aksum to the medieval Zagwe "
            "dynasty, from the powerful Ethiopian Empire to modern times. We're "
            "home to Lucy, one of humanity's earliest ancestors, and have never "
            "been fully colonized. What period of Ethiopian history would you "
            "like to explore?",
            (
                "Ancient Kingdom of Aksum",
                "Medieval Ethiopian history",
                "Modern Ethiopian development",
            ),
        ),
    ),
)

FALLBACK = CannedResponse(
    "That's an interesting question! While I may not have a specific answer right "
    "now, I'd love to help you explore Ethiopian heritage. I can tell you about "
    "our amazing heritage sites, rich cultural traditions, virtual tours, and "
    "educational resources.",
    (
        "Explore heritage sites like Lalibela",
        "Learn about Ethiopian coffee culture",
        "Take a virtual museum tour",
    ),
)


class IntentResponder:
    """Maps free-text input and a role to a canned heritage reply.

    Matching runs in a fixed order and the first stage that matches wins:
    curated questions, heritage sites, role-scoped rules, general categories
    and finally a fixed fallback. Every call is independent; the only varying
    input is the ``rng`` used to pick a greeting opener.
    """

    def __init__(self, rng: ChoiceSource | None = None) -> None:
        """Initialize the responder.

        Args:
            rng: Source used to pick greeting openers. Pass a seeded
                ``random.Random`` for reproducible greetings.
        """
        self.rng: ChoiceSource = rng or random.Random()

    def respond(
        self,
        user_input: object,
        role: object = Role.VISITOR,
        history: Iterable[HistoryMessage] | None = None,
    ) -> ChatReply:
        """Build a reply for a user message.

        Returns:
            ChatReply with non-empty text and list-valued suggestions and
            references.
        """
        text = self._normalize(user_input)
        resolved_role = Role.parse(role)
        try:
            recent = list(history or ())[-HISTORY_LIMIT:]
        except TypeError:
            recent = []
        logger.debug(
            "Responding as %s with %d history messages", resolved_role, len(recent)
        )

        reply = self.find_direct_answer(text)
        if reply is not None:
            return reply

        reply = self._role_reply(text, resolved_role)
        if reply is not None:
            return reply

        return self._general_reply(text)

    def find_direct_answer(self, user_input: object) -> ChatReply | None:
        """Match curated questions, then heritage sites.

        Returns:
            ChatReply for the first matching entry, or None.
        """
        text = self._normalize(user_input)

        for key, entry in COMMON_QUESTIONS.items():
            if key in text or any(word in text for word in key.split()):
                return ChatReply(text=entry.answer, suggestions=list(entry.suggestions))

        for key, site in HERITAGE_SITES.items():
            if key in text or site.name.lower() in text:
                extra = site.detail.text if site.detail is not None else ""
                return ChatReply(
                    text=(
                        f"{site.name} is {site.description}. Located in "
                        f"{site.location}, it's significant because "
                        f"{site.significance}. {extra}"
                    ),
                    suggestions=list(SITE_SUGGESTIONS),
                )

        return None

    @staticmethod
    def _normalize(user_input: object) -> str:
        if user_input is None:
            return ""
        return str(user_input).lower()

    @staticmethod
    def _role_reply(text: str, role: Role) -> ChatReply | None:
        if role is Role.MUSEUM_ADMIN:
            for rule in ADMIN_RULES:
                if rule.matches(text):
                    return rule.response.to_reply()
            return ADMIN_HELP.to_reply()

        if role in {Role.USER, Role.VISITOR}:
            for rule in VISITOR_RULES:
                if rule.matches(text):
                    return rule.response.to_reply()
            if role is Role.USER:
                return VISITOR_HELP.to_reply()

        return None

    def _general_reply(self, text: str) -> ChatReply:
        if GREETING_PATTERN.search(text):
            opener = self.rng.choice(GREETING_OPENERS)
            return ChatReply(
                text=f"{opener} {GREETING_FOLLOW_UP}",
                suggestions=list(GREETING_SUGGESTIONS),
            )

        for rule in GENERAL_RULES:
            if rule.matches(text):
                return rule.response.to_reply()

        return FALLBACK.to_reply()
