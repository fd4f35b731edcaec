"""Per-role chat assistant profiles shown by the chat widget."""

from dataclasses import dataclass
from types import MappingProxyType

from .models import Role


@dataclass(frozen=True)
class Personality:
    tone: str
    style: str
    emoji: bool
    examples: bool
    encouragement: bool


@dataclass(frozen=True)
class ChatProfile:
    """Welcome text, personality and quick actions for one role."""

    role: Role
    welcome_message: str
    personality: Personality
    primary_functions: tuple[str, ...]
    quick_actions: tuple[str, ...]


PERSONALITIES = MappingProxyType({
    "friendly_guide": Personality(
        tone="warm and enthusiastic",
        style="conversational and educational",
        emoji=True,
        examples=True,
        encouragement=True,
    ),
    "professional_assistant": Personality(
        tone="professional and helpful",
        style="clear and instructional",
        emoji=False,
        examples=True,
        encouragement=False,
    ),
    "technical_expert": Personality(
        tone="knowledgeable and precise",
        style="detailed and technical",
        emoji=False,
        examples=True,
        encouragement=False,
    ),
    "strategic_advisor": Personality(
        tone="analytical and insightful",
        style="strategic and comprehensive",
        emoji=False,
        examples=False,
        encouragement=False,
    ),
})

_VISITOR_WELCOME = (
    "Welcome to EthioHeritage360! I'm your virtual heritage guide. Ask me about "
    "Ethiopian cultural sites, tours, virtual museums, or anything related to our "
    "rich heritage. How can I help you today?"
)
_VISITOR_FUNCTIONS = (
    "Heritage site information",
    "Virtual tour guidance",
    "Cultural education",
    "Tour booking assistance",
)
_VISITOR_ACTIONS = (
    "Explore Lalibela churches",
    "Learn about Ethiopian coffee",
    "Take a virtual tour",
    "Find heritage sites",
)

PROFILES = MappingProxyType({
    Role.VISITOR: ChatProfile(
        role=Role.VISITOR,
        welcome_message=_VISITOR_WELCOME,
        personality=PERSONALITIES["friendly_guide"],
        primary_functions=_VISITOR_FUNCTIONS,
        quick_actions=_VISITOR_ACTIONS,
    ),
    Role.USER: ChatProfile(
        role=Role.USER,
        welcome_message=_VISITOR_WELCOME,
        personality=PERSONALITIES["friendly_guide"],
        primary_functions=_VISITOR_FUNCTIONS,
        quick_actions=_VISITOR_ACTIONS,
    ),
    Role.MUSEUM_ADMIN: ChatProfile(
        role=Role.MUSEUM_ADMIN,
        welcome_message=(
            "Hello! I'm here to assist you with museum management, artifact "
            "uploads, visitor analytics, and administrative tasks. What do you "
            "need help with?"
        ),
        personality=PERSONALITIES["professional_assistant"],
        primary_functions=(
            "Artifact management help",
            "Visitor analytics insights",
            "Staff management guidance",
            "Technical support",
        ),
        quick_actions=(
            "Upload artifact guide",
            "View visitor stats",
            "Manage staff roles",
            "System settings help",
        ),
    ),
    Role.ADMIN: ChatProfile(
        role=Role.ADMIN,
        welcome_message=(
            "Greetings, Administrator! I'm your system assistant. I can help with "
            "platform management, user oversight, system analytics, and technical "
            "support."
        ),
        personality=PERSONALITIES["technical_expert"],
        primary_functions=(
            "System administration",
            "User management",
            "Platform analytics",
            "Technical troubleshooting",
        ),
        quick_actions=(
            "System health check",
            "User activity reports",
            "Platform statistics",
            "Technical documentation",
        ),
    ),
    Role.SUPER_ADMIN: ChatProfile(
        role=Role.SUPER_ADMIN,
        welcome_message=(
            "Welcome, Super Administrator! I'm here to assist with high-level "
            "system management, platform oversight, and strategic analytics."
        ),
        personality=PERSONALITIES["strategic_advisor"],
        primary_functions=(
            "Strategic platform insights",
            "System-wide analytics",
            "Advanced administration",
            "Performance optimization",
        ),
        quick_actions=(
            "Platform overview",
            "Performance metrics",
            "System optimization",
            "Strategic insights",
        ),
    ),
})

FALLBACK_MESSAGES = MappingProxyType({
    "error": (
        "I apologize, but I'm having trouble processing your request right now. "
        "Please try again in a moment, or contact our support team."
    ),
    "no_match": (
        "That's an interesting question! While I may not have a specific answer "
        "right now, I'd love to help you explore Ethiopian heritage. I can tell you "
        "about our amazing heritage sites, rich cultural traditions, virtual tours, "
        "and educational resources."
    ),
    "technical_issue": (
        "I'm experiencing a temporary technical issue. Please try asking your "
        "question again, or contact support if the problem persists."
    ),
})


def get_profile(role: object = Role.VISITOR) -> ChatProfile:
    """Return the chat profile for a role, defaulting to the visitor profile."""
    return PROFILES[Role.parse(role)]
