"""Data models for the heritage chat assistant."""

from dataclasses import asdict, dataclass, field
from enum import StrEnum
from typing import Any, Literal


class Role(StrEnum):
    """Platform role of the person chatting."""

    VISITOR = "visitor"
    USER = "user"
    MUSEUM_ADMIN = "museumAdmin"
    ADMIN = "admin"
    SUPER_ADMIN = "superAdmin"

    @classmethod
    def parse(cls, value: object) -> "Role":
        """Resolve a raw role value, defaulting to ``VISITOR``.

        Returns:
            The matching role, or ``Role.VISITOR`` for unknown values.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value))
        except ValueError:
            return cls.VISITOR


class SiteDetailKind(StrEnum):
    """Which kind of extra detail a heritage site carries."""

    FEATURES = "features"
    VISIT_INFO = "visit_info"
    HIGHLIGHTS = "highlights"
    ACTIVITIES = "activities"


@dataclass(frozen=True)
class SiteDetail:
    """Optional extra sentence attached to a heritage site."""

    kind: SiteDetailKind
    text: str


@dataclass(frozen=True)
class KnowledgeEntry:
    """Curated answer for a common question."""

    key: str
    answer: str
    suggestions: tuple[str, ...]


@dataclass(frozen=True)
class SiteEntry:
    """Facts about a named heritage site."""

    key: str
    name: str
    description: str
    location: str
    significance: str
    detail: SiteDetail | None = None


@dataclass(frozen=True)
class Reference:
    """Structured pointer attached to a reply."""

    title: str | None = None
    url: str | None = None
    content: str | None = None

    def to_dict(self) -> dict[str, str]:
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass(frozen=True)
class HistoryMessage:
    """A single prior message in a conversation."""

    text: str
    sender: Literal["user", "bot"]


@dataclass
class ChatReply:
    """Reply text with follow-up suggestions and references."""

    text: str
    suggestions: list[str] = field(default_factory=list)
    references: list[str | Reference] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON shape the chat widget renders.

        Returns:
            Mapping with ``text``, ``suggestions`` and ``references`` keys.
        """
        return {
            "text": self.text,
            "suggestions": list(self.suggestions),
            "references": [
                ref.to_dict() if isinstance(ref, Reference) else ref
                for ref in self.references
            ],
        }


@dataclass
class ChatResult:
    """A reply together with where it came from."""

    reply: ChatReply
    source: Literal["knowledge_base", "openai_enhanced", "pattern_based"]
    context: str
    intent: str | None
    confidence: float
    timestamp: str


@dataclass
class ChatInteraction:
    """An archived question and answer for one user."""

    id: int
    user_id: str
    question: str
    answer: str
    source: str
    confidence: float
    suggestions: list[str]
    references: list[Any]
    created_at: str
