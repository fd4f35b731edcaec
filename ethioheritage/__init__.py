"""EthioHeritage360 chat assistant."""

from .conversation import ConversationManager
from .history import ChatHistoryStore
from .models import (
    ChatInteraction,
    ChatReply,
    ChatResult,
    HistoryMessage,
    KnowledgeEntry,
    Reference,
    Role,
    SiteDetail,
    SiteDetailKind,
    SiteEntry,
)
from .profiles import get_profile
from .responder import IntentResponder

__all__ = [
    "ChatHistoryStore",
    "ChatInteraction",
    "ChatReply",
    "ChatResult",
    "ConversationManager",
    "HistoryMessage",
    "IntentResponder",
    "KnowledgeEntry",
    "Reference",
    "Role",
    "SiteDetail",
    "SiteDetailKind",
    "SiteEntry",
    "get_profile",
]
