"""Platform context detection and keyword analysis of model replies."""

from dataclasses import dataclass

from .models import Role

GENERAL_CONTEXT = "general"
MAX_REMOTE_SUGGESTIONS = 4

PLATFORM_CONTEXTS: dict[str, str] = {
    "/museums": "museum_exploration",
    "/artifacts": "artifact_viewing",
    "/tours": "tour_booking",
    "/virtual-tours": "virtual_tour",
    "/education": "learning",
    "/admin/dashboard": "admin_overview",
    "/admin/artifacts": "artifact_management",
    "/admin/visitors": "visitor_analytics",
    "/admin/staff": "staff_management",
    "/profile": "user_profile",
    "/booking": "tour_booking",
}

CONTEXT_SUGGESTIONS: dict[str, tuple[str, ...]] = {
    "museum_exploration": (
        "Browse artifact collections",
        "Learn about artifact history",
        "Search for specific items",
    ),
    "artifact_viewing": (
        "View related artifacts",
        "Learn more about this period",
        "Save to favorites",
    ),
    "tour_booking": (
        "Available virtual tours",
        "Book physical tours",
        "Check tour schedules",
    ),
    "virtual_tour": (
        "Start 3D heritage tour",
        "Navigate to different sites",
        "Access tour guides",
    ),
    "learning": (
        "Browse courses available",
        "Track learning progress",
        "Join study groups",
    ),
    "admin_overview": (
        "View visitor analytics",
        "Manage artifacts",
        "Staff coordination",
    ),
    "artifact_management": (
        "Upload new artifacts",
        "Edit descriptions",
        "Organize collections",
    ),
    "visitor_analytics": (
        "View engagement metrics",
        "Popular content analysis",
        "Export reports",
    ),
}

DEFAULT_SUGGESTIONS = (
    "Tell me about Ethiopian heritage",
    "How do I use this platform?",
    "Contact support",
)

ROLE_SUGGESTIONS: dict[Role, tuple[str, ...]] = {
    Role.MUSEUM_ADMIN: (
        "Help with platform management",
        "Staff coordination tips",
    ),
    Role.USER: (
        "Explore more heritage sites",
        "Join cultural discussions",
    ),
}


@dataclass(frozen=True)
class ResponseAnalysis:
    """Intent detected in a model reply and how sure the keyword match is."""

    intent: str
    confidence: float


def detect_platform_context(path: str | None) -> str:
    """Map a page path to the platform context it belongs to.

    Exact routes win, then routes appearing anywhere in the path, then broad
    keyword rules.

    Returns:
        Context name, or ``"general"`` when nothing matches.
    """
    if not path:
        return GENERAL_CONTEXT

    if path in PLATFORM_CONTEXTS:
        return PLATFORM_CONTEXTS[path]

    for route, context in PLATFORM_CONTEXTS.items():
        if route.replace("/", "", 1) in path:
            return context

    if "admin" in path:
        return "admin_overview"
    if "museum" in path:
        return "museum_exploration"
    if "tour" in path:
        return "tour_booking"
    if "learn" in path or "education" in path:
        return "learning"
    return GENERAL_CONTEXT


def contextual_suggestions(context: str, role: object = Role.VISITOR) -> list[str]:
    """Suggestions for a remote-model reply given the page and role.

    Returns:
        At most ``MAX_REMOTE_SUGGESTIONS`` suggestion strings.
    """
    suggestions = list(CONTEXT_SUGGESTIONS.get(context, DEFAULT_SUGGESTIONS))
    suggestions.extend(ROLE_SUGGESTIONS.get(Role.parse(role), ()))
    return suggestions[:MAX_REMOTE_SUGGESTIONS]


def analyze_response(text: str, context: str) -> ResponseAnalysis:
    """Classify a model reply by keyword.

    Returns:
        The detected intent and a confidence score.
    """
    lowered = text.lower()

    if any(word in lowered for word in ("book", "reserve", "schedule")):
        return ResponseAnalysis("booking", 0.85)
    if any(word in lowered for word in ("learn", "course", "study")):
        return ResponseAnalysis("educational", 0.85)
    if any(word in lowered for word in ("tour", "visit", "explore")):
        return ResponseAnalysis("navigation", 0.9)
    if any(word in lowered for word in ("help", "support", "assistance")):
        return ResponseAnalysis("support", 0.95)
    if "admin" in context:
        return ResponseAnalysis("administrative", 0.8)
    return ResponseAnalysis("informational", 0.8)
