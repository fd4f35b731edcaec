"""Static Ethiopian heritage knowledge shared by every chat session.

All tables are read-only mappings built at import time.
"""

from types import MappingProxyType

from .models import KnowledgeEntry, SiteDetail, SiteDetailKind, SiteEntry

_COMMON_QUESTIONS = (
    KnowledgeEntry(
        key="what is lalibela",
        answer=(
            "Lalibela is home to 11 remarkable rock-hewn churches carved directly "
            "into the bedrock in the 12th century. These churches are still active "
            "places of worship and represent one of the world's greatest "
            "architectural achievements. The site is designed to represent 'New "
            "Jerusalem' and attracts pilgrims from around the world, especially "
            "during Timkat (Ethiopian Orthodox Epiphany)."
        ),
        suggestions=(
            "Tell me about other UNESCO sites",
            "How can I take a virtual tour?",
            "What makes the churches unique?",
        ),
    ),
    KnowledgeEntry(
        key="ethiopian coffee",
        answer=(
            "Ethiopia is the birthplace of coffee! Legend says a goat herder named "
            "Kaldi discovered coffee when his goats became energetic after eating "
            "certain berries. The traditional Ethiopian coffee ceremony involves "
            "roasting green beans, grinding them by hand, and brewing in a clay pot "
            "called a jebena. It's a social ritual that can take hours and "
            "represents hospitality, community, and spiritual connection."
        ),
        suggestions=(
            "Tell me about coffee regions",
            "How to participate in a coffee ceremony?",
            "Coffee tours available?",
        ),
    ),
    KnowledgeEntry(
        key="virtual tours",
        answer=(
            "Our virtual tours use advanced 3D technology to let you explore "
            "Ethiopian heritage sites from anywhere in the world. You can walk "
            "through Lalibela's churches, climb Aksum's stelae, and explore "
            "Gondar's castles. Each tour includes expert narration, historical "
            "context, and interactive elements. Some tours also offer AR features "
            "when you visit the actual sites."
        ),
        suggestions=(
            "Which tours are available?",
            "How do I start a virtual tour?",
            "Can I book group tours?",
        ),
    ),
    KnowledgeEntry(
        key="timkat festival",
        answer=(
            "Timkat is the Ethiopian Orthodox celebration of Epiphany, usually held "
            "in January. It commemorates the baptism of Jesus Christ in the Jordan "
            "River. The celebration involves processions, blessing of waters, and "
            "renewal of baptismal vows. The Timkat celebration in Lalibela and "
            "Gondar are particularly spectacular, with thousands of pilgrims and "
            "colorful ceremonies."
        ),
        suggestions=(
            "When is Timkat celebrated?",
            "Where to experience Timkat?",
            "Other Ethiopian festivals?",
        ),
    ),
)

_HERITAGE_SITES = (
    SiteEntry(
        key="lalibela",
        name="Lalibela Rock Churches",
        description="UNESCO World Heritage site featuring 11 medieval rock-hewn churches",
        location="Lalibela, Amhara Region",
        significance="Symbol of Ethiopia's Christian heritage and architectural marvel",
        detail=SiteDetail(
            SiteDetailKind.VISIT_INFO,
            "Available for virtual tours and educational programs",
        ),
    ),
    SiteEntry(
        key="aksum",
        name="Aksum Archaeological Site",
        description="Ancient capital of the Kingdom of Aksum with towering obelisks",
        location="Axum, Tigray Region",
        significance="Birthplace of Ethiopian civilization and Christianity",
        detail=SiteDetail(
            SiteDetailKind.FEATURES,
            "Stelae fields, royal tombs, Church of St. Mary of Zion",
        ),
    ),
    SiteEntry(
        key="gondar",
        name="Gondar Royal Enclosure",
        description="17th-century royal city with castles and palaces",
        location="Gondar, Amhara Region",
        significance="Former capital of Ethiopian Empire, architectural fusion",
        detail=SiteDetail(
            SiteDetailKind.HIGHLIGHTS,
            "Fasil Ghebbi fortress, Debre Berhan Selassie Church",
        ),
    ),
    SiteEntry(
        key="harar",
        name="Harar Jugol",
        description=(
            "Historic fortified city, considered the fourth holiest city of Islam"
        ),
        location="Harari Region",
        significance="Cultural crossroads, unique architecture and traditions",
        detail=SiteDetail(
            SiteDetailKind.FEATURES,
            "Ancient city walls, 82 mosques, traditional Harari houses",
        ),
    ),
    SiteEntry(
        key="simien",
        name="Simien Mountains National Park",
        description="Dramatic mountain landscape with endemic wildlife",
        location="Amhara Region",
        significance="Home to Gelada baboons, Walia ibex, and Ethiopian wolf",
        detail=SiteDetail(
            SiteDetailKind.ACTIVITIES,
            "Trekking, wildlife viewing, cultural encounters",
        ),
    ),
)

COMMON_QUESTIONS: MappingProxyType[str, KnowledgeEntry] = MappingProxyType({
    entry.key: entry for entry in _COMMON_QUESTIONS
})

HERITAGE_SITES: MappingProxyType[str, SiteEntry] = MappingProxyType({
    site.key: site for site in _HERITAGE_SITES
})

CULTURE_FACTS: MappingProxyType[str, MappingProxyType[str, str]] = MappingProxyType({
    "coffee": MappingProxyType({
        "origin": "Ethiopia is the birthplace of coffee",
        "ceremony": "Traditional coffee ceremony is a social and spiritual ritual",
        "regions": "Sidamo, Yirgacheffe, and Harrar are famous coffee regions",
        "significance": "Coffee (buna) is central to Ethiopian social life",
    }),
    "calendar": MappingProxyType({
        "system": "Ethiopian calendar has 13 months",
        "new_year": "Enkutatash celebrated in September",
        "difference": "7-8 years behind the Gregorian calendar",
    }),
    "languages": MappingProxyType({
        "official": "Amharic is the official language",
        "diversity": "Over 80 languages spoken",
        "script": "Ge'ez script used for Amharic and other languages",
        "ancient": "Ge'ez is an ancient liturgical language",
    }),
    "religion": MappingProxyType({
        "orthodox": "Ethiopian Orthodox Christianity since 4th century",
        "islam": "Islam has deep historical roots",
        "diversity": "Religious tolerance and coexistence",
        "festivals": "Timkat, Meskel, Eid celebrations",
    }),
})

PLATFORM_FEATURES: MappingProxyType[str, str] = MappingProxyType({
    "virtual_tours": "Immersive 3D tours of heritage sites",
    "interactive_map": "Explore locations with detailed information",
    "artifacts": "Digital museum with historical artifacts",
    "education": "Learning modules and cultural courses",
    "booking": "Reserve guided tours and experiences",
})

GREETING_OPENERS: tuple[str, ...] = (
    "Hello! I'm excited to help you explore Ethiopian heritage.",
    "Welcome! Ready to discover the wonders of Ethiopia?",
    "Hi there! Let's journey through Ethiopia's rich cultural landscape.",
)
