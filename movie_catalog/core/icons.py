"""
Emoji icons for movie titles.
"""

from typing import Optional

DEFAULT_ICON = "🎬"

# First matching keyword wins
_KEYWORD_ICONS = (
    ("prison", "⛓️"),
    ("family", "👨‍👩‍👧"),
    ("hero", "🦸"),
    ("dream", "💭"),
    ("space", "🚀"),
    ("star", "⭐"),
    ("life", "🌱"),
    ("wizard", "🧙"),
    ("magic", "🪄"),
    ("ring", "💍"),
    ("underworld", "🕶️"),
    ("city", "🌆"),
    ("ocean", "🌊"),
    ("sea", "🌊"),
    ("laugh", "😂"),
    ("love", "❤️"),
)


def get_movie_icon(movie_name: Optional[str]) -> str:
    """Return an emoji for a movie based on keywords in its name."""
    if not movie_name:
        return DEFAULT_ICON
    lowered = movie_name.lower()
    for keyword, icon in _KEYWORD_ICONS:
        if keyword in lowered:
            return icon
    return DEFAULT_ICON
