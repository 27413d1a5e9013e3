"""
Mood keyword to style directive resolution.
"""

from typing import Mapping, Optional

from .prompts import DEFAULT_MOOD, MOODS


class ToneResolver:
    """Explicit mood wins, then an inferred one, then the default banter style."""

    def __init__(self, moods: Mapping[str, str] = MOODS, default_mood: str = DEFAULT_MOOD):
        if default_mood not in moods:
            raise ValueError(f"Default mood '{default_mood}' has no style")
        self.moods = dict(moods)
        self.default_mood = default_mood

    def resolve_mood(self, explicit_mood: Optional[str] = None, inferred_mood: Optional[str] = None) -> str:
        """Return the first recognized mood keyword, or the default."""
        for mood in (explicit_mood, inferred_mood):
            if mood and mood.strip().lower() in self.moods:
                return mood.strip().lower()
        return self.default_mood

    def resolve(self, explicit_mood: Optional[str] = None, inferred_mood: Optional[str] = None) -> str:
        """Return the style description for the resolved mood."""
        return self.moods[self.resolve_mood(explicit_mood, inferred_mood)]
