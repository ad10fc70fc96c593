"""
Mock content generator for posts.

Placeholder for a real text model: picks an adjective for the mood and
fills a fixed template.
"""
import random
from typing import Dict, List

MOOD_ADJECTIVES: Dict[str, List[str]] = {
    "happy": ["joyful", "exciting", "wonderful", "amazing"],
    "sad": ["melancholic", "thoughtful", "reflective", "poignant"],
    "excited": ["thrilling", "energetic", "dynamic", "vibrant"],
    "calm": ["peaceful", "serene", "tranquil", "soothing"],
    "angry": ["intense", "passionate", "powerful", "bold"],
}

DEFAULT_ADJECTIVE = "interesting"

POST_TEMPLATE = (
    "This is a {adjective} post about {topic}. The mood here is {mood}, "
    "and there's so much to explore about this topic. {topic} has always "
    "been fascinating, and when viewed through a {mood} lens, it becomes "
    "even more compelling. What are your thoughts on {topic}?"
)


def pick_adjective(mood: str, rng: random.Random = None) -> str:
    """Pick a random adjective for the mood, or the default for unknown moods."""
    adjectives = MOOD_ADJECTIVES.get(mood)
    if not adjectives:
        return DEFAULT_ADJECTIVE
    return (rng or random).choice(adjectives)


def generate_post_content(topic: str, mood: str, rng: random.Random = None) -> str:
    """Generate post body text for a topic and mood."""
    adjective = pick_adjective(mood, rng)
    return POST_TEMPLATE.format(adjective=adjective, topic=topic, mood=mood)
