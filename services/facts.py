import html
import random
from typing import Optional

SPACE_FACTS = (
    "A day on Venus is longer than its year!",
    "One million Earths could fit inside the Sun.",
    "The Milky Way galaxy contains over 100 billion stars.",
    "Saturn's moon Titan has lakes and rivers of liquid methane.",
    "The International Space Station travels at 17,500 mph.",
    "Jupiter's Great Red Spot is a storm larger than Earth.",
    "Neutron stars are so dense that a teaspoon would weigh 6 billion tons.",
    "The universe is approximately 13.8 billion years old.",
)


def pick_fact(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(SPACE_FACTS)


def fact_markup(fact: str) -> str:
    return f'<div class="space-fact"><strong>🌟 Did You Know?</strong> {html.escape(fact)}</div>'
