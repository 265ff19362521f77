import logging
from pathlib import Path
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

# Order matters: the verse table assigns these by index, wrapping around.
VERSES = (
    "Your request wandered the hallway between two servers and found every door ajar.",
    "Somewhere a packet is still falling, and it remembers your name.",
    "The answer was here a moment ago. Only its echo stayed behind.",
    "We heard you from the far side of the wire, softer than you meant.",
    "Between sending and receiving there is a room with no clock.",
    "The route you asked for folds back into itself like a quiet stair.",
    "Every handshake here is half a handshake, waiting for the other hand.",
    "Your bytes arrived in the wrong season and had to wait for spring.",
    "The cache dreamed of you once, then woke up empty.",
    "This address exists only while you are looking at it.",
    "A timeout is just a door that took too long to decide.",
    "The signal came back to you, carrying nothing but your own voice.",
    "We are still loading, as we always have been, as we always will be.",
    "Nobody is at the gateway. The lights are on anyway.",
    "The socket listened until listening became the only thing it knew.",
    "You are in the space between the request and the reply. Stay a while.",
)


def load_verses(path: Optional[str] = None) -> Tuple[str, ...]:
    """Return the verse pool, read from ``path`` when given.

    The file holds one verse per line; blank lines are skipped and the order
    is kept.
    """
    if path is None:
        return VERSES

    text = Path(path).read_text(encoding="utf-8")
    verses = tuple(line.strip() for line in text.splitlines() if line.strip())
    if not verses:
        raise ValueError(f"Verse file {path} contains no verses")
    logger.info(f"Loaded {len(verses)} verses from {path}")
    return verses
