# src/worddies/core/dice.py
"""
Dice rolling for `roll NdS`.

Each die is drawn from [1, sides): a d6 yields 1-5. Existing users see
this range, so it is kept as-is.
"""

import random
import re

from worddies.core.errors import InvalidArgument


MAX_DICE = 10_000
DISPLAY_LIMIT = 100

_ROLL_RE = re.compile(r"^(\d+)[dD](\d+)$")


def parse_roll(token: str) -> tuple[int, int]:
    """Parse '3d6' into (3, 6)."""
    m = _ROLL_RE.match(token.strip())
    if not m:
        raise InvalidArgument(f"`{token}` is not a roll, use `<count>d<sides>` like `3d6`")
    return int(m.group(1)), int(m.group(2))


def roll(count: int, sides: int, rng: random.Random | None = None) -> list[int]:
    if sides <= 1:
        raise InvalidArgument("dice need at least 2 sides")
    if count < 0:
        raise InvalidArgument("cannot roll a negative number of dice")
    if count > MAX_DICE:
        raise InvalidArgument(f"too many dice, the limit is {MAX_DICE}")

    rng = rng or random
    return [rng.randrange(1, sides) for _ in range(count)]


def format_roll(rolls: list[int]) -> str:
    if len(rolls) > DISPLAY_LIMIT:
        text = f"({len(rolls)} dice)"
    else:
        text = "+".join(str(r) for r in rolls)
    if len(rolls) > 1:
        text += f" = {sum(rolls)}"
    return text
