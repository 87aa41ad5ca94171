"""
Dice routes: /api/dice
"""

from fastapi import APIRouter, Depends, HTTPException

from worddies.core.dice import format_roll, parse_roll, roll
from worddies.core.dispatcher import Context
from worddies.core.errors import InvalidArgument
from worddies.server.deps import get_context


router = APIRouter(prefix="/api/dice", tags=["dice"])


@router.get("/{notation}")
async def roll_dice(notation: str, ctx: Context = Depends(get_context)):
    """Roll NdS, e.g. /api/dice/3d6."""
    try:
        count, sides = parse_roll(notation)
        rolls = roll(count, sides, ctx.rng)
    except InvalidArgument as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "count": count,
        "sides": sides,
        "rolls": rolls,
        "total": sum(rolls),
        "text": format_roll(rolls),
    }
