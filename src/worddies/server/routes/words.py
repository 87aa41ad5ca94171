"""
Word routes: /api/words
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from worddies.core.dispatcher import Context, random_word
from worddies.core.errors import NotFound, ResourceUnavailable, SampleExhausted, TransportError
from worddies.core.words import format_definition
from worddies.server.deps import get_context


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/words", tags=["words"])


@router.get("/random")
async def get_random_word(ctx: Context = Depends(get_context)):
    """Sample corpus words until one resolves."""
    try:
        w = await random_word(ctx)
    except TransportError as e:
        logger.error("random word failed: %s", e)
        raise HTTPException(status_code=502, detail="Dictionary service unavailable")
    except (ResourceUnavailable, SampleExhausted) as e:
        logger.error("random word failed: %s", e)
        raise HTTPException(status_code=503, detail=str(e))

    return {**w.to_dict(), "text": format_definition(w)}


@router.get("/{word}")
async def get_word(word: str, ctx: Context = Depends(get_context)):
    """Look up a single word."""
    try:
        w = await ctx.dictionary.resolve(word)
    except NotFound:
        raise HTTPException(status_code=404, detail=f"No definition found for '{word}'")
    except TransportError as e:
        logger.error("define %s failed: %s", word, e)
        raise HTTPException(status_code=502, detail="Dictionary service unavailable")

    return {**w.to_dict(), "text": format_definition(w)}
