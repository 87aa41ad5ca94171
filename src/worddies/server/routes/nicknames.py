"""
Nickname routes: /api/nicknames
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from worddies.core.dispatcher import Context
from worddies.core.errors import StoreUnavailable, ValidationFailed
from worddies.core.nicknames import validate_nickname
from worddies.server.deps import get_context


router = APIRouter(prefix="/api/nicknames", tags=["nicknames"])


class SetNicknameRequest(BaseModel):
    name: str


@router.get("/{user_id}")
async def get_nickname(user_id: str, ctx: Context = Depends(get_context)):
    name = await ctx.nicknames.get(user_id)
    if name is None:
        raise HTTPException(status_code=404, detail="No nickname set")
    return {"user_id": user_id, "name": name}


@router.put("/{user_id}")
async def set_nickname(user_id: str, req: SetNicknameRequest, ctx: Context = Depends(get_context)):
    """Set a nickname. Same rules as the chat command, minus the mention check."""
    try:
        validate_nickname(req.name, mention_count=1)
        await ctx.nicknames.set(user_id, req.name)
    except ValidationFailed as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StoreUnavailable as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"user_id": user_id, "name": req.name}


@router.delete("/{user_id}")
async def clear_nickname(user_id: str, ctx: Context = Depends(get_context)):
    try:
        cleared = await ctx.nicknames.clear(user_id)
    except StoreUnavailable as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"user_id": user_id, "cleared": cleared}
