"""
Shared dependencies for routes.
"""

from fastapi import HTTPException, Request

from worddies.core.dispatcher import Context


def get_context(request: Request) -> Context:
    ctx = getattr(request.app.state, "ctx", None)
    if ctx is None:
        raise HTTPException(status_code=503, detail="Service is starting")
    return ctx
