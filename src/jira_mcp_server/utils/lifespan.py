"""Access to the server state stored by the FastMCP lifespan."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastmcp import Context

    from ..servers.context import MainAppContext

APP_CONTEXT_KEY = "app_lifespan_context"


def get_app_context(ctx: Context) -> MainAppContext | None:
    """Return the MainAppContext yielded by the server lifespan, if any."""
    lifespan_ctx_dict = ctx.request_context.lifespan_context
    if isinstance(lifespan_ctx_dict, dict):
        return lifespan_ctx_dict.get(APP_CONTEXT_KEY)
    return None
