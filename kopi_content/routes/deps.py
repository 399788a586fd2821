"""Request dependencies."""

from typing import Annotated

from fastapi import Depends, Request

from kopi_content.errors import StoreUnavailable
from kopi_content.services.registry import ContentServices


def get_content(request: Request) -> ContentServices:
    """Content services created in the application lifespan."""
    content = getattr(request.app.state, "content", None)
    if content is None:
        raise StoreUnavailable("Content services are not initialized")
    return content


Content = Annotated[ContentServices, Depends(get_content)]
