"""
FastAPI dependencies for caller identity and pagination.

Authentication happens upstream; the gateway forwards the authenticated
user's id in the X-User-Id header.
"""

from typing import Optional

from beanie import PydanticObjectId
from bson.errors import InvalidId
from fastapi import Depends, Header, Query

from config import settings
from models import User
from schemas import PageParams
from utils.errors import ErrorCodes, HttpException


async def get_caller_id(
    x_user_id: Optional[str] = Header(default=None),
) -> PydanticObjectId:
    """Resolve the caller's user id from the X-User-Id header."""
    if not x_user_id:
        raise HttpException.from_error_code(401, ErrorCodes.UNAUTHORIZED)
    try:
        return PydanticObjectId(x_user_id)
    except (InvalidId, TypeError):
        raise HttpException.from_error_code(401, ErrorCodes.UNAUTHORIZED)


async def require_admin(
    caller_id: PydanticObjectId = Depends(get_caller_id),
) -> PydanticObjectId:
    """Allow only callers whose user record carries the admin role."""
    user = await User.get(caller_id)
    if user is None or user.is_blocked or not user.is_admin:
        raise HttpException.from_error_code(403, ErrorCodes.FORBIDDEN)
    return caller_id


def get_page_params(
    page_size: Optional[int] = Query(
        default=None, ge=0, le=settings.pagination_max_limit
    ),
    current_page: Optional[int] = Query(default=None, ge=0),
) -> PageParams:
    """Pagination query parameters; the service fills in defaults."""
    return PageParams(page_size=page_size, current_page=current_page)
