"""FastAPI dependency: get_forwarded_token.

No local authentication. If the caller sends an Authorization header, its
raw token is forwarded upstream as "Authorization: JWT <token>"; otherwise
the client falls back to settings.WFM_JWT.

Usage in any router:
    from src.wm_gateway.auth.dependencies import get_forwarded_token

    @router.get("/x")
    async def x(token: Annotated[str | None, Depends(get_forwarded_token)]):
        ...
"""

from typing import Annotated

from fastapi import Header

_SCHEMES = ("jwt", "bearer")


def extract_token(authorization: str | None) -> str | None:
    """'JWT abc' / 'Bearer abc' / 'abc' → 'abc'; blank → None."""
    if not authorization:
        return None
    value = authorization.strip()
    scheme, _, rest = value.partition(" ")
    if rest and scheme.lower() in _SCHEMES:
        value = rest.strip()
    return value or None


async def get_forwarded_token(
    authorization: Annotated[str | None, Header()] = None,
) -> str | None:
    return extract_token(authorization)
