from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

# auto_error=False: a missing header is reported by the service as a 401
security = HTTPBearer(auto_error=False)

async def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Optional[str]:
    """
    Return the bearer token from the Authorization header, if any
    """
    if not credentials:
        return None
    return credentials.credentials
