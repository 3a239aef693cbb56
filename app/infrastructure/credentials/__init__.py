"""Access-token credential cache.

Usage:

    from infrastructure.credentials import CredentialCache, CredentialIdentity

    cache = CredentialCache()
    identity = CredentialIdentity.of("wechat_corp", corp_id="ww1", agent_secret="s")
    token = cache.get_token(identity, issuer)
"""

from infrastructure.credentials.cache import CredentialCache, TokenIssuer
from infrastructure.credentials.models import (
    CachedCredential,
    CredentialIdentity,
    IssuedToken,
)

__all__ = [
    "CredentialCache",
    "TokenIssuer",
    "CachedCredential",
    "CredentialIdentity",
    "IssuedToken",
]
