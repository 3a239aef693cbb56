"""Credential cache models."""

import hashlib
from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class CredentialIdentity:
    """Identity fields of one channel credential.

    Two identities built independently from the same provider and field
    values produce the same ``cache_key``. The key is a hash so that raw
    secrets are never held as dictionary keys or written to logs.

    Attributes:
        provider: Provider namespace (e.g. "wechat_corp").
        fields: Ordered (name, value) pairs identifying the credential.

    Example:
        >>> identity = CredentialIdentity.of(
        ...     "wechat_corp", corp_id="ww1", agent_id="1000002", agent_secret="s3cr3t"
        ... )
        >>> identity.cache_key
        'wechat_corp:5f2b...'
    """

    provider: str
    fields: Tuple[Tuple[str, str], ...]

    @classmethod
    def of(cls, provider: str, **fields: object) -> "CredentialIdentity":
        return cls(
            provider=provider,
            fields=tuple(
                (name, "" if value is None else str(value))
                for name, value in fields.items()
            ),
        )

    @property
    def cache_key(self) -> str:
        key_string = "|".join(f"{name}={value}" for name, value in sorted(self.fields))
        key_hash = hashlib.sha256(key_string.encode()).hexdigest()[:16]
        return f"{self.provider}:{key_hash}"

    def missing_fields(self) -> List[str]:
        """Names of identity fields that are empty."""
        return [name for name, value in self.fields if not value.strip()]


@dataclass(frozen=True)
class IssuedToken:
    """Token as returned by a provider's token-issuing endpoint.

    Attributes:
        token: Access token value.
        expires_in: Provider-declared lifetime in seconds.
    """

    token: str
    expires_in: int


@dataclass(frozen=True)
class CachedCredential:
    """A cached access token and the moment it stops being usable.

    Attributes:
        token: Access token value.
        expires_at: Epoch seconds; the entry is valid strictly before it.
    """

    token: str
    expires_at: float

    def is_valid(self, now: float) -> bool:
        return bool(self.token) and now < self.expires_at
