"""Thread-safe in-memory access-token cache.

Tokens are keyed by CredentialIdentity.cache_key. A cached entry is used
only while ``now < expires_at``; a refresh stores
``issued_at + expires_in - expiry_skew_seconds`` as the new expiry.

Stored entries are immutable CachedCredential objects and the map is only
read or written under ``_lock``, so a reader never observes a partially
written entry. With ``single_flight`` enabled, refreshes of the same key
are serialized behind a per-key lock and re-check the cache once they
hold it; refreshes of different keys still run in parallel.
"""

import threading
import time
from typing import Callable, Dict, Optional

from infrastructure.credentials.models import (
    CachedCredential,
    CredentialIdentity,
    IssuedToken,
)
from infrastructure.exceptions import AuthError
from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_EXPIRY_SKEW_SECONDS = 60

TokenIssuer = Callable[[], IssuedToken]


class CredentialCache:
    """Process-wide store of provider access tokens.

    Attributes:
        expiry_skew_seconds: Seconds subtracted from the provider TTL.
        single_flight: Serialize refreshes per key.

    Example:
        cache = CredentialCache()
        token = cache.get_token(identity, client.issue_token)
    """

    def __init__(
        self,
        expiry_skew_seconds: int = DEFAULT_EXPIRY_SKEW_SECONDS,
        single_flight: bool = True,
        clock: Callable[[], float] = time.time,
    ):
        self.expiry_skew_seconds = expiry_skew_seconds
        self.single_flight = single_flight
        self._clock = clock
        self._entries: Dict[str, CachedCredential] = {}
        self._refresh_locks: Dict[str, threading.Lock] = {}
        self._lock = threading.Lock()

    def get_token(self, identity: CredentialIdentity, issuer: TokenIssuer) -> str:
        """Return a valid token for ``identity``, refreshing it if needed.

        Args:
            identity: Identity fields of the credential. All must be non-empty.
            issuer: Performs exactly one call to the provider's token endpoint.

        Returns:
            The access token.

        Raises:
            AuthError: Identity incomplete, provider refused, or the issued
                token is unusable. Nothing is cached in these cases.
            TransportError: The token request itself failed.
        """
        missing = identity.missing_fields()
        if missing:
            raise AuthError(f"missing credential fields: {', '.join(missing)}")

        key = identity.cache_key
        cached = self._read(key)
        if cached is not None:
            return cached.token

        if not self.single_flight:
            return self._refresh(key, issuer).token

        with self._refresh_lock_for(key):
            # Another thread may have refreshed while this one waited.
            cached = self._read(key)
            if cached is not None:
                return cached.token
            return self._refresh(key, issuer).token

    def peek(self, identity: CredentialIdentity) -> Optional[CachedCredential]:
        """Return the stored entry for ``identity`` without validating expiry."""
        with self._lock:
            return self._entries.get(identity.cache_key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _read(self, key: str) -> Optional[CachedCredential]:
        with self._lock:
            entry = self._entries.get(key)
        if entry is not None and entry.is_valid(self._clock()):
            logger.debug("credential_cache_hit", cache_key=key)
            return entry
        return None

    def _refresh(self, key: str, issuer: TokenIssuer) -> CachedCredential:
        issued = issuer()
        if not issued.token or issued.expires_in <= 0:
            logger.warning(
                "credential_refresh_rejected",
                cache_key=key,
                expires_in=issued.expires_in,
            )
            raise AuthError("token response is missing a token or a positive expiry")

        issued_at = self._clock()
        entry = CachedCredential(
            token=issued.token,
            expires_at=issued_at + issued.expires_in - self.expiry_skew_seconds,
        )
        with self._lock:
            self._entries[key] = entry

        logger.info(
            "credential_cache_refreshed",
            cache_key=key,
            expires_in=issued.expires_in,
            valid_for=entry.expires_at - issued_at,
        )
        return entry

    def _refresh_lock_for(self, key: str) -> threading.Lock:
        with self._lock:
            lock = self._refresh_locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._refresh_locks[key] = lock
            return lock
