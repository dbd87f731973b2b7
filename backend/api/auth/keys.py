"""Process-wide cache of the user pool's JWKS signing keys."""

import logging
import threading
import time
from functools import lru_cache

import httpx
import jwt

from api.auth.models import SigningKey
from common.config import settings

logger = logging.getLogger(__name__)


class KeyFetchError(Exception):
    """The JWKS document could not be fetched or contained no usable keys."""

    pass


class KeyCache:
    """Lazily populated, single-flight cache of JWKS signing keys.

    The first lookup fetches ``{issuer}/.well-known/jwks.json`` and stores
    every key by its ``kid``. Later lookups are served from memory until the
    optional TTL lapses, at which point the whole set is refetched.
    Failed fetches are neither cached nor retried.
    """

    def __init__(
        self,
        jwks_url: str,
        ttl_seconds: int = 0,
        timeout_seconds: float = 5.0,
        http_client: httpx.Client | None = None,
    ):
        """Initialize the key cache.

        Args:
            jwks_url: JWKS discovery URL for the user pool
            ttl_seconds: Seconds before the key set is refetched (0 = never)
            timeout_seconds: Timeout for the JWKS HTTP request
            http_client: Optional httpx client (for testing)
        """
        self.jwks_url = jwks_url
        self.ttl_seconds = ttl_seconds
        self.timeout_seconds = timeout_seconds
        self._http = http_client
        self._keys: dict[str, SigningKey] | None = None
        self._fetched_at = 0.0
        self._lock = threading.Lock()
        self.fetch_count = 0

    def get_key(self, kid: str) -> SigningKey | None:
        """Get the signing key for a key identifier.

        Args:
            kid: Key identifier from a token header

        Returns:
            The SigningKey, or None if the pool has no such key

        Raises:
            KeyFetchError: If the key set had to be fetched and the fetch failed
        """
        return self._ensure_keys().get(kid)

    def clear(self) -> None:
        """Drop all cached keys; the next lookup refetches."""
        with self._lock:
            self._keys = None
            self._fetched_at = 0.0

    def _is_fresh(self) -> bool:
        if self._keys is None:
            return False
        if self.ttl_seconds <= 0:
            return True
        return time.monotonic() - self._fetched_at < self.ttl_seconds

    def _ensure_keys(self) -> dict[str, SigningKey]:
        keys = self._keys
        if keys is not None and self._is_fresh():
            return keys

        with self._lock:
            # Another thread may have populated the store while we waited
            if not self._is_fresh():
                self._keys = self._fetch_keys()
                self._fetched_at = time.monotonic()
            return self._keys

    def _fetch_keys(self) -> dict[str, SigningKey]:
        self.fetch_count += 1
        logger.info("Fetching JWKS", extra={"jwks_url": self.jwks_url})
        try:
            if self._http is not None:
                response = self._http.get(self.jwks_url, timeout=self.timeout_seconds)
            else:
                response = httpx.get(self.jwks_url, timeout=self.timeout_seconds)
            response.raise_for_status()
            document = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise KeyFetchError(f"Failed to fetch JWKS from {self.jwks_url}: {e}") from e

        entries = document.get("keys") if isinstance(document, dict) else None
        if not isinstance(entries, list):
            raise KeyFetchError(f"Malformed JWKS document from {self.jwks_url}")

        keys: dict[str, SigningKey] = {}
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            try:
                jwk = jwt.PyJWK(entry)
            except jwt.PyJWTError as e:
                logger.warning(
                    "Skipping unusable JWKS entry",
                    extra={"kid": entry.get("kid"), "error": str(e)},
                )
                continue
            if not jwk.key_id:
                continue
            keys[jwk.key_id] = SigningKey(key_id=jwk.key_id, key_type=jwk.key_type, key=jwk.key)

        if not keys:
            raise KeyFetchError(f"No usable signing keys in JWKS from {self.jwks_url}")

        logger.info("Loaded JWKS signing keys", extra={"key_ids": sorted(keys)})
        return keys


@lru_cache
def get_key_cache() -> KeyCache:
    """Get the process-wide key cache configured from settings."""
    return KeyCache(
        jwks_url=settings.jwks_url,
        ttl_seconds=settings.jwks_cache_ttl_seconds,
        timeout_seconds=settings.jwks_fetch_timeout_seconds,
    )
