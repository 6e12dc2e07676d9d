"""On-disk auth token cache.

A successful credential login stores the issued token so that later
processes (and later client instances) can skip ``user.login``:

    {cache_dir}/.zabbixapi-token-{md5(username + "|" + os_uid)}

Keying on the OS user id keeps tokens of different local accounts apart
when they share a cache directory such as /tmp. Files are written with mode
0o600 (owner read/write only).

The cache has no locking. Two processes logging in concurrently as the same
user may overwrite each other's file; the last writer wins.

Example usage:
    cache = TokenCache.for_user("/tmp", "Admin")
    if cache is not None:
        token = cache.read()      # None if missing or unreadable
        cache.write("0424bd59b807674191e7d77572075f33")
        cache.delete()
"""

from __future__ import annotations

import hashlib
import logging
import os
from pathlib import Path

from zabbix_api.core.constants import TOKEN_FILE_PREFIX, UNKNOWN_UID
from zabbix_api.core.errors import AuthCacheError
from zabbix_api.core.secure_io import write_owner_only

logger = logging.getLogger(__name__)


def get_os_user_id() -> int:
    """Return the effective OS user id, or -1 where the platform has none."""
    getuid = getattr(os, "getuid", None)
    return getuid() if getuid is not None else UNKNOWN_UID


def token_file_name(username: str, uid: int | None = None) -> str:
    """Build the cache file name for ``username`` under OS user ``uid``."""
    if uid is None:
        uid = get_os_user_id()
    digest = hashlib.md5(f"{username}|{uid}".encode("utf-8")).hexdigest()
    return f"{TOKEN_FILE_PREFIX}{digest}"


class TokenCache:
    """A single cached token file.

    Attributes:
        path: Location of the token file.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    @classmethod
    def for_user(
        cls,
        cache_dir: str | Path | None,
        username: str,
        uid: int | None = None,
    ) -> TokenCache | None:
        """Return the cache for ``username`` in ``cache_dir``.

        Returns None when caching is disabled (empty ``cache_dir``) or the
        directory does not exist.
        """
        if not cache_dir:
            return None
        directory = Path(cache_dir)
        if not directory.is_dir():
            logger.debug("Token cache dir does not exist: %s", directory)
            return None
        return cls(directory / token_file_name(username, uid))

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> str | None:
        """Return the cached token, or None if there is none.

        An unreadable file is treated the same as a missing one.
        """
        if not self.exists():
            return None
        try:
            token = self.path.read_text(encoding="utf-8").strip()
        except OSError as e:
            logger.warning("Could not read token cache %s: %s", self.path, e)
            return None
        return token or None

    def write(self, token: str) -> None:
        """Store ``token`` with owner-only permissions.

        Raises:
            AuthCacheError: If the file cannot be written.
        """
        try:
            write_owner_only(self.path, token)
        except OSError as e:
            raise AuthCacheError(f"Could not write token cache {self.path}: {e}") from e
        logger.debug("Auth token cached at %s", self.path)

    def delete(self) -> None:
        """Remove the cache file. A missing file is not an error.

        Raises:
            AuthCacheError: If the file exists but cannot be removed.
        """
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise AuthCacheError(f"Could not remove token cache {self.path}: {e}") from e
        logger.debug("Removed token cache %s", self.path)
