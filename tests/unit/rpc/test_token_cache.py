"""Unit tests for zabbix_api.rpc.auth (on-disk token cache)."""

import hashlib
import os
import stat

import pytest

from zabbix_api.core.errors import AuthCacheError
from zabbix_api.rpc.auth import TokenCache, get_os_user_id, token_file_name


class TestTokenFileName:
    """Tests for token_file_name."""

    def test_name_is_md5_of_user_and_uid(self):
        expected = hashlib.md5(b"Admin|1000").hexdigest()
        assert token_file_name("Admin", 1000) == f".zabbixapi-token-{expected}"

    def test_different_os_users_get_different_files(self):
        assert token_file_name("Admin", 1000) != token_file_name("Admin", 1001)

    def test_unknown_uid_sentinel(self, monkeypatch):
        """Platforms without getuid use -1."""
        monkeypatch.delattr(os, "getuid", raising=False)
        assert get_os_user_id() == -1
        expected = hashlib.md5(b"Admin|-1").hexdigest()
        assert token_file_name("Admin") == f".zabbixapi-token-{expected}"


class TestTokenCacheForUser:
    """Tests for TokenCache.for_user."""

    def test_disabled_with_empty_dir(self):
        assert TokenCache.for_user("", "Admin") is None

    def test_disabled_with_none(self):
        assert TokenCache.for_user(None, "Admin") is None

    def test_missing_dir(self, tmp_path):
        assert TokenCache.for_user(tmp_path / "nope", "Admin") is None

    def test_path_inside_dir(self, tmp_path):
        cache = TokenCache.for_user(str(tmp_path), "Admin", uid=0)
        assert cache is not None
        assert cache.path == tmp_path / token_file_name("Admin", 0)


class TestTokenCacheFile:
    """Tests for reading, writing and deleting the cache file."""

    def test_read_missing_returns_none(self, tmp_path):
        assert TokenCache(tmp_path / "token").read() is None

    def test_write_then_read(self, tmp_path):
        cache = TokenCache(tmp_path / "token")
        cache.write("0424bd59b807674191e7d77572075f33")
        assert cache.exists()
        assert cache.read() == "0424bd59b807674191e7d77572075f33"

    def test_overwrite(self, tmp_path):
        cache = TokenCache(tmp_path / "token")
        cache.write("old")
        cache.write("new")
        assert cache.read() == "new"
        assert [p.name for p in tmp_path.iterdir()] == ["token"]

    def test_empty_file_is_no_token(self, tmp_path):
        path = tmp_path / "token"
        path.write_text("")
        assert TokenCache(path).read() is None

    def test_unreadable_file_is_no_token(self, tmp_path):
        """Something other than a regular file is not a cached token."""
        path = tmp_path / "token"
        path.mkdir()
        cache = TokenCache(path)
        assert cache.read() is None

    @pytest.mark.unix_only
    def test_written_file_is_owner_only(self, tmp_path):
        cache = TokenCache(tmp_path / "token")
        cache.write("secret")
        mode = stat.S_IMODE(cache.path.stat().st_mode)
        assert mode == 0o600

    def test_write_failure_raises_auth_cache_error(self, tmp_path):
        cache = TokenCache(tmp_path / "missing-dir" / "token")
        with pytest.raises(AuthCacheError, match="Could not write"):
            cache.write("secret")

    def test_delete(self, tmp_path):
        cache = TokenCache(tmp_path / "token")
        cache.write("secret")
        cache.delete()
        assert not cache.exists()

    def test_delete_missing_is_ok(self, tmp_path):
        TokenCache(tmp_path / "token").delete()

    def test_delete_failure_raises_auth_cache_error(self, tmp_path):
        path = tmp_path / "token"
        path.mkdir()
        (path / "child").write_text("x")
        with pytest.raises(AuthCacheError, match="Could not remove"):
            TokenCache(path).delete()
