"""Unit tests for zabbix_api.api.methods."""

import pytest

from zabbix_api import ZabbixApi
from zabbix_api.api.methods import (
    ANONYMOUS_METHODS,
    API_METHODS,
    LOGIN_METHOD,
    LOGOUT_METHOD,
    METHOD_TABLE,
    iter_method_names,
    python_method_name,
    requires_auth,
)


class TestPythonMethodName:
    """Tests for python_method_name."""

    @pytest.mark.parametrize(
        ("method", "expected"),
        [
            ("host.get", "host_get"),
            ("hostgroup.massadd", "hostgroup_massadd"),
            ("user.checkAuthentication", "user_check_authentication"),
            ("usermacro.createglobal", "usermacro_createglobal"),
            ("apiinfo.version", "apiinfo_version"),
        ],
    )
    def test_names(self, method, expected):
        assert python_method_name(method) == expected

    def test_names_are_unique(self):
        names = [python_method_name(m) for m in iter_method_names()]
        assert len(names) == len(set(names))


class TestMethodTable:
    """Tests for the method table and auth classification."""

    def test_every_name_is_resource_dot_action(self):
        for name in iter_method_names():
            resource, _, action = name.partition(".")
            assert resource in API_METHODS
            assert action in API_METHODS[resource]

    def test_sorted(self):
        names = iter_method_names()
        assert names == sorted(names)

    def test_only_apiinfo_version_is_anonymous(self):
        assert ANONYMOUS_METHODS == {"apiinfo.version"}
        assert requires_auth("apiinfo.version") is False
        assert requires_auth("host.get") is True

    def test_unknown_methods_require_auth(self):
        """Methods outside the table (call() passthrough) still send auth."""
        assert requires_auth("brandnew.thing") is True

    def test_session_methods_not_generated(self):
        assert LOGIN_METHOD not in METHOD_TABLE
        assert LOGOUT_METHOD not in METHOD_TABLE

    def test_table_matches_names(self):
        assert set(METHOD_TABLE) == set(iter_method_names())
        assert METHOD_TABLE["host.get"] is True
        assert METHOD_TABLE["apiinfo.version"] is False

    def test_common_resources_present(self):
        for method in ("host.get", "item.create", "trigger.update", "event.acknowledge",
                       "history.get", "template.massadd", "user.unblock"):
            assert method in METHOD_TABLE


class TestGeneratedAttributes:
    """Every table entry is reachable on ZabbixApi."""

    def test_every_method_generated(self):
        for method in METHOD_TABLE:
            assert callable(getattr(ZabbixApi, python_method_name(method)))

    def test_login_logout_are_hand_written(self):
        assert not hasattr(ZabbixApi, "user_login")
        assert not hasattr(ZabbixApi, "user_logout")
        assert callable(ZabbixApi.login)
        assert callable(ZabbixApi.logout)
