"""Table of remote Zabbix API methods.

Every remote procedure is ``resource.action``. ZabbixApi gets one generated
method per entry (``host.get`` -> ``host_get``), all funnelling into
ZabbixApi.call(). Whether a method sends the auth token depends only on
membership in ANONYMOUS_METHODS.

``user.login`` and ``user.logout`` are deliberately absent: they change
session state and are exposed as ZabbixApi.login() / ZabbixApi.logout().
"""

import re

API_METHODS: dict[str, tuple[str, ...]] = {
    "action": ("create", "delete", "get", "update"),
    "alert": ("get",),
    "apiinfo": ("version",),
    "application": ("create", "delete", "get", "massadd", "update"),
    "auditlog": ("get",),
    "authentication": ("get", "update"),
    "autoregistration": ("get", "update"),
    "configuration": ("export", "import", "importcompare"),
    "correlation": ("create", "delete", "get", "update"),
    "dashboard": ("create", "delete", "get", "update"),
    "dcheck": ("get",),
    "dhost": ("get",),
    "discoveryrule": ("copy", "create", "delete", "get", "update"),
    "drule": ("create", "delete", "get", "update"),
    "dservice": ("get",),
    "event": ("acknowledge", "get"),
    "graph": ("create", "delete", "get", "update"),
    "graphitem": ("get",),
    "graphprototype": ("create", "delete", "get", "update"),
    "hanode": ("get",),
    "history": ("clear", "get"),
    "host": ("create", "delete", "get", "massadd", "massremove", "massupdate", "update"),
    "hostgroup": ("create", "delete", "get", "massadd", "massremove", "massupdate", "update"),
    "hostinterface": (
        "create",
        "delete",
        "get",
        "massadd",
        "massremove",
        "replacehostinterfaces",
        "update",
    ),
    "hostprototype": ("create", "delete", "get", "update"),
    "housekeeping": ("get", "update"),
    "httptest": ("create", "delete", "get", "update"),
    "iconmap": ("create", "delete", "get", "update"),
    "image": ("create", "delete", "get", "update"),
    "item": ("create", "delete", "get", "update"),
    "itemprototype": ("create", "delete", "get", "update"),
    "maintenance": ("create", "delete", "get", "update"),
    "map": ("create", "delete", "get", "update"),
    "mediatype": ("create", "delete", "get", "update"),
    "problem": ("get",),
    "proxy": ("create", "delete", "get", "update"),
    "regexp": ("create", "delete", "get", "update"),
    "report": ("create", "delete", "get", "update"),
    "role": ("create", "delete", "get", "update"),
    "script": ("create", "delete", "execute", "get", "getscriptsbyhosts", "update"),
    "service": ("create", "delete", "get", "update"),
    "settings": ("get", "update"),
    "sla": ("create", "delete", "get", "getsli", "update"),
    "task": ("create", "get"),
    "template": ("create", "delete", "get", "massadd", "massremove", "massupdate", "update"),
    "templatedashboard": ("create", "delete", "get", "update"),
    "token": ("create", "delete", "generate", "get", "update"),
    "trend": ("get",),
    "trigger": ("adddependencies", "create", "delete", "deletedependencies", "get", "update"),
    "triggerprototype": ("create", "delete", "get", "update"),
    "user": ("checkAuthentication", "create", "delete", "get", "unblock", "update"),
    "usergroup": ("create", "delete", "get", "update"),
    "usermacro": (
        "create",
        "createglobal",
        "delete",
        "deleteglobal",
        "get",
        "update",
        "updateglobal",
    ),
    "valuemap": ("create", "delete", "get", "update"),
}

# Methods callable without an auth token
ANONYMOUS_METHODS: frozenset[str] = frozenset({"apiinfo.version"})

# Session methods with dedicated ZabbixApi wrappers
LOGIN_METHOD = "user.login"
LOGOUT_METHOD = "user.logout"

# Cheap authenticated call used to check whether a cached token still works
PROBE_METHOD = "user.get"
PROBE_PARAMS = {"countOutput": True}

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def iter_method_names() -> list[str]:
    """Return all generated remote method names, sorted."""
    return sorted(
        f"{resource}.{action}"
        for resource, actions in API_METHODS.items()
        for action in actions
    )


def requires_auth(method: str) -> bool:
    """Whether ``method`` must carry the session token."""
    return method not in ANONYMOUS_METHODS


def python_method_name(method: str) -> str:
    """Map a remote method name to its ZabbixApi attribute name.

    >>> python_method_name("host.get")
    'host_get'
    >>> python_method_name("user.checkAuthentication")
    'user_check_authentication'
    """
    resource, _, action = method.partition(".")
    action = _CAMEL_BOUNDARY.sub(r"_\1", action).lower()
    return f"{resource}_{action}"


# Remote method name -> requires auth
METHOD_TABLE: dict[str, bool] = {name: requires_auth(name) for name in iter_method_names()}
