"""Zabbix API constants.

Numeric values used in API params and results (host status, item types,
trigger severities, ...). They are exposed as class attributes of
ApiConstants, which ZabbixApi inherits, so ``ZabbixApi.HOST_STATUS_MONITORED``
works as well as importing from this module.
"""


class ApiConstants:
    """Frequently used constants from the Zabbix frontend's defines."""

    # API error codes reported in error.data of some versions
    ZBX_API_ERROR_PARAMETERS = 100
    ZBX_API_ERROR_INTERNAL = 111
    ZBX_API_ERROR_PERMISSIONS = 120
    ZBX_API_ERROR_NO_AUTH = 200
    ZBX_API_ERROR_NO_METHOD = 300

    # API output modes
    API_OUTPUT_EXTEND = "extend"
    API_OUTPUT_COUNT = "count"

    # Host status
    HOST_STATUS_MONITORED = 0
    HOST_STATUS_NOT_MONITORED = 1
    HOST_STATUS_TEMPLATE = 3
    HOST_STATUS_PROXY_ACTIVE = 5
    HOST_STATUS_PROXY_PASSIVE = 6

    # Host availability
    HOST_AVAILABLE_UNKNOWN = 0
    HOST_AVAILABLE_TRUE = 1
    HOST_AVAILABLE_FALSE = 2

    # Host maintenance
    HOST_MAINTENANCE_STATUS_OFF = 0
    HOST_MAINTENANCE_STATUS_ON = 1

    # Host interfaces
    INTERFACE_TYPE_AGENT = 1
    INTERFACE_TYPE_SNMP = 2
    INTERFACE_TYPE_IPMI = 3
    INTERFACE_TYPE_JMX = 4
    INTERFACE_PRIMARY = 1
    INTERFACE_SECONDARY = 0
    INTERFACE_USE_DNS = 0
    INTERFACE_USE_IP = 1

    # Item types
    ITEM_TYPE_ZABBIX = 0
    ITEM_TYPE_TRAPPER = 2
    ITEM_TYPE_SIMPLE = 3
    ITEM_TYPE_INTERNAL = 5
    ITEM_TYPE_ZABBIX_ACTIVE = 7
    ITEM_TYPE_EXTERNAL = 10
    ITEM_TYPE_DB_MONITOR = 11
    ITEM_TYPE_IPMI = 12
    ITEM_TYPE_SSH = 13
    ITEM_TYPE_TELNET = 14
    ITEM_TYPE_CALCULATED = 15
    ITEM_TYPE_JMX = 16
    ITEM_TYPE_SNMPTRAP = 17
    ITEM_TYPE_DEPENDENT = 18
    ITEM_TYPE_HTTPAGENT = 19
    ITEM_TYPE_SNMP = 20
    ITEM_TYPE_SCRIPT = 21

    # Item value types
    ITEM_VALUE_TYPE_FLOAT = 0
    ITEM_VALUE_TYPE_STR = 1
    ITEM_VALUE_TYPE_LOG = 2
    ITEM_VALUE_TYPE_UINT64 = 3
    ITEM_VALUE_TYPE_TEXT = 4

    # Item status
    ITEM_STATUS_ACTIVE = 0
    ITEM_STATUS_DISABLED = 1

    # Trigger severities
    TRIGGER_SEVERITY_NOT_CLASSIFIED = 0
    TRIGGER_SEVERITY_INFORMATION = 1
    TRIGGER_SEVERITY_WARNING = 2
    TRIGGER_SEVERITY_AVERAGE = 3
    TRIGGER_SEVERITY_HIGH = 4
    TRIGGER_SEVERITY_DISASTER = 5

    # Trigger status and value
    TRIGGER_STATUS_ENABLED = 0
    TRIGGER_STATUS_DISABLED = 1
    TRIGGER_VALUE_FALSE = 0
    TRIGGER_VALUE_TRUE = 1

    # Event sources and objects
    EVENT_SOURCE_TRIGGERS = 0
    EVENT_SOURCE_DISCOVERY = 1
    EVENT_SOURCE_AUTOREGISTRATION = 2
    EVENT_SOURCE_INTERNAL = 3
    EVENT_OBJECT_TRIGGER = 0
    EVENT_OBJECT_DHOST = 1
    EVENT_OBJECT_DSERVICE = 2
    EVENT_OBJECT_AUTOREGHOST = 3
    EVENT_OBJECT_ITEM = 4
    EVENT_OBJECT_LLDRULE = 5

    # Event acknowledge actions (bitmask)
    ZBX_PROBLEM_UPDATE_CLOSE = 0x01
    ZBX_PROBLEM_UPDATE_ACKNOWLEDGE = 0x02
    ZBX_PROBLEM_UPDATE_MESSAGE = 0x04
    ZBX_PROBLEM_UPDATE_SEVERITY = 0x08

    # User types
    USER_TYPE_ZABBIX_USER = 1
    USER_TYPE_ZABBIX_ADMIN = 2
    USER_TYPE_SUPER_ADMIN = 3

    # Maintenance
    MAINTENANCE_TYPE_NORMAL = 0
    MAINTENANCE_TYPE_NODATA = 1

    # Permissions
    PERM_DENY = 0
    PERM_READ = 2
    PERM_READ_WRITE = 3
