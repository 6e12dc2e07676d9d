"""Allow ``python -m zabbix_api``."""

from zabbix_api.cli.main import main

raise SystemExit(main())
