from __future__ import annotations

pytest_plugins = ["pytester", "fluentassert.pytest_plugin"]
