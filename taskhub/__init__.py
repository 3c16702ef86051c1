"""TaskHub: role-based task, employee and KPI management service."""

__version__ = "0.1.0"
