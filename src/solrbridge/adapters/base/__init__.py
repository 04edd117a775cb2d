"""Base backend interface — Abstract classes for native engine execution."""

from solrbridge.adapters.base.adapter import AdapterHealth, SearchBackend

__all__ = ["AdapterHealth", "SearchBackend"]
