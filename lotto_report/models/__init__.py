"""ORM models."""

from lotto_report.models.kv_entry import KeyValueEntry

__all__ = ["KeyValueEntry"]
