"""Holiday name data sources."""

from .sources import JsonNameSource, NameSourceError, RegionNameSource

__all__ = ["JsonNameSource", "NameSourceError", "RegionNameSource"]
