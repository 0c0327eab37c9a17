"""Timing judgment, groove gauge and lane mapping rules for BMS rhythm games."""

__version__ = "0.1.0"
__all__ = ["judge", "gauge", "options", "wide_mappings"]