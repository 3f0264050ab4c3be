"""Settings management.

This package provides:
- UserSettings: User-configurable defaults loaded from a YAML file
"""

from textutils.settings.user import UserSettings

__all__ = ["UserSettings"]
