from wandr.core.settings import get_settings, settings

__all__ = ["settings", "get_settings"]
