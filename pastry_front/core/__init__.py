# Core modules
# session is not re-exported here: it imports the services, which import core.money

from .config import settings, get_settings

__all__ = ["settings", "get_settings"]
