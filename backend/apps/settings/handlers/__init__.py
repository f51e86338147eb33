"""Settings handlers."""

from apps.settings.handlers.delete_api_key import delete_api_key
from apps.settings.handlers.get_api_key import get_api_key
from apps.settings.handlers.save_api_key import save_api_key
from apps.settings.handlers.validate_api_key import validate_api_key

__all__ = [
    "get_api_key",
    "save_api_key",
    "delete_api_key",
    "validate_api_key",
]
