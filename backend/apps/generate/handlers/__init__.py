"""Generation handlers."""

from apps.generate.handlers.generate_blog import generate_blog
from apps.generate.handlers.generate_code import generate_code

__all__ = ["generate_blog", "generate_code"]
