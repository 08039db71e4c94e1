from __future__ import annotations

from .builder import build_post, build_posts, is_review
from .catalog_filter import Category, filter_posts
from .config import config_sha256, load_config
from .config_schema import AppConfig
from .errors import ConfigError, ExportError
from .normalize import ContentNode, ParseResult, normalize
from .post import Post
from .signals import extract_rating, extract_tags

__all__ = [
    "AppConfig",
    "Category",
    "ConfigError",
    "ContentNode",
    "ExportError",
    "ParseResult",
    "Post",
    "build_post",
    "build_posts",
    "config_sha256",
    "extract_rating",
    "extract_tags",
    "filter_posts",
    "is_review",
    "load_config",
    "normalize",
]
