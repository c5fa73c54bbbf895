"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .github import GitHubConfig, default_github_resilience, get_github_config
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .storage import StorageConfig, get_http_cache_path, get_storage_config

__all__ = [
    "CacheConfig",
    "ConfigurationError",
    "GitHubConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "StorageConfig",
    "default_github_resilience",
    "get_github_config",
    "get_http_cache_path",
    "get_storage_config",
    "optional_env_var",
    "require_env_vars",
]
