from env.env import (
    Environment,
    get_env,
    reset_env_caches,
    get_logging_env,
    ConfigError,
)

from env.paths import home_dir, config_dir, logs_dir

__all__ = [
    "Environment",
    "get_env",
    "reset_env_caches",
    "get_logging_env",
    "ConfigError",
    "home_dir",
    "config_dir",
    "logs_dir",
]
