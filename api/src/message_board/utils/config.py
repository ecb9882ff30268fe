"""
Configuration loader for the Message Board API.

This module handles loading configuration from either .conf files (preferred)
or .env files (for backward compatibility). It uses a centralized approach
to make configuration management more maintainable.

Priority order:
1. .conf file (INI format) - preferred
2. .env file (legacy) - for backward compatibility
3. Environment variables - highest priority override
"""
import os
import configparser
from pathlib import Path
from typing import Optional, Iterable


ENV_VARS = [
    'DB_NAME', 'DB_USER', 'DB_PASS', 'DB_HOST', 'DB_PORT', 'DB_DSN',
    'LOG_LEVEL', 'STRICT_JSON_BODY',
]

TRUTHY = {"1", "true", "yes", "on"}


class Config:
    """Configuration manager that supports both .conf and .env formats."""

    def __init__(self, roots: Optional[Iterable[Path]] = None):
        self._config = {}
        self._roots = list(roots) if roots is not None else [
            Path('/app'),  # Docker container
            Path(__file__).resolve().parents[4],  # Local development
        ]
        self._load_config()

    def _load_config(self):
        """Load configuration from .conf file, .env file, or environment variables."""
        conf_file = None
        env_file = None

        for root_dir in self._roots:
            conf_candidate = root_dir / ".conf"
            env_candidate = root_dir / ".env"

            if conf_candidate.exists():
                conf_file = conf_candidate
                break
            elif env_candidate.exists() and env_file is None:
                env_file = env_candidate

        if conf_file:
            self._load_from_conf(conf_file)
        elif env_file:
            self._load_from_env(env_file)

        # Environment variables always take precedence
        self._load_from_environment()

    def _load_from_conf(self, conf_file: Path):
        """Load configuration from INI-style .conf file."""
        parser = configparser.ConfigParser()
        parser.read(conf_file)

        if parser.has_section('database'):
            self._config['DB_NAME'] = parser.get('database', 'name', fallback=None)
            self._config['DB_USER'] = parser.get('database', 'user', fallback=None)
            self._config['DB_PASS'] = parser.get('database', 'password', fallback=None)
            self._config['DB_HOST'] = parser.get('database', 'host', fallback='db')
            self._config['DB_PORT'] = parser.get('database', 'port', fallback='5432')
            dsn = parser.get('database', 'dsn', fallback=None)
            if dsn:
                self._config['DB_DSN'] = dsn

        if parser.has_section('logging'):
            self._config['LOG_LEVEL'] = parser.get('logging', 'level', fallback='INFO')

        if parser.has_section('api'):
            self._config['STRICT_JSON_BODY'] = parser.get('api', 'strict_json_body', fallback='false')

    def _load_from_env(self, env_file: Path):
        """Load configuration from .env file for backward compatibility."""
        with open(env_file, 'r') as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith('#'):
                    continue
                if '=' in line:
                    key, value = line.split('=', 1)
                    key = key.strip()
                    value = value.strip().strip('"').strip("'")
                    # Handle variable substitution like ${DB_NAME}
                    max_iterations = 10
                    iteration = 0
                    while '${' in value and '}' in value and iteration < max_iterations:
                        var_start = value.index('${')
                        var_end = value.index('}', var_start)
                        var_name = value[var_start+2:var_end]
                        var_value = self._config.get(var_name, os.getenv(var_name, ''))
                        value = value[:var_start] + var_value + value[var_end+1:]
                        iteration += 1
                    self._config[key] = value

    def _load_from_environment(self):
        """Load configuration from environment variables (highest priority)."""
        for var in ENV_VARS:
            env_value = os.getenv(var)
            if env_value:
                self._config[var] = env_value

        # Construct DB_DSN if we have all required parts
        if not self._config.get('DB_DSN') and all([
            self._config.get('DB_USER'), self._config.get('DB_PASS'),
            self._config.get('DB_NAME'),
        ]):
            self._config['DB_DSN'] = (
                f"postgresql+psycopg2://{self._config['DB_USER']}:"
                f"{self._config['DB_PASS']}@{self._config.get('DB_HOST') or 'db'}:"
                f"{self._config.get('DB_PORT') or '5432'}/"
                f"{self._config['DB_NAME']}"
            )

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get a configuration value by key."""
        return self._config.get(key, default)

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._config.get(key)
        if value is None:
            return default
        return value.strip().lower() in TRUTHY

    def require(self, key: str) -> str:
        """Get a required configuration value, raising an error if not found."""
        value = self._config.get(key)
        if not value:
            raise RuntimeError(f"{key} is not set in configuration")
        return value


# Global configuration instance
_config = Config()


def get_config(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get a configuration value by key."""
    return _config.get(key, default)


def get_bool_config(key: str, default: bool = False) -> bool:
    return _config.get_bool(key, default)


def require_config(key: str) -> str:
    """Get a required configuration value, raising an error if not found."""
    return _config.require(key)
