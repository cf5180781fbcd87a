"""
Simplified JSON-based configuration for the geography column bridge
Single config.json file contains all configuration
"""
import json
import os
import logging
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV = "GEOGRAPHY_CONFIG_FILE"
VALID_BYTE_ORDERS = ('little', 'big')
VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class Config:
    """Main configuration class - loads from single config.json"""

    _config: Optional[Dict[str, Any]] = None
    _config_file: Optional[str] = None

    @classmethod
    def load(cls, file_path: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration from JSON file"""
        if file_path:
            cls._config_file = file_path
            cls._config = None

        if cls._config is None:
            cls._config = cls._load_config()

        return cls._config

    @classmethod
    def reload(cls) -> Dict[str, Any]:
        """
        Force reload configuration from file.

        Clears the cached configuration and reloads it from the config file.
        Values already captured by callers are not updated.

        Returns:
            Dict[str, Any]: Reloaded configuration dictionary
        """
        cls._config = None
        return cls.load()

    @classmethod
    def _load_config(cls) -> Dict[str, Any]:
        """Load JSON config with defaults and validation"""
        config_file = cls._find_config_file()

        try:
            if os.path.exists(config_file):
                with open(config_file, 'r', encoding='utf-8') as f:
                    config = json.load(f)
                logger.info(f"Loaded configuration from {config_file}")

                merged_config = cls._merge_with_defaults(config)
                cls._validate_config(merged_config)

                return merged_config
            else:
                logger.warning(f"Config file not found: {config_file}, using defaults")
                return cls._get_defaults()
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in config file: {e}", exc_info=True)
            return cls._get_defaults()
        except Exception as e:
            logger.error(f"Error loading config: {e}", exc_info=True)
            return cls._get_defaults()

    @classmethod
    def _validate_config(cls, config: Dict[str, Any]) -> None:
        """
        Validate configuration values, replacing invalid ones with defaults.

        Args:
            config: Configuration dictionary to validate (modified in place)
        """
        defaults = cls._get_defaults()

        codec_config = config.setdefault('codec', {})
        byte_order = codec_config.get('byte_order', 'little')
        byte_order = byte_order.lower() if isinstance(byte_order, str) else byte_order
        if byte_order not in VALID_BYTE_ORDERS:
            logger.warning(f"Invalid codec.byte_order: {byte_order}, using default 'little'")
            byte_order = 'little'
        codec_config['byte_order'] = byte_order

        if not isinstance(codec_config.get('require_exact_length'), bool):
            logger.warning("codec.require_exact_length must be a boolean, using default False")
            codec_config['require_exact_length'] = False

        serialization_config = config.setdefault('serialization', {})
        if not isinstance(serialization_config.get('enabled'), bool):
            logger.warning("serialization.enabled must be a boolean, using default False")
            serialization_config['enabled'] = False

        log_config = config.setdefault('logging', {})
        level = str(log_config.get('level', 'INFO')).upper()
        if level not in VALID_LOG_LEVELS:
            logger.warning(f"Invalid logging.level: {level}, using default 'INFO'")
            level = 'INFO'
        log_config['level'] = level

        metrics_config = config.setdefault('metrics', {})
        port = metrics_config.get('port', 9090)
        if not isinstance(port, int) or not (1 <= port <= 65535):
            logger.warning(f"Invalid metrics port: {port}, using default 9090")
            metrics_config['port'] = defaults['metrics']['port']

        logger.debug("Configuration validation completed")

    @classmethod
    def _find_config_file(cls) -> str:
        """
        Resolve the config file path.
        Explicit path first, then GEOGRAPHY_CONFIG_FILE, then config.json beside this module.
        """
        if cls._config_file:
            return cls._config_file

        env_path = os.getenv(CONFIG_FILE_ENV)
        if env_path:
            return env_path

        module_dir = os.path.dirname(os.path.abspath(__file__))
        return os.path.join(module_dir, "config.json")

    @classmethod
    def _merge_with_defaults(cls, config: Dict[str, Any]) -> Dict[str, Any]:
        """Merge loaded config with defaults"""
        defaults = cls._get_defaults()
        result = defaults.copy()
        for key, value in config.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = {**result[key], **value}
            else:
                result[key] = value
        return result

    @classmethod
    def _get_defaults(cls) -> Dict[str, Any]:
        """Default configuration values"""
        return {
            "codec": {
                "byte_order": "little",
                "require_exact_length": False
            },
            "serialization": {"enabled": False},
            "logging": {
                "log_file": "logs/geography.log",
                "level": "INFO",
                "max_bytes": 10485760,
                "backup_count": 5,
                "json_format": False
            },
            "metrics": {"enabled": True, "port": 9090}
        }

    @classmethod
    def get_codec_config(cls) -> Dict[str, Any]:
        """Get codec configuration"""
        return cls.load()["codec"]

    @classmethod
    def get_logging_config(cls) -> Dict[str, Any]:
        """Get logging configuration"""
        return cls.load()["logging"]


class ServerParams:
    """Runtime parameters"""

    @classmethod
    def get(cls, key: str, default=None):
        """Get parameter using dot notation (e.g., 'codec.byte_order')"""
        config = Config.load()
        keys = key.split('.')
        value = config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default
        return value if value is not None else default

    @classmethod
    def get_int(cls, key: str, default: int = 0) -> int:
        """Get integer parameter"""
        value = cls.get(key, default)
        try:
            return int(value)
        except (ValueError, TypeError):
            return default

    @classmethod
    def get_str(cls, key: str, default: str = '') -> str:
        """Get string parameter"""
        value = cls.get(key, default)
        return str(value) if value is not None else default

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        """Get boolean parameter"""
        value = cls.get(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ('true', '1', 'yes', 'on')
        return bool(value) if value is not None else default


# Auto-load config on module import
Config.load()
