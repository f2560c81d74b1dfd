"""
Configuration module for Bouncer.

Key material can be given inline as PEM text or as paths to PEM files, and
loaded from keyword arguments, environment variables or a JSON/YAML file.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from ..errors import ConfigurationError, ErrorCode
from ..util.config import (
    get_bool_config,
    get_config_value,
    load_config_file,
    parse_bool,
    read_text_file,
)


@dataclass
class BouncerConfig:
    """Configuration for a Bouncer instance"""
    private_key: Optional[str] = None
    public_key: Optional[str] = None
    passphrase: Optional[str] = None
    private_key_path: Optional[str] = None
    public_key_path: Optional[str] = None
    strict_payload: bool = False

    def __post_init__(self):
        try:
            if not self.private_key and self.private_key_path:
                self.private_key = read_text_file(self.private_key_path)
            if not self.public_key and self.public_key_path:
                self.public_key = read_text_file(self.public_key_path)
        except OSError as e:
            raise ConfigurationError(
                f"Unable to read key file: {e}", ErrorCode.MISSING_KEY, cause=e
            )

    @classmethod
    def from_env(cls) -> "BouncerConfig":
        """Create configuration from environment variables"""
        return cls(
            private_key=get_config_value("PRIVATE_KEY"),
            public_key=get_config_value("PUBLIC_KEY"),
            passphrase=get_config_value("KEY_PASSPHRASE"),
            private_key_path=get_config_value("PRIVATE_KEY_PATH"),
            public_key_path=get_config_value("PUBLIC_KEY_PATH"),
            strict_payload=get_bool_config("STRICT_PAYLOAD", False),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BouncerConfig":
        """Create configuration from a dictionary, rejecting unknown keys"""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys: {', '.join(unknown)}",
                details={'unknown': unknown},
            )

        values = dict(data)
        for name in ('private_key', 'public_key', 'passphrase', 'private_key_path', 'public_key_path'):
            value = values.get(name)
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(
                    f"{name} must be a string, got {type(value).__name__}",
                    details={'key': name},
                )
        if 'strict_payload' in values:
            values['strict_payload'] = parse_bool(values['strict_payload'])
        return cls(**values)

    @classmethod
    def from_file(cls, file_path: str) -> "BouncerConfig":
        """Create configuration from a JSON or YAML file"""
        try:
            data = load_config_file(file_path)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Unable to load configuration: {e}", cause=e)
        return cls.from_dict(data)

    def validate(self) -> bool:
        """Validate the configuration"""
        if not self.private_key:
            raise ConfigurationError("private_key is required", ErrorCode.MISSING_KEY)
        if not self.public_key:
            raise ConfigurationError("public_key is required", ErrorCode.MISSING_KEY)
        return True
