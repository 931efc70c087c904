"""
Configuration loading for simple-sign-url

Settings can come from a JSON document, a JSON file or the process
environment and are converted into an immutable SignerConfig.
"""

import json
import logging
import os
from typing import Any, Dict, Mapping, Optional, Union
from dataclasses import dataclass, field
from pathlib import Path

from ..constants import DEFAULT_ALGORITHM, DEFAULT_TTL, SECRET_KEY_UNDEFINED
from ..exceptions import ConfigError
from ..signing.types import SignerConfig

ENV_PREFIX = "SIGN_URL_"


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class SignUrlSettings:
    """Settings for signing and verifying URLs"""
    secret_key: str = field(repr=False)
    ttl: int = DEFAULT_TTL
    algorithm: str = DEFAULT_ALGORITHM
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'SignUrlSettings':
        """Build settings from a parsed configuration mapping"""
        try:
            secret_key = data.get('secret_key')
            if not secret_key:
                raise ConfigError(SECRET_KEY_UNDEFINED, "MISSING_SECRET")
            
            logging_config = LoggingConfig(**(data.get('logging') or {}))
            if not isinstance(logging_config.level, str) or not isinstance(logging_config.format, str):
                raise ConfigError("Logging level and format must be strings", "INVALID_FORMAT")

            return cls(
                secret_key=secret_key,
                ttl=data.get('ttl', DEFAULT_TTL),
                algorithm=data.get('algorithm', DEFAULT_ALGORITHM),
                logging=logging_config,
            )
        except (AttributeError, TypeError) as e:
            raise ConfigError(f"Invalid configuration format: {e}", "INVALID_FORMAT")
    
    @classmethod
    def from_json(cls, json_string: str) -> 'SignUrlSettings':
        """Load settings from a JSON string"""
        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Failed to parse configuration JSON: {e}", "PARSE_ERROR")
        
        if not isinstance(data, dict):
            raise ConfigError("Configuration JSON must be an object", "INVALID_FORMAT")
        return cls.from_dict(data)
    
    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> 'SignUrlSettings':
        """Load settings from a JSON file"""
        try:
            with open(Path(file_path), 'r', encoding='utf-8') as f:
                json_string = f.read()
        except OSError as e:
            raise ConfigError(f"Failed to read configuration file: {e}", "FILE_ERROR")
        return cls.from_json(json_string)
    
    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'SignUrlSettings':
        """
        Load settings from environment variables
        
        Reads SIGN_URL_SECRET_KEY, SIGN_URL_TTL, SIGN_URL_ALGORITHM and
        SIGN_URL_LOG_LEVEL.
        """
        env = os.environ if environ is None else environ
        data: Dict[str, Any] = {'secret_key': env.get(f"{ENV_PREFIX}SECRET_KEY")}
        
        ttl = env.get(f"{ENV_PREFIX}TTL")
        if ttl:
            try:
                data['ttl'] = int(ttl)
            except ValueError:
                raise ConfigError(f"{ENV_PREFIX}TTL must be an integer, got {ttl!r}", "INVALID_FORMAT")
        
        algorithm = env.get(f"{ENV_PREFIX}ALGORITHM")
        if algorithm:
            data['algorithm'] = algorithm
        
        log_level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level:
            data['logging'] = {'level': log_level}
        
        return cls.from_dict(data)
    
    def to_signer_config(self) -> SignerConfig:
        """Convert to an immutable SignerConfig"""
        return SignerConfig(secret_key=self.secret_key, ttl=self.ttl, algorithm=self.algorithm)
    
    def configure_logging(self) -> None:
        """Apply the logging section with logging.basicConfig"""
        level = getattr(logging, self.logging.level.upper(), None)
        if not isinstance(level, int):
            raise ConfigError(f"Unknown log level: {self.logging.level}", "INVALID_FORMAT")
        logging.basicConfig(level=level, format=self.logging.format)


def load_settings(file_path: Optional[Union[str, Path]] = None,
                  environ: Optional[Mapping[str, str]] = None) -> SignUrlSettings:
    """
    Load settings from a file when given, otherwise from the environment
    """
    if file_path is not None:
        return SignUrlSettings.from_file(file_path)
    return SignUrlSettings.from_env(environ)
