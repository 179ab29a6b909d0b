"""
Configuration for the academia runner.

The configuration is a plain dictionary. ``load_config`` starts from
``DEFAULT_CONFIG``, merges an optional JSON file over it, then applies
environment overrides. ``AcademiaConfig`` describes the accepted shape.
"""

import copy
import json
import logging
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, StrictInt, field_validator
from pydantic import ValidationError as PydanticValidationError

from .core.exceptions import ConfigurationError
from .core.models import DEFAULT_CONTACT, ContactInfo

DEFAULT_CONFIG: Dict[str, Any] = {
    'university_name': "University",
    'id_start': 1,
    'log_level': "INFO",
    'default_contact': DEFAULT_CONTACT.model_dump(),
}

ENV_OVERRIDES = {
    'ACADEMIA_UNIVERSITY_NAME': 'university_name',
    'ACADEMIA_LOG_LEVEL': 'log_level',
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AcademiaConfig(BaseModel):
    model_config = {"extra": "forbid"}

    university_name: str = Field(..., min_length=1)
    id_start: StrictInt = Field(..., ge=1)
    log_level: str
    default_contact: ContactInfo

    @field_validator('log_level')
    @classmethod
    def known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load and validate the configuration."""
    config = copy.deepcopy(DEFAULT_CONFIG)

    if path:
        try:
            with open(path, 'r') as f:
                loaded = json.load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file {path}: {e}", details={'path': path}) from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file {path}: {e}", details={'path': path}) from e
        if not isinstance(loaded, dict):
            raise ConfigurationError("Config file must contain a JSON object", details={'path': path})
        config.update(loaded)

    for env_var, key in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            config[key] = value

    validate_config(config)
    return config


def validate_config(config: Dict[str, Any]) -> None:
    """Validate ``config`` in place, normalizing the log level."""
    try:
        validated = AcademiaConfig.model_validate(config)
    except PydanticValidationError as e:
        fields = sorted({'.'.join(str(part) for part in error['loc']) for error in e.errors()})
        raise ConfigurationError(f"Invalid configuration: {', '.join(fields)}",
                                 details={'fields': fields}) from e
    config.update(validated.model_dump())


def default_contact(config: Dict[str, Any]) -> ContactInfo:
    """Fallback contact record configured for the university."""
    return ContactInfo.model_validate(config['default_contact'])


def configure_logging(config: Dict[str, Any]) -> None:
    logging.basicConfig(level=config['log_level'], format=LOG_FORMAT)
