"""Configuration validation using JSON Schema."""

from __future__ import annotations

import copy
from typing import Any, Dict

import jsonschema
from jsonschema import Draft7Validator, validators

from exceptions import ConfigValidationError
from log_config.logger import get_logger

logger = get_logger(__name__)

HEX_COLOR_PATTERN = "^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$"

# JSON Schema for default.yaml configuration
CONFIG_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "canvas": {
            "type": "object",
            "default": {},
            "additionalProperties": False,
            "properties": {
                "default_size": {"type": "integer", "minimum": 1, "maximum": 256, "default": 16},
                "min_size": {"type": "integer", "minimum": 1, "maximum": 256, "default": 8},
                "max_size": {"type": "integer", "minimum": 1, "maximum": 256, "default": 32},
                "size_step": {"type": "integer", "minimum": 1, "maximum": 256, "default": 8},
                "canvas_px": {"type": "integer", "minimum": 64, "maximum": 4096, "default": 500},
                "default_color": {"type": "string", "pattern": HEX_COLOR_PATTERN, "default": "#000000"},
            },
        },
        "export": {
            "type": "object",
            "default": {},
            "additionalProperties": False,
            "properties": {
                "padding_px": {"type": "integer", "minimum": 0, "maximum": 256, "default": 16},
                "show_cell_borders": {"type": "boolean", "default": True},
                "default_filename": {"type": "string", "pattern": "\\.png$", "default": "pixel-art.png"},
            },
        },
        "ui": {
            "type": "object",
            "default": {},
            "additionalProperties": False,
            "properties": {
                "window_title": {"type": "string", "minLength": 1, "default": "PixelArt Studio"},
            },
        },
    },
}


def extend_with_default(validator_class):
    """Extend JSON Schema validator to set default values."""
    validate_properties = validator_class.VALIDATORS["properties"]

    def set_defaults(validator, properties, instance, schema):
        if isinstance(instance, dict):
            for prop, subschema in properties.items():
                if "default" in subschema:
                    instance.setdefault(prop, copy.deepcopy(subschema["default"]))

        for error in validate_properties(validator, properties, instance, schema):
            yield error

    return validators.extend(validator_class, {"properties": set_defaults})


DefaultValidatingValidator = extend_with_default(Draft7Validator)


def validate_config(config: Dict[str, Any]) -> None:
    """Validate configuration against JSON Schema, filling in defaults.

    Args:
        config: Configuration dictionary (modified in place)

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    try:
        validator = DefaultValidatingValidator(CONFIG_SCHEMA)
        errors = list(validator.iter_errors(config))

        if errors:
            error_messages = []
            for error in errors:
                path = " -> ".join(str(p) for p in error.path) if error.path else "root"
                error_messages.append(f"{path}: {error.message}")

            logger.error(f"Configuration validation failed with {len(errors)} errors")
            for msg in error_messages:
                logger.error(f"  - {msg}")

            raise ConfigValidationError(
                f"Configuration validation failed with {len(errors)} error(s). See logs for details.",
                validation_errors=error_messages,
            )

        logger.info("Configuration validation passed")

    except jsonschema.exceptions.SchemaError as e:
        logger.error(f"Invalid schema: {e}")
        raise ConfigValidationError(f"Invalid schema definition: {e}")


__all__ = ["validate_config", "CONFIG_SCHEMA"]
