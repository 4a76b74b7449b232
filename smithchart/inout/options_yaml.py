# smithchart/inout/options_yaml.py
import yaml
from typing import Any, Dict, Mapping
from cerberus import Validator
from smithchart.core.exceptions import ConfigError
from smithchart.core.options import ChartOptions
from smithchart.utils.logging_config import get_logger

logger = get_logger(__name__)

_RGBA_SCHEMA: Dict[str, Any] = {
    'type': 'list',
    'minlength': 3,
    'maxlength': 4,
    'schema': {'type': 'number', 'coerce': float, 'min': 0.0, 'max': 1.0},
}

COLOR_KEYS = ('rx_grid', 'gb_grid', 'rx_text', 'gb_text', 'ring', 'line', 'annotation')
FLAG_KEYS = ('show_rx', 'show_gb', 'show_labels', 'show_strings', 'draw_ring', 'sparse_gb')

# Schema for a chart options file.
OPTIONS_SCHEMA: Dict[str, Any] = {
    'flags': {
        'type': 'dict',
        'required': False,
        'schema': {key: {'type': 'boolean'} for key in FLAG_KEYS},
    },
    'line_width': {'type': 'number', 'coerce': float, 'min': 0.0, 'required': False},
    'point_width': {'type': 'number', 'coerce': float, 'min': 0.0, 'required': False},
    'colors': {
        'type': 'dict',
        'required': False,
        'schema': {key: _RGBA_SCHEMA for key in COLOR_KEYS},
    },
    'label_font': {'type': 'string', 'empty': False, 'required': False},
    'annotation_font': {'type': 'string', 'nullable': True, 'required': False},
    'annotation_font_size': {'type': 'number', 'coerce': float, 'min': 0.0, 'required': False},
}

def validate_schema(data: Any, schema: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate parsed YAML data against a given schema.

    Args:
        data: The YAML data as a dictionary.
        schema: The Cerberus schema definition.

    Returns:
        The validated (and coerced) document.

    Raises:
        ConfigError: If validation fails.
    """
    if not isinstance(data, Mapping):
        logger.error("Chart options must be a mapping, got %s", type(data).__name__)
        raise ConfigError("Chart options must be a mapping")
    validator = Validator(schema)
    if not validator.validate(dict(data)):
        errors = validator.errors
        logger.error("Chart options validation errors: %s", errors)
        raise ConfigError("Chart options validation failed: " + str(errors))
    return validator.document

def chart_options_from_dict(data: Mapping[str, Any]) -> ChartOptions:
    """
    Build ChartOptions from an already parsed mapping; missing keys keep their defaults.

    Raises:
        ConfigError: On validation errors.
    """
    document = validate_schema(data, OPTIONS_SCHEMA)
    kwargs: Dict[str, Any] = dict(document.get('flags', {}))
    for key in ('line_width', 'point_width', 'label_font', 'annotation_font', 'annotation_font_size'):
        if key in document:
            kwargs[key] = document[key]
    for key, value in document.get('colors', {}).items():
        # alpha defaults to opaque
        kwargs[key] = tuple(value) + (1.0,) * (4 - len(value))
    return ChartOptions(**kwargs)

def load_chart_options(yaml_file: str) -> ChartOptions:
    """
    Parse a YAML chart options file.

    Args:
        yaml_file: Path to the YAML file.

    Returns:
        The resulting ChartOptions.

    Raises:
        ConfigError: If the file is not valid YAML or fails validation.
    """
    with open(yaml_file, 'r') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {yaml_file}: {e}") from e
    if data is None:
        data = {}
    options = chart_options_from_dict(data)
    logger.debug("Loaded chart options from %s", yaml_file)
    return options
