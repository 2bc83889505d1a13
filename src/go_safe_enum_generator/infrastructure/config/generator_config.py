#!/usr/bin/env python3

"""Defaults for the Go code emitter, overridable from the environment."""

import os

DEFAULT_CONFIG = {
    # Import path of the YAML package used by MarshalYAML/UnmarshalYAML
    "YAML_IMPORT": "gopkg.in/yaml.v3",
    # Link placed in the doc comment of every generated type
    "REFERENCE_URL": "https://threedots.tech/post/safer-enums-in-go/",
}


def get_config() -> dict[str, str]:
    """Get emitter configuration with environment variable overrides.

    Every key can be overridden with an ``ENUM_<KEY>`` variable, e.g.
    ``ENUM_YAML_IMPORT=gopkg.in/yaml.v2``.

    Returns:
        Configuration dictionary
    """
    config = DEFAULT_CONFIG.copy()

    for key in config:
        env_value = os.getenv(f"ENUM_{key}")
        if env_value is not None:
            config[key] = env_value

    return config
