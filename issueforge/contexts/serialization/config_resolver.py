"""
Render Config Resolution

Merges an optional YAML override file onto the structured RenderConfig defaults.
Override files only need the keys they change:

    # render.yaml
    fold_threshold: 60
    indent_sequences: false

Examples:
    >>> load_render_config()                      # defaults (or ISSUEFORGE_RENDER_CONFIG)
    >>> load_render_config(Path("render.yaml"))   # explicit override file
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from issueforge.contexts.serialization.defaults import RenderConfig

load_dotenv()
RENDER_CONFIG_ENV = "ISSUEFORGE_RENDER_CONFIG"


def load_render_config(config_path: Optional[Path] = None) -> RenderConfig:
    """
    Load render options, layering an override file onto the defaults.

    Args:
        config_path: Optional override YAML (defaults to ISSUEFORGE_RENDER_CONFIG env variable)

    Returns:
        RenderConfig with overrides applied

    Raises:
        omegaconf.errors.ConfigKeyError: If the override file names an unknown option
        omegaconf.errors.ValidationError: If an option has the wrong type
    """
    if config_path is None and os.getenv(RENDER_CONFIG_ENV):
        config_path = Path(os.getenv(RENDER_CONFIG_ENV))

    base = OmegaConf.structured(RenderConfig)
    if config_path is not None:
        base = OmegaConf.merge(base, OmegaConf.load(config_path))

    return OmegaConf.to_object(base)
