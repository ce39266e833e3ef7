"""
Document style configuration.

Page and font settings for the .docx writer. Defaults reproduce the standard
résumé layout; a YAML file named by RESUMETAB_STYLE_PATH (or passed explicitly)
may override any subset of keys, e.g.:

    body:
      font: Georgia
    page:
      margin_inches: 0.75
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf

from resumetab.contexts.rendering.logger import _log_debug, _log_info

load_dotenv()

STYLE_PATH_ENV = "RESUMETAB_STYLE_PATH"

DEFAULT_STYLE: Dict[str, Any] = {
    "page": {
        "margin_inches": 1.0,
    },
    "body": {
        "font": "Times New Roman",
        "size": 11,
        "line_spacing": 1.15,
    },
    "heading": {
        "font": "Calibri",
        "size": 14,
        "space_before": 200,
        "space_after": 200,
    },
    "name": {
        "size": 16,
    },
    "list_style": "List Bullet",
}


def load_document_style(style_path: Optional[Union[str, Path]] = None) -> DictConfig:
    """
    Build the document style, merging an optional YAML override onto the defaults.

    Args:
        style_path: Override file; falls back to RESUMETAB_STYLE_PATH when None

    Returns:
        OmegaConf DictConfig with page, body, heading, name and list_style keys
    """
    style = OmegaConf.create(DEFAULT_STYLE)

    if style_path is None:
        style_path = os.getenv(STYLE_PATH_ENV)

    if style_path:
        override = OmegaConf.load(Path(style_path))
        style = OmegaConf.merge(style, override)
        _log_info(f"Applied style override: {style_path}")
    else:
        _log_debug("Using default document style")

    return style
