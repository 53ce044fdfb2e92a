"""
Configuration loading for the word-hash pipeline.

Per-document options (``clean_source`` and ``stemmer_language``) are
plain call-site arguments. Project-wide defaults and logging settings
live in config/word_hash.yaml so they can be changed without touching
code.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional

import yaml


DEFAULT_CONFIG_PATH = "config/word_hash.yaml"

DEFAULT_OPTIONS: Dict[str, Any] = {
    "clean_source": True,
    "stemmer_language": "en",
}

REQUIRED_SECTIONS = ("word_hash", "logging")


def _load_yaml(path: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file and return it as a dictionary.

    Parameters
    ----------
    path : str
        Path to the YAML file.

    Returns
    -------
    Dict[str, Any]
        Parsed YAML content.

    Raises
    ------
    FileNotFoundError
        If the YAML file does not exist.
    ValueError
        If the YAML file is empty or cannot be parsed.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)

    if cfg is None:
        raise ValueError(f"Config file is empty or invalid: {path}")

    return cfg


def load_word_hash_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """
    Load and return the full configuration dictionary.

    Parameters
    ----------
    config_path : str, optional
        Path to the YAML configuration file.

    Returns
    -------
    Dict[str, Any]
        Dictionary containing the "word_hash" and "logging" sections.
    """
    cfg = _load_yaml(config_path)

    for section in REQUIRED_SECTIONS:
        if section not in cfg:
            raise KeyError(f'Missing "{section}" section in config: {config_path}')

    return cfg


def resolve_options(options: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge caller options over the defaults.

    Only recognized keys are taken; anything else is ignored so that
    callers can pass a larger options dict straight through.
    """
    resolved = dict(DEFAULT_OPTIONS)
    if not options:
        return resolved

    for key in DEFAULT_OPTIONS:
        if key in options and options[key] is not None:
            resolved[key] = options[key]

    resolved["clean_source"] = bool(resolved["clean_source"])
    resolved["stemmer_language"] = str(resolved["stemmer_language"])
    return resolved


def unrecognized_option_keys(options: Optional[Mapping[str, Any]]) -> list:
    """Keys in ``options`` that the pipeline does not understand."""
    if not options:
        return []
    return sorted(str(k) for k in options if k not in DEFAULT_OPTIONS)


def get_word_hash_options(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """
    Retrieve the resolved 'word_hash' section from the configuration.

    Parameters
    ----------
    config_path : str
        Path to the YAML configuration.

    Returns
    -------
    Dict[str, Any]
        Options with ``clean_source`` and ``stemmer_language`` filled in.
    """
    cfg = load_word_hash_config(config_path)
    return resolve_options(cfg["word_hash"] or {})
