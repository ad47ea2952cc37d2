"""Session config loading and validation.

A config names the corpus file, an optional stop-word list and query
options.  Validation is syntactic only: structure and types.  Whether the
files exist is checked when they are read, and a missing file degrades to
an empty corpus or stop-word set rather than failing.
"""

from __future__ import annotations

import json
from pathlib import Path

from engine.searcher import FIRST_TERM_MODES


class ConfigError(ValueError):
    """Raised by load_config when a config file fails validation."""

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


# ── Syntactic Validation ────────────────────────────────────────────

def validate_syntactic(config: dict) -> list[str]:
    """Check required fields and types.  Returns list of error strings."""
    errors: list[str] = []

    if not isinstance(config, dict):
        return ["Config must be a JSON object."]

    if not isinstance(config.get("name"), str) or not config["name"]:
        errors.append("'name' is required and must be a non-empty string.")
    if not isinstance(config.get("corpus"), str) or not config["corpus"]:
        errors.append("'corpus' is required and must be a non-empty string.")

    stopwords = config.get("stopwords")
    if stopwords is not None and not isinstance(stopwords, str):
        errors.append("'stopwords' must be a string path or null.")

    query = config.get("query")
    if query is None:
        return errors
    if not isinstance(query, dict):
        errors.append("'query' must be an object if provided.")
        return errors

    first_term = query.get("first_term", "literal")
    if not isinstance(first_term, str) or first_term not in FIRST_TERM_MODES:
        errors.append(
            f"'query.first_term' must be one of {sorted(FIRST_TERM_MODES)}, got '{first_term}'."
        )

    return errors


# ── Top-level validate ──────────────────────────────────────────────

def _read_config(config_path: str) -> tuple[dict | None, list[str]]:
    path = Path(config_path)
    try:
        config = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        return None, [f"Invalid JSON: {e}"]
    except FileNotFoundError:
        return None, [f"Config file not found: {config_path}"]
    except (OSError, UnicodeDecodeError) as e:
        return None, [f"Could not read config: {e}"]
    return config, validate_syntactic(config)


def validate_config(config_path: str) -> tuple[bool, list[str]]:
    """Run syntactic validation on a config file.

    Returns (passed, errors).
    """
    _, errors = _read_config(config_path)
    if errors:
        return False, errors
    return True, []


def load_config(config_path: str) -> dict:
    """Read and validate a config file, raising ConfigError on failure."""
    config, errors = _read_config(config_path)
    if errors:
        raise ConfigError(errors)
    return config
