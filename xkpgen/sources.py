"""
Where configuration and dictionaries come from.

Configuration lives in ``.xkcd-defaults.json``, looked up in the user's
home directory first and then in the current directory. Dictionaries are
JSON arrays of words, the format written by the dictionary build scripts.

Every function takes an optional ``logger``; nothing here logs through a
module-global logger.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from .config import PassphraseConfig, parse_config, unknown_keys

CONFIG_FILENAME = ".xkcd-defaults.json"

_SILENT = logging.getLogger("xkpgen.silent")
_SILENT.addHandler(logging.NullHandler())
_SILENT.propagate = False


class ConfigFileError(ValueError):
    """The configuration file could not be read or is not a JSON object."""


class DictionaryError(ValueError):
    """The dictionary file could not be read or is not a list of words."""


def find_config_file(
    home: Optional[Path] = None,
    cwd: Optional[Path] = None,
    logger: Optional[logging.Logger] = None,
) -> Optional[Path]:
    """
    Return the first existing ``.xkcd-defaults.json``, or None.

    The home directory wins over the current directory.
    """
    log = logger or _SILENT
    if home is None:
        try:
            home = Path.home()
        except RuntimeError as exc:
            log.debug("no home directory, skipping it: %s", exc)
    cwd = cwd if cwd is not None else Path.cwd()

    candidates = [cwd / CONFIG_FILENAME]
    if home is not None:
        candidates.insert(0, home / CONFIG_FILENAME)

    for candidate in candidates:
        exists = candidate.is_file()
        log.debug("config candidate %s exists=%s", candidate, exists)
        if exists:
            return candidate
    return None


def _load_json(path: Path, error_cls: type[ValueError]):
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise error_cls(f"cannot read {path}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise error_cls(f"{path} is not valid JSON: {exc}") from exc


def read_config_file(
    path: Path,
    dictionary: Optional[tuple[str, ...]] = None,
    logger: Optional[logging.Logger] = None,
) -> PassphraseConfig:
    """
    Load and validate a configuration file.

    Raises :class:`ConfigFileError` for I/O and JSON problems and a
    :class:`~xkpgen.config.ConfigError` for invalid values.
    """
    log = logger or _SILENT
    raw = _load_json(Path(path), ConfigFileError)
    if not isinstance(raw, dict):
        raise ConfigFileError(f"{path} must contain a JSON object")
    log.debug("raw config from %s: %s", path, raw)

    ignored = unknown_keys(raw)
    if ignored:
        log.warning("ignoring unknown configuration keys in %s: %s", path, ", ".join(ignored))

    return parse_config(raw, dictionary=dictionary)


def read_dictionary(
    path: Path,
    logger: Optional[logging.Logger] = None,
) -> tuple[str, ...]:
    """
    Load a dictionary file: a non-empty JSON array of strings.
    """
    log = logger or _SILENT
    words = _load_json(Path(path), DictionaryError)
    if not isinstance(words, list):
        raise DictionaryError(f"{path} must contain a JSON array of words")
    if not words:
        raise DictionaryError(f"{path} contains no words")
    for word in words:
        if not isinstance(word, str):
            raise DictionaryError(f"{path} contains a non-string entry: {word!r}")

    log.debug("read %d words from %s", len(words), path)
    return tuple(words)
