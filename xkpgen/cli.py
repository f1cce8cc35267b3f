"""
Command-line interface: ``xkpgen [COUNT] [--debug] [--config PATH] [--dictionary PATH]``.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import __release__, __version__
from .composer import compose_with_meta
from .config import DEFAULT_CONFIG, ConfigError, PassphraseConfig
from .entropy import EntropySourceFailure
from .sources import (
    CONFIG_FILENAME,
    ConfigFileError,
    DictionaryError,
    find_config_file,
    read_config_file,
    read_dictionary,
)
from .words import WordSelectionExhausted, has_qualifying_word

EXIT_OK = 0
EXIT_CONFIG = 1
EXIT_GENERATION = 3


def configure_logging(debug: bool = False) -> logging.Logger:
    """
    Build the ``xkpgen`` logger: stderr only, DEBUG when ``debug`` is set,
    otherwise warnings and errors only.
    """
    logger = logging.getLogger("xkpgen")
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not a whole number") from None
    if number < 1:
        raise argparse.ArgumentTypeError("count must be at least 1")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="xkpgen",
        description="XKCD-style passphrase generator using the OS secure random source",
    )
    parser.add_argument(
        "count", nargs="?", type=_positive_int, default=1, help="number of passwords to print"
    )
    parser.add_argument("--debug", action="store_true", help="write debug output to stderr")
    parser.add_argument(
        "--version", action="store_true", help="print version and release, then exit"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="configuration file (default: ~/.xkcd-defaults.json, then ./.xkcd-defaults.json)",
    )
    parser.add_argument(
        "--dictionary",
        type=Path,
        default=None,
        help="JSON array of words (default: built-in word list)",
    )
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace, logger: logging.Logger) -> PassphraseConfig:
    """
    Resolve the configuration and dictionary the command line asks for.
    """
    dictionary: Optional[tuple[str, ...]] = None
    if args.dictionary is not None:
        dictionary = read_dictionary(args.dictionary, logger=logger)

    path = args.config or find_config_file(logger=logger)
    if path is None:
        logger.debug("no %s found, using built-in defaults", CONFIG_FILENAME)
        config = DEFAULT_CONFIG
        if dictionary is not None:
            config = config.with_dictionary(dictionary)
    else:
        logger.debug("reading configuration from %s", path)
        config = read_config_file(path, dictionary=dictionary, logger=logger)

    logger.debug("config: %s", _describe(config))
    logger.debug("len(dictionary) = %d", len(config.word_dictionary))
    return config


def _describe(config: PassphraseConfig) -> str:
    # The dictionary is left out, it can hold hundreds of thousands of words.
    return ", ".join(
        f"{name}={value!r}"
        for name, value in vars(config).items()
        if name != "word_dictionary"
    )


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for ``python -m xkpgen``, the ``xkpgen`` script and ``run_xkpgen.py``.
    """
    args = parse_args(argv)

    if args.version:
        print(f"version = {__version__}")
        print(f"release = {__release__}")
        return EXIT_OK

    logger = configure_logging(args.debug)
    logger.debug("args: %s", vars(args))

    try:
        config = load_config(args, logger)
    except (ConfigError, ConfigFileError, DictionaryError) as exc:
        logger.error("Error reading defaults: %s", exc)
        return EXIT_CONFIG

    if config.num_words > 0 and not has_qualifying_word(config):
        logger.error(
            "Error: no dictionary word has a length between %d and %d",
            config.word_length_min,
            config.word_length_max,
        )
        return EXIT_CONFIG

    passwords: list[str] = []
    try:
        for _ in range(args.count):
            meta = compose_with_meta(config)
            logger.debug(
                "composed length %d, final length %d", meta.unpadded_length, len(meta.password)
            )
            passwords.append(meta.password)
    except (EntropySourceFailure, WordSelectionExhausted) as exc:
        logger.critical("Error generating output: %s", exc)
        return EXIT_GENERATION

    for password in passwords:
        print(password)
    return EXIT_OK
