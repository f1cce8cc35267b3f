"""
XKCD-style passphrase generator package.
"""

__version__ = "1.0.0"
__release__ = "v1.0.0"

from .config import PassphraseConfig, DEFAULT_CONFIG, parse_config
from .composer import compose, compose_with_meta, generate_passwords

__all__ = [
    "PassphraseConfig",
    "DEFAULT_CONFIG",
    "parse_config",
    "compose",
    "compose_with_meta",
    "generate_passwords",
]
