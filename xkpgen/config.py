"""
Configuration for the XKCD-style passphrase generator.

A loosely-typed record (usually decoded from ``.xkcd-defaults.json``) is
validated by :func:`parse_config` and turned into an immutable
:class:`PassphraseConfig`. Nothing downstream re-interprets strings.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Iterable, Mapping, Optional

from .wordlist import DEFAULT_WORDS


class ConfigError(ValueError):
    """Base class for configuration errors."""


class UnknownEnumValue(ConfigError):
    """An enum field holds a token that is not recognised."""

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Unknown {field}: {value!r}")


class InvalidAlphabet(ConfigError):
    """An alphabet needed by an active mode is empty or malformed."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")


class InvalidValue(ConfigError):
    """A numeric field is out of range or of the wrong type."""

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class CaseTransform(Enum):
    NONE = "none"  # case
    ALTERNATE = "alternate"  # CaSe
    CAPITALISE = "capitalise"  # CASE
    INVERT = "invert"  # cASE
    UPPER = "upper"  # CASE
    RANDOM = "random"  # cASe

    # "lower" is an alias of "none"
    LOWER = "none"


class SeparatorMode(Enum):
    NONE = "none"
    RANDOM = "random"
    CHARACTER = "character"


class PaddingType(Enum):
    NONE = "none"
    FIXED = "fixed"
    ADAPTIVE = "adaptive"


class PaddingCharacter(Enum):
    RANDOM = "random"  # draw from symbol_alphabet
    SEPARATOR = "separator"  # reuse the separator drawn for this password
    SPECIFIED = "specified"  # the single character in symbol_alphabet


_CASE_TOKENS = {
    "none": CaseTransform.NONE,
    "lower": CaseTransform.LOWER,
    "alternate": CaseTransform.ALTERNATE,
    "capitalise": CaseTransform.CAPITALISE,
    "invert": CaseTransform.INVERT,
    "upper": CaseTransform.UPPER,
    "random": CaseTransform.RANDOM,
}

_PADDING_TYPE_TOKENS = {
    "none": PaddingType.NONE,
    "fixed": PaddingType.FIXED,
    "adaptive": PaddingType.ADAPTIVE,
}


def _check_alphabet(field: str, alphabet: tuple[str, ...]) -> None:
    if not alphabet:
        raise InvalidAlphabet(field, "must not be empty")
    for entry in alphabet:
        if not isinstance(entry, str) or len(entry) != 1:
            raise InvalidAlphabet(field, f"{entry!r} is not a single character")


@dataclass(frozen=True)
class PassphraseConfig:
    # How many dictionary words go into each password.
    num_words: int = 4

    # Inclusive bounds on the length of a selected word.
    word_length_min: int = 4
    word_length_max: int = 8

    case_transform: CaseTransform = CaseTransform.ALTERNATE

    # With SeparatorMode.CHARACTER the alphabet holds exactly that character.
    separator_mode: SeparatorMode = SeparatorMode.RANDOM
    separator_alphabet: tuple[str, ...] = tuple("-+=.*_|~,")

    # Random decimal digits emitted around the word block.
    padding_digits_before: int = 2
    padding_digits_after: int = 2

    padding_type: PaddingType = PaddingType.FIXED

    # With PaddingCharacter.SPECIFIED the alphabet holds exactly that character.
    padding_character: PaddingCharacter = PaddingCharacter.RANDOM
    symbol_alphabet: tuple[str, ...] = tuple("!@$%^&*-_+=:|~?/.;")

    # Only used with PaddingType.FIXED.
    padding_characters_before: int = 2
    padding_characters_after: int = 2

    # Only used with PaddingType.ADAPTIVE.
    pad_to_length: int = 32

    # Candidate words, read-only.
    word_dictionary: tuple[str, ...] = DEFAULT_WORDS

    # Give up on word selection after this many draws. None never gives up.
    max_word_attempts: Optional[int] = None

    def __post_init__(self) -> None:
        self.validate()

    def with_dictionary(self, words: Iterable[str]) -> "PassphraseConfig":
        """Return a copy of this configuration carrying ``words``."""
        return replace(self, word_dictionary=tuple(words))

    @property
    def uses_padding_symbol(self) -> bool:
        return self.padding_type in (PaddingType.FIXED, PaddingType.ADAPTIVE)

    def validate(self) -> None:
        """
        Check the cross-field invariants.

        Raises a :class:`ConfigError` subclass on the first violation.
        """
        for name in (
            "num_words",
            "word_length_min",
            "word_length_max",
            "padding_digits_before",
            "padding_digits_after",
            "padding_characters_before",
            "padding_characters_after",
            "pad_to_length",
        ):
            value = getattr(self, name)
            if value < 0:
                raise InvalidValue(name, value, "must not be negative")

        if self.word_length_min > self.word_length_max:
            raise InvalidValue(
                "word_length_min",
                self.word_length_min,
                f"greater than word_length_max ({self.word_length_max})",
            )

        if self.max_word_attempts is not None and self.max_word_attempts < 1:
            raise InvalidValue(
                "max_word_attempts", self.max_word_attempts, "must be at least 1"
            )

        if self.separator_mode is not SeparatorMode.NONE:
            _check_alphabet("separator_alphabet", self.separator_alphabet)
        if self.separator_mode is SeparatorMode.CHARACTER and len(self.separator_alphabet) != 1:
            raise InvalidAlphabet(
                "separator_alphabet", "a fixed separator needs exactly one character"
            )

        if self.uses_padding_symbol:
            if self.padding_character is PaddingCharacter.SEPARATOR:
                if self.separator_mode is SeparatorMode.NONE:
                    raise InvalidAlphabet(
                        "padding_character",
                        "padding with the separator needs a separator",
                    )
            else:
                _check_alphabet("symbol_alphabet", self.symbol_alphabet)
            if (
                self.padding_character is PaddingCharacter.SPECIFIED
                and len(self.symbol_alphabet) != 1
            ):
                raise InvalidAlphabet(
                    "symbol_alphabet", "a specified padding needs exactly one character"
                )


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = PassphraseConfig()

_FIELD_NAMES = frozenset(f.name for f in fields(PassphraseConfig))



def _int_field(raw: Mapping[str, Any], name: str) -> int:
    value = raw.get(name, getattr(DEFAULT_CONFIG, name))
    # bool is an int subclass; true/false in JSON is a mistake here.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidValue(name, value, "must be an integer")
    return value


def _token(raw: Mapping[str, Any], name: str, default: str) -> tuple[str, str]:
    """Return (original, lower-cased) string value of an enum field."""
    value = raw.get(name, default)
    if not isinstance(value, str):
        raise UnknownEnumValue(name, value)
    return value, value.lower()


def _alphabet_field(raw: Mapping[str, Any], name: str) -> tuple[str, ...]:
    value = raw.get(name)
    if value is None:
        return getattr(DEFAULT_CONFIG, name)
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise InvalidAlphabet(name, "must be an array of single characters")
    return tuple(value)


def parse_config(
    raw: Mapping[str, Any],
    dictionary: Optional[Iterable[str]] = None,
) -> PassphraseConfig:
    """
    Validate and normalise a raw configuration record.

    Enum tokens are matched case-insensitively. ``separator_character``
    and ``padding_character`` also accept a literal single character,
    which is lower-cased like any other token and replaces the
    corresponding alphabet. Missing keys take their
    value from :data:`DEFAULT_CONFIG`; unknown keys are ignored.
    """
    if not isinstance(raw, Mapping):
        raise ConfigError("configuration must be a JSON object")

    _, case_token = _token(raw, "case_transform", DEFAULT_CONFIG.case_transform.value)
    try:
        case_transform = _CASE_TOKENS[case_token]
    except KeyError:
        raise UnknownEnumValue("case_transform", raw.get("case_transform")) from None

    separator_alphabet = _alphabet_field(raw, "separator_alphabet")
    separator, separator_token = _token(raw, "separator_character", "random")
    if separator_token == "none":
        separator_mode = SeparatorMode.NONE
    elif separator_token == "random":
        separator_mode = SeparatorMode.RANDOM
    elif len(separator_token) == 1:
        separator_mode = SeparatorMode.CHARACTER
        separator_alphabet = (separator_token,)
    else:
        raise UnknownEnumValue("separator_character", separator)

    _, padding_type_token = _token(raw, "padding_type", DEFAULT_CONFIG.padding_type.value)
    try:
        padding_type = _PADDING_TYPE_TOKENS[padding_type_token]
    except KeyError:
        raise UnknownEnumValue("padding_type", raw.get("padding_type")) from None

    symbol_alphabet = _alphabet_field(raw, "symbol_alphabet")
    padding, padding_token = _token(raw, "padding_character", "random")
    if padding_token == "random":
        padding_character = PaddingCharacter.RANDOM
    elif padding_token == "separator":
        padding_character = PaddingCharacter.SEPARATOR
    elif len(padding_token) == 1:
        padding_character = PaddingCharacter.SPECIFIED
        symbol_alphabet = (padding_token,)
    else:
        raise UnknownEnumValue("padding_character", padding)

    max_word_attempts = raw.get("max_word_attempts")
    if max_word_attempts is not None and (
        isinstance(max_word_attempts, bool) or not isinstance(max_word_attempts, int)
    ):
        raise InvalidValue("max_word_attempts", max_word_attempts, "must be an integer")

    return PassphraseConfig(
        num_words=_int_field(raw, "num_words"),
        word_length_min=_int_field(raw, "word_length_min"),
        word_length_max=_int_field(raw, "word_length_max"),
        case_transform=case_transform,
        separator_mode=separator_mode,
        separator_alphabet=separator_alphabet,
        padding_digits_before=_int_field(raw, "padding_digits_before"),
        padding_digits_after=_int_field(raw, "padding_digits_after"),
        padding_type=padding_type,
        padding_character=padding_character,
        symbol_alphabet=symbol_alphabet,
        padding_characters_before=_int_field(raw, "padding_characters_before"),
        padding_characters_after=_int_field(raw, "padding_characters_after"),
        pad_to_length=_int_field(raw, "pad_to_length"),
        word_dictionary=DEFAULT_WORDS if dictionary is None else tuple(dictionary),
        max_word_attempts=max_word_attempts,
    )


def unknown_keys(raw: Mapping[str, Any]) -> list[str]:
    """Keys of ``raw`` that :func:`parse_config` ignores."""
    accepted = (_FIELD_NAMES - {"word_dictionary", "separator_mode"}) | {"separator_character"}
    return sorted(key for key in raw if key not in accepted)
