import logging
import unicodedata
from enum import Enum
from typing import NamedTuple

from ..errors import InvalidInputError, UnknownScriptError

logger = logging.getLogger(__name__)


class ScriptKind(Enum):
    """Scripts the engine can read and write."""
    IAST = 'IAST'
    DEVANAGARI = 'Devanagari'
    UNKNOWN = 'Unknown'

    @classmethod
    def coerce(cls, value) -> 'ScriptKind':
        """Accept a ScriptKind or its name/value in any letter case."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if wanted in (member.value.lower(), member.name.lower()):
                    return member
        raise InvalidInputError(f"Not a script: {value!r}")


# Main Devanagari block
DEVANAGARI_RANGE = (0x0900, 0x097F)

# Precomposed letters used by IAST (and the ISO 15919 variants it borrows)
IAST_DIACRITIC_LETTERS = frozenset(
    'āīūṛṝḷḹṅñṭḍṇśṣṃḥṁ'
    'ĀĪŪṚṜḶḸṄÑṬḌṆŚṢṂḤṀ'
)

# Combining marks that spell IAST letters in decomposed text
IAST_COMBINING_MARKS = frozenset('\u0301\u0303\u0304\u0307\u0310\u0323\u0325')


class ScriptProfile(NamedTuple):
    iast: int
    devanagari: int
    other: int


def is_devanagari_char(char: str) -> bool:
    """Check if character belongs to the Devanagari block."""
    return DEVANAGARI_RANGE[0] <= ord(char) <= DEVANAGARI_RANGE[1]


def is_iast_char(char: str) -> bool:
    """Check if character is a Latin letter or diacritic usable in IAST."""
    if char in IAST_DIACRITIC_LETTERS or char in IAST_COMBINING_MARKS:
        return True
    if char.isascii():
        return char.isalpha()
    if not unicodedata.category(char).startswith('L'):
        return False
    return unicodedata.name(char, '').startswith('LATIN ')


def _is_countable(char: str) -> bool:
    # Whitespace, punctuation, digits and symbols never vote
    return unicodedata.category(char)[0] in ('L', 'M')


def script_profile(text: str) -> ScriptProfile:
    """Count letters belonging to each script, ignoring everything else."""
    iast = devanagari = other = 0
    for char in text:
        if not _is_countable(char):
            continue
        if is_devanagari_char(char):
            devanagari += 1
        elif is_iast_char(char):
            iast += 1
        else:
            other += 1
    return ScriptProfile(iast, devanagari, other)


def detect_script(text: str) -> ScriptKind:
    """Classify text as IAST, Devanagari or Unknown.

    The script with the majority of matched letters wins. Text with no
    matched letters, or with equal counts for both scripts, is Unknown.
    """
    if not isinstance(text, str):
        raise InvalidInputError(f"Expected str, got {type(text).__name__}")

    profile = script_profile(text)
    if profile.devanagari > profile.iast:
        return ScriptKind.DEVANAGARI
    if profile.iast > profile.devanagari:
        return ScriptKind.IAST
    if profile.iast:
        logger.debug("Tied script counts for %r", text)
    return ScriptKind.UNKNOWN


def require_script(text: str) -> ScriptKind:
    """Like detect_script, but raise UnknownScriptError instead of Unknown."""
    script = detect_script(text)
    if script is ScriptKind.UNKNOWN:
        raise UnknownScriptError(text)
    return script
