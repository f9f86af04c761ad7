import re
import unicodedata
from typing import Dict

from indic_transliteration import sanscript

from ..errors import InvalidInputError, UnknownScriptError
from ..validation import validate_text
from .phoneme_table import PHONEME_TABLE, PhonemeTable
from .script_detector import ScriptKind, detect_script

ZERO_WIDTH = re.compile(r'[\u200B-\u200D\uFEFF]')


class SanskritTextNormalizer:
    """Unicode clean-up and romanization-scheme conversion for engine input."""

    def __init__(self, table: PhonemeTable = PHONEME_TABLE):
        # Romanizations accepted on input, keyed by the names users type
        self.schemes: Dict[str, str] = {
            'hk': sanscript.HK,
            'harvard-kyoto': sanscript.HK,
            'itrans': sanscript.ITRANS,
            'slp1': sanscript.SLP1,
            'velthuis': sanscript.VELTHUIS,
            'wx': sanscript.WX,
            'iast': sanscript.IAST,
            'devanagari': sanscript.DEVANAGARI,
        }

        # Ligatures spelled out as the phonemes they stand for
        self.special_chars: Dict[str, str] = {
            'ॐ': 'ओं',   # Om symbol
        }

        self.variants: Dict[str, str] = dict(table.variant_spellings)
        self.variants.update(self.special_chars)
        self._variant_pattern = re.compile('|'.join(
            re.escape(variant) for variant in sorted(self.variants, key=len, reverse=True)
        ))

    def normalize_unicode(self, text: str) -> str:
        """Normalize to NFC form."""
        return unicodedata.normalize('NFC', text)

    def strip_zero_width(self, text: str) -> str:
        """Remove zero-width characters that might interfere."""
        return ZERO_WIDTH.sub('', text)

    def fold_variants(self, text: str) -> str:
        """Rewrite alternative spellings (``ṁ``, ISO 15919 vowels, ``ॐ``) in primary form."""
        return self._variant_pattern.sub(lambda match: self.variants[match.group(0)], text)

    def clean(self, text: str) -> str:
        """NFC-normalize, drop zero-width characters, fold variant spellings and trim."""
        validate_text(text)
        return self.fold_variants(self.strip_zero_width(self.normalize_unicode(text))).strip()

    def scheme_id(self, scheme: str) -> str:
        try:
            return self.schemes[scheme.strip().lower()]
        except (AttributeError, KeyError):
            raise InvalidInputError(f"Unsupported transliteration scheme: {scheme!r}")

    def from_scheme(self, text: str, scheme: str) -> str:
        """Convert text in a supported romanization to IAST."""
        validate_text(text)
        source = self.scheme_id(scheme)
        if source != sanscript.IAST:
            text = sanscript.transliterate(text, source, sanscript.IAST)
        return self.fold_variants(self.normalize_unicode(text))

    def to_scheme(self, text: str, scheme: str) -> str:
        """Convert IAST or Devanagari text to a supported romanization."""
        validate_text(text)
        target = self.scheme_id(scheme)
        script = detect_script(text)
        if script is ScriptKind.UNKNOWN:
            raise UnknownScriptError(text)
        source = sanscript.DEVANAGARI if script is ScriptKind.DEVANAGARI else sanscript.IAST
        if source == target:
            return text
        return sanscript.transliterate(self.normalize_unicode(text), source, target)


DEFAULT_TEXT_NORMALIZER = SanskritTextNormalizer()


def clean_text(text: str) -> str:
    return DEFAULT_TEXT_NORMALIZER.clean(text)


def from_scheme(text: str, scheme: str) -> str:
    return DEFAULT_TEXT_NORMALIZER.from_scheme(text, scheme)


def to_scheme(text: str, scheme: str) -> str:
    return DEFAULT_TEXT_NORMALIZER.to_scheme(text, scheme)
