"""Conversion between IAST and Devanagari through canonical phoneme ids.

A canonical sequence is a tuple of canonical ids. Characters the
tokenizer did not recognise travel through it as their own literal text;
being single characters they never collide with an id.
"""

import logging
from typing import List, NamedTuple, Optional, Sequence, Tuple, Union

from ..errors import InvalidInputError, UnknownScriptError
from ..validation import validate_text
from .phoneme_table import PHONEME_TABLE, PhonemeTable, VIRAMA
from .script_detector import ScriptKind
from .tokenizer import (
    DEFAULT_TOKENIZER, INHERENT_VOWEL_ID, PhonemeTokenizer, Token, TokenSequence,
)

logger = logging.getLogger(__name__)

CanonicalSequence = Tuple[str, ...]


class RenderedUnit(NamedTuple):
    canonical_id: Optional[str]
    surface: str
    inherent: bool = False


class CrossScriptNormalizer:
    """Maps token sequences to canonical form and renders them in either script."""

    def __init__(self, table: PhonemeTable = PHONEME_TABLE,
                 tokenizer: PhonemeTokenizer = DEFAULT_TOKENIZER):
        self.table = table
        self.tokenizer = tokenizer

    def to_canonical(self, sequence: Union[TokenSequence, str]) -> CanonicalSequence:
        """Canonical ids of a token sequence (a plain string is tokenized first)."""
        if isinstance(sequence, str):
            sequence = self.tokenizer.tokenize(sequence)
        if not isinstance(sequence, TokenSequence):
            raise InvalidInputError(f"Expected TokenSequence, got {type(sequence).__name__}")
        return tuple(token.canonical_id or token.surface for token in sequence)

    def render_units(self, canonical: Sequence[str], target: ScriptKind) -> List[RenderedUnit]:
        """Spell each canonical id in ``target``, one unit per phoneme."""
        target = ScriptKind.coerce(target)
        if isinstance(canonical, TokenSequence):
            canonical = self.to_canonical(canonical)
        if isinstance(canonical, str) or not all(isinstance(item, str) for item in canonical):
            raise InvalidInputError("Expected a sequence of canonical ids")

        if target is ScriptKind.IAST:
            return [self._iast_unit(item) for item in canonical]
        if target is ScriptKind.DEVANAGARI:
            return self._devanagari_units(tuple(canonical))
        raise UnknownScriptError(None, "Cannot render into an unknown script")

    def render(self, canonical: Sequence[str], target: ScriptKind) -> str:
        return ''.join(unit.surface for unit in self.render_units(canonical, target))

    def to_tokens(self, canonical: Sequence[str], target: ScriptKind) -> TokenSequence:
        """Render and wrap the result as a TokenSequence without re-tokenizing."""
        target = ScriptKind.coerce(target)
        tokens = []
        offset = 0
        for unit in self.render_units(canonical, target):
            phoneme = self.table.get(unit.canonical_id) if unit.canonical_id else None
            tokens.append(Token(phoneme, unit.surface, target, offset, unit.inherent))
            offset += len(unit.surface)
        return TokenSequence(tuple(tokens), target)

    def normalize(self, sequence: TokenSequence, target: ScriptKind) -> str:
        """Render a token sequence in ``target`` script."""
        return self.render(self.to_canonical(sequence), target)

    def transliterate(self, text: str, target: ScriptKind, source: ScriptKind = None) -> str:
        """Convert text between IAST and Devanagari; source is detected if omitted."""
        sequence = self.tokenizer.tokenize(text, source)
        if sequence.script is ScriptKind.UNKNOWN:
            logger.debug("Passing %r through unchanged: unknown script", text)
            return text
        return self.normalize(sequence, target)

    def is_equivalent(self, first: str, second: str) -> bool:
        """True when two spellings, in any script, denote the same phonemes."""
        one = self.tokenizer.tokenize(validate_text(first, name='first').strip())
        two = self.tokenizer.tokenize(validate_text(second, name='second').strip())
        if one.has_unrecognized or two.has_unrecognized:
            return False
        return self.to_canonical(one) == self.to_canonical(two)

    def _iast_unit(self, item: str) -> RenderedUnit:
        phoneme = self.table.get(item)
        if phoneme is None:
            return RenderedUnit(None, item)
        return RenderedUnit(item, phoneme.iast)

    def _devanagari_units(self, canonical: CanonicalSequence) -> List[RenderedUnit]:
        units = []
        i = 0
        while i < len(canonical):
            item = canonical[i]
            phoneme = self.table.get(item)

            if phoneme is None:
                units.append(RenderedUnit(None, item))
                i += 1
            elif phoneme.devanagari is None:
                units.append(RenderedUnit(item, phoneme.iast))
                i += 1
            elif phoneme.is_consonant and not phoneme.is_sign:
                following = self.table.get(canonical[i + 1]) if i + 1 < len(canonical) else None
                if following is not None and following.is_vowel:
                    units.append(RenderedUnit(item, phoneme.devanagari))
                    if following.canonical_id == INHERENT_VOWEL_ID:
                        units.append(RenderedUnit(INHERENT_VOWEL_ID, '', True))
                    else:
                        units.append(RenderedUnit(following.canonical_id, following.matra))
                    i += 2
                else:
                    # No vowel follows: suppress the inherent a
                    units.append(RenderedUnit(item, phoneme.devanagari + VIRAMA))
                    i += 1
            else:
                units.append(RenderedUnit(item, phoneme.devanagari))
                i += 1
        return units


DEFAULT_NORMALIZER = CrossScriptNormalizer()


def to_canonical(sequence: TokenSequence) -> CanonicalSequence:
    return DEFAULT_NORMALIZER.to_canonical(sequence)


def render(canonical: Sequence[str], target: ScriptKind) -> str:
    return DEFAULT_NORMALIZER.render(canonical, target)


def normalize(sequence: TokenSequence, target: ScriptKind) -> str:
    return DEFAULT_NORMALIZER.normalize(sequence, target)


def transliterate(text: str, target: ScriptKind, source: ScriptKind = None) -> str:
    return DEFAULT_NORMALIZER.transliterate(text, target, source)


def is_equivalent_across_scripts(first: str, second: str) -> bool:
    return DEFAULT_NORMALIZER.is_equivalent(first, second)
