import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from ..errors import InvalidInputError
from .phoneme_table import (
    BARE, LETTER, MATRA, PHONEME_TABLE, Phoneme, PhonemeTable, SurfaceForm, VIRAMA,
)
from .script_detector import ScriptKind, detect_script

logger = logging.getLogger(__name__)

INHERENT_VOWEL_ID = 'VOWEL_A_SHORT'


@dataclass(frozen=True)
class Token:
    """A phoneme occurrence inside one tokenized word.

    ``phoneme`` is None for characters outside both inventories; such
    tokens pass through unchanged. The inherent ``a`` of a Devanagari
    consonant letter is its own token with an empty surface.
    """
    phoneme: Optional[Phoneme]
    surface: str
    script: ScriptKind
    start: int
    inherent: bool = False

    @property
    def canonical_id(self) -> Optional[str]:
        return self.phoneme.canonical_id if self.phoneme else None

    @property
    def is_unrecognized(self) -> bool:
        return self.phoneme is None

    @property
    def end(self) -> int:
        return self.start + len(self.surface)


@dataclass(frozen=True)
class TokenSequence:
    """Ordered tokens of one word; surfaces concatenate back to the input."""
    tokens: Tuple[Token, ...]
    script: ScriptKind

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __getitem__(self, index):
        return self.tokens[index]

    def __bool__(self) -> bool:
        return bool(self.tokens)

    @property
    def text(self) -> str:
        return ''.join(token.surface for token in self.tokens)

    @property
    def canonical_ids(self) -> Tuple[Optional[str], ...]:
        return tuple(token.canonical_id for token in self.tokens)

    @property
    def has_unrecognized(self) -> bool:
        return any(token.is_unrecognized for token in self.tokens)

    @property
    def unrecognized(self) -> Tuple[Token, ...]:
        return tuple(token for token in self.tokens if token.is_unrecognized)

    @property
    def first(self) -> Optional[Token]:
        return self.tokens[0] if self.tokens else None

    @property
    def last(self) -> Optional[Token]:
        return self.tokens[-1] if self.tokens else None


class PhonemeTokenizer:
    """Longest-match-first phoneme tokenizer for IAST and Devanagari."""

    def __init__(self, table: PhonemeTable = PHONEME_TABLE):
        self.table = table
        self._candidates = {
            script: self._index(table.surfaces_for(script))
            for script in (ScriptKind.IAST, ScriptKind.DEVANAGARI)
        }

    @staticmethod
    def _index(forms: Tuple[SurfaceForm, ...]) -> Dict[str, List[SurfaceForm]]:
        """Group candidate spellings by first character, longest first."""
        index: Dict[str, List[SurfaceForm]] = {}
        for form in forms:
            index.setdefault(form.text[0], []).append(form)
        for bucket in index.values():
            bucket.sort(key=lambda form: -len(form.text))
        return index

    def match_at(self, text: str, position: int, script: ScriptKind) -> Optional[SurfaceForm]:
        """Return the longest spelling that matches ``text`` at ``position``."""
        bucket = self._candidates.get(script, {}).get(text[position])
        if not bucket:
            return None
        for form in bucket:
            if text.startswith(form.text, position):
                return form
        return None

    def tokenize(self, text: str, script: ScriptKind = None) -> TokenSequence:
        """Segment a word into phoneme tokens.

        Args:
            text: Word in IAST or Devanagari
            script: Script of ``text``; detected when omitted

        Returns:
            TokenSequence whose surfaces reconstruct ``text`` exactly. A
            spelling that would not render back unchanged (a capital, a
            decomposed letter, a stray matra) is left unrecognized.
        """
        if not isinstance(text, str):
            raise InvalidInputError(f"Expected str, got {type(text).__name__}")
        script = detect_script(text) if script is None else ScriptKind.coerce(script)

        if script is ScriptKind.DEVANAGARI:
            tokens = self._scan_devanagari(text)
        elif script is ScriptKind.IAST:
            tokens = self._scan_iast(text)
        else:
            tokens = [Token(None, char, script, i) for i, char in enumerate(text)]

        unrecognized = [token.surface for token in tokens if token.is_unrecognized]
        if unrecognized:
            logger.debug("Unrecognized characters in %r: %r", text, unrecognized)
        return TokenSequence(tuple(tokens), script)

    def _scan_iast(self, text: str) -> List[Token]:
        tokens = []
        i = 0
        while i < len(text):
            form = self.match_at(text, i, ScriptKind.IAST)
            if form is None:
                tokens.append(Token(None, text[i], ScriptKind.IAST, i))
                i += 1
                continue
            tokens.append(Token(self.table.get(form.canonical_id), form.text, ScriptKind.IAST, i))
            i += len(form.text)
        return tokens

    def _scan_devanagari(self, text: str) -> List[Token]:
        tokens = []
        inherent = self.table.get(INHERENT_VOWEL_ID)
        previous = None
        i = 0
        while i < len(text):
            form = self.match_at(text, i, ScriptKind.DEVANAGARI)
            if form is None or not self._can_follow(previous, form):
                tokens.append(Token(None, text[i], ScriptKind.DEVANAGARI, i))
                previous = None
                i += 1
                continue

            phoneme = self.table.get(form.canonical_id)
            tokens.append(Token(phoneme, form.text, ScriptKind.DEVANAGARI, i))
            previous = form
            i += len(form.text)

            # A consonant letter carries a short a unless a matra follows
            if form.kind == LETTER and phoneme.is_consonant and not self._matra_at(text, i):
                tokens.append(Token(inherent, '', ScriptKind.DEVANAGARI, i, inherent=True))
        return tokens

    def _can_follow(self, previous: Optional[SurfaceForm], form: SurfaceForm) -> bool:
        """Whether ``form`` reads back the same after ``previous``.

        A matra only belongs to the consonant letter right before it, and
        a vowel letter straight after a virama would render as a matra.
        """
        if form.kind == MATRA:
            return (previous is not None and previous.kind == LETTER
                    and self.table.get(previous.canonical_id).is_consonant)
        if form.kind == LETTER and self.table.get(form.canonical_id).is_vowel:
            return previous is None or previous.kind != BARE
        return True

    def _matra_at(self, text: str, position: int) -> bool:
        if position >= len(text):
            return False
        if text[position] == VIRAMA:
            return True
        form = self.match_at(text, position, ScriptKind.DEVANAGARI)
        return form is not None and form.kind == MATRA


DEFAULT_TOKENIZER = PhonemeTokenizer()


def tokenize(text: str, script: ScriptKind = None) -> TokenSequence:
    """Tokenize with the shared default tokenizer."""
    return DEFAULT_TOKENIZER.tokenize(text, script)


def tokenize_words(text: str, script: ScriptKind = None) -> List[TokenSequence]:
    """Tokenize each whitespace-separated word of ``text``."""
    if not isinstance(text, str):
        raise InvalidInputError(f"Expected str, got {type(text).__name__}")
    if script is None:
        script = detect_script(text)
    return [DEFAULT_TOKENIZER.tokenize(word, script) for word in text.split()]
