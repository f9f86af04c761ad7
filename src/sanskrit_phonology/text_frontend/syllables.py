from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .classifier import is_long_vowel
from .script_detector import ScriptKind
from .tokenizer import Token, TokenSequence, tokenize

GURU = 'guru'
LAGHU = 'laghu'


@dataclass(frozen=True)
class Syllable:
    """Onset consonants, a vowel nucleus and any trailing anusvara/visarga or coda."""
    tokens: Tuple[Token, ...]
    heavy: bool = False

    @property
    def text(self) -> str:
        return ''.join(token.surface for token in self.tokens)

    @property
    def nucleus(self) -> Optional[Token]:
        for token in self.tokens:
            if token.phoneme and token.phoneme.is_vowel:
                return token
        return None

    @property
    def onset(self) -> Tuple[Token, ...]:
        onset = []
        for token in self.tokens:
            if token.phoneme and token.phoneme.is_vowel:
                break
            onset.append(token)
        return tuple(onset)

    @property
    def weight(self) -> str:
        return GURU if self.heavy else LAGHU


def _has_vowel(tokens: List[Token]) -> bool:
    return any(token.phoneme.is_vowel for token in tokens)


def _split(sequence: TokenSequence) -> List[List[Token]]:
    groups: List[List[Token]] = []
    current: List[Token] = []

    def close():
        nonlocal current
        if not current:
            return
        if _has_vowel(current) or not groups:
            groups.append(current)
        else:
            # Word-final consonants close the previous syllable
            groups[-1].extend(current)
        current = []

    for token in sequence:
        phoneme = token.phoneme
        if phoneme is None:
            close()
        elif phoneme.is_sign:
            current.append(token)
        elif _has_vowel(current):
            close()
            current.append(token)
        else:
            current.append(token)
    close()
    return groups


def _is_heavy(group: List[Token], following: Optional[List[Token]]) -> bool:
    nucleus_seen = False
    for token in group:
        phoneme = token.phoneme
        if phoneme.is_vowel:
            nucleus_seen = True
            if is_long_vowel(phoneme):
                return True
        elif nucleus_seen:
            # anusvara, visarga or a coda consonant
            return True
    if following:
        onset = 0
        for token in following:
            if token.phoneme.is_vowel:
                break
            onset += 1
        return onset >= 2
    return False


def syllabify(text: Union[str, TokenSequence], script: ScriptKind = None) -> List[Syllable]:
    """Split a word into syllables and mark each guru (heavy) or laghu (light).

    A syllable is heavy when its vowel is long or a diphthong, when it
    carries anusvara or visarga, or when two or more consonants follow it.
    """
    sequence = text if isinstance(text, TokenSequence) else tokenize(text, script)
    groups = _split(sequence)
    syllables = []
    for i, group in enumerate(groups):
        following = groups[i + 1] if i + 1 < len(groups) else None
        syllables.append(Syllable(tuple(group), _is_heavy(group, following)))
    return syllables


def count_syllables(text: Union[str, TokenSequence], script: ScriptKind = None) -> int:
    return sum(1 for syllable in syllabify(text, script) if syllable.nucleus is not None)


def syllable_weights(text: Union[str, TokenSequence], script: ScriptKind = None) -> List[str]:
    """Metrical pattern of a word, e.g. ['guru', 'laghu'] for 'rāma'."""
    return [syllable.weight for syllable in syllabify(text, script)]


def is_heavy_syllable(syllable: Union[str, Syllable], script: ScriptKind = None) -> bool:
    """Weight of a single syllable given on its own."""
    if isinstance(syllable, Syllable):
        return syllable.heavy
    syllables = syllabify(syllable, script)
    return bool(syllables) and syllables[-1].heavy
