"""Consonant clusters (samyoga) in IAST and Devanagari words.

A conjunct is a run of two or more consonants with no vowel between
them. Anusvara, visarga and unrecognized characters end a run, as does
the inherent a of a Devanagari consonant letter.
"""

from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Tuple, Union

from .classifier import is_true_consonant
from .script_detector import ScriptKind
from .tokenizer import Token, TokenSequence, tokenize


@dataclass(frozen=True)
class Conjunct:
    tokens: Tuple[Token, ...]

    @property
    def start(self) -> int:
        return self.tokens[0].start

    @property
    def end(self) -> int:
        return self.tokens[-1].end

    @property
    def text(self) -> str:
        return ''.join(token.surface for token in self.tokens)

    @property
    def canonical_ids(self) -> Tuple[str, ...]:
        return tuple(token.canonical_id for token in self.tokens)


class ConjunctAnalysis(NamedTuple):
    script: ScriptKind
    count: int
    unique: Tuple[str, ...]
    density: float
    conjuncts: Tuple[Conjunct, ...]

    @property
    def has_conjuncts(self) -> bool:
        return self.count > 0


def _sequence(text: Union[str, TokenSequence], script: Optional[ScriptKind]) -> TokenSequence:
    return text if isinstance(text, TokenSequence) else tokenize(text, script)


def find_conjuncts(text: Union[str, TokenSequence], script: ScriptKind = None) -> List[Conjunct]:
    """Every maximal consonant cluster in ``text``, in order of position."""
    conjuncts = []
    run: List[Token] = []
    for token in list(_sequence(text, script)) + [None]:
        if token is not None and is_true_consonant(token.phoneme):
            run.append(token)
            continue
        if len(run) >= 2:
            conjuncts.append(Conjunct(tuple(run)))
        run = []
    return conjuncts


def has_conjunct(text: Union[str, TokenSequence], script: ScriptKind = None) -> bool:
    return bool(find_conjuncts(text, script))


def analyze_conjuncts(text: Union[str, TokenSequence],
                      script: ScriptKind = None) -> ConjunctAnalysis:
    """Count the conjuncts of a text and how densely they occur.

    Density is conjuncts per character of the text as written.
    """
    sequence = _sequence(text, script)
    conjuncts = find_conjuncts(sequence)
    unique = tuple(dict.fromkeys(conjunct.text for conjunct in conjuncts))
    length = len(sequence.text)
    density = len(conjuncts) / length if length else 0.0
    return ConjunctAnalysis(sequence.script, len(conjuncts), unique, density, tuple(conjuncts))
