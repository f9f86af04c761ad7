"""Word pairs whose junction does not follow the regular vowel rules.

Pairs are written in IAST and compared in canonical form, so the same
entry matches Devanagari input.
"""

from types import MappingProxyType
from typing import Dict, Tuple

from ..text_frontend.script_detector import ScriptKind
from ..text_frontend.tokenizer import tokenize

# (left, right) -> joined form
LEXICAL_EXCEPTIONS: Dict[Tuple[str, str], str] = {
    # pararupa before a verb beginning with e/o (eni pararupam)
    ('pra', 'ejate'): 'prejate',
    ('upa', 'oṣati'): 'upoṣati',
    # vrddhi where guna is expected (upasargad rti dhatau)
    ('pra', 'ṛcchati'): 'prārcchati',
    ('upa', 'ṛcchati'): 'upārcchati',
    # vrddhi before ūh, īr (aksadibhyah)
    ('akṣa', 'ūhinī'): 'akṣauhiṇī',
    ('sva', 'īraḥ'): 'svairaḥ',
    ('sva', 'īriṇī'): 'svairiṇī',
    ('pra', 'ūḍhaḥ'): 'prauḍhaḥ',
    ('pra', 'ūhaḥ'): 'prauhaḥ',
    # pararupa in sakandhvadi words
    ('śaka', 'andhuḥ'): 'śakandhuḥ',
    ('kula', 'aṭā'): 'kulaṭā',
    ('mārta', 'aṇḍaḥ'): 'mārtaṇḍaḥ',
    # avan substitute for go
    ('go', 'indraḥ'): 'gavendraḥ',
    ('go', 'agram'): 'gavāgram',
}

CanonicalKey = Tuple[Tuple[str, ...], Tuple[str, ...]]


def _ids(iast: str) -> Tuple[str, ...]:
    return tuple(token.canonical_id for token in tokenize(iast, ScriptKind.IAST))


def build_exception_table(pairs: Dict[Tuple[str, str], str] = LEXICAL_EXCEPTIONS):
    """Index exception pairs by their canonical id sequences."""
    table: Dict[CanonicalKey, Tuple[str, ...]] = {}
    for (left, right), joined in pairs.items():
        table[(_ids(left), _ids(right))] = _ids(joined)
    return MappingProxyType(table)


EXCEPTION_TABLE = build_exception_table()
