"""Sandhi rules in priority order.

Each rule looks at the junction of two morphemes in canonical form and,
when it applies, says how many tokens to take from the end of the left
side and the start of the right side and what to put in their place.
The first rule whose predicate holds is the only one applied.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from ..text_frontend.classifier import (
    are_savarna, guna_span_of, is_ik_vowel, is_true_consonant, is_voiced_consonant,
    is_vowel, long_of, semivowel_of,
)
from .exceptions import EXCEPTION_TABLE


class RuleName(str, Enum):
    LEXICAL_EXCEPTION = 'lexical_exception'
    ANUSVARA = 'anusvara'
    SCHUTVA = 'schutva'
    SATVA = 'satva'
    SAVARNA_DIRGHA = 'savarna_dirgha'
    GUNA = 'guna'
    VRDDHI = 'vrddhi'
    YAN = 'yan'
    AYADI = 'ayadi'
    VISARGA = 'visarga'


@dataclass(frozen=True)
class Boundary:
    """Canonical ids on both sides of a morpheme junction."""
    left: Tuple[str, ...]
    right: Tuple[str, ...]

    @property
    def left_last(self) -> Optional[str]:
        return self.left[-1] if self.left else None

    @property
    def left_before_last(self) -> Optional[str]:
        return self.left[-2] if len(self.left) > 1 else None

    @property
    def right_first(self) -> Optional[str]:
        return self.right[0] if self.right else None


@dataclass(frozen=True)
class Replacement:
    left_consumed: int
    right_consumed: int
    ids: Tuple[str, ...]


@dataclass(frozen=True)
class SandhiRule:
    name: RuleName
    priority: int
    predicate: Callable[[Boundary], bool]
    transform: Callable[[Boundary], Replacement]
    description: str = ''


A_VOWELS = frozenset({'VOWEL_A_SHORT', 'VOWEL_A_LONG'})

# stoh scuna scuh: dental sounds become palatal next to palatals;
# s also becomes ś before k and kh
SCHUTVA_PAIRS = {
    ('CONS_S', 'CONS_C'): 'CONS_SH',
    ('CONS_S', 'CONS_CH'): 'CONS_SH',
    ('CONS_S', 'CONS_SH'): 'CONS_SH',
    ('CONS_S', 'CONS_K'): 'CONS_SH',
    ('CONS_S', 'CONS_KH'): 'CONS_SH',
    ('CONS_T', 'CONS_C'): 'CONS_C',
    ('CONS_T', 'CONS_CH'): 'CONS_C',
    ('CONS_T', 'CONS_J'): 'CONS_J',
    ('CONS_T', 'CONS_JH'): 'CONS_J',
    ('CONS_D', 'CONS_J'): 'CONS_J',
    ('CONS_D', 'CONS_JH'): 'CONS_J',
    ('CONS_N', 'CONS_J'): 'CONS_NY',
    ('CONS_N', 'CONS_JH'): 'CONS_NY',
}

SATVA_PRECEDING = frozenset({'VOWEL_I_SHORT', 'VOWEL_I_LONG', 'VOWEL_U_SHORT', 'VOWEL_U_LONG'})
SATVA_FOLLOWING = frozenset({'CONS_K', 'CONS_KH', 'CONS_P', 'CONS_PH'})

# vrddhir eci
VRDDHI_PAIRS = {
    'VOWEL_E': 'VOWEL_AI', 'VOWEL_AI': 'VOWEL_AI',
    'VOWEL_O': 'VOWEL_AU', 'VOWEL_AU': 'VOWEL_AU',
}

# eco 'yavayavah
AYADI_SUBSTITUTES = {
    'VOWEL_E': ('VOWEL_A_SHORT', 'CONS_Y'),
    'VOWEL_O': ('VOWEL_A_SHORT', 'CONS_V'),
    'VOWEL_AI': ('VOWEL_A_LONG', 'CONS_Y'),
    'VOWEL_AU': ('VOWEL_A_LONG', 'CONS_V'),
}


def _lexical_applies(b: Boundary) -> bool:
    return (b.left, b.right) in EXCEPTION_TABLE


def _lexical(b: Boundary) -> Replacement:
    return Replacement(len(b.left), len(b.right), EXCEPTION_TABLE[(b.left, b.right)])


def _anusvara_applies(b: Boundary) -> bool:
    return b.left_last == 'CONS_M' and is_true_consonant(b.right_first)


def _anusvara(b: Boundary) -> Replacement:
    return Replacement(1, 0, ('ANUSVARA',))


def _schutva_applies(b: Boundary) -> bool:
    return (b.left_last, b.right_first) in SCHUTVA_PAIRS


def _schutva(b: Boundary) -> Replacement:
    return Replacement(1, 0, (SCHUTVA_PAIRS[(b.left_last, b.right_first)],))


def _satva_applies(b: Boundary) -> bool:
    return (b.left_last == 'CONS_S' and b.left_before_last in SATVA_PRECEDING
            and b.right_first in SATVA_FOLLOWING)


def _satva(b: Boundary) -> Replacement:
    return Replacement(1, 0, ('CONS_SS',))


def _savarna_dirgha_applies(b: Boundary) -> bool:
    return (is_vowel(b.left_last) and is_vowel(b.right_first)
            and long_of(b.left_last) is not None
            and are_savarna(b.left_last, b.right_first))


def _savarna_dirgha(b: Boundary) -> Replacement:
    return Replacement(1, 1, (long_of(b.left_last),))


def _guna_applies(b: Boundary) -> bool:
    return b.left_last in A_VOWELS and is_ik_vowel(b.right_first)


def _guna(b: Boundary) -> Replacement:
    return Replacement(1, 1, guna_span_of(b.right_first))


def _vrddhi_applies(b: Boundary) -> bool:
    return b.left_last in A_VOWELS and b.right_first in VRDDHI_PAIRS


def _vrddhi(b: Boundary) -> Replacement:
    return Replacement(1, 1, (VRDDHI_PAIRS[b.right_first],))


def _yan_applies(b: Boundary) -> bool:
    return is_ik_vowel(b.left_last) and is_vowel(b.right_first)


def _yan(b: Boundary) -> Replacement:
    return Replacement(1, 0, (semivowel_of(b.left_last),))


def _ayadi_applies(b: Boundary) -> bool:
    return b.left_last in AYADI_SUBSTITUTES and is_vowel(b.right_first)


def _ayadi(b: Boundary) -> Replacement:
    return Replacement(1, 0, AYADI_SUBSTITUTES[b.left_last])


def _visarga_applies(b: Boundary) -> bool:
    if b.left_last != 'VISARGA' or b.left_before_last != 'VOWEL_A_SHORT':
        return False
    return b.right_first == 'VOWEL_A_SHORT' or is_voiced_consonant(b.right_first)


def _visarga(b: Boundary) -> Replacement:
    if b.right_first == 'VOWEL_A_SHORT':
        # The following a is elided and marked with avagraha
        return Replacement(2, 1, ('VOWEL_O', 'AVAGRAHA'))
    return Replacement(2, 0, ('VOWEL_O',))


SANDHI_RULES: Tuple[SandhiRule, ...] = tuple(sorted((
    SandhiRule(RuleName.LEXICAL_EXCEPTION, 10, _lexical_applies, _lexical,
               'listed word pairs with irregular junctions'),
    SandhiRule(RuleName.ANUSVARA, 20, _anusvara_applies, _anusvara,
               'final m before a consonant becomes anusvara; other final nasals are kept'),
    SandhiRule(RuleName.SATVA, 25, _satva_applies, _satva,
               's after i/u becomes ṣ before k, kh, p, ph'),
    SandhiRule(RuleName.SCHUTVA, 30, _schutva_applies, _schutva,
               's becomes ś before palatals, k and kh; dentals become palatal before palatals'),
    SandhiRule(RuleName.SAVARNA_DIRGHA, 40, _savarna_dirgha_applies, _savarna_dirgha,
               'two savarna vowels merge into the long vowel'),
    SandhiRule(RuleName.GUNA, 50, _guna_applies, _guna,
               'a/ā before an ik-vowel gives its guna'),
    SandhiRule(RuleName.VRDDHI, 60, _vrddhi_applies, _vrddhi,
               'a/ā before e, ai, o, au gives vrddhi'),
    SandhiRule(RuleName.YAN, 70, _yan_applies, _yan,
               'ik-vowel before a dissimilar vowel becomes its semivowel'),
    SandhiRule(RuleName.AYADI, 75, _ayadi_applies, _ayadi,
               'e, o, ai, au before a vowel become ay, av, āy, āv'),
    SandhiRule(RuleName.VISARGA, 80, _visarga_applies, _visarga,
               'aḥ before a voiced sound becomes o'),
), key=lambda rule: rule.priority))


def first_matching_rule(boundary: Boundary) -> Optional[SandhiRule]:
    for rule in SANDHI_RULES:
        if rule.predicate(boundary):
            return rule
    return None
