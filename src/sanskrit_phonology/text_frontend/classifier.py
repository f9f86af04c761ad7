"""Phonological classification over the phoneme inventory.

Every function accepts a canonical id, a Token, a Phoneme or a surface
spelling ('i', 'इ', 'ि') and never raises: anything outside the
inventory yields None or False.

Grades follow the traditional hierarchy ik < guna < vrddhi and are
looked up directly in the phoneme table.
"""

from typing import NamedTuple, Optional, Tuple

from .phoneme_table import DIPHTHONG, LONG, PHONEME_TABLE, Phoneme

GUNA_VOWELS = frozenset({'VOWEL_A_SHORT', 'VOWEL_E', 'VOWEL_O'})
VRDDHI_VOWELS = frozenset({'VOWEL_A_LONG', 'VOWEL_AI', 'VOWEL_AU'})

# ur an raparah: a guna/vrddhi substitute for r/l vowels is followed by r/l
_RAPARA = {
    'VOWEL_R_SHORT': 'CONS_R', 'VOWEL_R_LONG': 'CONS_R',
    'VOWEL_L_SHORT': 'CONS_L', 'VOWEL_L_LONG': 'CONS_L',
}

STOP_MANNERS = frozenset({'stop', 'nasal'})


class ConsonantFeatures(NamedTuple):
    place: Optional[str]
    manner: str
    voicing: str
    aspirated: bool


def _resolve(value) -> Optional[Phoneme]:
    return PHONEME_TABLE.resolve(value)


def canonical_id_of(value) -> Optional[str]:
    phoneme = _resolve(value)
    return phoneme.canonical_id if phoneme else None


def is_vowel(value) -> bool:
    phoneme = _resolve(value)
    return bool(phoneme and phoneme.is_vowel)


def is_consonant(value) -> bool:
    phoneme = _resolve(value)
    return bool(phoneme and phoneme.is_consonant)


def is_ik_vowel(value) -> bool:
    phoneme = _resolve(value)
    return bool(phoneme and phoneme.is_ik)


def is_guna_vowel(value) -> bool:
    return canonical_id_of(value) in GUNA_VOWELS


def is_vrddhi_vowel(value) -> bool:
    return canonical_id_of(value) in VRDDHI_VOWELS


def is_long_vowel(value) -> bool:
    """Long vowels and diphthongs (both count two morae)."""
    phoneme = _resolve(value)
    return bool(phoneme and phoneme.is_vowel and phoneme.length in (LONG, DIPHTHONG))


def guna_of(value) -> Optional[str]:
    """Guna vowel of an ik-vowel; None for anything else."""
    phoneme = _resolve(value)
    if phoneme is None or not phoneme.is_ik:
        return None
    return phoneme.guna_target


def vrddhi_of(value) -> Optional[str]:
    """Vrddhi vowel of an ik-vowel or of a, e, o; None otherwise."""
    phoneme = _resolve(value)
    if phoneme is None or not phoneme.is_vowel:
        return None
    return phoneme.vrddhi_target


def guna_span_of(value) -> Optional[Tuple[str, ...]]:
    """Full guna substitute, with r/l appended for r and l vowels (ṛ -> ar)."""
    target = guna_of(value)
    if target is None:
        return None
    rapara = _RAPARA.get(canonical_id_of(value))
    return (target, rapara) if rapara else (target,)


def vrddhi_span_of(value) -> Optional[Tuple[str, ...]]:
    """Full vrddhi substitute, with r/l appended for r and l vowels (ṛ -> ār)."""
    target = vrddhi_of(value)
    if target is None:
        return None
    rapara = _RAPARA.get(canonical_id_of(value))
    return (target, rapara) if rapara else (target,)


def grade_rank(value) -> Optional[int]:
    """0 for ik-vowels, 1 for guna vowels, 2 for vrddhi vowels."""
    canonical_id = canonical_id_of(value)
    if canonical_id in VRDDHI_VOWELS:
        return 2
    if canonical_id in GUNA_VOWELS:
        return 1
    if is_ik_vowel(canonical_id):
        return 0
    return None


def long_of(value) -> Optional[str]:
    """Long counterpart of a simple vowel (i -> ī); long vowels map to themselves."""
    phoneme = _resolve(value)
    if phoneme is None or not phoneme.is_vowel:
        return None
    return phoneme.long_target


def semivowel_of(value) -> Optional[str]:
    """Semivowel (yan) substitute of an ik-vowel: i -> y, u -> v, ṛ -> r, ḷ -> l."""
    phoneme = _resolve(value)
    if phoneme is None or not phoneme.is_ik:
        return None
    return {'palatal': 'CONS_Y', 'labial': 'CONS_V',
            'retroflex': 'CONS_R', 'dental': 'CONS_L'}[phoneme.place]


def consonant_features_of(value) -> Optional[ConsonantFeatures]:
    phoneme = _resolve(value)
    if phoneme is None or not phoneme.is_consonant:
        return None
    return ConsonantFeatures(phoneme.place, phoneme.manner, phoneme.voicing, phoneme.aspirated)


def articulation_place_of(value) -> Optional[str]:
    phoneme = _resolve(value)
    return phoneme.place if phoneme else None


def is_voiced_consonant(value) -> bool:
    features = consonant_features_of(value)
    return bool(features and features.voicing == 'voiced'
                and features.manner not in ('anusvara', 'candrabindu'))


def is_true_consonant(value) -> bool:
    """Consonant proper: excludes anusvara, visarga and candrabindu."""
    phoneme = _resolve(value)
    return bool(phoneme and phoneme.is_consonant and not phoneme.is_sign)


def are_savarna(first, second) -> bool:
    """Homorganic check.

    Vowels are savarna when they share a vowel class (a/ā, i/ī, u/ū, and
    ṛ/ḷ together); a diphthong is savarna only with itself. Stops and
    nasals are savarna within the same varga. A vowel and a consonant are
    never savarna.
    """
    one, two = _resolve(first), _resolve(second)
    if one is None or two is None:
        return False
    if one.canonical_id == two.canonical_id:
        return True
    if one.is_vowel and two.is_vowel:
        return one.savarna_key is not None and one.savarna_key == two.savarna_key
    if one.is_consonant and two.is_consonant:
        return (one.manner in STOP_MANNERS and two.manner in STOP_MANNERS
                and one.place == two.place)
    return False
