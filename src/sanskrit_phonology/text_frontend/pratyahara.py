"""Pratyahara (abbreviated phoneme class) construction from the Shiva sutras.

A pratyahara names every phoneme from a starting sound up to, but not
including, an it-marker, skipping the it-markers in between (adir
antyena saheta). Vowels in a pratyahara also stand for their savarna
long and short forms.
"""

from typing import Dict, List, Optional, Tuple

from ..errors import InvalidInputError
from .classifier import are_savarna, is_vowel
from .phoneme_table import PHONEME_TABLE

# Each sutra: its sounds, then its it-marker (all IAST)
SHIVA_SUTRAS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (('a', 'i', 'u'), 'ṇ'),
    (('ṛ', 'ḷ'), 'k'),
    (('e', 'o'), 'ṅ'),
    (('ai', 'au'), 'c'),
    (('h', 'y', 'v', 'r'), 'ṭ'),
    (('l',), 'ṇ'),
    (('ñ', 'm', 'ṅ', 'ṇ', 'n'), 'm'),
    (('jh', 'bh'), 'ñ'),
    (('gh', 'ḍh', 'dh'), 'ṣ'),
    (('j', 'b', 'g', 'ḍ', 'd'), 'ś'),
    (('kh', 'ph', 'ch', 'ṭh', 'th', 'c', 'ṭ', 't'), 'v'),
    (('k', 'p'), 'y'),
    (('ś', 'ṣ', 's'), 'r'),
    (('h',), 'l'),
)

# name -> (first sound, it-marker, which occurrence of the marker)
COMMON_PRATYAHARAS: Dict[str, Tuple[str, str, int]] = {
    'ac': ('a', 'c', 1),
    'ak': ('a', 'k', 1),
    'ik': ('i', 'k', 1),
    'ec': ('e', 'c', 1),
    'eṅ': ('e', 'ṅ', 1),
    'aṇ': ('a', 'ṇ', 2),
    'yaṇ': ('y', 'ṇ', 1),
    'hal': ('h', 'l', 1),
    'jhal': ('jh', 'l', 1),
    'jhaś': ('jh', 'ś', 1),
    'jhaṣ': ('jh', 'ṣ', 1),
    'khar': ('kh', 'r', 1),
    'yar': ('y', 'r', 1),
    'śal': ('ś', 'l', 1),
    'am': ('a', 'm', 1),
    'ñam': ('ñ', 'm', 1),
}


def _flatten() -> List[Tuple[str, bool]]:
    """The Shiva sutras as one list of (IAST sound, is_it_marker)."""
    flat = []
    for sounds, marker in SHIVA_SUTRAS:
        flat.extend((sound, False) for sound in sounds)
        flat.append((marker, True))
    return flat


_ALPHABET = _flatten()


def _canonical(iast: str) -> str:
    phoneme = PHONEME_TABLE.lookup_surface(iast)
    if phoneme is None:
        raise InvalidInputError(f"Unknown sound in pratyahara: {iast!r}")
    return phoneme.canonical_id


def construct_pratyahara(start: str, it_marker: str, occurrence: int = 1) -> Tuple[str, ...]:
    """Canonical ids named by ``start`` + ``it_marker``.

    Args:
        start: First sound, as IAST or canonical id
        it_marker: Closing it-marker in IAST (e.g. 'c' for ac)
        occurrence: Which occurrence of the marker after ``start`` closes
            the group; 'ṇ' closes both the first and the sixth sutra

    Raises:
        InvalidInputError: The start sound or marker is not in the sutras
    """
    start_id = start if start in PHONEME_TABLE else _canonical(start)
    start_index: Optional[int] = None
    for index, (sound, marker) in enumerate(_ALPHABET):
        if not marker and _canonical(sound) == start_id:
            start_index = index
            break
    if start_index is None:
        raise InvalidInputError(f"{start!r} does not occur in the Shiva sutras")

    members: List[str] = []
    seen = 0
    for sound, marker in _ALPHABET[start_index:]:
        if marker and sound == it_marker:
            seen += 1
            if seen == occurrence:
                return tuple(members)
        if not marker:
            canonical_id = _canonical(sound)
            if canonical_id not in members:
                members.append(canonical_id)
    raise InvalidInputError(f"No it-marker {it_marker!r} (occurrence {occurrence}) after {start!r}")


def get_pratyahara(name: str) -> Tuple[str, ...]:
    """Members of a well-known pratyahara such as 'ac', 'hal' or 'ik'."""
    try:
        start, marker, occurrence = COMMON_PRATYAHARAS[name]
    except (KeyError, TypeError):
        raise InvalidInputError(f"Unknown pratyahara: {name!r}")
    return construct_pratyahara(start, marker, occurrence)


def in_pratyahara(value, name: str) -> bool:
    """Whether a sound belongs to a named pratyahara, savarna vowels included."""
    members = get_pratyahara(name)
    phoneme = PHONEME_TABLE.resolve(value)
    if phoneme is None:
        return False
    if phoneme.canonical_id in members:
        return True
    return is_vowel(phoneme) and any(are_savarna(phoneme, member) for member in members)
