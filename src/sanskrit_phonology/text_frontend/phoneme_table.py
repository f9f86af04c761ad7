"""Static catalog of Sanskrit phonemes in IAST and Devanagari.

Every phoneme is keyed by a script-independent ``canonical_id``. The
table is built once at import and exposed through read-only mappings;
nothing in the engine writes to it afterwards.
"""

import unicodedata
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Optional, Tuple

from .script_detector import ScriptKind

VOWEL = 'Vowel'
CONSONANT = 'Consonant'
MARK = 'Mark'

SHORT = 'short'
LONG = 'long'
DIPHTHONG = 'diphthong'

VIRAMA = '्'

# Surface kinds
LETTER = 'letter'      # independent vowel, or consonant carrying inherent a
MATRA = 'matra'        # dependent vowel sign
BARE = 'bare'          # consonant + virama
SIGN = 'sign'          # anusvara, visarga, candrabindu, avagraha


@dataclass(frozen=True)
class Phoneme:
    """One sound unit with its spellings and phonological features."""
    canonical_id: str
    iast: str
    category: str
    devanagari: Optional[str] = None
    matra: Optional[str] = None
    length: Optional[str] = None
    is_ik: bool = False
    guna_target: Optional[str] = None
    vrddhi_target: Optional[str] = None
    long_target: Optional[str] = None
    savarna_key: Optional[str] = None
    place: Optional[str] = None
    manner: Optional[str] = None
    voicing: Optional[str] = None
    aspirated: bool = False
    iast_variants: Tuple[str, ...] = ()

    @property
    def is_vowel(self) -> bool:
        return self.category == VOWEL

    @property
    def is_consonant(self) -> bool:
        return self.category == CONSONANT

    @property
    def is_sign(self) -> bool:
        """Written as a diacritic sign in Devanagari rather than a letter."""
        return self.manner in ('anusvara', 'visarga', 'candrabindu') or self.category == MARK


@dataclass(frozen=True)
class SurfaceForm:
    """A spelling of a phoneme that the tokenizer can match."""
    text: str
    canonical_id: str
    script: ScriptKind
    kind: str


def _vowel(cid, iast, dev, matra, length, savarna_key=None, place=None, is_ik=False,
           guna=None, vrddhi=None, long_target=None, variants=()):
    return Phoneme(cid, iast, VOWEL, devanagari=dev, matra=matra, length=length, is_ik=is_ik,
                   guna_target=guna, vrddhi_target=vrddhi, long_target=long_target,
                   savarna_key=savarna_key, place=place, manner='vowel', voicing='voiced',
                   iast_variants=variants)


def _consonant(cid, iast, dev, place, manner, voicing, aspirated=False, variants=()):
    return Phoneme(cid, iast, CONSONANT, devanagari=dev, place=place, manner=manner,
                   voicing=voicing, aspirated=aspirated, iast_variants=variants)


PHONEMES: Tuple[Phoneme, ...] = (
    # Simple vowels
    _vowel('VOWEL_A_SHORT', 'a', 'अ', None, SHORT, 'a', 'velar',
           vrddhi='VOWEL_A_LONG', long_target='VOWEL_A_LONG'),
    _vowel('VOWEL_A_LONG', 'ā', 'आ', 'ा', LONG, 'a', 'velar', long_target='VOWEL_A_LONG'),
    _vowel('VOWEL_I_SHORT', 'i', 'इ', 'ि', SHORT, 'i', 'palatal', is_ik=True,
           guna='VOWEL_E', vrddhi='VOWEL_AI', long_target='VOWEL_I_LONG'),
    _vowel('VOWEL_I_LONG', 'ī', 'ई', 'ी', LONG, 'i', 'palatal', is_ik=True,
           guna='VOWEL_E', vrddhi='VOWEL_AI', long_target='VOWEL_I_LONG'),
    _vowel('VOWEL_U_SHORT', 'u', 'उ', 'ु', SHORT, 'u', 'labial', is_ik=True,
           guna='VOWEL_O', vrddhi='VOWEL_AU', long_target='VOWEL_U_LONG'),
    _vowel('VOWEL_U_LONG', 'ū', 'ऊ', 'ू', LONG, 'u', 'labial', is_ik=True,
           guna='VOWEL_O', vrddhi='VOWEL_AU', long_target='VOWEL_U_LONG'),
    _vowel('VOWEL_R_SHORT', 'ṛ', 'ऋ', 'ृ', SHORT, 'r', 'retroflex', is_ik=True,
           guna='VOWEL_A_SHORT', vrddhi='VOWEL_A_LONG', long_target='VOWEL_R_LONG',
           variants=('r\u0325',)),
    _vowel('VOWEL_R_LONG', 'ṝ', 'ॠ', 'ॄ', LONG, 'r', 'retroflex', is_ik=True,
           guna='VOWEL_A_SHORT', vrddhi='VOWEL_A_LONG', long_target='VOWEL_R_LONG',
           variants=('r\u0325\u0304',)),
    _vowel('VOWEL_L_SHORT', 'ḷ', 'ऌ', 'ॢ', SHORT, 'r', 'dental', is_ik=True,
           guna='VOWEL_A_SHORT', vrddhi='VOWEL_A_LONG', long_target='VOWEL_L_LONG',
           variants=('l\u0325',)),
    _vowel('VOWEL_L_LONG', 'ḹ', 'ॡ', 'ॣ', LONG, 'r', 'dental', is_ik=True,
           guna='VOWEL_A_SHORT', vrddhi='VOWEL_A_LONG', long_target='VOWEL_L_LONG',
           variants=('l\u0325\u0304',)),
    # Compound vowels
    _vowel('VOWEL_E', 'e', 'ए', 'े', DIPHTHONG, place='palatal', vrddhi='VOWEL_AI'),
    _vowel('VOWEL_AI', 'ai', 'ऐ', 'ै', DIPHTHONG, place='palatal'),
    _vowel('VOWEL_O', 'o', 'ओ', 'ो', DIPHTHONG, place='labial', vrddhi='VOWEL_AU'),
    _vowel('VOWEL_AU', 'au', 'औ', 'ौ', DIPHTHONG, place='labial'),

    # Velars
    _consonant('CONS_K', 'k', 'क', 'velar', 'stop', 'voiceless'),
    _consonant('CONS_KH', 'kh', 'ख', 'velar', 'stop', 'voiceless', True),
    _consonant('CONS_G', 'g', 'ग', 'velar', 'stop', 'voiced'),
    _consonant('CONS_GH', 'gh', 'घ', 'velar', 'stop', 'voiced', True),
    _consonant('CONS_NG', 'ṅ', 'ङ', 'velar', 'nasal', 'voiced'),
    # Palatals
    _consonant('CONS_C', 'c', 'च', 'palatal', 'stop', 'voiceless'),
    _consonant('CONS_CH', 'ch', 'छ', 'palatal', 'stop', 'voiceless', True),
    _consonant('CONS_J', 'j', 'ज', 'palatal', 'stop', 'voiced'),
    _consonant('CONS_JH', 'jh', 'झ', 'palatal', 'stop', 'voiced', True),
    _consonant('CONS_NY', 'ñ', 'ञ', 'palatal', 'nasal', 'voiced'),
    # Retroflexes
    _consonant('CONS_TT', 'ṭ', 'ट', 'retroflex', 'stop', 'voiceless'),
    _consonant('CONS_TTH', 'ṭh', 'ठ', 'retroflex', 'stop', 'voiceless', True),
    _consonant('CONS_DD', 'ḍ', 'ड', 'retroflex', 'stop', 'voiced'),
    _consonant('CONS_DDH', 'ḍh', 'ढ', 'retroflex', 'stop', 'voiced', True),
    _consonant('CONS_NN', 'ṇ', 'ण', 'retroflex', 'nasal', 'voiced'),
    # Dentals
    _consonant('CONS_T', 't', 'त', 'dental', 'stop', 'voiceless'),
    _consonant('CONS_TH', 'th', 'थ', 'dental', 'stop', 'voiceless', True),
    _consonant('CONS_D', 'd', 'द', 'dental', 'stop', 'voiced'),
    _consonant('CONS_DH', 'dh', 'ध', 'dental', 'stop', 'voiced', True),
    _consonant('CONS_N', 'n', 'न', 'dental', 'nasal', 'voiced'),
    # Labials
    _consonant('CONS_P', 'p', 'प', 'labial', 'stop', 'voiceless'),
    _consonant('CONS_PH', 'ph', 'फ', 'labial', 'stop', 'voiceless', True),
    _consonant('CONS_B', 'b', 'ब', 'labial', 'stop', 'voiced'),
    _consonant('CONS_BH', 'bh', 'भ', 'labial', 'stop', 'voiced', True),
    _consonant('CONS_M', 'm', 'म', 'labial', 'nasal', 'voiced'),
    # Semivowels
    _consonant('CONS_Y', 'y', 'य', 'palatal', 'semivowel', 'voiced'),
    _consonant('CONS_R', 'r', 'र', 'retroflex', 'semivowel', 'voiced'),
    _consonant('CONS_L', 'l', 'ल', 'dental', 'semivowel', 'voiced'),
    _consonant('CONS_V', 'v', 'व', 'labial', 'semivowel', 'voiced'),
    # Sibilants and aspirate
    _consonant('CONS_SH', 'ś', 'श', 'palatal', 'sibilant', 'voiceless'),
    _consonant('CONS_SS', 'ṣ', 'ष', 'retroflex', 'sibilant', 'voiceless'),
    _consonant('CONS_S', 's', 'स', 'dental', 'sibilant', 'voiceless'),
    _consonant('CONS_H', 'h', 'ह', 'glottal', 'aspirate', 'voiced'),

    # Ayogavaha
    _consonant('ANUSVARA', 'ṃ', 'ं', None, 'anusvara', 'voiced', variants=('ṁ',)),
    _consonant('VISARGA', 'ḥ', 'ः', None, 'visarga', 'voiceless'),
    _consonant('CANDRABINDU', 'm\u0310', 'ँ', None, 'candrabindu', 'voiced'),
    Phoneme('AVAGRAHA', "'", MARK, devanagari='ऽ', iast_variants=('’',)),
)


def _variant_spellings(phonemes: Tuple[Phoneme, ...]) -> Dict[str, str]:
    """Map each alternative IAST spelling to the primary one it stands for."""
    folds = {}
    for phoneme in phonemes:
        for variant in phoneme.iast_variants:
            folds[unicodedata.normalize('NFC', variant)] = phoneme.iast
    return folds


class PhonemeTable:
    """Read-only index over PHONEMES, keyed by id and by surface spelling.

    Only spellings that render back unchanged are surfaces. Alternative
    IAST spellings (ISO 15919 ring-below vowels, ``ṁ``, the typographic
    apostrophe) are listed in ``variant_spellings`` so callers can fold
    them first.
    """

    def __init__(self, phonemes: Tuple[Phoneme, ...] = PHONEMES):
        by_id: Dict[str, Phoneme] = {}
        surfaces: List[SurfaceForm] = []
        by_surface: Dict[Tuple[ScriptKind, str], str] = {}

        for phoneme in phonemes:
            by_id[phoneme.canonical_id] = phoneme

            surfaces.append(SurfaceForm(phoneme.iast, phoneme.canonical_id, ScriptKind.IAST,
                                        SIGN if phoneme.is_sign else LETTER))

            if phoneme.devanagari is None:
                continue
            if phoneme.is_sign:
                surfaces.append(SurfaceForm(phoneme.devanagari, phoneme.canonical_id,
                                            ScriptKind.DEVANAGARI, SIGN))
            elif phoneme.is_vowel:
                surfaces.append(SurfaceForm(phoneme.devanagari, phoneme.canonical_id,
                                            ScriptKind.DEVANAGARI, LETTER))
                if phoneme.matra:
                    surfaces.append(SurfaceForm(phoneme.matra, phoneme.canonical_id,
                                                ScriptKind.DEVANAGARI, MATRA))
            else:
                surfaces.append(SurfaceForm(phoneme.devanagari + VIRAMA, phoneme.canonical_id,
                                            ScriptKind.DEVANAGARI, BARE))
                surfaces.append(SurfaceForm(phoneme.devanagari, phoneme.canonical_id,
                                            ScriptKind.DEVANAGARI, LETTER))

        for form in surfaces:
            by_surface.setdefault((form.script, form.text), form.canonical_id)

        self._by_id = MappingProxyType(by_id)
        self._by_surface = MappingProxyType(by_surface)
        self._surfaces = tuple(surfaces)
        self._variants = MappingProxyType(_variant_spellings(phonemes))

    @property
    def phonemes(self):
        return self._by_id

    @property
    def surfaces(self) -> Tuple[SurfaceForm, ...]:
        return self._surfaces

    @property
    def variant_spellings(self):
        """Alternative NFC IAST spelling -> primary IAST spelling."""
        return self._variants

    def surfaces_for(self, script: ScriptKind) -> Tuple[SurfaceForm, ...]:
        return tuple(form for form in self._surfaces if form.script is script)

    def __contains__(self, canonical_id) -> bool:
        return canonical_id in self._by_id

    def __iter__(self):
        return iter(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)

    def get(self, canonical_id: str) -> Optional[Phoneme]:
        return self._by_id.get(canonical_id)

    def lookup_surface(self, text: str, script: ScriptKind = None) -> Optional[Phoneme]:
        """Find the phoneme spelled exactly ``text`` (e.g. 'ī', 'ई' or 'ी')."""
        scripts = (script,) if script else (ScriptKind.IAST, ScriptKind.DEVANAGARI)
        for candidate in scripts:
            canonical_id = self._by_surface.get((candidate, text))
            if canonical_id:
                return self._by_id[canonical_id]
        return None

    def resolve(self, value) -> Optional[Phoneme]:
        """Resolve a Phoneme, canonical id, surface spelling or token to a Phoneme."""
        if isinstance(value, Phoneme):
            return value
        phoneme = getattr(value, 'phoneme', None)
        if isinstance(phoneme, Phoneme):
            return phoneme
        if not isinstance(value, str) or not value:
            return None
        found = self._by_id.get(value) or self.lookup_surface(value)
        if found is None:
            folded = self._variants.get(unicodedata.normalize('NFC', value))
            found = self.lookup_surface(folded, ScriptKind.IAST) if folded else None
        return found

    def render_iast(self, canonical_id: str) -> Optional[str]:
        phoneme = self._by_id.get(canonical_id)
        return phoneme.iast if phoneme else None

    def ids_where(self, **features) -> Tuple[str, ...]:
        """Canonical ids whose attributes equal all given feature values."""
        return tuple(
            phoneme.canonical_id for phoneme in self._by_id.values()
            if all(getattr(phoneme, name) == value for name, value in features.items())
        )


PHONEME_TABLE = PhonemeTable()
