"""Sanskrit script and phonology engine.

Script detection, phoneme tokenization, phonological classification,
IAST/Devanagari conversion and sandhi for Sanskrit text.
"""

from .errors import InvalidInputError, SanskritPhonologyError, UnknownScriptError
from .sandhi import SandhiResult, SandhiTransducer, apply_sandhi, join
from .text_frontend import (
    ScriptKind, Token, TokenSequence, analyze_conjuncts, are_savarna, clean_text,
    consonant_features_of, construct_pratyahara, count_syllables, detect_script,
    find_conjuncts, from_scheme, grade_rank, guna_of, has_conjunct, in_pratyahara,
    is_equivalent_across_scripts, is_heavy_syllable, is_ik_vowel, is_vowel, normalize,
    render, syllabify, to_canonical, tokenize, transliterate, vrddhi_of,
)
from .validation import validate_text

__version__ = "0.1.0"
