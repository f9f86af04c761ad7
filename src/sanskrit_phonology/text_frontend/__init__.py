from .classifier import (
    are_savarna, articulation_place_of, consonant_features_of, grade_rank, guna_of,
    guna_span_of, is_consonant, is_guna_vowel, is_ik_vowel, is_vowel, is_vrddhi_vowel,
    vrddhi_of, vrddhi_span_of,
)
from .conjuncts import Conjunct, ConjunctAnalysis, analyze_conjuncts, find_conjuncts, has_conjunct
from .cross_script import (
    CrossScriptNormalizer, is_equivalent_across_scripts, normalize, render, to_canonical,
    transliterate,
)
from .phoneme_table import PHONEME_TABLE, Phoneme, PhonemeTable
from .pratyahara import construct_pratyahara, get_pratyahara, in_pratyahara
from .script_detector import ScriptKind, detect_script, require_script
from .syllables import Syllable, count_syllables, is_heavy_syllable, syllabify
from .text_normalizer import SanskritTextNormalizer, clean_text, from_scheme, to_scheme
from .tokenizer import PhonemeTokenizer, Token, TokenSequence, tokenize, tokenize_words
