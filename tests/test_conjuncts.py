import pytest

from sanskrit_phonology.text_frontend.conjuncts import (
    analyze_conjuncts, find_conjuncts, has_conjunct,
)
from sanskrit_phonology.text_frontend.script_detector import ScriptKind
from sanskrit_phonology.text_frontend.tokenizer import tokenize


class TestFindConjuncts:

    @pytest.mark.parametrize("word, texts", [
        ("dharmakṣetre", ["rm", "kṣ", "tr"]),
        ("धर्मक्षेत्रे", ["र्म", "क्ष", "त्र"]),
        ("indraḥ", ["ndr"]),
        ("इन्द्रः", ["न्द्र"]),
        ("saṃskṛtam", ["sk"]),
        ("क्त", ["क्त"]),
        ("rāma", []),
        ("कत", []),
        ("saṃyoga", []),
        ("ak1ta", []),
        ("", []),
    ])
    def test_texts(self, word, texts):
        assert [conjunct.text for conjunct in find_conjuncts(word)] == texts

    def test_position_and_ids(self):
        conjunct, = find_conjuncts("namaste")
        assert conjunct.text == "st"
        assert conjunct.start == 4
        assert conjunct.end == 6
        assert conjunct.canonical_ids == ('CONS_S', 'CONS_T')

    def test_token_sequence_input(self):
        assert len(find_conjuncts(tokenize("kṛṣṇārjunau"))) == 2

    @pytest.mark.parametrize("word, expected", [
        ("saṃskṛtam", True),
        ("नमस्ते", True),
        ("rāma", False),
        ("राम", False),
    ])
    def test_has_conjunct(self, word, expected):
        assert has_conjunct(word) is expected


class TestAnalyzeConjuncts:

    def test_counts(self):
        text = "dharmakṣetre kurukṣetre"
        analysis = analyze_conjuncts(text)
        assert analysis.script is ScriptKind.IAST
        assert analysis.count == 5
        assert analysis.unique == ("rm", "kṣ", "tr")
        assert analysis.density == pytest.approx(5 / len(text))
        assert analysis.has_conjuncts
        assert analysis.conjuncts[3].start == text.index("kṣ", 13)

    def test_empty(self):
        analysis = analyze_conjuncts("")
        assert analysis.count == 0
        assert analysis.density == 0.0
        assert not analysis.has_conjuncts
        assert analysis.script is ScriptKind.UNKNOWN
