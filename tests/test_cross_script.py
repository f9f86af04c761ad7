import pytest

from sanskrit_phonology.errors import InvalidInputError, UnknownScriptError
from sanskrit_phonology.text_frontend.cross_script import (
    CrossScriptNormalizer, is_equivalent_across_scripts, normalize, render, to_canonical,
    transliterate,
)
from sanskrit_phonology.text_frontend.phoneme_table import PHONEME_TABLE
from sanskrit_phonology.text_frontend.script_detector import ScriptKind, detect_script
from sanskrit_phonology.text_frontend.tokenizer import tokenize


class TestRoundTrip:

    def test_render_restores_input(self, word_in_script):
        word, script = word_in_script
        assert render(to_canonical(tokenize(word, script)), script) == word

    def test_detection_is_stable(self, word_in_script):
        word, script = word_in_script
        rendered = render(to_canonical(tokenize(word, script)), script)
        assert detect_script(rendered) is script


class TestScriptSymmetry:

    def test_every_phoneme_round_trips_in_both_scripts(self):
        for phoneme in PHONEME_TABLE:
            canonical = (phoneme.canonical_id,)
            iast = render(canonical, ScriptKind.IAST)
            devanagari = render(canonical, ScriptKind.DEVANAGARI)
            assert to_canonical(tokenize(iast, ScriptKind.IAST)) == canonical
            assert to_canonical(tokenize(devanagari, ScriptKind.DEVANAGARI)) == canonical

    @pytest.mark.parametrize("iast, devanagari", [
        ("kṛṣṇa", "कृष्ण"),
        ("rāmaḥ", "रामः"),
        ("saṃskṛtam", "संस्कृतम्"),
        ("rāmo'tra", "रामोऽत्र"),
        ("aiśvaryam", "ऐश्वर्यम्"),
    ])
    def test_same_canonical_form(self, iast, devanagari):
        assert to_canonical(tokenize(iast)) == to_canonical(tokenize(devanagari))
        assert transliterate(iast, ScriptKind.DEVANAGARI) == devanagari
        assert transliterate(devanagari, ScriptKind.IAST) == iast


class TestDevanagariRendering:

    @pytest.mark.parametrize("canonical, expected", [
        (('CONS_K',), 'क्'),
        (('CONS_K', 'VOWEL_A_SHORT'), 'क'),
        (('CONS_K', 'VOWEL_I_SHORT'), 'कि'),
        (('VOWEL_I_SHORT', 'CONS_K'), 'इक्'),
        (('VOWEL_A_SHORT', 'VOWEL_I_SHORT'), 'अइ'),
        (('CONS_S', 'VOWEL_A_SHORT', 'ANUSVARA'), 'सं'),
        (('CONS_K', 'CONS_SS', 'VOWEL_A_SHORT'), 'क्ष'),
    ])
    def test_letters_matras_and_virama(self, canonical, expected):
        assert render(canonical, ScriptKind.DEVANAGARI) == expected

    def test_literal_characters_pass_through(self):
        assert render(('CONS_R', 'VOWEL_A_LONG', '!'), ScriptKind.DEVANAGARI) == 'रा!'
        assert render(('CONS_R', '!'), ScriptKind.IAST) == 'r!'

    def test_inherent_vowel_unit(self):
        units = CrossScriptNormalizer().render_units(('CONS_K', 'VOWEL_A_SHORT'),
                                                     ScriptKind.DEVANAGARI)
        assert units[1].surface == ''
        assert units[1].inherent


class TestNormalizerApi:

    def test_normalize(self):
        assert normalize(tokenize("nama"), "Devanagari") == "नम"
        assert normalize(tokenize("नमः"), ScriptKind.IAST) == "namaḥ"

    def test_to_tokens_keeps_ids(self):
        sequence = CrossScriptNormalizer().to_tokens(('CONS_R', 'VOWEL_A_LONG', 'CONS_M'),
                                                     ScriptKind.DEVANAGARI)
        assert sequence.text == 'राम्'
        assert sequence.canonical_ids == ('CONS_R', 'VOWEL_A_LONG', 'CONS_M')
        assert sequence.script is ScriptKind.DEVANAGARI

    def test_transliterate_unknown_passes_through(self):
        assert transliterate("123", ScriptKind.DEVANAGARI) == "123"

    def test_render_to_unknown_raises(self):
        with pytest.raises(UnknownScriptError):
            render(('CONS_K',), ScriptKind.UNKNOWN)

    def test_render_rejects_plain_string(self):
        with pytest.raises(InvalidInputError):
            render("CONS_K", ScriptKind.IAST)

    def test_to_canonical_rejects_other_types(self):
        with pytest.raises(InvalidInputError):
            to_canonical(42)


class TestEquivalence:

    @pytest.mark.parametrize("first, second, expected", [
        ("kṛṣṇa", "कृष्ण", True),
        ("rāma", "राम", True),
        ("rāma", "rāma", True),
        (" rāma ", "राम", True),
        ("rāma", "रम", False),
        ("rāma!", "राम!", False),
    ])
    def test_is_equivalent_across_scripts(self, first, second, expected):
        assert is_equivalent_across_scripts(first, second) is expected

    def test_non_string(self):
        with pytest.raises(InvalidInputError):
            is_equivalent_across_scripts(None, "राम")
