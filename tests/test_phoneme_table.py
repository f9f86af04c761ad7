import dataclasses

import pytest

from sanskrit_phonology.text_frontend.phoneme_table import (
    CONSONANT, MARK, PHONEME_TABLE, VOWEL, Phoneme,
)
from sanskrit_phonology.text_frontend.script_detector import ScriptKind


class TestInventory:

    def test_sizes(self):
        assert len(PHONEME_TABLE) == 51
        assert len(PHONEME_TABLE.ids_where(category=VOWEL)) == 14
        assert len(PHONEME_TABLE.ids_where(category=CONSONANT)) == 36
        assert PHONEME_TABLE.ids_where(category=MARK) == ('AVAGRAHA',)

    def test_ik_vowels(self):
        assert set(PHONEME_TABLE.ids_where(is_ik=True)) == {
            'VOWEL_I_SHORT', 'VOWEL_I_LONG', 'VOWEL_U_SHORT', 'VOWEL_U_LONG',
            'VOWEL_R_SHORT', 'VOWEL_R_LONG', 'VOWEL_L_SHORT', 'VOWEL_L_LONG',
        }

    def test_every_id_is_unique_and_iterable(self):
        ids = [phoneme.canonical_id for phoneme in PHONEME_TABLE]
        assert len(ids) == len(set(ids))
        assert all(canonical_id in PHONEME_TABLE for canonical_id in ids)

    def test_read_only(self):
        with pytest.raises(TypeError):
            PHONEME_TABLE.phonemes['NEW'] = None
        with pytest.raises(dataclasses.FrozenInstanceError):
            PHONEME_TABLE.get('CONS_K').iast = 'q'


class TestSurfaceLookup:

    def test_every_devanagari_form_maps_back(self):
        for phoneme in PHONEME_TABLE:
            if phoneme.devanagari is None:
                continue
            found = PHONEME_TABLE.lookup_surface(phoneme.devanagari, ScriptKind.DEVANAGARI)
            assert found.canonical_id == phoneme.canonical_id
            if phoneme.matra:
                found = PHONEME_TABLE.lookup_surface(phoneme.matra, ScriptKind.DEVANAGARI)
                assert found.canonical_id == phoneme.canonical_id

    def test_every_iast_form_maps_back(self):
        for phoneme in PHONEME_TABLE:
            found = PHONEME_TABLE.lookup_surface(phoneme.iast, ScriptKind.IAST)
            assert found.canonical_id == phoneme.canonical_id

    @pytest.mark.parametrize("surface, expected", [
        ("ि", "VOWEL_I_SHORT"),
        ("क्", "CONS_K"),
        ("ऽ", "AVAGRAHA"),
        ("m\u0310", "CANDRABINDU"),
    ])
    def test_exact_surfaces(self, surface, expected):
        assert PHONEME_TABLE.lookup_surface(surface).canonical_id == expected

    @pytest.mark.parametrize("surface", ["ṁ", "r\u0325", "r\u0323", "Ś", "K"])
    def test_alternative_spellings_are_not_surfaces(self, surface):
        assert PHONEME_TABLE.lookup_surface(surface) is None

    def test_every_iast_surface_is_the_primary_spelling(self):
        for form in PHONEME_TABLE.surfaces_for(ScriptKind.IAST):
            assert form.text == PHONEME_TABLE.get(form.canonical_id).iast

    @pytest.mark.parametrize("variant, primary", [
        ("ṁ", "ṃ"),
        ("r\u0325", "ṛ"),
        ("r\u0325\u0304", "ṝ"),
        ("l\u0325", "ḷ"),
        ("’", "'"),
    ])
    def test_variant_spellings(self, variant, primary):
        assert PHONEME_TABLE.variant_spellings[variant] == primary
        assert PHONEME_TABLE.resolve(variant) is PHONEME_TABLE.lookup_surface(primary)

    def test_variant_spellings_are_read_only(self):
        with pytest.raises(TypeError):
            PHONEME_TABLE.variant_spellings['x'] = 'y'

    def test_unknown_surface(self):
        assert PHONEME_TABLE.lookup_surface("x") is None
        assert PHONEME_TABLE.lookup_surface("क", ScriptKind.IAST) is None

    def test_resolve(self):
        phoneme = PHONEME_TABLE.get('CONS_K')
        assert PHONEME_TABLE.resolve(phoneme) is phoneme
        assert PHONEME_TABLE.resolve('CONS_K') is phoneme
        assert PHONEME_TABLE.resolve('क') is phoneme
        assert PHONEME_TABLE.resolve('k') is phoneme
        assert PHONEME_TABLE.resolve('') is None
        assert PHONEME_TABLE.resolve(7) is None
        assert PHONEME_TABLE.render_iast('CONS_KH') == 'kh'
        assert PHONEME_TABLE.render_iast('NOPE') is None


class TestPhoneme:

    def test_categories(self):
        assert PHONEME_TABLE.get('VOWEL_AI').is_vowel
        assert PHONEME_TABLE.get('CONS_BH').is_consonant
        assert PHONEME_TABLE.get('VISARGA').is_sign
        assert PHONEME_TABLE.get('AVAGRAHA').is_sign
        assert not PHONEME_TABLE.get('CONS_M').is_sign

    def test_custom_phoneme_defaults(self):
        phoneme = Phoneme('X', 'x', VOWEL)
        assert phoneme.guna_target is None
        assert phoneme.iast_variants == ()
