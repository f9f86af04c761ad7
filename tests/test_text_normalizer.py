import pytest

from sanskrit_phonology.errors import InvalidInputError, UnknownScriptError
from sanskrit_phonology.text_frontend.text_normalizer import (
    SanskritTextNormalizer, clean_text, from_scheme, to_scheme,
)
from sanskrit_phonology.text_frontend.tokenizer import tokenize


class TestCleanText:

    def test_nfc_and_zero_width(self):
        assert clean_text("  ra\u0304ma\u200b ") == "rāma"

    def test_devanagari_untouched(self):
        assert clean_text("राम") == "राम"

    @pytest.mark.parametrize("text, expected", [
        ("saṁ", "saṃ"),
        ("sa\u1e41skr\u0325tam", "saṃskṛtam"),
        ("kl\u0325pta", "kḷpta"),
        ("pitr\u0325\u0304n", "pitṝn"),
        ("rāmo’tra", "rāmo'tra"),
    ])
    def test_variant_spellings_are_folded(self, text, expected):
        assert clean_text(text) == expected
        assert not tokenize(clean_text(text)).has_unrecognized

    def test_om_is_spelled_out(self):
        assert clean_text("ॐ") == "ओं"
        assert tokenize(clean_text("ॐ")).canonical_ids == ('VOWEL_O', 'ANUSVARA')

    def test_dandas_stay_as_punctuation(self):
        assert clean_text("रामः।") == "रामः।"
        assert tokenize(clean_text("रामः॥")).last.is_unrecognized

    def test_capitals_are_kept(self):
        assert clean_text("Rāma") == "Rāma"

    def test_non_string(self):
        with pytest.raises(InvalidInputError):
            clean_text(5)


class TestSchemes:

    @pytest.mark.parametrize("text, scheme, expected", [
        ("kRSNa", "hk", "kṛṣṇa"),
        ("rAmaH", "HK", "rāmaḥ"),
        ("rAmaH", "harvard-kyoto", "rāmaḥ"),
        ("kfzRa", "slp1", "kṛṣṇa"),
        ("kṛṣṇa", "iast", "kṛṣṇa"),
    ])
    def test_from_scheme(self, text, scheme, expected):
        assert from_scheme(text, scheme) == expected

    def test_from_scheme_is_nfc(self):
        assert from_scheme("kr\u0323s\u0323n\u0323a", "iast") == "kṛṣṇa"

    def test_from_scheme_folds_variants(self):
        assert from_scheme("saṁskr\u0325tam", "iast") == "saṃskṛtam"

    def test_to_scheme(self):
        assert to_scheme("kṛṣṇa", "hk") == "kRSNa"
        assert to_scheme("कृष्ण", "hk") == "kRSNa"
        assert to_scheme("राम", "devanagari") == "राम"

    def test_to_scheme_unknown_script(self):
        with pytest.raises(UnknownScriptError):
            to_scheme("123", "hk")

    @pytest.mark.parametrize("scheme", ["klingon", None, ""])
    def test_unsupported_scheme(self, scheme):
        with pytest.raises(InvalidInputError):
            from_scheme("rAma", scheme)

    def test_scheme_table(self):
        normalizer = SanskritTextNormalizer()
        assert normalizer.scheme_id(" ITRANS ") == normalizer.schemes['itrans']
