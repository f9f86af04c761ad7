"""Shared word lists and sandhi tables for the test suite."""

import pytest

from sanskrit_phonology.text_frontend.script_detector import ScriptKind

IAST_WORDS = [
    "kṛṣṇa",
    "rāmaḥ",
    "saṃskṛtam",
    "dharmakṣetre",
    "gaṅgā",
    "jñānam",
    "prauḍhaḥ",
    "namaste",
    "ṛṣiḥ",
    "ḹ",
]

DEVANAGARI_WORDS = [
    "कृष्ण",
    "रामः",
    "संस्कृतम्",
    "धर्मक्षेत्रे",
    "गङ्गा",
    "ज्ञानम्",
    "नमस्ते",
    "रामोऽत्र",
    "ऋषिः",
    "आँ",
]

# (left, right, combined, rule)
IAST_SANDHI = [
    ("pari", "īkṣate", "parīkṣate", "savarna_dirgha"),
    ("mahā", "indraḥ", "mahendraḥ", "guna"),
    ("pra", "eti", "praiti", "vrddhi"),
    ("prati", "ekam", "pratyekam", "yan"),
    ("sam", "gacchate", "saṃgacchate", "anusvara"),
    ("dus", "carati", "duścarati", "schutva"),
    ("su", "uktam", "sūktam", "savarna_dirgha"),
    ("deva", "ālayaḥ", "devālayaḥ", "savarna_dirgha"),
    ("upa", "ikṣate", "upekṣate", "guna"),
    ("mahā", "ṛṣiḥ", "maharṣiḥ", "guna"),
    ("tat", "ca", "tacca", "schutva"),
    ("dus", "karoti", "duṣkaroti", "satva"),
    ("bhas", "karoti", "bhaśkaroti", "schutva"),
    ("namas", "khaḍgaḥ", "namaśkhaḍgaḥ", "schutva"),
    ("havis", "pacati", "haviṣpacati", "satva"),
    ("tān", "jayati", "tāñjayati", "schutva"),
    ("rājan", "karoti", "rājankaroti", None),
    ("pitṛ", "artham", "pitrartham", "yan"),
    ("ne", "anam", "nayanam", "ayadi"),
    ("pau", "akaḥ", "pāvakaḥ", "ayadi"),
    ("rāmaḥ", "gacchati", "rāmogacchati", "visarga"),
    ("rāmaḥ", "atra", "rāmo'tra", "visarga"),
    ("pra", "bhavati", "prabhavati", None),
]

DEVANAGARI_SANDHI = [
    ("परि", "ईक्षते", "परीक्षते", "savarna_dirgha"),
    ("महा", "इन्द्रः", "महेन्द्रः", "guna"),
    ("प्र", "एति", "प्रैति", "vrddhi"),
    ("प्रति", "एकम्", "प्रत्येकम्", "yan"),
    ("सम्", "गच्छते", "संगच्छते", "anusvara"),
    ("दुस्", "चरति", "दुश्चरति", "schutva"),
    ("नमस्", "करोति", "नमश्करोति", "schutva"),
    ("रामः", "अत्र", "रामोऽत्र", "visarga"),
    ("प्र", "एजते", "प्रेजते", "lexical_exception"),
    ("ॐ", "नमः", "ओंनमः", None),
]

LEXICAL_SANDHI = [
    ("pra", "ejate", "prejate"),
    ("upa", "oṣati", "upoṣati"),
    ("pra", "ṛcchati", "prārcchati"),
    ("akṣa", "ūhinī", "akṣauhiṇī"),
    ("sva", "īraḥ", "svairaḥ"),
    ("go", "indraḥ", "gavendraḥ"),
    ("mārta", "aṇḍaḥ", "mārtaṇḍaḥ"),
]


@pytest.fixture(params=[(word, ScriptKind.IAST) for word in IAST_WORDS]
                + [(word, ScriptKind.DEVANAGARI) for word in DEVANAGARI_WORDS],
                ids=lambda param: param[0])
def word_in_script(request):
    """Each sample word paired with the script it is written in."""
    return request.param
