"""Rule tables for languages written in Devanagari.

Every consonant letter carries an inherent schwa, which is silenced by a
following virama and replaced by a following vowel sign. Each consonant
therefore gets three rules, tried in this order: consonant + virama,
consonant before a vowel sign (which looks ahead without consuming it),
and the bare consonant.
"""

VIRAMA = "्"

CONSONANTS = {
    "क": "k", "ख": "kʰ", "ग": "g", "घ": "gʱ", "ङ": "ŋ",
    "च": "tʃ", "छ": "tʃʰ", "ज": "dʒ", "झ": "dʒʱ", "ञ": "ɲ",
    "ट": "ʈ", "ठ": "ʈʰ", "ड": "ɖ", "ढ": "ɖʱ", "ण": "ɳ",
    "त": "t̪", "थ": "t̪ʰ", "द": "d̪", "ध": "d̪ʱ", "न": "n",
    "प": "p", "फ": "pʰ", "ब": "b", "भ": "bʱ", "म": "m",
    "य": "j", "र": "ɾ", "ल": "l", "व": "ʋ", "ळ": "ɭ",
    "श": "ʃ", "ष": "ʂ", "स": "s", "ह": "ɦ",
}

VOWEL_SIGNS = {
    "ा": "aː", "ि": "i", "ी": "iː", "ु": "u", "ू": "uː",
    "ृ": "ɾu", "े": "e", "ै": "əi", "ो": "o", "ौ": "əu",
    "ॅ": "æ", "ॉ": "ɔ",
}

VOWELS = {
    "अ": "ə", "आ": "aː", "इ": "i", "ई": "iː", "उ": "u", "ऊ": "uː",
    "ऋ": "ɾu", "ए": "e", "ऐ": "əi", "ओ": "o", "औ": "əu",
    "ॲ": "æ", "ऑ": "ɔ",
}

SIGNS = {
    # anusvara, nasalises or adds a homorganic nasal
    "ं": "n",
    # chandrabindu
    "ँ": "̃",
    # visarga
    "ः": "h",
    "।": "|",
    "॥": "‖",
}

DIGITS = {chr(0x0966 + value): str(value) for value in range(10)}


def consonant_rules(letter, ipa):
    return [
        {"pattern": letter + VIRAMA, "output": ipa},
        {"pattern": f"{letter}[{''.join(VOWEL_SIGNS)}]", "output": ipa, "consumes": 1},
        {"pattern": letter, "output": ipa + "ə"},
    ]


def letter_rules(mapping):
    return [{"pattern": letter, "output": ipa} for letter, ipa in mapping.items()]


devanagari_base_rules = (
    [rule for letter, ipa in CONSONANTS.items() for rule in consonant_rules(letter, ipa)]
    + letter_rules(VOWEL_SIGNS)
    + letter_rules(VOWELS)
    + letter_rules(SIGNS)
    + letter_rules(DIGITS)
)

marathi = {
    "name": "marathi",
    "language": "mr",
    "status": "INCOMPLETE",
    "variants": ["Marathi"],
    "fallback": "report",
    "rules": devanagari_base_rules,
}
