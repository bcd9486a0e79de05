"""American English rule table.

Based on Mark Rosenfelder's English spelling rules
(http://zompist.com/spell.html), which get about 85% of the lexicon right.
The numbers in the comments refer to his rules.
Letters that stand for themselves (b, d, f, ...) have no rule yet and are
reported by the fallback.

The general g rule is listed after the gu rules (23), otherwise it shadows
them: guest is /gɛst/, not /guɛst/.
"""

VOWELS = "aeiou"
CONSONANTS = "bcdfghjklmnpqrstvwxz"
LONG_I = "aɪ"

# Start of the utterance or of a word
INITIAL = r"^|\s"

english_american = {
    "name": "english_american",
    "language": "en-US",
    "status": "IN_PROGRESS",
    "variants": ["American"],
    "fallback": "report",
    "rules": [
        # 1. Unconditional replacements
        {"pattern": "t?ch", "output": "tʃ"},
        {"pattern": "sc?h", "output": "ʃ"},
        {"pattern": "ph", "output": "f"},
        {"pattern": "th", "output": "θ"},
        {"pattern": "qu", "output": "kw"},
        {"pattern": "wr", "output": "r"},
        # Before an o, wh is h: who, whore, whole
        {"pattern": "who", "output": "h", "consumes": 1},
        {"pattern": "wh", "output": "w"},
        # 2. x is ks, but gz after e and before a vowel: exist, excite
        {"pattern": f"xh[{VOWELS}]", "output": "gz", "consumes": 2, "context": "e"},
        {"pattern": "xh", "output": "ks"},
        {"pattern": f"x[{VOWELS}]", "output": "gz", "consumes": 1, "context": "e"},
        {"pattern": "x", "output": "ks"},
        {"pattern": "rh", "output": "r"},
        # 4. Before a vowel, gh is g: ghost
        {"pattern": f"gh[{VOWELS}]", "output": "g", "consumes": 2},
        # 5. gh makes a preceding i long: right
        {"pattern": "igh", "output": LONG_I},
        # 6. aught and ought: daughter, sought
        {"pattern": "aught", "output": "ɔt"},
        {"pattern": "ought", "output": "ɔt"},
        # 7. Any other ough
        {"pattern": "rough", "output": "rʌf"},
        {"pattern": " cough", "output": " kɒf"},
        {"pattern": " through ", "output": " θru "},
        {"pattern": "ough", "output": "oʊ"},
        # 8. Elsewhere gh is dropped: freight
        {"pattern": "gh", "output": ""},
        # 9. Initial gn, kn, mn, pt, tm: only the second letter is pronounced
        {"pattern": "gn", "output": "n", "context": INITIAL},
        {"pattern": "kn", "output": "n", "context": INITIAL},
        {"pattern": "mn", "output": "n", "context": INITIAL},
        {"pattern": "pt", "output": "t", "context": INITIAL},
        {"pattern": "tm", "output": "m", "context": INITIAL},
        # 10. y ending a one-syllable word: ply
        {"pattern": r"y(\s|$)", "output": LONG_I, "consumes": 1,
         "context": rf"(^|\s)[^{VOWELS}]+"},
        # 11. ey, ay and oy: monkey, say, boy
        {"pattern": "ey", "output": "i"},
        {"pattern": "ay", "output": "eɪ"},
        {"pattern": "oy", "output": "oj"},
        # 14. ci or ti before a vowel: gracious, nation
        {"pattern": f"(ti|ci)[{VOWELS}]", "output": "ʃ", "consumes": 2},
        # 18. al before r, s, m, a dental stop or final ll: also, wall, bald
        {"pattern": "al([lrsmtd]|th)", "output": "ɔɫ", "consumes": 2},
        # 19. alk, except initially: walk
        {"pattern": "alk", "output": "ɔk", "context": r"[^\s]"},
        # 20. c is s before a front vowel, k elsewhere: cell, acid, cow
        {"pattern": "c[iey]", "output": "s", "consumes": 1},
        {"pattern": "c", "output": "k"},
        # 22. The e after g is lost before o or a: changeable, dungeon
        {"pattern": "ge[oa]", "output": "dʒ", "consumes": 2},
        # 21. g is dʒ before a front vowel: gel, turgid
        {"pattern": "g[iey]", "output": "dʒ", "consumes": 1},
        # 23. Initial gu or final gue is g: guest, plague
        {"pattern": "gu", "output": "g", "context": INITIAL},
        {"pattern": r"gue($|\s)", "output": "g", "consumes": 3},
        # Medially gu is gw: language, anguish
        {"pattern": "gu", "output": "gw"},
        {"pattern": "g", "output": "g"},
        # 24. Word-final le and re after a consonant: bottle, acre
        {"pattern": r"le(\s|$)", "output": "əɫ", "consumes": 2,
         "context": f"[{CONSONANTS}]"},
        {"pattern": r"re(\s|$)", "output": "ər", "consumes": 2,
         "context": f"[{CONSONANTS}]"},
        # 25. Vowels are long before a single consonant and a vowel:
        # rate, mete, fine, rote, cute
        {"pattern": f"a[{CONSONANTS}][{VOWELS}]", "output": "eɪ", "consumes": 1},
        {"pattern": f"e[{CONSONANTS}][{VOWELS}]", "output": "iː", "consumes": 1},
        {"pattern": f"i[{CONSONANTS}][{VOWELS}]", "output": LONG_I, "consumes": 1},
        {"pattern": f"o[{CONSONANTS}][{VOWELS}]", "output": "oʊ", "consumes": 1},
        {"pattern": f"u[{CONSONANTS}][{VOWELS}]", "output": "ju", "consumes": 1},
        # 26. and short before two consonants or a final one:
        # pat, pet, pit, pot, but
        {"pattern": rf"a[{CONSONANTS}]([{CONSONANTS}]|\s|$)", "output": "æ", "consumes": 1},
        {"pattern": rf"e[{CONSONANTS}]([{CONSONANTS}]|\s|$)", "output": "ɛ", "consumes": 1},
        {"pattern": rf"i[{CONSONANTS}]([{CONSONANTS}]|\s|$)", "output": "ɪ", "consumes": 1},
        {"pattern": rf"o[{CONSONANTS}]([{CONSONANTS}]|\s|$)", "output": "ɒ", "consumes": 1},
        {"pattern": rf"u[{CONSONANTS}]([{CONSONANTS}]|\s|$)", "output": "ʌ", "consumes": 1},
        # 32. Except before a vowel, ous is əs: jealous.
        # Has to come before silent e deletion, or it applies to arouse.
        {"pattern": "ous", "output": "əs"},
        # 33. Silent final e: rate, mike, cute
        {"pattern": "e", "output": "", "context": f"[{VOWELS}][{CONSONANTS}]{{1,2}}"},
        # 35. i before another vowel in the first syllable: bias, diagram
        {"pattern": f"[iy][{VOWELS}]", "output": "ajə",
         "context": rf"(^|\s)[^{VOWELS}]+"},
        # 38. Any vowel is reduced before l: battle, final, evil
        {"pattern": f"[{VOWELS}]l", "output": "əɫ"},
        # 3. Ignore apostrophes: can't, o'clock
        {"pattern": "'", "output": ""},
        # Hyphens separate words: mother-in-law
        {"pattern": "-", "output": " "},
    ],
}
