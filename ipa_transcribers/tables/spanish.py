"""Spanish rule table.

Spanish spelling is close to phonemic, so letters without a rule are
copied as they are. Peninsular and American Spanish differ in the
pronunciation of c before e/i, z and ll.

Pronunciation information sourced from:
* Oxford Dictionary Spanish Pronunciation Guide
  (https://es.oxforddictionaries.com/grammar/spanish-pronunciation)
* Wikipedia's IPA for Spanish (https://en.wikipedia.org/wiki/Help:IPA/Spanish)
"""

# Start of the utterance or of a word
INITIAL = r"^|\s"

spanish = {
    "name": "spanish",
    "language": "es",
    "status": "IN_PROGRESS",
    "variants": ["Peninsular", "American"],
    "fallback": "copy",
    "rules": [
        # Ñ is always pronounced /ɲ/
        {"pattern": "ñ", "output": "ɲ"},
        # H is mute (huevo /ˈweβo/, almohada /almoˈaða/)
        {"pattern": "h", "output": ""},
        # B and V are pronounced the same: /b/ initially or after m or n,
        # /β/ everywhere else (rabo /ˈraβo/, árbol /ˈarβol/)
        {"pattern": "(mb|mv|nb|nv)", "output": "mb"},
        {"pattern": "[bv]", "output": "b", "context": INITIAL},
        {"pattern": "[bv]", "output": "β"},
        {"pattern": "ng", "output": "ŋg"},
        {"pattern": "(nk|nc)", "output": "ŋ", "consumes": 1},
        {"pattern": "ch", "output": "tʃ"},
        # C before e or i is /θ/ in most of Spain, /s/ in Latin America
        # (cero /ˈθero/, /ˈsero/)
        {"pattern": "c[ie]", "output": ["θ", "s"], "consumes": 1},
        {"pattern": "c", "output": "k"},
        {"pattern": "z", "output": ["θ", "s"]},
        # Q is always followed by a silent u
        {"pattern": "que", "output": "ke"},
        {"pattern": "qui", "output": "ki"},
        # D is /d/ initially or after n or l, /ð/ everywhere else
        {"pattern": "d", "output": "d", "context": INITIAL},
        {"pattern": "ld", "output": "ld"},
        {"pattern": "nd", "output": "nd"},
        {"pattern": "d", "output": "ð"},
        # J is always /x/
        {"pattern": "j", "output": "x"},
        # G is /x/ before e or i, /g/ initially before a, o, u, ue or ui,
        # and /ɣ/ elsewhere, unless written with a diaeresis
        {"pattern": "g[ie]", "output": "x", "consumes": 1},
        {"pattern": "gui", "output": "gi", "context": INITIAL},
        {"pattern": "gue", "output": "ge", "context": INITIAL},
        {"pattern": "g[aou]", "output": "g", "consumes": 1, "context": INITIAL},
        {"pattern": "güi", "output": "ɣwi"},
        {"pattern": "güe", "output": "ɣwe"},
        {"pattern": "gu[ie]", "output": "ɣ", "consumes": 2},
        {"pattern": "g", "output": "ɣ"},
        # The double rr is always trilled
        {"pattern": "rr", "output": "r"},
        {"pattern": "x", "output": "ks"},
        # LL keeps its palatal lateral in parts of Castile,
        # most other speakers merge it with y
        {"pattern": "ll", "output": ["ʎ", "ʝ"]},
        # Weak vowels before another vowel form a rising diphthong
        {"pattern": "u[aeio]", "output": "w", "consumes": 1},
        {"pattern": "i[aeou]", "output": "j", "consumes": 1},
        # Falling diphthongs spelled with y
        {"pattern": "ey", "output": "ei"},
        {"pattern": "oy", "output": "oi"},
        # Stressed vowels are written with an acute accent
        {"pattern": "á", "output": "a"},
        {"pattern": "é", "output": "e"},
        {"pattern": "í", "output": "i"},
        {"pattern": "ó", "output": "o"},
        {"pattern": "[úü]", "output": "u"},
    ],
}
