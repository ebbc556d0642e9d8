"""Romanian pronunciation hints for native English speakers."""

from __future__ import annotations

import re

# Names and loanwords that keep a plain 'eh' at the start ("Eva", "Elena",
# "Emanuel", "Erasmus", "Europa"). The lookahead runs after the leading 'e',
# so the list holds what follows it.
INITIAL_E_EXCEPTION_SUFFIXES = ("va", "lena", "manuel", "rasmus", "uropa", "eva", "vei")

INITIAL_E_PATTERN = re.compile(
    rf"^e(?!({'|'.join(INITIAL_E_EXCEPTION_SUFFIXES)})\b)",
    re.IGNORECASE,
)

RO_EN_RULES = (
    # Diphthongs and vowel groups
    ("ai", "eye", "like 'eye'"),
    ("ei", "yay", "like 'say'"),
    ("oi", "oy", "like 'boy'"),
    ("ui", "wee", "like 'week', but faster"),
    ("au", "ow", "like 'cow'"),
    ("ea", "ya", "like 'ya' in 'yard' (e.g., 'Ea' is 'ya')"),
    ("eu", "yeh-oo", "like 'eh-oo' quickly blended"),
    ("ou", "oh", "like 'go'"),
    ("ia", "ya", "like 'ya' in 'yard'"),
    ("ie", "yeh", "like 'ye' in 'yes'"),
    ("io", "yo", "like 'yo' in 'yogurt'"),
    ("iu", "ee-you", "like the word 'you'"),
    ("ii", "ee", "like 'ee' in 'see'"),
    # Many native words starting with 'e' sound like English 'ye' ('este' ~ 'yeste').
    (
        INITIAL_E_PATTERN,
        "yeh",
        "like 'yes' at the beginning of many words; not for names or foreign "
        "words (e.g., 'Eva', 'Elena', 'Emanuel', 'Erasmus', 'Europa')",
    ),
    ("ă", "uh", "like 'a' in 'about' (schwa sound)"),
    ("â", "uh", "a guttural 'uh', similar to 'î'"),
    ("î", "uh", "a guttural 'uh', from the back of the throat"),
    ("a", "ah", "like 'a' in 'father'"),
    ("e", "eh", "like 'e' in 'bet'"),
    ("i", "ee", "like 'ee' in 'see'"),
    ("o", "oh", "like 'o' in 'go'"),
    ("u", "oo", "like 'oo' in 'moon'"),
)
