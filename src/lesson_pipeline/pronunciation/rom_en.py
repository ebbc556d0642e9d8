"""Vlax Romani pronunciation hints for native English speakers.

Vlax orthography is close to phonetic: a letter almost always stands for one
sound. Only letters whose value surprises English readers are listed; plain
consonants such as ``b`` or ``m`` are left unannotated. Aspirated digraphs are
multi-letter literals, so they win over their single-letter halves regardless
of declaration order.
"""

from __future__ import annotations

ROM_EN_RULES = (
    # Aspirated consonants
    ("čh", "ch-h", "like 'ch' in 'church', but with a strong puff of air (aspirated)"),
    ("kh", "k-h", "like 'k' in 'key' with a strong puff of air; similar to 'c-h' in 'back-hand'"),
    ("ph", "p-h", "like 'p' in 'pot' with a strong puff of air; similar to 'p-h' in 'uphill'"),
    (
        "th",
        "t-h",
        "like 't' in 'top' with a strong puff of air; similar to 't-h' in 'anthill'. "
        "Never like 'th' in 'the' or 'thin'",
    ),
    ("dž", "j", "like 'j' in 'judge' or 'g' in 'gem'"),
    # Single consonants with unexpected values
    ("č", "ch", "like 'ch' in 'church' (unaspirated, no puff of air)"),
    ("š", "sh", "like 'sh' in 'shoe'"),
    ("ž", "zh", "like the 's' in 'treasure' or the 'g' in 'beige'"),
    ("c", "ts", "like 'ts' in 'cats' or 'pizza'"),
    ("j", "y", "like 'y' in 'yes' or 'yellow'"),
    ("r", "rr", "a rolled or tapped 'r', as in Spanish 'pero'"),
    ("x", "kh", "a guttural sound like the 'ch' in Scottish 'loch' or German 'Bach'"),
    # Pure vowels
    ("a", "ah", "like 'a' in 'father' or 'spa'"),
    ("e", "eh", "like 'e' in 'bet' or 'met'"),
    ("i", "ee", "like 'ee' in 'see' or 'machine'"),
    ("o", "oh", "like 'o' in 'go' or 'boat'"),
    ("u", "oo", "like 'oo' in 'moon' or 'flute'"),
)
