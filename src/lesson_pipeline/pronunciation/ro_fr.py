"""Romanian pronunciation hints for native French speakers."""

from __future__ import annotations

RO_FR_RULES = (
    ("ă", "ə", "comme le 'e' dans 'le' (schwa)"),
    ("â", "ɨ", "un son guttural, similaire au 'e' russe"),
    ("î", "ɨ", "un son guttural, similaire au 'e' russe"),
    ("i", "i", "comme 'i' dans 'lit'"),
    ("u", "u", "comme 'ou' dans 'chou'"),
)
