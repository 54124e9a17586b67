from __future__ import annotations

from typing import Dict, List, Tuple

# magic word id -> (case_sensitive, synonym, ...)
MagicWordTable = Dict[str, Dict[str, Tuple]]

MAGIC_WORDS: MagicWordTable = {
    "en": {
        "uniquelink": (0, "uniquelink"),
        "uniquelinkifexists": (0, "uniquelinkifexists"),
        "alreadylinkeduniquely": (0, "alreadylinkeduniquely"),
    },
}

DEFAULT_LANGUAGE = "en"

def magic_word_synonyms(word_id: str, language: str = DEFAULT_LANGUAGE) -> Tuple[bool, List[str]]:
    """
    Return (case_sensitive, synonyms) for a magic word id. Ids missing from
    `language` fall back to English. Raises ValueError for unknown ids.
    """
    for lang in (language, DEFAULT_LANGUAGE):
        entry = MAGIC_WORDS.get(lang, {}).get(word_id)
        if entry:
            case_sensitive, *names = entry
            return bool(case_sensitive), list(names)
    raise ValueError(f"Unknown magic word: {word_id}")
