from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional
import re

# characters that can never appear in a page title
_ILLEGAL = re.compile(r"[\[\]{}|<>\x00-\x1f]")

def normalize_title_text(s: str) -> str:
    """
    Canonical page name:
    - underscores are spaces
    - whitespace collapsed and stripped
    - a leading ':' (explicit main namespace) dropped
    - first letter upper-cased
    """
    s = (s or "").replace("_", " ")
    s = re.sub(r"\s+", " ", s).strip()
    if s.startswith(":"):
        s = s[1:].strip()
    if not s:
        return ""
    return s[0].upper() + s[1:]

@dataclass(frozen=True)
class Title:
    text: str
    interwiki: str = ""
    fragment: str = ""
    resolver: Optional["TitleResolver"] = field(default=None, compare=False, repr=False)

    def is_external(self) -> bool:
        return bool(self.interwiki)

    def exists(self) -> bool:
        if self.is_external() or self.resolver is None:
            return False
        return self.resolver.page_exists(self.text)

    @property
    def full_text(self) -> str:
        return f"{self.interwiki}:{self.text}" if self.interwiki else self.text

class TitleResolver:
    """
    Resolves link targets against a fixed set of known pages and
    interwiki prefixes.
    """

    def __init__(self, pages: Iterable[str] = (), interwiki_prefixes: Iterable[str] = ()) -> None:
        self._pages: FrozenSet[str] = frozenset(
            n for n in (normalize_title_text(p) for p in pages) if n
        )
        self._interwiki: FrozenSet[str] = frozenset(
            p.strip().lower() for p in interwiki_prefixes if p and p.strip()
        )

    def page_exists(self, text: str) -> bool:
        return normalize_title_text(text) in self._pages

    def new_from_text(self, text: str) -> Optional[Title]:
        """
        Parse a link target. Returns None for targets that are not valid
        titles (empty, fragment-only, or containing illegal characters).
        """
        raw = (text or "").strip()
        if not raw or _ILLEGAL.search(raw):
            return None

        fragment = ""
        if "#" in raw:
            raw, fragment = raw.split("#", 1)
            fragment = fragment.strip()

        interwiki = ""
        if ":" in raw:
            prefix, rest = raw.split(":", 1)
            if prefix.strip().lower() in self._interwiki:
                interwiki = prefix.strip().lower()
                rest = re.sub(r"\s+", " ", rest.replace("_", " ")).strip()
                return Title(text=rest, interwiki=interwiki, fragment=fragment, resolver=self)

        name = normalize_title_text(raw)
        if not name:
            return None
        return Title(text=name, fragment=fragment, resolver=self)
