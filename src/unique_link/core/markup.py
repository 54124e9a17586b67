from __future__ import annotations

from typing import Optional, Tuple

def wiki_link(target: str, text: str) -> str:
    return f"[[{target}|{text}]]"

def render_link(target: str, resolution: Optional[Tuple[bool, str]]) -> str:
    """
    Wikitext for a resolve_link result:
    None -> "" ; (True, text) -> "[[target|text]]" ; (False, text) -> "text"
    """
    if resolution is None:
        return ""
    should_link, text = resolution
    return wiki_link(target, text) if should_link else text
