from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Tuple

WIKI_SUFFIX = ".wiki"

def iter_pages(root: Path) -> Iterable[Tuple[Path, Path]]:
    """(absolute path, path relative to root) for every page, sorted."""
    for p in sorted(root.rglob(f"*{WIKI_SUFFIX}")):
        if p.is_file():
            yield p, p.resolve().relative_to(root.resolve())

def page_title(rel: Path) -> str:
    # "People/Ada_Lovelace.wiki" -> "People/Ada Lovelace"
    return rel.with_suffix("").as_posix().replace("_", " ")

def page_titles(rels: List[Path]) -> List[str]:
    return [page_title(rel) for rel in rels]

def read_page(p: Path) -> str:
    """
    Page source as text. Raises UnicodeDecodeError for non-UTF-8 input.
    A byte-order mark is dropped and line endings become "\\n".
    """
    text = p.read_bytes().decode("utf-8-sig")
    return text.replace("\r\n", "\n").replace("\r", "\n")

def write_page(out_root: Path, rel: Path, text: str) -> Path:
    out = out_root / rel
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8", newline="\n")
    return out
