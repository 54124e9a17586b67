from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple

from unique_link.core.title import TitleResolver
from unique_link.i18n import DEFAULT_LANGUAGE, magic_word_synonyms
from unique_link.logging import get_logger

log = get_logger()

# calling convention flag: handler receives (parser, frame, raw_args)
SFH_OBJECT_ARGS = 1

DirectiveCallback = Callable[..., Optional[str]]
ParserHook = Callable[["WikiParser"], None]

def find_closing_braces(text: str, start: int) -> Optional[int]:
    """
    Given text[start:] beginning with "{{", return the index just past the
    matching "}}", or None if the braces never balance.
    """
    depth = 0
    i = start
    n = len(text)
    while i < n:
        if text.startswith("{{", i):
            depth += 1
            i += 2
        elif text.startswith("}}", i):
            depth -= 1
            i += 2
            if depth == 0:
                return i
        else:
            i += 1
    return None

def split_args(s: str) -> List[str]:
    """
    Split directive arguments on '|', ignoring pipes nested inside
    {{...}} or [[...]].
    """
    args: List[str] = []
    depth = 0
    cur = 0
    i = 0
    n = len(s)
    while i < n:
        pair = s[i : i + 2]
        if pair in ("{{", "[["):
            depth += 1
            i += 2
            continue
        if pair in ("}}", "]]") and depth > 0:
            depth -= 1
            i += 2
            continue
        if s[i] == "|" and depth == 0:
            args.append(s[cur:i])
            cur = i + 1
        i += 1
    args.append(s[cur:])
    return args

class Frame:
    """Lazy argument expansion for object-args directives."""

    def __init__(self, parser: "WikiParser") -> None:
        self.parser = parser

    def expand(self, text: str) -> str:
        return self.parser.expand(text or "")

class WikiParser:
    """
    Minimal wikitext host: expands {{#directive:arg|...}} calls through
    registered handlers and runs extension hooks around each page.
    """

    def __init__(
        self,
        title_resolver: Optional[TitleResolver] = None,
        *,
        language: str = DEFAULT_LANGUAGE,
    ) -> None:
        self.title_resolver = title_resolver or TitleResolver()
        self.language = language
        self.title = ""
        self._exact: Dict[str, Tuple[DirectiveCallback, int]] = {}
        self._folded: Dict[str, Tuple[DirectiveCallback, int]] = {}
        self._first_call_init_hooks: List[ParserHook] = []
        self._clear_state_hooks: List[ParserHook] = []
        self._initialised = False

    # ---- extension points ----

    def add_first_call_init_hook(self, hook: ParserHook) -> None:
        self._first_call_init_hooks.append(hook)

    def add_clear_state_hook(self, hook: ParserHook) -> None:
        self._clear_state_hooks.append(hook)

    def set_function_hook(self, word_id: str, callback: DirectiveCallback, flags: int = 0) -> None:
        case_sensitive, names = magic_word_synonyms(word_id, self.language)
        for name in names:
            if case_sensitive:
                self._exact[name] = (callback, flags)
            else:
                self._folded[name.casefold()] = (callback, flags)
        log.debug("registered directive %s as %s", word_id, ", ".join(names))

    def function_names(self) -> List[str]:
        return sorted(set(self._exact) | set(self._folded))

    # ---- lifecycle ----

    def first_call_init(self) -> None:
        if self._initialised:
            return
        self._initialised = True
        for hook in self._first_call_init_hooks:
            hook(self)

    def clear_state(self) -> None:
        self.first_call_init()
        for hook in self._clear_state_hooks:
            hook(self)

    def parse(self, title: str, text: str) -> str:
        """Render one page. Every call is its own render session."""
        self.clear_state()
        self.title = title
        return self.expand(text)

    # ---- expansion ----

    def _lookup(self, name: str) -> Optional[Tuple[DirectiveCallback, int]]:
        return self._exact.get(name) or self._folded.get(name.casefold())

    def _call(self, raw: str) -> str:
        inner = raw[3:-2]
        name, sep, rest = inner.partition(":")
        # only {{#name:...}} is a directive call
        entry = self._lookup(name.strip()) if sep else None
        if entry is None:
            return raw
        callback, flags = entry
        args = split_args(rest)

        if flags & SFH_OBJECT_ARGS:
            out = callback(self, Frame(self), args)
        else:
            out = callback(self, *[self.expand(a).strip() for a in args])
        return "" if out is None else str(out)

    def expand(self, text: str) -> str:
        out: List[str] = []
        pos = 0
        while True:
            start = text.find("{{#", pos)
            if start < 0:
                out.append(text[pos:])
                break
            end = find_closing_braces(text, start)
            if end is None:
                # unbalanced: keep the brace and look for later directives
                out.append(text[pos : start + 1])
                pos = start + 1
                continue
            out.append(text[pos:start])
            out.append(self._call(text[start:end]))
            pos = end
        return "".join(out)
