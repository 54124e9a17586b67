from __future__ import annotations

from typing import List, Optional, Tuple

from unique_link.core.markup import render_link, wiki_link
from unique_link.core.registry import Branch, LinkRegistry
from unique_link.host.parser import Frame, WikiParser

class RenderSession:
    """
    One page render's worth of unique-link state.

    The session owns its LinkRegistry; reset() swaps in a new one so nothing
    recorded while rendering one page can leak into the next. The directive
    handlers below are bound to a WikiParser by unique_link.hooks.
    """

    def __init__(self) -> None:
        self.registry = LinkRegistry()

    def reset(self) -> None:
        self.registry = LinkRegistry()

    def resolve_link(
        self, target: str, display_text: str = "", category: str = ""
    ) -> Optional[Tuple[bool, str]]:
        return self.registry.resolve_link(target, display_text, category)

    def conditional_branch(
        self, target: str, category: str = "", then_branch: Branch = None, else_branch: Branch = ""
    ) -> str:
        return self.registry.conditional_branch(target, category, then_branch, else_branch)

    # ---- directive handlers ----

    def uniquelink(
        self, parser: WikiParser, dest: str = "", text: str = "", category: str = "", *_extra: str
    ) -> str:
        """{{#uniquelink:dest|text|category}}"""
        return render_link(dest, self.resolve_link(dest, text, category))

    def uniquelinkifexists(
        self, parser: WikiParser, dest: str = "", text: str = "", category: str = "", *_extra: str
    ) -> str:
        """
        {{#uniquelinkifexists:dest|text|category}}

        Like uniquelink, but the first mention only becomes a link when dest
        is an interwiki target or an existing page. The target is recorded
        before the lookup, so a missing page is looked up once per render
        and every later mention is plain text.
        """
        resolution = self.resolve_link(dest, text, category)
        if resolution is None:
            return ""
        should_link, text = resolution
        if not should_link:
            return text
        title = parser.title_resolver.new_from_text(dest)
        if title is not None and (title.is_external() or title.exists()):
            return wiki_link(dest, text)
        return text

    def alreadylinkeduniquely(self, parser: WikiParser, frame: Frame, args: List[str]) -> str:
        """
        {{#alreadylinkeduniquely:dest|category|then|else}}

        Only the branch that is returned gets expanded. A then-branch that is
        present but empty yields "", an absent one yields "1".
        """
        def arg(i: int) -> str:
            if i >= len(args) or not args[i]:
                return ""
            return frame.expand(args[i]).strip()

        return self.conditional_branch(
            arg(0),
            arg(1),
            then_branch=(lambda: arg(2)) if len(args) > 2 else None,
            else_branch=lambda: arg(3),
        )
