from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple, Union

Branch = Union[str, Callable[[], str], None]

def _branch_text(branch: Branch) -> str:
    if callable(branch):
        branch = branch()
    return branch or ""

class LinkRegistry:
    """
    Targets already linked during one render session.

    Uncategorized targets and each category form independent namespaces:
    a target seen under "people" does not suppress it under "" or "places".
    Dicts keyed by target (value None) keep insertion order for inspection.
    """

    def __init__(self) -> None:
        self.uncategorized: Dict[str, None] = {}
        self.categorized: Dict[str, Dict[str, None]] = {}

    def reset(self) -> None:
        self.uncategorized = {}
        self.categorized = {}

    def is_linked(self, target: str, category: Optional[str] = "") -> bool:
        if not category:
            return target in self.uncategorized
        seen = self.categorized.get(category)
        return seen is not None and target in seen

    def mark_linked(self, target: str, category: Optional[str] = "") -> None:
        if not category:
            self.uncategorized[target] = None
            return
        self.categorized.setdefault(category, {})[target] = None

    def resolve_link(
        self,
        target: str,
        display_text: Optional[str] = "",
        category: Optional[str] = "",
    ) -> Optional[Tuple[bool, str]]:
        """
        Decide whether `target` should render as a link.

        Returns None when there is no target (nothing to output), otherwise
        (should_link, text). Only the first call for a target in its
        namespace gets should_link=True and records the target.
        """
        if not target:
            return None
        text = display_text or target
        if self.is_linked(target, category):
            return False, text
        self.mark_linked(target, category)
        return True, text

    def conditional_branch(
        self,
        target: str,
        category: Optional[str] = "",
        then_branch: Branch = None,
        else_branch: Branch = "",
    ) -> str:
        """
        then_branch if target is linked, else else_branch. An absent (None)
        then_branch means "1"; a supplied one is returned even when empty.
        Branches may be zero-argument callables; only the chosen one is called.
        Never records the target.
        """
        if target and self.is_linked(target, category):
            return "1" if then_branch is None else _branch_text(then_branch)
        return _branch_text(else_branch)

    def __len__(self) -> int:
        return len(self.uncategorized) + sum(len(s) for s in self.categorized.values())
