from unique_link.core.registry import LinkRegistry

def test_fresh_registry_has_nothing_linked() -> None:
    reg = LinkRegistry()
    assert not reg.is_linked("Page")
    assert not reg.is_linked("Page", "people")
    assert len(reg) == 0

def test_mark_then_is_linked() -> None:
    reg = LinkRegistry()
    reg.mark_linked("Page", "people")
    assert reg.is_linked("Page", "people")
    assert not reg.is_linked("Page", "places")
    assert not reg.is_linked("Page")

def test_uncategorized_does_not_leak_into_categories() -> None:
    reg = LinkRegistry()
    reg.mark_linked("X")
    assert reg.is_linked("X", "")
    assert reg.is_linked("X", None)
    assert not reg.is_linked("X", "catA")

def test_mark_is_idempotent() -> None:
    reg = LinkRegistry()
    reg.mark_linked("X", "catA")
    reg.mark_linked("X", "catA")
    assert list(reg.categorized["catA"]) == ["X"]
    assert len(reg) == 1

def test_insertion_order_kept() -> None:
    reg = LinkRegistry()
    for t in ["b", "a", "c", "a"]:
        reg.mark_linked(t)
    assert list(reg.uncategorized) == ["b", "a", "c"]

def test_reset_forgets_everything() -> None:
    reg = LinkRegistry()
    reg.mark_linked("X")
    reg.mark_linked("Y", "catA")
    reg.reset()
    assert not reg.is_linked("X")
    assert not reg.is_linked("Y", "catA")
    assert reg.categorized == {}

def test_resolve_link_first_then_plain() -> None:
    reg = LinkRegistry()
    assert reg.resolve_link("Page", "", "") == (True, "Page")
    assert reg.is_linked("Page")
    assert reg.resolve_link("Page", "", "") == (False, "Page")
    assert len(reg) == 1

def test_resolve_link_keeps_display_text() -> None:
    reg = LinkRegistry()
    assert reg.resolve_link("Page", "Click here", "") == (True, "Click here")
    assert reg.resolve_link("Page", "again", "") == (False, "again")

def test_resolve_link_empty_target_is_noop() -> None:
    reg = LinkRegistry()
    assert reg.resolve_link("", "text", "catA") is None
    assert len(reg) == 0

def test_resolve_link_per_category() -> None:
    reg = LinkRegistry()
    assert reg.resolve_link("Page", category="a") == (True, "Page")
    assert reg.resolve_link("Page", category="b") == (True, "Page")
    assert reg.resolve_link("Page") == (True, "Page")
    assert reg.resolve_link("Page", category="a") == (False, "Page")

def test_conditional_branch() -> None:
    reg = LinkRegistry()
    assert reg.conditional_branch("X", "", "YES", "NO") == "NO"
    reg.mark_linked("X", "")
    assert reg.conditional_branch("X", "", "YES", "NO") == "YES"
    assert reg.conditional_branch("X", "") == "1"
    assert reg.conditional_branch("X", "", "", "NO") == ""
    assert reg.conditional_branch("X", "", None, "NO") == "1"

def test_conditional_branch_is_read_only() -> None:
    reg = LinkRegistry()
    assert reg.conditional_branch("X", "catA") == ""
    assert reg.conditional_branch("", "", "YES", "NO") == "NO"
    assert not reg.is_linked("X", "catA")
    assert len(reg) == 0

def test_conditional_branch_calls_only_chosen_branch() -> None:
    reg = LinkRegistry()
    calls = []

    def branch(name):
        def f():
            calls.append(name)
            return name
        return f

    assert reg.conditional_branch("X", "", branch("then"), branch("else")) == "else"
    reg.mark_linked("X")
    assert reg.conditional_branch("X", "", branch("then"), branch("else")) == "then"
    assert reg.conditional_branch("X", "", lambda: "") == ""
    assert calls == ["else", "then"]
