from unique_link.host.parser import SFH_OBJECT_ARGS, WikiParser, find_closing_braces, split_args

import pytest

def _echo(parser, *args):
    return "<" + ",".join(args) + ">"

def test_split_args_respects_nesting() -> None:
    assert split_args("a|b|c") == ["a", "b", "c"]
    assert split_args("[[A|B]]|c") == ["[[A|B]]", "c"]
    assert split_args("{{#x:1|2}}|c") == ["{{#x:1|2}}", "c"]
    assert split_args("") == [""]

def test_find_closing_braces() -> None:
    s = "x{{#a:{{#b:1}}}}y"
    assert find_closing_braces(s, 1) == len(s) - 1
    assert find_closing_braces("{{#a:", 0) is None

def test_expand_normal_directive_trims_args() -> None:
    p = WikiParser()
    p.set_function_hook("uniquelink", _echo)
    assert p.expand("a {{#uniquelink: X | y }} b") == "a <X,y> b"

def test_names_are_case_insensitive() -> None:
    p = WikiParser()
    p.set_function_hook("uniquelink", _echo)
    assert p.expand("{{#UniqueLink:X}}") == "<X>"

def test_unknown_directive_left_verbatim() -> None:
    p = WikiParser()
    assert p.expand("{{#if:a|b}} and {{Template}}") == "{{#if:a|b}} and {{Template}}"

def test_unbalanced_braces_left_verbatim() -> None:
    p = WikiParser()
    p.set_function_hook("uniquelink", _echo)
    assert p.expand("{{#uniquelink:X") == "{{#uniquelink:X"
    assert p.expand("{{#oops {{#uniquelink:X}}") == "{{#oops <X>"

def test_nested_directives_expand_inside_out_in_document_order() -> None:
    calls = []

    def record(parser, *args):
        calls.append(args[0])
        return args[0].upper()

    p = WikiParser()
    p.set_function_hook("uniquelink", record)
    assert p.expand("{{#uniquelink:{{#uniquelink:a}}b}} {{#uniquelink:c}}") == "AB C"
    assert calls == ["a", "Ab", "c"]

def test_object_args_get_raw_arguments() -> None:
    seen = {}

    def obj(parser, frame, args):
        seen["args"] = list(args)
        return frame.expand(args[1])

    p = WikiParser()
    p.set_function_hook("uniquelink", _echo)
    p.set_function_hook("alreadylinkeduniquely", obj, SFH_OBJECT_ARGS)
    assert p.expand("{{#alreadylinkeduniquely:x|{{#uniquelink:y}}}}") == "<y>"
    assert seen["args"] == ["x", "{{#uniquelink:y}}"]

def test_unknown_magic_word_rejected() -> None:
    p = WikiParser()
    with pytest.raises(ValueError):
        p.set_function_hook("nosuchword", _echo)

def test_lifecycle_hooks() -> None:
    events = []
    p = WikiParser()
    p.add_first_call_init_hook(lambda parser: events.append("init"))
    p.add_clear_state_hook(lambda parser: events.append("clear"))
    p.parse("A", "x")
    p.parse("B", "y")
    assert events == ["init", "clear", "clear"]
    assert p.title == "B"
