from __future__ import annotations

from typing import Iterable, Tuple

from unique_link.config import ExtensionConfig
from unique_link.core.title import TitleResolver
from unique_link.host.parser import SFH_OBJECT_ARGS, WikiParser
from unique_link.logging import get_logger
from unique_link.session import RenderSession

log = get_logger()

# directive id -> calling convention flags
DIRECTIVES = {
    "uniquelink": 0,
    "uniquelinkifexists": 0,
    "alreadylinkeduniquely": SFH_OBJECT_ARGS,
}

def on_parser_first_call_init(parser: WikiParser, session: RenderSession, config: ExtensionConfig) -> None:
    """
    Reset the session and register every directive that is not disabled.
    Does nothing at all when the extension is disabled.
    """
    if config.disabled:
        log.info("unique-link disabled; no directives registered")
        return

    session.reset()
    for name, flags in DIRECTIVES.items():
        if name in config.disabled_functions:
            log.info(f"directive disabled: {name}")
            continue
        parser.set_function_hook(name, getattr(session, name), flags)

def on_parser_clear_state(parser: WikiParser, session: RenderSession) -> None:
    session.reset()

def install(parser: WikiParser, session: RenderSession, config: ExtensionConfig) -> None:
    """Attach a session to a parser's lifecycle."""

    def first_call_init(p: WikiParser) -> None:
        on_parser_first_call_init(p, session, config)

    def clear_state(p: WikiParser) -> None:
        on_parser_clear_state(p, session)

    parser.add_first_call_init_hook(first_call_init)
    parser.add_clear_state_hook(clear_state)

def build_parser(config: ExtensionConfig, pages: Iterable[str] = ()) -> Tuple[WikiParser, RenderSession]:
    """A parser that knows `pages`, with a fresh session installed."""
    resolver = TitleResolver(pages, config.interwiki_prefixes)
    parser = WikiParser(resolver, language=config.language)
    session = RenderSession()
    install(parser, session, config)
    return parser, session
