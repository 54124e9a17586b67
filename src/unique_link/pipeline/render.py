from __future__ import annotations

from dataclasses import dataclass

from unique_link.config import RenderConfig
from unique_link.hooks import build_parser
from unique_link.io.fs import iter_pages, page_title, page_titles, read_page, write_page
from unique_link.logging import get_logger

log = get_logger()

@dataclass(frozen=True)
class RenderStats:
    total: int
    rendered: int
    skipped: int

def render_pages(cfg: RenderConfig) -> RenderStats:
    """
    Render every page under cfg.input_dir. Each page is its own render
    session: links made on one page never suppress links on another.
    """
    if not cfg.dry_run:
        cfg.output_dir.mkdir(parents=True, exist_ok=True)

    pages = list(iter_pages(cfg.input_dir))

    # every input page exists as a link target, plus any configured extras
    known = page_titles([rel for _, rel in pages]) + list(cfg.extra_pages)
    parser, session = build_parser(cfg.extension, known)

    rendered = 0
    skipped = 0

    for path, rel in pages:
        rel_str = rel.as_posix()
        try:
            raw = read_page(path)
        except UnicodeDecodeError:
            log.error(f"Non-UTF8 rejected: {rel_str}")
            skipped += 1
            continue

        out_text = parser.parse(page_title(rel), raw)
        log.debug(f"{rel_str}: {len(session.registry)} unique link target(s)")

        if cfg.dry_run:
            log.info(f"[dry-run] would write: {rel_str}")
        else:
            write_page(cfg.output_dir, rel, out_text)
        rendered += 1

    return RenderStats(total=len(pages), rendered=rendered, skipped=skipped)
