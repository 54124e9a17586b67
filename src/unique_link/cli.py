from __future__ import annotations

import argparse
from pathlib import Path

from unique_link.config import RenderConfig, load_config
from unique_link.logging import get_logger, set_verbose
from unique_link.pipeline.render import render_pages

log = get_logger()

def main(argv=None) -> int:
    p = argparse.ArgumentParser(prog="unique-link")
    sub = p.add_subparsers(dest="cmd", required=True)

    r = sub.add_parser("render", help="Expand unique-link directives in a directory of .wiki pages")
    r.add_argument("pages", help="Directory of input .wiki pages")
    r.add_argument("--output", required=True, help="Directory for rendered pages")
    r.add_argument("--config", default=None, help="Extension settings (YAML; default: <pages>/uniquelink.yaml)")
    r.add_argument("--page", action="append", default=[], help="Extra page title that exists (repeatable)")
    r.add_argument("--dry-run", action="store_true", help="No writes; report actions")
    r.add_argument("--verbose", action="store_true", help="Log per-page and registration detail")

    args = p.parse_args(argv)
    set_verbose(bool(args.verbose))

    input_dir = Path(args.pages).expanduser().resolve()
    output_dir = Path(args.output).expanduser().resolve()
    config_path = Path(args.config).expanduser().resolve() if args.config else (input_dir / "uniquelink.yaml")

    cfg = RenderConfig(
        input_dir=input_dir,
        output_dir=output_dir,
        extension=load_config(config_path),
        extra_pages=tuple(args.page),
        dry_run=bool(args.dry_run),
    )

    stats = render_pages(cfg)
    log.info(
        "done: total=%d rendered=%d skipped=%d disabled=%s output=%s",
        stats.total, stats.rendered, stats.skipped, cfg.extension.disabled, cfg.output_dir,
    )
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
