from __future__ import annotations

import argparse
import logging
import sys

from .config import load_config
from .session import new_session

IMPORT_FLAGS = ("-import", "--import")
EXPORT_FLAGS = ("-export", "--export")


def scan_launch_paths(argv: list[str]) -> tuple[str | None, str | None, list[str]]:
    """Pull ``-import <path>`` / ``-export <path>`` out of argv.

    Only exact flag tokens count, and only when a value follows; the first
    occurrence wins. Everything else is returned untouched.
    """
    import_path: str | None = None
    export_path: str | None = None
    rest: list[str] = []
    i = 0
    while i < len(argv):
        tok = argv[i]
        has_value = i + 1 < len(argv)
        if tok in IMPORT_FLAGS and has_value:
            if import_path is None:
                import_path = argv[i + 1]
            i += 2
            continue
        if tok in EXPORT_FLAGS and has_value:
            if export_path is None:
                export_path = argv[i + 1]
            i += 2
            continue
        rest.append(tok)
        i += 1
    return import_path, export_path, rest


def build_parser() -> argparse.ArgumentParser:
    # -import/-export are scanned separately; argparse would prefix-match them
    p = argparse.ArgumentParser(
        prog="flashcard-trainer",
        allow_abbrev=False,
        usage="%(prog)s [-import PATH] [-export PATH] [--config PATH] [--log-level LEVEL]",
    )
    p.add_argument("--config", default=None, help="Config path (JSON)")
    p.add_argument("--log-level", default=None, help="Diagnostic log level (default from config, WARNING)")
    return p


def _is_level_name(name: str) -> bool:
    return isinstance(logging.getLevelName(name), int)


def main(argv: list[str] | None = None) -> int:
    raw = list(sys.argv[1:] if argv is None else argv)
    import_path, export_path, rest = scan_launch_paths(raw)

    parser = build_parser()
    # unknown launch arguments are ignored
    args, _unknown = parser.parse_known_args(rest)

    try:
        cfg = load_config(args.config)
    except (OSError, ValueError) as e:
        parser.error(f"cannot load config {args.config}: {e}")

    level = (args.log_level or cfg.log_level).upper()
    if not _is_level_name(level):
        parser.error(f"unknown log level: {level}")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    session = new_session(seed=cfg.random_seed, encoding=cfg.encoding)
    return session.run(import_path=import_path, export_path=export_path)


if __name__ == "__main__":
    raise SystemExit(main())
