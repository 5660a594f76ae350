import argparse
import contextlib
import sys
from pathlib import Path
from typing import List, Optional

import orjson
from loguru import logger

from .config import Config
from .errors import AdrError
from .models import AdrAttributes
from .processing import AdrLifecycle, init


def setup_logging(log_file: Optional[str] = None, level: Optional[str] = None):
    """Configure application logging."""
    logger.remove()
    _ = logger.add(sys.stderr, level=level or Config.LOG_LEVEL)

    log_file = log_file or Config.LOG_FILE
    if not log_file:
        return
    with contextlib.suppress(OSError):
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    _ = logger.add(
        log_file,
        rotation="10 MB",
        retention="10 days",
        backtrace=True,
        diagnose=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="adrkeeper", description="Manage Architecture Decision Records")
    parser.add_argument("--adr-path", default=None, help="records directory")
    parser.add_argument("--template-path", default=None, help="template directory")
    sub = parser.add_subparsers(dest="command", required=True)

    p_init = sub.add_parser("init", help="create the records directory and its first record")
    p_init.add_argument("--base-dir", default=None)
    p_init.add_argument("--repo", default=None, help="template git repository")

    p_list = sub.add_parser("list", help="list records")
    p_list.add_argument("--json", action="store_true", help="print records as JSON")

    p_new = sub.add_parser("new", help="create a record")
    p_new.add_argument("title")
    p_new.add_argument("--status", default=None)
    p_new.add_argument("--link-type", default=None, help="e.g. Amends, Supersedes")
    p_new.add_argument("--target", default=None, help="filename of the record to link to")

    p_status = sub.add_parser("status", help="change the status of a record")
    p_status.add_argument("path")
    p_status.add_argument("status")

    p_link = sub.add_parser("link", help="add a link annotation to a record")
    p_link.add_argument("source")
    p_link.add_argument("target_path")
    p_link.add_argument("link_type")
    return parser


def run(args: argparse.Namespace) -> int:
    adr_path = args.adr_path or Config.ADR_PATH
    template_path = args.template_path or Config.TEMPLATE_PATH

    if args.command == "init":
        base_dir = Path(args.base_dir) if args.base_dir else Config.BASE_DIR
        path = init(base_dir, adr_path, template_path, args.repo or Config.TEMPLATE_REPO)
        print(path)
        return 0

    lifecycle = AdrLifecycle(Config.BASE_DIR / adr_path, Config.BASE_DIR / template_path)

    if args.command == "list":
        if args.json:
            records = [r.model_dump() for r in lifecycle.list_records()]
            print(orjson.dumps(records, option=orjson.OPT_INDENT_2).decode("utf-8"))
        else:
            for name in lifecycle.get_all_adr():
                print(name)
        return 0

    if args.command == "new":
        attrs = AdrAttributes(
            src_adr_name=args.title,
            link_type=args.link_type,
            tgt_adr_name=args.target,
            **({"status": args.status} if args.status else {}),
        )
        print(lifecycle.create_new_adr(attrs))
        return 0

    if args.command == "status":
        return 0 if lifecycle.change_status(Path(args.path), args.status) else 1

    if args.command == "link":
        lifecycle.add_link(args.source, Path(args.target_path), args.link_type)
        return 0

    return 2


def main(argv: Optional[List[str]] = None) -> int:
    """Command line entry point."""
    setup_logging()
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except KeyboardInterrupt:
        logger.info("Interrupted.")
        return 130
    except (AdrError, OSError) as e:
        logger.error(f"[adr] {args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
