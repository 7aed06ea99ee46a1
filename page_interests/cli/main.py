"""CLI: page-interests classify, serve, config validate."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from ..config import build_bootstrap_message, configure_logging, load_config, validate_config
from ..types import PageInterestsConfig, UnknownMessageError
from ..worker import InterestsWorker, serve


def _print_json(obj: dict) -> None:
    sys.stdout.write(json.dumps(obj, ensure_ascii=False) + "\n")
    sys.stdout.flush()


def _bootstrapped_worker(config: PageInterestsConfig, post=None) -> InterestsWorker:
    worker = InterestsWorker(post=post)
    worker.handle(build_bootstrap_message(config))
    return worker


def cmd_classify(args, config: PageInterestsConfig):
    """Classify one page and print the reply."""
    worker = _bootstrapped_worker(config)
    reply = worker.handle({
        "message": "classify",
        "url": args.url,
        "title": args.title,
        "host": args.host,
        "tld": args.tld or args.host,
        "path": args.path,
    })
    if reply is None:
        print("Classification failed (see log output)", file=sys.stderr)
        sys.exit(1)
    _print_json(reply)


async def _serve_stdio(worker: InterestsWorker) -> int:
    loop = asyncio.get_running_loop()
    reader = asyncio.StreamReader()
    await loop.connect_read_pipe(lambda: asyncio.StreamReaderProtocol(reader), sys.stdin)
    return await serve(worker, reader)


def cmd_serve(args, config: PageInterestsConfig):
    """Run the worker over JSON lines on stdin/stdout."""
    if config.data.rules or config.data.classifier_model or config.data.url_stopwords:
        worker = _bootstrapped_worker(config, post=_print_json)
    else:
        worker = InterestsWorker(post=_print_json)
    try:
        asyncio.run(_serve_stdio(worker))
    except UnknownMessageError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


def cmd_config_validate(args, config: PageInterestsConfig):
    """Validate the config file."""
    errors = validate_config(config)
    if errors:
        print("Config errors:")
        for err in errors:
            print(f"  - {err}")
        sys.exit(1)
    print("Config is valid.")


def main():
    parser = argparse.ArgumentParser(
        prog="page-interests",
        description="Classify visited pages into interest categories",
    )
    parser.add_argument("--config", "-c", help="Path to config file")
    parser.add_argument("--log-level", help="Override logging.level (DEBUG, INFO, ...)")

    subparsers = parser.add_subparsers(dest="command")

    # classify
    classify_parser = subparsers.add_parser("classify", help="Classify a single page")
    classify_parser.add_argument("--url", default="", help="Page URL")
    classify_parser.add_argument("--title", default="", help="Page title")
    classify_parser.add_argument("--host", required=True, help="Page host")
    classify_parser.add_argument("--tld", help="Registrable domain (defaults to host)")
    classify_parser.add_argument("--path", default="/", help="Page path")

    # serve
    subparsers.add_parser("serve", help="Handle JSON-lines messages on stdin/stdout")

    # config validate
    config_parser = subparsers.add_parser("config", help="Config operations")
    config_sub = config_parser.add_subparsers(dest="config_command")
    config_sub.add_parser("validate", help="Validate config file")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = load_config(args.config)
    configure_logging(config, args.log_level)

    if args.command == "classify":
        cmd_classify(args, config)
    elif args.command == "serve":
        cmd_serve(args, config)
    elif args.command == "config":
        if args.config_command == "validate":
            cmd_config_validate(args, config)
        else:
            config_parser.print_help()


if __name__ == "__main__":
    main()
