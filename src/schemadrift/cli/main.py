import argparse
import json
import os
import sys
from typing import List, Optional

import uvicorn
from dotenv import load_dotenv

from schemadrift.logging_config import configure_logging
from schemadrift.services.schema_comparator import compare
from schemadrift.services.spec_loader import load_spec
from schemadrift.tracing import configure_tracing

EXIT_OK = 0
EXIT_BREAKING = 1
EXIT_BAD_INPUT = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schemadrift",
        description="Detect breaking changes between two API schema versions.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    diff = sub.add_parser("diff", help="Compare two JSON or YAML documents")
    diff.add_argument("old", help="Previous version of the document")
    diff.add_argument("new", help="New version of the document")
    diff.add_argument(
        "--fail-on-breaking",
        action="store_true",
        help="Exit with status 1 when breaking changes are found",
    )
    diff.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")

    serve = sub.add_parser("serve", help="Run the compare API")
    serve.add_argument("--host", default=os.getenv("SCHEMADRIFT_HOST", "127.0.0.1"))
    serve.add_argument("--port", type=int, default=int(os.getenv("SCHEMADRIFT_PORT", "8000")))
    serve.add_argument("--reload", action="store_true")

    return parser


def run_diff(old_path: str, new_path: str, *, fail_on_breaking: bool = False, indent: int = 2) -> int:
    try:
        old = load_spec(old_path)
        new = load_spec(new_path)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    result = compare(old, new)
    print(json.dumps(result.to_dict(), indent=indent, ensure_ascii=False))

    if fail_on_breaking and result.breaking:
        return EXIT_BREAKING
    return EXIT_OK


def serve(host: str, port: int, reload: bool = False) -> None:
    uvicorn.run(
        "schemadrift.main:app",
        host=host,
        port=port,
        reload=reload,
    )


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = _build_parser().parse_args(argv)

    if args.command == "serve":
        serve(args.host, args.port, reload=args.reload)
        return EXIT_OK

    configure_logging(stream=sys.stderr)
    configure_tracing()
    return run_diff(args.old, args.new, fail_on_breaking=args.fail_on_breaking, indent=args.indent)


if __name__ == "__main__":
    sys.exit(main())
