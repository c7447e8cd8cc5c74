import argparse
import sys

from authoring.logging_setup import setup_console_logging
from authoring.utils import json_dump
from authoring.wizard import (
    DEFAULT_CATALOG,
    DecodeError,
    StepPlanner,
    TypeIdentifierCodec,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect lesson item type identifiers")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("catalog", help="List every type identifier the catalog offers")

    decode_parser = sub.add_parser("decode", help="Decode a type identifier")
    decode_parser.add_argument("type_id")
    decode_parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject identifiers the current catalog no longer offers",
    )

    plan_parser = sub.add_parser("plan", help="Show the wizard steps for a type identifier")
    plan_parser.add_argument("type_id")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_console_logging()

    if args.command == "catalog":
        for type_id in DEFAULT_CATALOG.type_ids():
            print(type_id)
        return 0

    codec = TypeIdentifierCodec(DEFAULT_CATALOG, strict=getattr(args, "strict", False))
    try:
        state = codec.decode(args.type_id)
    except DecodeError as e:
        print(f"{e.reason}: {e}", file=sys.stderr)
        return 1

    if args.command == "decode":
        print(json_dump(state.selection().to_dict()))
    else:
        for index, step in enumerate(StepPlanner(DEFAULT_CATALOG).plan(state), start=1):
            print(f"{index}. {step.title} - {step.description}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
