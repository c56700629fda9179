"""CLI entrypoints for storygen commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Dict

from .config import SCHEMA_FIELDS, ConfigError, load_config
from .inputs import get_input_descriptors
from .logging import configure_logging
from .models import GenerationSchema
from .parsing import SourceUnavailableError
from .story import create_component_stories_file, story_destination
from .tree import HostTree

_SCHEMA_HELP: Dict[str, str] = {
    "lib_path": "Library source directory, relative to --root.",
    "module_file_name": "File name of the NgModule declaring the component.",
    "ng_module_class_name": "Class name of the NgModule.",
    "component_name": "Class name of the component.",
    "component_path": "Component directory, relative to --lib-path.",
    "component_file_name": "Component file name without the .ts extension.",
}


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="storygen",
        description="Generate Storybook stories with knobs for Angular component inputs.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log output to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Create a <component>.stories.ts file next to a component.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    for name in SCHEMA_FIELDS:
        generate_parser.add_argument(
            "--" + name.replace("_", "-"),
            dest=name,
            default=None,
            help=_SCHEMA_HELP[name],
        )
    generate_parser.add_argument(
        "--root",
        default=".",
        help="Workspace root holding .storygen.yml (defaults to current directory).",
    )
    generate_parser.add_argument(
        "--templates-dir",
        default=None,
        help="Directory of story templates overriding the built-in set.",
    )

    inputs_parser = subparsers.add_parser(
        "inputs",
        help="Print the @Input() knobs detected in a component file as JSON.",
    )
    _add_verbose_option(inputs_parser, suppress_default=True)
    inputs_parser.add_argument("path", help="Path to the component .ts file.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for storygen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(verbose=bool(args.verbose), log_file=log_file)

    if args.command == "generate":
        _run_generate(parser, args)
    elif args.command == "inputs":
        _run_inputs(parser, args)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_generate(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    root = Path(args.root)
    try:
        config = load_config(root)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    values: Dict[str, str] = dict(config.defaults)
    for name in SCHEMA_FIELDS:
        value = getattr(args, name, None)
        if value is not None:
            values[name] = value
    missing = [name for name in SCHEMA_FIELDS if not values.get(name)]
    if missing:
        flags = ", ".join("--" + name.replace("_", "-") for name in missing)
        parser.error(f"the following arguments are required: {flags}")

    schema = GenerationSchema(**{name: values[name] for name in SCHEMA_FIELDS})
    templates_dir = Path(args.templates_dir) if args.templates_dir else config.templates_dir

    try:
        written = create_component_stories_file(
            schema, HostTree(root), templates_dir=templates_dir
        )
    except (SourceUnavailableError, FileNotFoundError) as exc:
        parser.exit(1, f"{exc}\n")
    if written:
        for path in written:
            print(f"Story created at {path}")
    else:
        print(f"Story already exists in {story_destination(schema)}, skipped")


def _run_inputs(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    path = Path(args.path)
    try:
        descriptors = get_input_descriptors(HostTree(path.parent), path.name)
    except SourceUnavailableError as exc:
        parser.exit(1, f"{exc}\n")
    print(json.dumps([descriptor.to_dict() for descriptor in descriptors], indent=2))


if __name__ == "__main__":
    main(sys.argv[1:])
