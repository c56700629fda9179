"""CLI behaviour tests."""

from __future__ import annotations

import json

import pytest

from storygen.cli import _build_parser, main
from tests._fixtures.workspace_builder import WorkspaceBuilder

COMPONENT = """
    import { Component, Input } from '@angular/core';

    @Component({ selector: 'ui-card', template: '' })
    export class CardComponent {
      @Input() title: string;
      @Input() elevation = 2;
    }
"""

GENERATE_ARGS = [
    "--lib-path",
    "libs/ui/src/lib",
    "--module-file-name",
    "ui.module.ts",
    "--ng-module-class-name",
    "UiModule",
    "--component-name",
    "CardComponent",
    "--component-path",
    "card",
    "--component-file-name",
    "card.component",
]


def test_cli_accepts_verbose_before_and_after_command() -> None:
    parser = _build_parser()

    assert parser.parse_args(["--verbose", "inputs", "a.ts"]).verbose is True
    assert parser.parse_args(["inputs", "a.ts", "--verbose"]).verbose is True


def test_cli_parses_schema_flags() -> None:
    args = _build_parser().parse_args(["generate", *GENERATE_ARGS])

    assert args.command == "generate"
    assert args.component_path == "card"
    assert args.ng_module_class_name == "UiModule"
    assert args.root == "."


def test_cli_generate_creates_story(
    workspace_builder: WorkspaceBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    workspace_builder.write({"libs/ui/src/lib/card/card.component.ts": COMPONENT})
    root = str(workspace_builder.path())

    main(["generate", "--root", root, *GENERATE_ARGS])

    story = workspace_builder.path() / "libs/ui/src/lib/card/card.component.stories.ts"
    content = story.read_text(encoding="utf-8")
    assert "title: text('title', '')," in content
    assert "elevation: number('elevation', 2)," in content
    assert "Story created at libs/ui/src/lib/card/card.component.stories.ts" in capsys.readouterr().out

    main(["generate", "--root", root, *GENERATE_ARGS])

    assert "already exists" in capsys.readouterr().out
    assert story.read_text(encoding="utf-8") == content


def test_cli_generate_uses_config_defaults(workspace_builder: WorkspaceBuilder) -> None:
    workspace_builder.write(
        {
            "libs/ui/src/lib/card/card.component.ts": COMPONENT,
            ".storygen.yml": """
                defaults:
                  lib_path: libs/ui/src/lib
                  module_file_name: ui.module.ts
                  ng_module_class_name: UiModule
            """,
        }
    )

    main(
        [
            "generate",
            "--root",
            str(workspace_builder.path()),
            "--component-name",
            "CardComponent",
            "--component-path",
            "card",
            "--component-file-name",
            "card.component",
        ]
    )

    assert (workspace_builder.path() / "libs/ui/src/lib/card/card.component.stories.ts").is_file()


def test_cli_generate_reports_missing_fields(
    workspace_builder: WorkspaceBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["generate", "--root", str(workspace_builder.path()), "--component-name", "X"])

    assert excinfo.value.code == 2
    assert "--lib-path" in capsys.readouterr().err


def test_cli_generate_missing_component_exits_with_error(
    workspace_builder: WorkspaceBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["generate", "--root", str(workspace_builder.path()), *GENERATE_ARGS])

    assert excinfo.value.code == 1
    assert "Could not read TS file" in capsys.readouterr().err
    assert not (workspace_builder.path() / "libs").exists()


def test_cli_inputs_prints_json(
    workspace_builder: WorkspaceBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    workspace_builder.write({"card.component.ts": COMPONENT})

    main(["inputs", str(workspace_builder.path() / "card.component.ts")])

    assert json.loads(capsys.readouterr().out) == [
        {"name": "title", "type": "text", "defaultValue": "''"},
        {"name": "elevation", "type": "number", "defaultValue": "2"},
    ]


@pytest.mark.parametrize("lib_path", ["../libs", "/abs/libs/ui/src/lib"])
def test_cli_generate_lib_path_outside_root_exits_with_error(
    workspace_builder: WorkspaceBuilder, capsys: pytest.CaptureFixture[str], lib_path: str
) -> None:
    args = list(GENERATE_ARGS)
    args[args.index("--lib-path") + 1] = lib_path

    with pytest.raises(SystemExit) as excinfo:
        main(["generate", "--root", str(workspace_builder.path()), *args])

    assert excinfo.value.code == 1
    assert "Could not read TS file" in capsys.readouterr().err


def test_cli_log_file_receives_log_output(workspace_builder: WorkspaceBuilder) -> None:
    workspace_builder.write({"libs/ui/src/lib/card/card.component.ts": COMPONENT})
    log_file = workspace_builder.path().parent / "storygen.log"

    main(
        [
            "--log-file",
            str(log_file),
            "generate",
            "--root",
            str(workspace_builder.path()),
            *GENERATE_ARGS,
        ]
    )

    content = log_file.read_text(encoding="utf-8")
    assert "INFO storygen.rendering: Created libs/ui/src/lib/card/card.component.stories.ts" in content
