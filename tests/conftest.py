from __future__ import annotations

import logging
import textwrap
from pathlib import Path
from typing import Iterator

import pytest

from storygen.models import GenerationSchema
from storygen.tree import VirtualTree
from tests._fixtures.workspace_builder import WorkspaceBuilder

BUTTON_COMPONENT = textwrap.dedent(
    """
    import { Component, Input } from '@angular/core';

    @Component({
      selector: 'ui-button',
      templateUrl: './button.component.html'
    })
    export class ButtonComponent {
      @Input() label: string;
      @Input() count: number = 5;
      @Input('active') isActive: boolean = true;
      @Input() data = [1,2,3];
      internal = 'not an input';
    }
    """
).lstrip("\n")


@pytest.fixture
def workspace_builder(tmp_path: Path) -> WorkspaceBuilder:
    """Provide a reusable workspace builder rooted at the pytest tmp_path."""
    return WorkspaceBuilder(tmp_path)


@pytest.fixture
def button_schema() -> GenerationSchema:
    return GenerationSchema(
        lib_path="libs/ui/src/lib",
        module_file_name="ui.module.ts",
        ng_module_class_name="UiModule",
        component_name="ButtonComponent",
        component_path="button",
        component_file_name="button.component",
    )


@pytest.fixture
def button_tree() -> VirtualTree:
    return VirtualTree({"libs/ui/src/lib/button/button.component.ts": BUTTON_COMPONENT})


@pytest.fixture(autouse=True)
def _reset_storygen_logger() -> Iterator[None]:
    """Undo configure_logging() between tests so caplog keeps receiving records."""
    yield
    logger = logging.getLogger("storygen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
