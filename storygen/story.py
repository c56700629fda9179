"""Story file generation for Angular components."""

from __future__ import annotations

import posixpath
import re
from pathlib import Path
from typing import Dict, List, Optional

from .inputs import get_input_descriptors
from .logging import get_logger
from .models import GenerationSchema
from .rendering import DEFAULT_TEMPLATES_DIR, merge_with_skip_existing, render_template_dir
from .tree import FileTree, HostTree

_LOGGER = get_logger("story")

COMPONENT_EXTENSION = ".ts"

_PATH_SEPARATORS = re.compile(r"[\\/]")


def relative_module_path(component_path: str, module_file_name: str) -> str:
    """Return the import path from the component directory back to its module.

    ``relative_module_path("a/b", "my.module.ts") == "../../my.module"``.
    """
    steps = [
        ".."
        for segment in _PATH_SEPARATORS.split(component_path)
        if segment not in ("", ".")
    ]
    module_name = re.sub(r"\.ts$", "", posixpath.basename(module_file_name.replace("\\", "/")))
    return "/".join((steps or ["."]) + [module_name])


def component_source_path(schema: GenerationSchema) -> str:
    return posixpath.join(
        schema.lib_path,
        schema.component_path,
        schema.component_file_name + COMPONENT_EXTENSION,
    )


def story_destination(schema: GenerationSchema) -> str:
    return posixpath.join(schema.lib_path, schema.component_path)


def build_context(schema: GenerationSchema, tree: FileTree) -> Dict[str, object]:
    """Collect the template context for the component described by ``schema``."""
    return {
        "componentFileName": schema.component_file_name,
        "componentName": schema.component_name,
        "relativeModulePath": relative_module_path(
            schema.component_path, schema.module_file_name
        ),
        "moduleName": schema.ng_module_class_name,
        "props": get_input_descriptors(tree, component_source_path(schema)),
        # Removes the __tmpl__ suffix from template file names.
        "tmpl": "",
    }


def create_component_stories_file(
    schema: GenerationSchema,
    tree: FileTree,
    *,
    templates_dir: Optional[Path] = None,
) -> List[str]:
    """Render the story template next to the component.

    Files that already exist are left alone, so repeated runs are no-ops.
    Returns the paths written into ``tree``.
    """
    context = build_context(schema, tree)
    rendered = render_template_dir(templates_dir or DEFAULT_TEMPLATES_DIR, context)
    written = merge_with_skip_existing(tree, rendered, story_destination(schema))
    _LOGGER.debug(
        "Story generation for %s wrote %d of %d file(s)",
        schema.component_name,
        len(written),
        len(rendered),
    )
    return written


def generate(
    schema: GenerationSchema,
    tree: Optional[FileTree] = None,
    *,
    templates_dir: Optional[Path] = None,
) -> List[str]:
    """Generate the story for ``schema`` into ``tree`` (the working directory by default)."""
    if tree is None:
        tree = HostTree(Path.cwd())
    return create_component_stories_file(schema, tree, templates_dir=templates_dir)


__all__ = [
    "COMPONENT_EXTENSION",
    "build_context",
    "component_source_path",
    "create_component_stories_file",
    "generate",
    "relative_module_path",
    "story_destination",
]
