"""Rendering template directories and merging them into a file tree."""

from __future__ import annotations

import posixpath
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Mapping

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from .logging import get_logger
from .tree import FileTree, normalize_path

_LOGGER = get_logger("rendering")

DEFAULT_TEMPLATES_DIR = Path(__file__).with_name("templates") / "story"

_PATH_PLACEHOLDER = re.compile(r"__([A-Za-z][A-Za-z0-9]*)__")


@dataclass(frozen=True)
class RenderedFile:
    """A template rendered in memory, relative to its destination directory."""

    path: str
    content: str


def render_path(template_path: str, context: Mapping[str, object]) -> str:
    """Substitute ``__name__`` placeholders in a template file path."""

    def _replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in context:
            raise TemplateError(f"Unknown placeholder '{key}' in template path {template_path}")
        return str(context[key])

    return _PATH_PLACEHOLDER.sub(_replace, template_path)


def _create_env(source_dir: Path) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(source_dir)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


def render_template_dir(source_dir: Path, context: Mapping[str, object]) -> List[RenderedFile]:
    """Render every file below ``source_dir`` with ``context``."""
    if not source_dir.is_dir():
        raise FileNotFoundError(f"Template directory not found: {source_dir}")
    env = _create_env(source_dir)
    rendered: List[RenderedFile] = []
    for name in env.list_templates():
        template = env.get_template(name)
        rendered.append(
            RenderedFile(path=render_path(name, context), content=template.render(**context))
        )
    return rendered


def merge_with_skip_existing(
    tree: FileTree, files: Iterable[RenderedFile], destination: str
) -> List[str]:
    """Write ``files`` below ``destination``, leaving existing files untouched.

    Returns the paths that were written. The existence check and the write
    are not atomic.
    """
    written: List[str] = []
    for rendered in files:
        target = normalize_path(posixpath.join(destination, rendered.path))
        if tree.exists(target):
            _LOGGER.info("%s already exists, skipping", target)
            continue
        tree.write(target, rendered.content.encode("utf-8"))
        _LOGGER.info("Created %s", target)
        written.append(target)
    return written


__all__ = [
    "DEFAULT_TEMPLATES_DIR",
    "RenderedFile",
    "merge_with_skip_existing",
    "render_path",
    "render_template_dir",
]
