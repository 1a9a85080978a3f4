"""Expand the optional-branding text templates with brand values."""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from brandfork.config.file_ops import write_text_file
from brandfork.platform.filesystem import walk_files
from brandfork.platform.logging import logger

_PLACEHOLDER: Final[re.Pattern[str]] = re.compile(r"\$\{(\w+)\}")


def string_template(text: str, values: Mapping[str, str]) -> str:
    """Replace ``${name}`` tokens with ``values[name]``.

    Tokens without a value are left verbatim; this is plain substitution,
    not a template language.
    """

    return _PLACEHOLDER.sub(lambda match: values.get(match.group(1), match.group(0)), text)


def expand_templates(template_dir: Path, output_dir: Path, values: Mapping[str, str]) -> list[Path]:
    """Write every template under ``template_dir`` to the same path in ``output_dir``."""

    if not template_dir.is_dir():
        logger.debug("No optional branding templates at %s", template_dir)
        return []

    written: list[Path] = []
    for relative_path in walk_files(template_dir):
        source = template_dir.joinpath(*relative_path.parts)
        destination = output_dir.joinpath(*relative_path.parts)
        contents = source.read_text(encoding="utf-8")
        write_text_file(destination, string_template(contents, values))
        written.append(destination)
    return written


__all__ = ["expand_templates", "string_template"]
