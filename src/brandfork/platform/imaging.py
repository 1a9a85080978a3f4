"""Pillow helpers for rendering brand artwork into icon files."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from PIL import Image

from brandfork.platform.filesystem import ensure_empty, ensure_parent_directory


def verify_image(path: Path) -> tuple[int, int]:
    """Check that ``path`` decodes as an image and return its size.

    Raises:
        OSError: If the file is missing, not a readable image or fails its
            chunk checksums.
    """

    with Image.open(path) as img:
        try:
            img.verify()
        except SyntaxError as exc:
            # Pillow reports PNG checksum mismatches as SyntaxError.
            raise OSError(f"Corrupt image data in {path}: {exc}") from exc
        return img.size


def render_square(source: Path, size: int) -> Image.Image:
    """Load ``source`` and resample it to ``size`` x ``size`` pixels."""

    with Image.open(source) as img:
        rgba = img.convert("RGBA")
    if rgba.size == (size, size):
        return rgba
    return rgba.resize((size, size), Image.Resampling.LANCZOS)


def save_square_png(source: Path, size: int, destination: Path) -> Path:
    """Write ``source`` resized to ``size`` pixels as a PNG at ``destination``."""

    _ = ensure_parent_directory(destination)
    render_square(source, size).save(destination, format="PNG")
    return destination


def write_icns(
    source: Path,
    destination: Path,
    sizes: Sequence[int],
    scratch_dir: Path,
) -> Path:
    """Build a multi-resolution ICNS container from ``source``.

    Frames are rendered into ``scratch_dir`` (emptied first) using the
    ``icon_<n>x<n>.png`` iconset naming, then bundled into ``destination``.
    """

    _ = ensure_empty(scratch_dir)
    frames: list[Image.Image] = []
    for size in sorted(sizes):
        frame_path = scratch_dir / f"icon_{size}x{size}.png"
        _ = save_square_png(source, size, frame_path)
        with Image.open(frame_path) as frame:
            frames.append(frame.copy())

    _ = ensure_parent_directory(destination)
    largest = frames[-1]
    largest.save(destination, format="ICNS", append_images=frames[:-1])
    return destination


__all__ = ["render_square", "save_square_png", "verify_image", "write_icns"]
