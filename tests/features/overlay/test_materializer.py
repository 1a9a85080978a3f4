"""
Summary: Verify overlay projection, manifest idempotence and the overwrite policy.
Why: The engine tree is destructively owned for overlay paths; regressions lose data.
"""

from __future__ import annotations

import os
from pathlib import Path, PurePosixPath

import pytest

from brandfork.features.overlay import (
    MaterializationStrategy,
    OverlayEntry,
    OverlayMaterializer,
    materialize,
    scan,
    select_strategy,
)
from brandfork.shared.errors import MaterializationError


@pytest.fixture
def overlay_root(tmp_path: Path) -> Path:
    root = tmp_path / "src"
    (root / "browser" / "base").mkdir(parents=True)
    _ = (root / "browser" / "base" / "zen.js").write_text("// overlay\n", encoding="utf-8")
    (root / "toolkit").mkdir()
    _ = (root / "toolkit" / "moz.build").write_text("DIRS += []\n", encoding="utf-8")
    return root


@pytest.fixture
def engine_root(tmp_path: Path) -> Path:
    root = tmp_path / "engine"
    root.mkdir()
    _ = (root / ".gitignore").write_text("obj-*\n", encoding="utf-8")
    return root


def _snapshot(root: Path) -> dict[str, tuple[str, bytes]]:
    """Record every path beneath ``root`` with its kind and content."""

    snapshot: dict[str, tuple[str, bytes]] = {}
    for path in sorted(root.rglob("*")):
        key = path.relative_to(root).as_posix()
        if path.is_symlink():
            snapshot[key] = ("link", os.readlink(path).encode())
        elif path.is_file():
            snapshot[key] = ("file", path.read_bytes())
        else:
            snapshot[key] = ("dir", b"")
    return snapshot


@pytest.mark.parametrize("strategy", list(MaterializationStrategy))
def test_materialize_all_projects_every_entry(
    overlay_root: Path, engine_root: Path, strategy: MaterializationStrategy
) -> None:
    materializer = OverlayMaterializer(source_root=overlay_root, dest_root=engine_root, strategy=strategy)

    report = materializer.materialize_all(scan(overlay_root))

    assert report.success
    assert len(report.materialized) == 2
    projected = engine_root / "browser" / "base" / "zen.js"
    assert projected.read_text(encoding="utf-8") == "// overlay\n"
    assert projected.is_symlink() is (strategy is MaterializationStrategy.SYMLINK)
    ignore_lines = (engine_root / ".gitignore").read_text(encoding="utf-8").splitlines()
    assert "browser/base/zen.js" in ignore_lines
    assert "toolkit/moz.build" in ignore_lines


def test_symlink_points_at_canonical_overlay_file(overlay_root: Path, engine_root: Path) -> None:
    materialize(
        OverlayEntry(PurePosixPath("toolkit/moz.build")),
        overlay_root,
        engine_root,
        MaterializationStrategy.SYMLINK,
    )

    link = engine_root / "toolkit" / "moz.build"
    assert Path(os.readlink(link)) == (overlay_root / "toolkit" / "moz.build").resolve()


@pytest.mark.parametrize("strategy", list(MaterializationStrategy))
def test_materialize_twice_is_idempotent(
    overlay_root: Path, engine_root: Path, strategy: MaterializationStrategy
) -> None:
    groups = scan(overlay_root)

    _ = OverlayMaterializer(source_root=overlay_root, dest_root=engine_root, strategy=strategy).materialize_all(groups)
    first = _snapshot(engine_root)
    _ = OverlayMaterializer(source_root=overlay_root, dest_root=engine_root, strategy=strategy).materialize_all(groups)
    second = _snapshot(engine_root)

    assert first == second
    lines = (engine_root / ".gitignore").read_text(encoding="utf-8").splitlines()
    assert len(lines) == len(set(lines))


@pytest.mark.parametrize("strategy", list(MaterializationStrategy))
def test_preexisting_plain_file_is_replaced(
    overlay_root: Path, engine_root: Path, strategy: MaterializationStrategy
) -> None:
    for relative in ("browser/base/zen.js", "toolkit/moz.build"):
        target = engine_root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        _ = target.write_text("vendored original\n", encoding="utf-8")

    report = OverlayMaterializer(
        source_root=overlay_root, dest_root=engine_root, strategy=strategy
    ).materialize_all(scan(overlay_root))

    assert report.success
    for relative in ("browser/base/zen.js", "toolkit/moz.build"):
        projected = engine_root / relative
        assert projected.read_bytes() == (overlay_root / relative).read_bytes()


def test_manual_edit_of_managed_copy_is_lost(overlay_root: Path, engine_root: Path) -> None:
    """Documented hazard: edits made inside the engine tree are overwritten without a diff."""

    groups = scan(overlay_root)
    materializer = OverlayMaterializer(
        source_root=overlay_root, dest_root=engine_root, strategy=MaterializationStrategy.COPY
    )
    _ = materializer.materialize_all(groups)

    edited = engine_root / "browser" / "base" / "zen.js"
    _ = edited.write_text("// hand edit in engine tree\n", encoding="utf-8")

    _ = OverlayMaterializer(
        source_root=overlay_root, dest_root=engine_root, strategy=MaterializationStrategy.COPY
    ).materialize_all(groups)

    assert edited.read_text(encoding="utf-8") == "// overlay\n"


def test_switching_strategy_replaces_managed_copy_with_link(overlay_root: Path, engine_root: Path) -> None:
    groups = scan(overlay_root)
    _ = OverlayMaterializer(
        source_root=overlay_root, dest_root=engine_root, strategy=MaterializationStrategy.COPY
    ).materialize_all(groups)

    _ = OverlayMaterializer(
        source_root=overlay_root, dest_root=engine_root, strategy=MaterializationStrategy.SYMLINK
    ).materialize_all(groups)

    assert (engine_root / "toolkit" / "moz.build").is_symlink()


def test_ownership_manifest_records_projected_paths(overlay_root: Path, engine_root: Path) -> None:
    _ = OverlayMaterializer(
        source_root=overlay_root, dest_root=engine_root, strategy=MaterializationStrategy.COPY
    ).materialize_all(scan(overlay_root))

    owned = (engine_root / ".brandfork-owned").read_text(encoding="utf-8").splitlines()
    assert sorted(owned) == ["browser/base/zen.js", "toolkit/moz.build"]
    assert ".brandfork-owned" in (engine_root / ".gitignore").read_text(encoding="utf-8").splitlines()


def test_failures_are_collected_without_aborting(overlay_root: Path, engine_root: Path) -> None:
    groups = scan(overlay_root)
    (overlay_root / "browser" / "base" / "zen.js").unlink()

    report = OverlayMaterializer(
        source_root=overlay_root, dest_root=engine_root, strategy=MaterializationStrategy.COPY
    ).materialize_all(groups)

    assert not report.success
    assert [failure.entry.relative_path for failure in report.failures] == [
        PurePosixPath("browser/base/zen.js")
    ]
    assert [entry.relative_path for entry in report.materialized] == [PurePosixPath("toolkit/moz.build")]
    ignore_lines = (engine_root / ".gitignore").read_text(encoding="utf-8").splitlines()
    assert "browser/base/zen.js" not in ignore_lines

    with pytest.raises(MaterializationError) as excinfo:
        report.raise_for_failures()
    assert len(excinfo.value.failures) == 1


def test_overlay_files_are_never_modified(overlay_root: Path, engine_root: Path) -> None:
    before = _snapshot(overlay_root)

    _ = OverlayMaterializer(
        source_root=overlay_root, dest_root=engine_root, strategy=MaterializationStrategy.SYMLINK
    ).materialize_all(scan(overlay_root))

    assert _snapshot(overlay_root) == before


@pytest.mark.parametrize(
    ("platform", "opt_in", "expected"),
    [
        ("linux", False, MaterializationStrategy.SYMLINK),
        ("darwin", False, MaterializationStrategy.SYMLINK),
        ("win32", False, MaterializationStrategy.COPY),
        ("win32", True, MaterializationStrategy.SYMLINK),
    ],
)
def test_select_strategy(platform: str, opt_in: bool, expected: MaterializationStrategy) -> None:
    assert select_strategy(platform, windows_use_symbolic_links=opt_in) is expected


def test_strategy_from_user_input_rejects_unknown_value() -> None:
    assert MaterializationStrategy.from_user_input(" Copy ") is MaterializationStrategy.COPY
    with pytest.raises(ValueError):
        _ = MaterializationStrategy.from_user_input("hardlink")
