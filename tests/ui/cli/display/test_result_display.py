"""Tests for overlay and brand result rendering."""

from io import StringIO
from pathlib import Path, PurePosixPath

from rich.console import Console

from brandfork.features.branding import AssetArtifact, BrandOutputReport, ReleaseInfo
from brandfork.features.branding.domain.models import BrandDefinition
from brandfork.features.overlay import (
    MaterializationReport,
    MaterializationStrategy,
    OverlayEntry,
    OverlayGroup,
)
from brandfork.features.overlay.domain.models import MaterializationFailure
from brandfork.ui.cli.display import BrandResultDisplay, OverlayResultDisplay


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, width=120, color_system=None), buffer


def test_overlay_summary_lists_failures_even_when_quiet() -> None:
    console, buffer = _console()
    entry = OverlayEntry(PurePosixPath("browser/base/zen.js"))
    report = MaterializationReport(
        strategy=MaterializationStrategy.COPY,
        failures=[MaterializationFailure(entry=entry, error="Permission denied")],
    )

    OverlayResultDisplay(console).show_results([report], quiet=True)

    output = buffer.getvalue()
    assert "Failed: 1" in output
    assert "browser/base/zen.js: Permission denied" in output
    assert "Materialized" not in output


def test_overlay_groups_table() -> None:
    console, buffer = _console()
    group = OverlayGroup(name="browser", entries=[OverlayEntry(PurePosixPath("browser/a.js"))])

    OverlayResultDisplay(console).show_groups(Path("/fork/src"), [group])

    assert "browser" in buffer.getvalue()


def test_brand_report_warns_about_unpatched_descriptor(tmp_path: Path) -> None:
    console, buffer = _console()
    brand = BrandDefinition(
        key="acme",
        display_name="Acme Browser",
        short_name="Acme",
        shorter_name="Acme",
        vendor="Acme Corp",
        generic_name="Acme Generic",
        background_color="#112233",
        release=ReleaseInfo(display_version="1.0.0", channel="acme"),
    )
    output_dir = tmp_path / "browser" / "branding" / "acme"
    report = BrandOutputReport(brand=brand, output_dir=output_dir)
    report.add(AssetArtifact.RASTER_ICON, output_dir / "default16.png")

    BrandResultDisplay(console).show_report(report, verbose=True)

    output = buffer.getvalue()
    assert "Acme Browser" in output
    assert "raster_icon" in output
    assert "Update URL not patched" in output
    assert "acme/default16.png" in output
