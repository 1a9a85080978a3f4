"""
Summary: Verify brand validation and the layered field merge.
Why: Later pipeline steps trust resolved fields and never re-check brand files.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from brandfork.config.config import Config
from brandfork.config.settings import DEFAULT_DISPLAY_VERSION
from brandfork.features.branding import BrandResolver, merge_layers
from brandfork.shared.errors import IncompleteBrandError, MissingBrandError


def test_merge_layers_is_shallow_and_left_to_right() -> None:
    merged = merge_layers(
        {"a": 1, "nested": {"x": 1, "y": 2}},
        {"a": 2, "b": 2},
        {"nested": {"x": 9}},
    )

    assert merged == {"a": 2, "b": 2, "nested": {"x": 9}}


def test_resolve_merges_global_defaults_and_brand_fields(fork_config: Config, brand_dir: Path) -> None:
    _ = brand_dir
    fork_config.brands["acme"]["updateServer"] = "updates.acme.test"

    brand = BrandResolver(fork_config).resolve("acme")

    assert brand.key == "acme"
    assert brand.display_name == "Acme Browser"
    assert brand.background_color == "#112233"
    assert brand.vendor == "Acme Corp"
    assert brand.generic_name == "Acme Generic"
    assert brand.release.display_version == "1.2.3"
    assert brand.release.channel == "acme"
    assert brand.extra == {"updateServer": "updates.acme.test"}
    assert brand.as_template_values()["updateServer"] == "updates.acme.test"


def test_resolve_uses_documented_defaults_for_missing_fields(fork_config: Config) -> None:
    source = fork_config.branding_dir / "bare"
    source.mkdir(parents=True)
    for name in ("logo.png", "logo-mac.png", "firefox.ico", "firefox64.ico"):
        _ = (source / name).write_bytes(b"stub")

    brand = BrandResolver(fork_config).resolve("bare")

    assert brand.display_name == "Mozilla Nightly"
    assert brand.short_name == "Nightly"
    assert brand.background_color == "#2B2A33"
    assert brand.vendor == "Acme Corp"
    assert brand.release.display_version == DEFAULT_DISPLAY_VERSION


def test_brand_fields_override_global_identity(fork_config: Config, brand_dir: Path) -> None:
    _ = brand_dir
    fork_config.brands["acme"]["brandingVendor"] = "Acme Labs"

    brand = BrandResolver(fork_config).resolve("acme")

    assert brand.vendor == "Acme Labs"


def test_missing_brand_directory(fork_config: Config) -> None:
    with pytest.raises(MissingBrandError) as excinfo:
        _ = BrandResolver(fork_config).resolve("ghost")

    assert excinfo.value.key == "ghost"


def test_incomplete_brand_lists_every_missing_file(fork_config: Config, brand_dir: Path) -> None:
    (brand_dir / "logo-mac.png").unlink()
    (brand_dir / "firefox64.ico").unlink()

    with pytest.raises(IncompleteBrandError) as excinfo:
        _ = BrandResolver(fork_config).resolve("acme")

    assert [path.name for path in excinfo.value.missing] == ["logo-mac.png", "firefox64.ico"]


def test_list_brands(fork_config: Config, brand_dir: Path) -> None:
    _ = brand_dir
    (fork_config.branding_dir / "beta").mkdir()
    _ = (fork_config.branding_dir / "README.md").write_text("notes", encoding="utf-8")

    assert BrandResolver(fork_config).list_brands() == ["acme", "beta"]


def test_list_brands_without_store(tmp_path: Path) -> None:
    assert BrandResolver(Config(root=tmp_path)).list_brands() == []
