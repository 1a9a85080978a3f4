"""Tests for placeholder substitution in optional branding templates."""

from __future__ import annotations

from pathlib import Path

from brandfork.features.branding.usecases.locale_templates import expand_templates, string_template


def test_known_tokens_are_replaced() -> None:
    text = "name=${brandFullName} short=${brandShortName}"

    assert string_template(text, {"brandFullName": "Acme Browser", "brandShortName": "Acme"}) == (
        "name=Acme Browser short=Acme"
    )


def test_unknown_tokens_are_left_verbatim() -> None:
    assert string_template("x=${missing} y=${a}", {"a": "1"}) == "x=${missing} y=1"


def test_values_are_not_reexpanded() -> None:
    assert string_template("${a}", {"a": "${b}", "b": "no"}) == "${b}"


def test_expand_templates_mirrors_relative_paths(templates_tree: Path, tmp_path: Path) -> None:
    output = tmp_path / "out"

    written = expand_templates(
        templates_tree,
        output,
        {
            "brandShorterName": "Acme",
            "brandShortName": "Acme",
            "brandFullName": "Acme Browser",
            "brandingVendor": "Acme Corp",
        },
    )

    target = output / "locales" / "en-US" / "brand.properties"
    assert written == [target]
    assert target.read_text(encoding="utf-8") == (
        "brandShorterName=Acme\n"
        "brandShortName=Acme\n"
        "brandFullName=Acme Browser\n"
        "vendorShortName=Acme Corp\n"
        "untouched=${notDefined}\n"
    )


def test_expand_templates_without_template_dir(tmp_path: Path) -> None:
    assert expand_templates(tmp_path / "absent", tmp_path / "out", {}) == []
    assert not (tmp_path / "out").exists()
