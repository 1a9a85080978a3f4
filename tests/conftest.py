"""Shared pytest fixtures building a miniature fork on disk."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

from brandfork.config.config import Config

BASE_CSS = """\
.about-wordmark { color: #fff; }
#aboutDialogContainer { background-color: #130829; }
.header { background: hsla(235, 43%, 10%, .5); }
"""

APPLICATION_INI = """\
[App]
Vendor=@MOZ_APP_VENDOR@
Name=@MOZ_APP_BASENAME@

[AppUpdate]
URL=https://aus5.mozilla.org/update/6/%PRODUCT%/%VERSION%/update.xml
"""


def write_png(path: Path, size: int, color: tuple[int, int, int, int] = (17, 34, 51, 255)) -> Path:
    """Write a solid square PNG of ``size`` pixels."""

    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGBA", (size, size), color).save(path, format="PNG")
    return path


def write_ico(path: Path, size: int) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGBA", (size, size), (0, 0, 0, 255)).save(path, format="ICO", sizes=[(size, size)])
    return path


@pytest.fixture
def png_writer() -> Callable[..., Path]:
    return write_png


@pytest.fixture
def fork_config(tmp_path: Path) -> Config:
    """Configuration rooted at ``tmp_path`` with an ``acme`` brand table."""

    return Config(
        name="Acme Generic",
        vendor="Acme Corp",
        root=tmp_path,
        brands={
            "acme": {
                "backgroundColor": "#112233",
                "brandFullName": "Acme Browser",
                "brandShortName": "Acme",
                "brandShorterName": "Acme",
                "release": {"displayVersion": "1.2.3"},
            }
        },
    )


@pytest.fixture
def brand_dir(fork_config: Config) -> Path:
    """Brand source directory for ``acme`` holding only the required files."""

    source = fork_config.branding_dir / "acme"
    _ = write_png(source / "logo.png", 512)
    _ = write_png(source / "logo-mac.png", 512, (200, 10, 10, 255))
    _ = write_ico(source / "firefox.ico", 16)
    _ = write_ico(source / "firefox64.ico", 64)
    return source


@pytest.fixture
def engine_tree(fork_config: Config) -> Path:
    """Engine tree with the default branding and an application descriptor."""

    engine = fork_config.engine_path
    base = engine / "browser" / "branding" / "unofficial"
    (base / "content").mkdir(parents=True)
    _ = (base / "content" / "aboutDialog.css").write_text(BASE_CSS, encoding="utf-8")
    _ = (base / "content" / "about-wordmark.svg").write_text("<svg/>", encoding="utf-8")
    _ = (base / "branding.nsi").write_text("!define BrandFullName \"Nightly\"\n", encoding="utf-8")
    _ = (base / "configure.sh").write_text("MOZ_APP_DISPLAYNAME=Nightly\n", encoding="utf-8")
    (base / "locales" / "en-US").mkdir(parents=True)
    _ = (base / "locales" / "en-US" / "brand.properties").write_text(
        "brandShortName=Nightly\n", encoding="utf-8"
    )
    (engine / "build").mkdir(parents=True)
    _ = (engine / "build" / "application.ini.in").write_text(APPLICATION_INI, encoding="utf-8")
    return engine


@pytest.fixture
def templates_tree(fork_config: Config) -> Path:
    """Optional branding templates using brand placeholders."""

    optional = fork_config.templates_path / "branding.optional"
    (optional / "locales" / "en-US").mkdir(parents=True)
    _ = (optional / "locales" / "en-US" / "brand.properties").write_text(
        "brandShorterName=${brandShorterName}\n"
        "brandShortName=${brandShortName}\n"
        "brandFullName=${brandFullName}\n"
        "vendorShortName=${brandingVendor}\n"
        "untouched=${notDefined}\n",
        encoding="utf-8",
    )
    return optional
