"""Where: src/brandfork/config/settings.py
What: Fixed names, sizes and patterns shared by the overlay and branding features.
Why: Keep engine-tree conventions in one place instead of scattering literals.
Assumptions: - The engine tree follows the Firefox branding directory layout.
Trade-offs: - Values are constants; per-fork tuning lives in ``Config``.
"""

from __future__ import annotations

import re
from typing import Final

# Overlay scanning -------------------------------------------------------------

# Files ending in this suffix are diffs handled by a separate patch engine.
PATCH_SUFFIX: Final[str] = ".patch"

# Dependency-manager directories never projected into the engine tree.
EXCLUDED_DIR_NAMES: Final[frozenset[str]] = frozenset({"node_modules"})

# Version-control exclusion file at the root of the engine tree.
IGNORE_MANIFEST_NAME: Final[str] = ".gitignore"

# Paths this tool has projected into the engine tree.
OWNERSHIP_MANIFEST_NAME: Final[str] = ".brandfork-owned"

# Overlay files from the tests tree land beneath this engine directory.
TESTS_OVERLAY_DESTINATION: Final[str] = "browser/base/zen-components"


# Brand store -------------------------------------------------------------------

REQUIRED_BRAND_FILES: Final[tuple[str, ...]] = (
    "logo.png",
    "logo-mac.png",
    "firefox.ico",
    "firefox64.ico",
)

MASTER_LOGO: Final[str] = "logo.png"
MAC_LOGO: Final[str] = "logo-mac.png"

# The engine does not use 512px, but the icon containers are built from it.
RASTER_ICON_SIZES: Final[tuple[int, ...]] = (16, 22, 24, 32, 48, 64, 128, 256, 512)
ICNS_SIZES: Final[tuple[int, ...]] = (16, 32, 64, 128, 256, 512)
ABOUT_LOGO_SIZES: Final[dict[str, int]] = {
    "about-logo.png": 512,
    "about-logo@2x.png": 1024,
}

# Platform whose packaging consumes a multi-resolution icon bundle.
ICON_BUNDLE_PLATFORM: Final[str] = "darwin"
ICNS_NAME: Final[str] = "firefox.icns"
ICONSET_SCRATCH_NAME: Final[str] = "macos_icon_info.iconset"

CONTENT_DIR_NAME: Final[str] = "content"


# Engine tree layout ---------------------------------------------------------

BRANDING_STORE_PARTS: Final[tuple[str, ...]] = ("browser", "branding")
BASE_BRANDING_NAME: Final[str] = "unofficial"
OPTIONAL_BRANDING_TEMPLATE_DIR: Final[str] = "branding.optional"
APPLICATION_DESCRIPTOR_PARTS: Final[tuple[str, ...]] = ("build", "application.ini.in")

INSTALLER_SCRIPT_NAME: Final[str] = "branding.nsi"
PROFILE_PREFS_PARTS: Final[tuple[str, ...]] = ("pref", "firefox-branding.js")


# Rewrites -----------------------------------------------------------------------

# Legacy background colour tokens in the inherited branding stylesheets.
CSS_LEGACY_COLOR_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"#130829|hsla\(235, 43%, 10%, \.5\)", re.MULTILINE
)
CSS_THEME_VARIABLE: Final[str] = "--theme-bg"

UPDATE_URL_PATTERN: Final[re.Pattern[str]] = re.compile(r"URL=.*update\.xml")
GENERIC_BUILD_SUFFIX: Final[str] = "-generic"


# Hashing ------------------------------------------------------------------------

FILE_HASH_CHUNK_SIZE: Final[int] = 64 * 1024


# Documented brand defaults, applied between the global identity and the brand table.
DEFAULT_BRAND_FIELDS: Final[dict[str, str]] = {
    "backgroundColor": "#2B2A33",
    "brandShorterName": "Nightly",
    "brandShortName": "Nightly",
    "brandFullName": "Mozilla Nightly",
}

# Release version shown for brands whose ``[brands.<key>.release]`` table omits ``displayVersion``.
DEFAULT_DISPLAY_VERSION: Final[str] = "1.0.0"


__all__ = [
    "ABOUT_LOGO_SIZES",
    "APPLICATION_DESCRIPTOR_PARTS",
    "BASE_BRANDING_NAME",
    "BRANDING_STORE_PARTS",
    "CONTENT_DIR_NAME",
    "CSS_LEGACY_COLOR_PATTERN",
    "CSS_THEME_VARIABLE",
    "DEFAULT_BRAND_FIELDS",
    "DEFAULT_DISPLAY_VERSION",
    "EXCLUDED_DIR_NAMES",
    "FILE_HASH_CHUNK_SIZE",
    "GENERIC_BUILD_SUFFIX",
    "ICNS_NAME",
    "ICNS_SIZES",
    "ICONSET_SCRATCH_NAME",
    "ICON_BUNDLE_PLATFORM",
    "IGNORE_MANIFEST_NAME",
    "INSTALLER_SCRIPT_NAME",
    "MAC_LOGO",
    "MASTER_LOGO",
    "OPTIONAL_BRANDING_TEMPLATE_DIR",
    "OWNERSHIP_MANIFEST_NAME",
    "PATCH_SUFFIX",
    "PROFILE_PREFS_PARTS",
    "RASTER_ICON_SIZES",
    "REQUIRED_BRAND_FILES",
    "TESTS_OVERLAY_DESTINATION",
    "UPDATE_URL_PATTERN",
]
