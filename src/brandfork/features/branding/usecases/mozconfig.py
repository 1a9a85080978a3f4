"""Render the internal build-configuration fragment for a brand."""

from __future__ import annotations

from enum import StrEnum
from typing import Final

_OTHER_BUILD_MODES: Final[str] = """# You can change to other build modes by running:
#   $ brandfork mozconfig <brand> --build-mode [dev|debug|release]"""

UNRESOLVABLE_UPDATE_HOST: Final[str] = "localhost:7648 # This should not resolve"

_PLATFORM_OPTIMIZE_FLAGS: Final[dict[str, str]] = {
    "linux": 'ac_add_options --enable-optimize="-march=nehalem -msse3 -mtune=znver3 -O3 -w -mavx -maes"',
    "darwin": 'ac_add_options --enable-optimize="-mcpu=apple-m1 -O3 -w"',
    "win32": (
        'ac_add_options --enable-optimize="-march=x86-64-v3 -Qvec -w -ftree-vectorize'
        ' -msse3 -mssse3 -msse4.1 -mtune=haswell -mavx -maes"'
    ),
}
_PROFILE_GENERATION_FLAGS: Final[str] = 'ac_add_options --enable-optimize="-O2 -w"'


class BuildMode(StrEnum):
    DEV = "dev"
    DEBUG = "debug"
    RELEASE = "release"


def platform_optimize_flags(platform: str, *, profile_generation: bool = False) -> str:
    """Return the optimisation options used by release builds on ``platform``."""

    if profile_generation:
        return _PROFILE_GENERATION_FLAGS
    return _PLATFORM_OPTIMIZE_FLAGS.get(platform, f"# Unknown platform {platform}")


def build_mode_options(build_mode: str, platform: str, *, profile_generation: bool = False) -> str:
    """Return the options block for ``build_mode``; unknown modes become a comment."""

    if build_mode == BuildMode.DEV:
        return f"# Development build settings\n{_OTHER_BUILD_MODES}\nac_add_options --disable-debug"
    if build_mode == BuildMode.DEBUG:
        return (
            f"# Debug build settings\n{_OTHER_BUILD_MODES}\n"
            "ac_add_options --enable-debug\nac_add_options --disable-optimize"
        )
    if build_mode == BuildMode.RELEASE:
        flags = platform_optimize_flags(platform, profile_generation=profile_generation)
        return (
            "# Release build settings\n"
            "ac_add_options --disable-debug\n"
            "ac_add_options --enable-optimize\n"
            "ac_add_options --enable-rust-simd\n"
            f"{flags}"
        )
    return f"# Unknown build mode {build_mode}"


def render_mozconfig(
    brand_key: str,
    build_mode: str,
    platform: str,
    update_host: str | None = None,
    *,
    profile_generation: bool = False,
) -> str:
    """Return the build-configuration fragment selecting ``brand_key``'s branding."""

    options = build_mode_options(build_mode, platform, profile_generation=profile_generation)
    return f"""
# =====================
# Internal brandfork config
# =====================

{options}
ac_add_options --disable-geckodriver
ac_add_options --disable-profiling
ac_add_options --disable-tests

# Custom branding
ac_add_options --with-branding=browser/branding/{brand_key}

# Config for updates
ac_add_options --enable-unverified-updates
ac_add_options --enable-update-channel={brand_key}
export MOZ_APPUPDATE_HOST={update_host or UNRESOLVABLE_UPDATE_HOST}
"""


__all__ = [
    "BuildMode",
    "UNRESOLVABLE_UPDATE_HOST",
    "build_mode_options",
    "platform_optimize_flags",
    "render_mozconfig",
]
