"""Where: src/brandfork/features/branding/usecases/fragments.py
What: Render the installer define block, the profile preference fragment and the update URL patch.
Why: These files are regenerated wholesale from brand fields rather than inherited.
Assumptions: - Placeholders such as ``%VERSION%`` and ``@MOZ_APPUPDATE_HOST@`` are resolved by the engine build.
Trade-offs: - Fixed URLs are embedded verbatim; only brand names vary.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final

from brandfork.config.file_ops import write_text_file
from brandfork.config.settings import GENERIC_BUILD_SUFFIX, ICON_BUNDLE_PLATFORM, UPDATE_URL_PATTERN
from brandfork.platform.logging import logger

from ..domain.models import BrandDefinition

_INSTALLER_DEFINES_TEMPLATE: Final[str] = """
# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

# NSIS branding defines for official release builds.
# The nightly build branding.nsi is located in browser/installer/windows/nsis/
# The unofficial build branding.nsi is located in browser/branding/unofficial/

# BrandFullNameInternal is used for some registry and file system values
# instead of BrandFullName and typically should not be modified.
!define BrandFullNameInternal "{full_name}"
!define BrandFullName         "{full_name}"
!define CompanyName           "{vendor}"
!define URLInfoAbout          "https://zen-browser.app"
!define URLUpdateInfo         "https://zen-browser.app/release-notes/${{AppVersion}}"
!define HelpLink              "https://github.com/zen-browser/desktop/issues"

; The OFFICIAL define is a workaround to support different urls for Release and
; Beta since they share the same branding when building with other branches that
; set the update channel to beta.
!define OFFICIAL
!define URLStubDownloadX86 "https://download.mozilla.org/?os=win&lang=${{AB_CD}}&product=firefox-latest"
!define URLStubDownloadAMD64 "https://download.mozilla.org/?os=win64&lang=${{AB_CD}}&product=firefox-latest"
!define URLStubDownloadAArch64 "https://download.mozilla.org/?os=win64-aarch64&lang=${{AB_CD}}&product=firefox-latest"
!define URLManualDownload "https://zen-browser.app/download"
!define URLSystemRequirements "https://www.mozilla.org/firefox/system-requirements/"
!define Channel "release"

# The installer's certificate name and issuer expected by the stub installer
!define CertNameDownload   "{cert_name}"
!define CertIssuerDownload "DigiCert SHA2 Assured ID Code Signing CA"

# Dialog units are used so the UI displays correctly with the system's DPI
# settings. These are tweaked to look good with the en-US strings; ideally
# we would customize them for each locale but we don't really have a way to
# implement that and it would be a ton of work for the localizers.
!define PROFILE_CLEANUP_LABEL_TOP "50u"
!define PROFILE_CLEANUP_LABEL_LEFT "22u"
!define PROFILE_CLEANUP_LABEL_WIDTH "175u"
!define PROFILE_CLEANUP_LABEL_HEIGHT "100u"
!define PROFILE_CLEANUP_LABEL_ALIGN "left"
!define PROFILE_CLEANUP_CHECKBOX_LEFT "22u"
!define PROFILE_CLEANUP_CHECKBOX_WIDTH "175u"
!define PROFILE_CLEANUP_BUTTON_LEFT "22u"
!define INSTALL_HEADER_TOP "70u"
!define INSTALL_HEADER_LEFT "22u"
!define INSTALL_HEADER_WIDTH "180u"
!define INSTALL_HEADER_HEIGHT "100u"
!define INSTALL_BODY_LEFT "22u"
!define INSTALL_BODY_WIDTH "180u"
!define INSTALL_INSTALLING_TOP "115u"
!define INSTALL_INSTALLING_LEFT "270u"
!define INSTALL_INSTALLING_WIDTH "150u"
!define INSTALL_PROGRESS_BAR_TOP "100u"
!define INSTALL_PROGRESS_BAR_LEFT "270u"
!define INSTALL_PROGRESS_BAR_WIDTH "150u"
!define INSTALL_PROGRESS_BAR_HEIGHT "12u"

!define PROFILE_CLEANUP_CHECKBOX_TOP_MARGIN "12u"
!define PROFILE_CLEANUP_BUTTON_TOP_MARGIN "12u"
!define PROFILE_CLEANUP_BUTTON_X_PADDING "80u"
!define PROFILE_CLEANUP_BUTTON_Y_PADDING "8u"
!define INSTALL_BODY_TOP_MARGIN "20u"

# Font settings that can be customized for each channel
!define INSTALL_HEADER_FONT_SIZE 20
!define INSTALL_HEADER_FONT_WEIGHT 600
!define INSTALL_INSTALLING_FONT_SIZE 15
!define INSTALL_INSTALLING_FONT_WEIGHT 600

# UI Colors that can be customized for each channel
!define COMMON_TEXT_COLOR 0x000000
!define COMMON_BACKGROUND_COLOR 0xFFFFFF
!define INSTALL_INSTALLING_TEXT_COLOR 0xFFFFFF
# This color is written as 0x00BBGGRR because it's actually a COLORREF value.
!define PROGRESS_BAR_BACKGROUND_COLOR 0xFFAA00
"""

PROFILE_PREFS: Final[str] = """
/* This Source Code Form is subject to the terms of the Mozilla Public
 * License, v. 2.0. If a copy of the MPL was not distributed with this
 * file, You can obtain one at http://mozilla.org/MPL/2.0/. */

pref("startup.homepage_override_url", "https://zen-browser.app/whatsnew?v=%VERSION%");
pref("startup.homepage_welcome_url", "https://zen-browser.app/welcome/");
pref("startup.homepage_welcome_url.additional", "https://zen-browser.app/privacy-policy/");

// Give the user x seconds to react before showing the big UI. default=192 hours
pref("app.update.promptWaitTime", 691200);
// app.update.url.manual: URL user can browse to manually if for some reason
// all update installation attempts fail.
// app.update.url.details: a default value for the "More information about this
// update" link supplied in the "An update is available" page of the update
// wizard.
pref("app.update.url.manual", "https://zen-browser.app/download/");
pref("app.update.url.details", "https://zen-browser.app/release-notes/latest/");
pref("app.releaseNotesURL", "https://zen-browser.app/release-notes/%VERSION%/");
pref("app.releaseNotesURL.aboutDialog", "https://www.zen-browser.app/release-notes/%VERSION%/");
pref("app.releaseNotesURL.prompt", "https://zen-browser.app/release-notes/%VERSION%/");

// Number of usages of the web console.
// If this is less than 5, then pasting code into the web console is disabled
pref("devtools.selfxss.count", 5);
"""

UPDATE_URL_TEMPLATE: Final[str] = (
    "URL=https://@MOZ_APPUPDATE_HOST@/updates/browser/%BUILD_TARGET%/%CHANNEL%{suffix}/update.xml"
)


def render_installer_defines(brand: BrandDefinition) -> str:
    """Return the NSIS ``!define`` block for ``brand``."""

    return _INSTALLER_DEFINES_TEMPLATE.format(
        full_name=brand.display_name,
        vendor=brand.vendor,
        cert_name=brand.display_name,
    )


def write_installer_defines(destination: Path, brand: BrandDefinition) -> Path:
    logger.debug("Configuring installer defines into %s", destination)
    write_text_file(destination, render_installer_defines(brand))
    return destination


def write_profile_prefs(destination: Path) -> Path:
    """Overwrite the runtime preference fragment at ``destination``."""

    write_text_file(destination, PROFILE_PREFS)
    return destination


def update_url_suffix(*, compat_mode: bool, platform: str) -> str:
    """Return the channel suffix for ABI-reduced builds outside the icon-bundle platform."""

    if compat_mode and platform != ICON_BUNDLE_PLATFORM:
        return GENERIC_BUILD_SUFFIX
    return ""


def patch_update_url(text: str, suffix: str = "") -> str:
    """Point every ``URL=...update.xml`` line of ``text`` at the templated update URL."""

    replacement = UPDATE_URL_TEMPLATE.format(suffix=suffix)
    return UPDATE_URL_PATTERN.sub(lambda _match: replacement, text)


def write_update_url(descriptor: Path, suffix: str = "") -> bool:
    """Patch the application descriptor in place; return ``False`` when it is absent."""

    if not descriptor.is_file():
        logger.warning("Application descriptor not found, update URL left unchanged: %s", descriptor)
        return False

    contents = descriptor.read_text(encoding="utf-8")
    write_text_file(descriptor, patch_update_url(contents, suffix))
    return True


__all__ = [
    "PROFILE_PREFS",
    "UPDATE_URL_TEMPLATE",
    "patch_update_url",
    "render_installer_defines",
    "update_url_suffix",
    "write_installer_defines",
    "write_profile_prefs",
    "write_update_url",
]
