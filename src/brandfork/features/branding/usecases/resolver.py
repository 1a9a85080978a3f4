"""
Summary: Validate a brand's source directory and merge its fields over defaults.
Why: Every later pipeline step reads normalized brand fields, never raw config.
"""

from __future__ import annotations

from brandfork.config.config import Config, validate_brand_table
from brandfork.config.settings import DEFAULT_BRAND_FIELDS, REQUIRED_BRAND_FILES
from brandfork.platform.logging import logger
from brandfork.shared.errors import IncompleteBrandError, MissingBrandError

from ..domain.models import BrandDefinition, BrandLayout, merge_layers


class BrandResolver:
    """Resolve brand keys against the brand store configured in ``config``."""

    def __init__(self, config: Config) -> None:
        self._config = config

    def list_brands(self) -> list[str]:
        """Return the brand keys that have a source directory."""

        store = self._config.branding_dir
        if not store.is_dir():
            return []
        return sorted(path.name for path in store.iterdir() if path.is_dir())

    def layout(self, brand_key: str) -> BrandLayout:
        return BrandLayout(
            key=brand_key,
            source_dir=self._config.branding_dir / brand_key,
            engine_dir=self._config.engine_path,
        )

    def validate(self, brand_key: str) -> BrandLayout:
        """Check the brand directory and its required files.

        Raises:
            MissingBrandError: If the brand has no source directory.
            IncompleteBrandError: If any required file is absent, naming all of them.
        """

        layout = self.layout(brand_key)
        if not layout.source_dir.is_dir():
            raise MissingBrandError(brand_key, layout.source_dir)

        required = [layout.source_dir / name for name in REQUIRED_BRAND_FILES]
        missing = [path for path in required if not path.is_file()]
        if missing:
            raise IncompleteBrandError(brand_key, missing)
        return layout

    def resolve(self, brand_key: str) -> BrandDefinition:
        """Validate ``brand_key`` and return its merged definition.

        Raises:
            ConfigError: If the configured brand table has the wrong shape.
        """

        _ = self.validate(brand_key)
        merged = merge_layers(
            {
                "brandingGenericName": self._config.name,
                "brandingVendor": self._config.vendor,
            },
            DEFAULT_BRAND_FIELDS,
            validate_brand_table(brand_key, self._config.brands.get(brand_key, {})),
        )
        brand = BrandDefinition.from_mapping(brand_key, merged)
        logger.debug("Resolved brand %s (%s)", brand_key, brand.display_name)
        return brand


__all__ = ["BrandResolver"]
