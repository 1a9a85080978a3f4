"""Configuration management for brandfork."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from brandfork.config.file_ops import write_text_file
from brandfork.config.paths import default_config_path, repo_root
from brandfork.platform.logging import logger
from brandfork.shared.errors import ConfigError


MAX_WORKERS_DEFAULT = 4

BRAND_STRING_FIELDS = (
    "brandFullName",
    "brandShortName",
    "brandShorterName",
    "brandingVendor",
    "brandingGenericName",
    "backgroundColor",
)


def validate_brand_table(brand_key: str, table: Any) -> dict[str, Any]:
    """Check the shape of one ``[brands.<key>]`` table and return a copy.

    Raises:
        ConfigError: If the table, its ``release`` sub-table or a text field has the wrong type.
    """
    if not isinstance(table, Mapping):
        raise ConfigError(f"Brand '{brand_key}' must be a table")

    for key in BRAND_STRING_FIELDS:
        if key in table and not isinstance(table[key], str):
            raise ConfigError(f"'brands.{brand_key}.{key}' must be a string")

    release = table.get("release")
    if release is not None:
        if not isinstance(release, Mapping):
            raise ConfigError(f"'brands.{brand_key}.release' must be a table")
        version = release.get("displayVersion")
        if version is not None and not isinstance(version, str):
            raise ConfigError(f"'brands.{brand_key}.release.displayVersion' must be a string")
        github = release.get("github")
        if github is not None and not isinstance(github, Mapping):
            raise ConfigError(f"'brands.{brand_key}.release.github' must be a table")

    return dict(table)


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class BuildOptions:
    """Build switches that influence how the engine tree is prepared."""

    # Windows users normally lack the privilege to create symbolic links.
    windows_use_symbolic_links: bool = False


@dataclass
class Config:
    """Application configuration."""

    # Product identity shared by every brand
    name: str = "Unnamed Browser"
    vendor: str = "Unknown Vendor"
    update_hostname: str | None = None

    # Layout of the fork, relative to ``root`` unless absolute
    engine_dir: Path = _path_field(Path("engine"))
    src_dir: Path = _path_field(Path("src"))
    tests_dir: Path | None = _path_field()
    configs_dir: Path = _path_field(Path("configs"))
    templates_dir: Path = _path_field(Path("templates"))

    # Log file path
    log_file: Path | None = _path_field()

    # Upper bound for resize and materialization worker threads
    max_workers: int = MAX_WORKERS_DEFAULT

    build_options: BuildOptions = field(default_factory=BuildOptions)

    # Brand tables keyed by brand key (also the update channel)
    brands: dict[str, dict[str, Any]] = field(default_factory=dict)

    root: Path = field(default_factory=repo_root, metadata={"serialize": False})

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)
        self.root = Path(self.root)

    def resolve_path(self, value: Path) -> Path:
        """Resolve ``value`` against the repository root when it is relative."""

        path = Path(value).expanduser()
        if not path.is_absolute():
            path = self.root / path
        return path.resolve()

    @property
    def engine_path(self) -> Path:
        return self.resolve_path(self.engine_dir)

    @property
    def src_path(self) -> Path:
        return self.resolve_path(self.src_dir)

    @property
    def tests_path(self) -> Path | None:
        return self.resolve_path(self.tests_dir) if self.tests_dir is not None else None

    @property
    def branding_dir(self) -> Path:
        """Directory holding one source folder per brand."""
        return self.resolve_path(self.configs_dir) / "branding"

    @property
    def templates_path(self) -> Path:
        return self.resolve_path(self.templates_dir)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, root: Path | None = None) -> "Config":
        """Build a configuration from a parsed TOML document.

        Raises:
            ConfigError: If a known key has the wrong shape.
        """

        known = {f.name for f in fields(cls) if f.metadata.get("serialize", True)}
        values: dict[str, Any] = {}

        for key, value in data.items():
            if key not in known:
                logger.warning("Ignoring unknown configuration key: %s", key)
                continue
            values[key] = value

        for key in ("name", "vendor"):
            if key in values and not isinstance(values[key], str):
                raise ConfigError(f"'{key}' must be a string")

        hostname = values.get("update_hostname")
        if hostname is not None and not isinstance(hostname, str):
            raise ConfigError("'update_hostname' must be a string")

        for f in fields(cls):
            if f.metadata.get("path", False) and f.name in values:
                value = values[f.name]
                if not isinstance(value, str):
                    raise ConfigError(f"'{f.name}' must be a path string")
                if not value.strip() and f.default is not None:
                    raise ConfigError(f"'{f.name}' must not be empty")
                values[f.name] = value.strip() or None

        workers = values.get("max_workers", MAX_WORKERS_DEFAULT)
        if isinstance(workers, bool) or not isinstance(workers, int) or workers <= 0:
            raise ConfigError("'max_workers' must be a positive integer")

        raw_options = values.pop("build_options", {})
        if not isinstance(raw_options, Mapping):
            raise ConfigError("'build_options' must be a table")
        use_links = raw_options.get("windows_use_symbolic_links", False)
        if not isinstance(use_links, bool):
            raise ConfigError("'build_options.windows_use_symbolic_links' must be a boolean")

        raw_brands = values.pop("brands", {})
        if not isinstance(raw_brands, Mapping):
            raise ConfigError("'brands' must be a table of brand tables")
        brands: dict[str, dict[str, Any]] = {}
        for brand_key, brand_table in raw_brands.items():
            brands[str(brand_key)] = validate_brand_table(str(brand_key), brand_table)

        return cls(
            **values,
            build_options=BuildOptions(windows_use_symbolic_links=use_links),
            brands=brands,
            root=root if root is not None else repo_root(),
        )

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file."""

        try:
            destination = target or default_config_path()
            content = self._render_toml()
            write_text_file(destination, content)
            logger.info("Configuration saved to %s", destination)
            return destination
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# brandfork configuration file")
        lines.append("")

        lines.append("# Product identity shared by every brand")
        lines.append(f"name = {self._format_toml_value(self.name)}")
        lines.append(f"vendor = {self._format_toml_value(self.vendor)}")
        lines.append("")

        lines.append("# Update server host embedded in generated build configuration (optional)")
        lines.append('# Example: update_hostname = "updates.example.com"')
        if self.update_hostname:
            lines.append(f"update_hostname = {self._format_toml_value(self.update_hostname)}")
        lines.append("")

        lines.append("# Fork layout, relative to the repository root")
        lines.append(f"engine_dir = {self._format_toml_value(self.engine_dir)}")
        lines.append(f"src_dir = {self._format_toml_value(self.src_dir)}")
        if self.tests_dir is not None:
            lines.append(f"tests_dir = {self._format_toml_value(self.tests_dir)}")
        lines.append(f"configs_dir = {self._format_toml_value(self.configs_dir)}")
        lines.append(f"templates_dir = {self._format_toml_value(self.templates_dir)}")
        lines.append("")

        lines.append("# Log file path (optional)")
        if self.log_file is not None:
            lines.append(f"log_file = {self._format_toml_value(self.log_file)}")
        lines.append("")

        lines.append("# Worker threads used for icon resizing and overlay projection")
        lines.append(f"max_workers = {self._format_toml_value(self.max_workers)}")
        lines.append("")

        lines.append("[build_options]")
        lines.append("# Set to true when the Windows account may create symbolic links")
        lines.append(
            "windows_use_symbolic_links = "
            + self._format_toml_value(self.build_options.windows_use_symbolic_links)
        )

        for brand_key, brand_table in self.brands.items():
            lines.append("")
            self._render_table(f"brands.{brand_key}", brand_table, lines)

        lines.append("")
        return "\n".join(lines)

    def _render_table(self, name: str, table: Mapping[str, Any], lines: list[str]) -> None:
        """Render ``table`` and its nested tables under the ``name`` header."""

        lines.append(f"[{name}]")
        nested: list[tuple[str, Mapping[str, Any]]] = []
        for key, value in table.items():
            if isinstance(value, Mapping):
                nested.append((key, value))
                continue
            if value is None:
                continue
            lines.append(f"{key} = {self._format_toml_value(value)}")
        for key, value in nested:
            lines.append("")
            self._render_table(f"{name}.{key}", value, lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, Path):
            value = value.as_posix()
        if isinstance(value, str):
            escaped = value.replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        if isinstance(value, (list, tuple)):
            return "[" + ", ".join(self._format_toml_value(item) for item in value) + "]"
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            path: Explicit configuration file. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object, or defaults when no file exists.
        """
        config_file = path or default_config_path()

        if cls._instance is not None and cls._loaded_from == config_file:
            return cls._instance

        if config_file.exists():
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                logger.error("Failed to load configuration: %s", e)
                raise ConfigError(f"Invalid TOML in {config_file}: {e}") from e

            instance = cls.from_mapping(config_dict, root=config_file.parent.parent)
            logger.debug("Configuration loaded from %s", config_file)
        else:
            logger.debug("No configuration at %s, using defaults", config_file)
            instance = cls(root=config_file.parent.parent)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance


__all__ = ["BRAND_STRING_FIELDS", "BuildOptions", "Config", "MAX_WORKERS_DEFAULT", "validate_brand_table"]
