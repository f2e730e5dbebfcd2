# topmark:header:start
#
#   project      : Tailor
#   file         : model.py
#   file_relpath : src/tailor/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model: a mutable builder and an immutable runtime snapshot.

`MutableConfig` collects values from the runtime defaults and from TOML files
(``tailor.toml`` or ``[tool.tailor]`` in ``pyproject.toml``), merging layers with
*later wins* precedence. `MutableConfig.freeze` validates the result and
returns a frozen `Config` that serializers are built from.

Typical usage:

    config = MutableConfig.load_merged([Path("pyproject.toml")]).freeze()
    serializer = make_serializer(config.output_format, config)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from tailor.config.io import (
    get_bool_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from tailor.config.keys import Toml
from tailor.config.logging import get_logger
from tailor.constants import (
    DEFAULT_ITEM_KEY,
    DEFAULT_META_KEY,
    DEFAULT_ROOT_KEY,
    DEFAULT_SORT_KEYS,
    PYPROJECT_TOML_NAME,
    TAILOR_TOML_NAME,
)
from tailor.core.errors import ConfigError
from tailor.core.formats import OutputFormat, parse_output_format

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tailor.config.io import TomlTable
    from tailor.config.logging import TailorLogger

logger: TailorLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for Tailor.

    Attributes:
        output_format (OutputFormat): Default encoding used by `make_serializer`.
        xml_root_key (str): Name of the XML document element.
        xml_meta_key (str): Name of the element wrapping attached metadata.
        xml_item_key (str): Name of the element wrapping each sequence member.
        xml_sort_keys (bool): Whether mapping keys are emitted in case-insensitive
            alphabetical order (True) or insertion order (False).
        array_meta_key (str): Key holding attached metadata in flat/JSON output.
        null_default (Any): Default null value for scopes built from this config.
        config_files (tuple[Path, ...]): Files that contributed to this config.
    """

    output_format: OutputFormat
    xml_root_key: str
    xml_meta_key: str
    xml_item_key: str
    xml_sort_keys: bool
    array_meta_key: str
    null_default: Any
    config_files: tuple[Path, ...]

    def to_toml_dict(self) -> TomlTable:
        """Convert this Config into a TOML-serializable dict.

        Returns:
            TomlTable: The TOML-serializable dict. ``null_default`` is omitted
                when it is None.
        """
        scope_table: TomlTable = {}
        if self.null_default is not None:
            scope_table[Toml.KEY_NULL_DEFAULT] = self.null_default
        return {
            Toml.SECTION_OUTPUT: {Toml.KEY_FORMAT: self.output_format.value},
            Toml.SECTION_XML: {
                Toml.KEY_ROOT_KEY: self.xml_root_key,
                Toml.KEY_META_KEY: self.xml_meta_key,
                Toml.KEY_ITEM_KEY: self.xml_item_key,
                Toml.KEY_SORT_KEYS: self.xml_sort_keys,
            },
            Toml.SECTION_ARRAY: {Toml.KEY_META_KEY: self.array_meta_key},
            Toml.SECTION_SCOPE: scope_table,
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableConfig: A mutable builder initialized from this snapshot.
        """
        return MutableConfig(
            output_format=self.output_format,
            xml_root_key=self.xml_root_key,
            xml_meta_key=self.xml_meta_key,
            xml_item_key=self.xml_item_key,
            xml_sort_keys=self.xml_sort_keys,
            array_meta_key=self.array_meta_key,
            null_default=self.null_default,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used while loading and merging sources.

    ``None`` means *unset*: the value is inherited from lower layers during
    `merge_with` and falls back to the built-in default in `freeze`.
    """

    output_format: OutputFormat | None = None
    xml_root_key: str | None = None
    xml_meta_key: str | None = None
    xml_item_key: str | None = None
    xml_sort_keys: bool | None = None
    array_meta_key: str | None = None
    null_default: Any = None
    config_files: list[Path] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Validate this builder and freeze it into an immutable Config.

        Raises:
            ConfigError: If an element or meta key is configured as an empty string.
        """
        keys: dict[str, str] = {
            "xml.root_key": DEFAULT_ROOT_KEY if self.xml_root_key is None else self.xml_root_key,
            "xml.meta_key": DEFAULT_META_KEY if self.xml_meta_key is None else self.xml_meta_key,
            "xml.item_key": DEFAULT_ITEM_KEY if self.xml_item_key is None else self.xml_item_key,
            "array.meta_key": (
                DEFAULT_META_KEY if self.array_meta_key is None else self.array_meta_key
            ),
        }
        for name, value in keys.items():
            if not value.strip():
                raise ConfigError(f"Config invalid: `{name}` must be a non-empty string.")

        return Config(
            output_format=(
                OutputFormat.ARRAY if self.output_format is None else self.output_format
            ),
            xml_root_key=keys["xml.root_key"],
            xml_meta_key=keys["xml.meta_key"],
            xml_item_key=keys["xml.item_key"],
            xml_sort_keys=DEFAULT_SORT_KEYS if self.xml_sort_keys is None else self.xml_sort_keys,
            array_meta_key=keys["array.meta_key"],
            null_default=self.null_default,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Build a config from the runtime defaults.

        Returns:
            MutableConfig: A builder populated with default values.
        """
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Parse a TOML table (already unwrapped to plain dicts).

        Unknown sections and keys are ignored. An unknown output format is
        logged and left unset rather than raised, so a bad value in one layer
        does not mask the layers below it.

        Args:
            data (TomlTable): The Tailor TOML table.
            config_file (Path | None): Source file, recorded for provenance.

        Returns:
            MutableConfig: The parsed builder.
        """
        output_table: TomlTable = get_table_value(data, Toml.SECTION_OUTPUT)
        xml_table: TomlTable = get_table_value(data, Toml.SECTION_XML)
        array_table: TomlTable = get_table_value(data, Toml.SECTION_ARRAY)
        scope_table: TomlTable = get_table_value(data, Toml.SECTION_SCOPE)

        output_format: OutputFormat | None = None
        fmt_raw: str | None = get_string_value_or_none(output_table, Toml.KEY_FORMAT)
        if fmt_raw is not None:
            try:
                output_format = parse_output_format(fmt_raw)
            except ValueError as exc:
                logger.error("Ignoring [output].format in %s: %s", config_file or "<dict>", exc)

        draft = cls(
            output_format=output_format,
            xml_root_key=get_string_value_or_none(xml_table, Toml.KEY_ROOT_KEY),
            xml_meta_key=get_string_value_or_none(xml_table, Toml.KEY_META_KEY),
            xml_item_key=get_string_value_or_none(xml_table, Toml.KEY_ITEM_KEY),
            xml_sort_keys=get_bool_value_or_none(xml_table, Toml.KEY_SORT_KEYS),
            array_meta_key=get_string_value_or_none(array_table, Toml.KEY_META_KEY),
            null_default=scope_table.get(Toml.KEY_NULL_DEFAULT),
        )
        if config_file is not None:
            draft.config_files = [config_file]
        logger.trace("Parsed MutableConfig from %s: %s", config_file or "<dict>", draft)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports ``tailor.toml`` and ``pyproject.toml`` (``[tool.tailor]`` section).

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The parsed builder; None if a pyproject.toml
                has no ``[tool.tailor]`` section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)

        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_section: TomlTable = get_table_value(
                get_table_value(toml_data, Toml.SECTION_TOOL), Toml.SECTION_TOOL_TAILOR
            )
            if not tool_section:
                logger.debug("[tool.tailor] section missing in %s", path)
                return None
            toml_data = tool_section

        return cls.from_toml_dict(toml_data, config_file=path)

    @classmethod
    def load_merged(cls, paths: Iterable[Path] = ()) -> MutableConfig:
        """Merge the runtime defaults with each config file, in order.

        Later files take precedence over earlier ones. Missing files are skipped.

        Args:
            paths (Iterable[Path]): Config files to layer on top of the defaults.

        Returns:
            MutableConfig: The merged builder.
        """
        merged: MutableConfig = cls.from_defaults()
        for path in paths:
            if not path.is_file():
                logger.debug("Skipping missing config file: %s", path)
                continue
            layer: MutableConfig | None = cls.from_toml_file(path)
            if layer is not None:
                merged = merged.merge_with(layer)
        return merged

    @classmethod
    def from_directory(cls, directory: Path) -> MutableConfig:
        """Load the config files of a project directory over the defaults.

        ``tailor.toml`` takes precedence over ``[tool.tailor]`` in ``pyproject.toml``.

        Args:
            directory (Path): Directory holding the config files.

        Returns:
            MutableConfig: The merged builder.
        """
        return cls.load_merged([directory / PYPROJECT_TOML_NAME, directory / TAILOR_TOML_NAME])

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where set values of ``other`` override this one.

        Args:
            other (MutableConfig): The higher-precedence layer.

        Returns:
            MutableConfig: The merged builder (neither input is modified).
        """

        def _pick(mine: Any, theirs: Any) -> Any:
            return mine if theirs is None else theirs

        return MutableConfig(
            output_format=_pick(self.output_format, other.output_format),
            xml_root_key=_pick(self.xml_root_key, other.xml_root_key),
            xml_meta_key=_pick(self.xml_meta_key, other.xml_meta_key),
            xml_item_key=_pick(self.xml_item_key, other.xml_item_key),
            xml_sort_keys=_pick(self.xml_sort_keys, other.xml_sort_keys),
            array_meta_key=_pick(self.array_meta_key, other.array_meta_key),
            null_default=_pick(self.null_default, other.null_default),
            config_files=[*self.config_files, *other.config_files],
        )
