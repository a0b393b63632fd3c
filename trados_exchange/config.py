from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Defaults


@dataclass(frozen=True, slots=True)
class ExchangeConfig:
    snapshot_path: Path = field(default_factory=lambda: Path(Defaults.SNAPSHOT_FILE))
    language_dimension: str = Defaults.LANGUAGE_DIMENSION
    workspace: str = Defaults.WORKSPACE
    document_node_type: str = Defaults.DOCUMENT_NODE_TYPE
    indent: int = Defaults.INDENT

    def __post_init__(self) -> None:
        if not self.language_dimension.strip():
            raise ValueError("language_dimension must not be empty")
        if not self.workspace.strip():
            raise ValueError("workspace must not be empty")
        if not self.document_node_type.strip():
            raise ValueError("document_node_type must not be empty")
        if self.indent < 0:
            raise ValueError(f"indent must not be negative, got {self.indent}")

    @classmethod
    def from_env(cls) -> ExchangeConfig:
        return cls(
            snapshot_path=Path(os.getenv("TRADOS_SNAPSHOT", Defaults.SNAPSHOT_FILE)),
            language_dimension=os.getenv(
                "TRADOS_LANGUAGE_DIMENSION", Defaults.LANGUAGE_DIMENSION
            ),
            workspace=os.getenv("TRADOS_WORKSPACE", Defaults.WORKSPACE),
            document_node_type=os.getenv(
                "TRADOS_DOCUMENT_NODE_TYPE", Defaults.DOCUMENT_NODE_TYPE
            ),
            indent=int(os.getenv("TRADOS_INDENT", str(Defaults.INDENT))),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> ExchangeConfig:
        config = ExchangeConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: ExchangeConfig
    ) -> ExchangeConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        content = _get_table(data, "content")
        export = _get_table(data, "export")
        snapshot_path = base_config.snapshot_path
        if value := content.get("snapshot"):
            snapshot_path = Path(str(value))
            if not snapshot_path.is_absolute():
                snapshot_path = config_file.parent / snapshot_path
        language_dimension = base_config.language_dimension
        if value := content.get("language_dimension"):
            language_dimension = str(value)
        document_node_type = base_config.document_node_type
        if value := content.get("document_node_type"):
            document_node_type = str(value)
        workspace = base_config.workspace
        if value := export.get("workspace"):
            workspace = str(value)
        indent = base_config.indent
        if (value := export.get("indent")) is not None:
            indent = _coerce_int(value, key="export.indent")
        return ExchangeConfig(
            snapshot_path=snapshot_path,
            language_dimension=language_dimension,
            workspace=workspace,
            document_node_type=document_node_type,
            indent=indent,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        return int(value)
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")
