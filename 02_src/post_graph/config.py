"""Layout constants and their configuration sources."""

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Tuple

from dotenv import load_dotenv

from .errors import ConfigError

MAIN_BRANCH_ID = "main"
MAIN_BRANCH_COLOR = "#6b7280"

BRANCH_PALETTE: Tuple[str, ...] = (
    "#3b82f6",  # blue-500
    "#10b981",  # green-500
    "#f59e0b",  # amber-500
    "#ef4444",  # red-500
    "#8b5cf6",  # violet-500
    "#ec4899",  # pink-500
    "#06b6d4",  # cyan-500
    "#f97316",  # orange-500
)

ENV_PREFIX = "POST_GRAPH_"

_CAMEL_ALIASES = {
    "rowHeight": "row_height",
    "paddingTop": "padding_top",
    "paddingBottom": "padding_bottom",
    "mainX": "main_x",
    "branchSpacing": "branch_spacing",
    "labelWidth": "label_width",
    "mainColor": "main_color",
}

_NUMERIC_FIELDS = (
    "row_height",
    "padding_top",
    "padding_bottom",
    "main_x",
    "branch_spacing",
    "label_width",
)


@dataclass(frozen=True)
class LayoutConfig:
    """Pixel geometry of the graph.

    These values only move coordinates around; node and edge counts never
    depend on them.
    """

    row_height: float = 48
    padding_top: float = 24
    padding_bottom: float = 24
    main_x: float = 150
    branch_spacing: float = 80
    label_width: float = 100
    main_color: str = MAIN_BRANCH_COLOR
    palette: Tuple[str, ...] = BRANCH_PALETTE

    def __post_init__(self) -> None:
        object.__setattr__(self, "palette", tuple(self.palette))
        if self.row_height <= 0:
            raise ConfigError(f"row_height must be positive, got {self.row_height}")
        if not self.palette:
            raise ConfigError("palette must contain at least one color")

    def row_y(self, index: int) -> float:
        return self.padding_top + index * self.row_height

    def branch_color(self, rank: int) -> str:
        return self.palette[rank % len(self.palette)]

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "LayoutConfig":
        known = {item.name for item in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in values.items():
            name = _CAMEL_ALIASES.get(key, key)
            if name not in known:
                raise ConfigError(f"Unknown layout option: {key}")
            if name in _NUMERIC_FIELDS:
                value = _to_number(name, value)
            elif name == "palette":
                value = tuple(str(color) for color in value)
            kwargs[name] = value
        return cls(**kwargs)

    @classmethod
    def from_env(cls, base: "LayoutConfig | None" = None) -> "LayoutConfig":
        load_dotenv()
        config = base or cls()
        overrides: Dict[str, Any] = {}
        for name in _NUMERIC_FIELDS:
            raw = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None and raw.strip():
                overrides[name] = _to_number(name, raw)
        main_color = os.getenv(f"{ENV_PREFIX}MAIN_COLOR")
        if main_color:
            overrides["main_color"] = main_color
        return replace(config, **overrides) if overrides else config


def _to_number(name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ConfigError(f"Layout option {name} must be numeric, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as error:
        raise ConfigError(f"Layout option {name} must be numeric, got {value!r}") from error
    return int(number) if number.is_integer() else number
