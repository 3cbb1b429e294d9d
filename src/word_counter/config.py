from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml

ROUNDING_MODES = ("half_even", "half_up")


@dataclass(slots=True)
class ChartSettings:
    """Configuration block for the words / chars / sentences bar chart."""

    max_height: int = 40
    min_height: int = 2
    fill: str = "#"


@dataclass(slots=True)
class WordCounterConfig:
    """Display and input options for the word counter host."""

    score_decimals: int = 2
    rounding: str = "half_even"
    show_chart: bool = True
    input_extensions: List[str] = field(default_factory=lambda: [".txt"])
    chart: ChartSettings = field(default_factory=ChartSettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(WordCounterConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "chart" in data:
        chart_value = data["chart"]
        if isinstance(chart_value, ChartSettings):
            kwargs["chart"] = chart_value
        elif isinstance(chart_value, Mapping):
            kwargs["chart"] = _build_chart_settings(chart_value)
        else:
            kwargs.pop("chart")
    if "input_extensions" in kwargs:
        kwargs["input_extensions"] = _normalize_extensions(kwargs["input_extensions"])
    return kwargs


def _normalize_extensions(value: Any) -> List[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        raise ValueError("input_extensions must be a string or a list of strings.")
    extensions: List[str] = []
    for ext in value:
        if not isinstance(ext, str) or not ext.strip("."):
            raise ValueError(f"Invalid input extension {ext!r}.")
        ext = ext.lower()
        extensions.append(ext if ext.startswith(".") else f".{ext}")
    return extensions


def _build_chart_settings(data: Mapping[str, Any]) -> ChartSettings:
    chart_allowed = {field.name for field in fields(ChartSettings)}
    filtered = {key: data[key] for key in data if key in chart_allowed}
    return ChartSettings(**filtered)


def _require_non_negative_int(name: str, value: Any) -> None:
    # bool is an int subclass; "true" is not a height.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}.")
    if value < 0:
        raise ValueError(f"{name} must be non-negative.")


def _validate(config: WordCounterConfig) -> WordCounterConfig:
    if not isinstance(config.rounding, str) or config.rounding not in ROUNDING_MODES:
        raise ValueError(
            f"Unknown rounding mode {config.rounding!r}; "
            f"expected one of {', '.join(ROUNDING_MODES)}."
        )
    if not isinstance(config.show_chart, bool):
        raise ValueError(f"show_chart must be true or false, got {config.show_chart!r}.")
    _require_non_negative_int("score_decimals", config.score_decimals)
    _require_non_negative_int("chart.max_height", config.chart.max_height)
    _require_non_negative_int("chart.min_height", config.chart.min_height)
    if not isinstance(config.chart.fill, str) or len(config.chart.fill) != 1:
        raise ValueError("Chart fill must be a single character.")
    return config


def config_from_dict(data: Mapping[str, Any] | None) -> WordCounterConfig:
    """Build a WordCounterConfig from a dictionary-like input."""
    if data is None:
        return WordCounterConfig()
    return _validate(WordCounterConfig(**_build_kwargs(data)))


def config_from_yaml(path: str | Path) -> WordCounterConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> WordCounterConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return WordCounterConfig()
    return config_from_yaml(path)
