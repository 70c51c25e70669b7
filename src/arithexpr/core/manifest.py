import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ConfigError
from .expression_lang.parser import DEFAULT_MAX_DEPTH

MANIFEST_NAME = "arithexpr.toml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ParserConfig:
    """Parser configuration."""

    allow_trailing_tokens: bool = True
    max_depth: int = DEFAULT_MAX_DEPTH


@dataclass
class EvaluatorConfig:
    """Evaluator configuration."""

    strict_division: bool = False  # Raise DivisionByZeroError instead of inf/nan


@dataclass
class OutputConfig:
    """What the CLI prints besides the result."""

    show_tokens: bool = False
    show_ast: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"

    @property
    def level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.level]


@dataclass
class ArithManifest:
    parser: ParserConfig = field(default_factory=ParserConfig)
    evaluator: EvaluatorConfig = field(default_factory=EvaluatorConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _get(table: dict[str, Any], section: str, key: str, kind: type, default: Any) -> Any:
    value = table.get(key, default)
    # bool is a subclass of int; keep them apart
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ConfigError(
            f"[{section}] {key} must be {kind.__name__}, got {type(value).__name__}"
        )
    return value


def load_manifest(path: Path) -> ArithManifest:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    parser_data = data.get("parser", {})
    evaluator_data = data.get("evaluator", {})
    output_data = data.get("output", {})
    logging_data = data.get("logging", {})

    max_depth = _get(parser_data, "parser", "max_depth", int, DEFAULT_MAX_DEPTH)
    if max_depth < 1:
        raise ConfigError(f"[parser] max_depth must be positive, got {max_depth}")

    parser_config = ParserConfig(
        allow_trailing_tokens=_get(parser_data, "parser", "allow_trailing_tokens", bool, True),
        max_depth=max_depth,
    )

    evaluator_config = EvaluatorConfig(
        strict_division=_get(evaluator_data, "evaluator", "strict_division", bool, False),
    )

    output_config = OutputConfig(
        show_tokens=_get(output_data, "output", "show_tokens", bool, False),
        show_ast=_get(output_data, "output", "show_ast", bool, False),
    )

    level = _get(logging_data, "logging", "level", str, "WARNING").upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"[logging] level must be one of {', '.join(_LOG_LEVELS)}, got {level!r}")

    return ArithManifest(
        parser=parser_config,
        evaluator=evaluator_config,
        output=output_config,
        logging=LoggingConfig(level=level),
    )


def find_manifest(start: Path | None = None) -> Path | None:
    """Return arithexpr.toml in ``start`` (default: cwd) if it exists."""
    candidate = (start or Path.cwd()) / MANIFEST_NAME
    if candidate.is_file():
        return candidate
    return None
