"""
setcalc Configuration

Settings for the setcalc command line tool, read from the [setcalc] table of
a TOML file:

    [setcalc]
    element_type = "int"      # "str" (default) or "int"
    comment_prefix = "#"      # lines starting with this are skipped
    strip = true              # strip surrounding whitespace from each line
    trace_level = 0           # diagnostics verbosity

Command line flags override values from the file.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional

from hashset.errors import ConfigError, InputError

# TOML parsing - use stdlib tomllib in 3.11+, fallback to tomli
try:
    import tomllib
except ImportError:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None


ELEMENT_TYPES = ("str", "int")


@dataclass
class SetCalcConfig:
    """Configuration for reading element files and reporting"""
    element_type: str = "str"
    comment_prefix: str = "#"
    strip: bool = True
    trace_level: int = 0

    def __post_init__(self):
        if self.element_type not in ELEMENT_TYPES:
            raise ConfigError(
                f"element_type must be one of {', '.join(ELEMENT_TYPES)}, got {self.element_type!r}"
            )
        if not isinstance(self.trace_level, int) or isinstance(self.trace_level, bool) \
                or self.trace_level < 0:
            raise ConfigError(f"trace_level must be a non-negative integer, got {self.trace_level!r}")
        if not isinstance(self.comment_prefix, str):
            raise ConfigError(f"comment_prefix must be a string, got {self.comment_prefix!r}")
        if not isinstance(self.strip, bool):
            raise ConfigError(f"strip must be a boolean, got {self.strip!r}")


def config_from_dict(data: Dict[str, Any]) -> SetCalcConfig:
    """Build a config from a parsed [setcalc] table"""
    known = {f.name for f in fields(SetCalcConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown setcalc option(s): {', '.join(unknown)}")
    return SetCalcConfig(**data)


def load_config(path: Optional[str]) -> SetCalcConfig:
    """Load config from a TOML file, or defaults when path is None"""
    if path is None:
        return SetCalcConfig()

    if tomllib is None:
        raise ConfigError(
            "TOML parsing not available.\n"
            "Install with: pip install tomli"
        )

    try:
        with open(path, 'rb') as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}")
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Failed to parse {path}: {e}")
    except UnicodeDecodeError as e:
        raise ConfigError(f"{path} is not valid UTF-8: {e}")

    table = data.get("setcalc", {})
    if not isinstance(table, dict):
        raise ConfigError(f"[setcalc] in {path} must be a table")
    return config_from_dict(table)


def parse_element(text: str, config: SetCalcConfig):
    """Convert one raw line into an element according to element_type"""
    if config.element_type == "int":
        try:
            return int(text)
        except ValueError:
            raise InputError(f"Not an integer: {text!r}")
    return text


def parse_lines(lines: List[str], config: SetCalcConfig) -> list:
    """Parse element lines, skipping blanks and comments"""
    elements = []
    for line in lines:
        line = line.rstrip("\n")
        if config.strip:
            line = line.strip()
        if not line.strip():
            continue
        if config.comment_prefix and line.lstrip().startswith(config.comment_prefix):
            continue
        elements.append(parse_element(line, config))
    return elements
