"""Configuration system with minimal YAML parser.

Supports loading configuration from YAML files in the configs/ directory.
Uses a minimal YAML parser (no external dependencies) supporting:
- Scalars (strings, numbers, booleans, null)
- Nested dictionaries (key: value syntax, indentation for nesting)
- Comments (# ...)
- Quoted strings (single and double)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib.resources import as_file, files
from pathlib import Path

from debug_console.constants import DEFAULT_PROMPT, is_printable

# --- Minimal YAML Parser ---


def parse_simple_yaml(text: str) -> dict:
    """Parse a simple YAML mapping document into a Python dict."""
    lines = [ln for ln in text.split("\n") if ln.strip() and not ln.lstrip().startswith("#")]
    result, _ = _parse_mapping(lines, 0, 0)
    return result


def _indent_of(line: str) -> int:
    return len(line) - len(line.lstrip())


def _parse_mapping(lines: list[str], start: int, indent: int) -> tuple[dict, int]:
    """Parse consecutive ``key: value`` lines at ``indent`` starting at ``start``."""
    result: dict = {}
    i = start
    while i < len(lines):
        line = lines[i]
        line_indent = _indent_of(line)
        if line_indent < indent:
            break
        if line_indent > indent:
            # Stray over-indented line with no owning key
            i += 1
            continue
        stripped = line.strip()
        colon = _find_unquoted_colon(stripped)
        if colon <= 0:
            i += 1
            continue
        key = stripped[:colon].strip()
        value = _remove_inline_comment(stripped[colon + 1 :].strip())
        i += 1
        if value:
            result[key] = _parse_value(value)
        elif i < len(lines) and _indent_of(lines[i]) > indent:
            result[key], i = _parse_mapping(lines, i, _indent_of(lines[i]))
        else:
            result[key] = None
    return result, i


def _find_unquoted_colon(s: str) -> int:
    """Find the position of the first colon not inside quotes."""
    quote = None
    for i, c in enumerate(s):
        if quote:
            if c == quote:
                quote = None
        elif c in ("'", '"'):
            quote = c
        elif c == ":":
            return i
    return -1


def _remove_inline_comment(s: str) -> str:
    """Strip a trailing ``# comment`` that is preceded by a space and not quoted."""
    quote = None
    for i, c in enumerate(s):
        if quote:
            if c == quote:
                quote = None
        elif c in ("'", '"'):
            quote = c
        elif c == "#" and i > 0 and s[i - 1] == " ":
            return s[:i].rstrip()
    return s


_ESCAPES = {"n": "\n", "t": "\t", "\\": "\\", '"': '"'}


def _parse_value(s: str) -> str | int | float | bool | None:
    """Parse a scalar YAML value."""
    s = s.strip()
    if not s or s.lower() in ("null", "~"):
        return None
    if s.lower() in ("true", "yes", "on"):
        return True
    if s.lower() in ("false", "no", "off"):
        return False
    if len(s) >= 2 and s[0] == s[-1] == '"':
        out = []
        body = iter(s[1:-1])
        for c in body:
            if c == "\\":
                nxt = next(body, "")
                out.append(_ESCAPES.get(nxt, "\\" + nxt))
            else:
                out.append(c)
        return "".join(out)
    if len(s) >= 2 and s[0] == s[-1] == "'":
        return s[1:-1].replace("''", "'")
    try:
        if "." in s:
            return float(s)
        return int(s)
    except ValueError:
        return s


# --- Configuration Dataclasses ---


@dataclass
class EditorConfig:
    """Line editor settings."""

    prompt: str = DEFAULT_PROMPT


@dataclass
class EvaluatorConfig:
    """Which built-in evaluator answers committed lines."""

    name: str = "echo"


@dataclass
class DebugConfig:
    """Debug log file names (written when --debug is given)."""

    key_log: str = "console_keys.log"
    session_log: str = "console_session.log"


@dataclass
class Config:
    """Complete application configuration."""

    editor: EditorConfig = field(default_factory=EditorConfig)
    evaluator: EvaluatorConfig = field(default_factory=EvaluatorConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)


# --- Config Loading ---


def _get_user_data_dir() -> Path:
    """Get the user's debug-console data directory ($HOME/.debug-console)."""
    return Path.home() / ".debug-console"


def _is_path(name: str) -> bool:
    return "/" in name or "\\" in name or name.endswith(".yml")


def _find_config_file(config_name_or_path: str) -> Path | None:
    """Find a config file by name or path.

    Search order:
    1. If it looks like a path (contains / or \\ or ends in .yml), treat as path
    2. $HOME/.debug-console/configs/<name>.yml
    3. Current working directory configs/<name>.yml
    4. Bundled package configs/<name>.yml
    """
    if _is_path(config_name_or_path):
        path = Path(config_name_or_path).expanduser()
        return path if path.is_file() else None

    config_filename = f"{config_name_or_path}.yml"

    user_config = _get_user_data_dir() / "configs" / config_filename
    if user_config.is_file():
        return user_config

    cwd_config = Path.cwd() / "configs" / config_filename
    if cwd_config.is_file():
        return cwd_config

    try:
        config_ref = files("debug_console").joinpath("configs").joinpath(config_filename)
        with as_file(config_ref) as p:
            if p.is_file():
                return Path(p)
    except (ModuleNotFoundError, FileNotFoundError, TypeError):
        pass

    return None


def _get_config_search_paths(config_name: str) -> list[str]:
    """Get list of paths that would be searched for a config name."""
    config_filename = f"{config_name}.yml"
    return [
        str(_get_user_data_dir() / "configs" / config_filename),
        str(Path.cwd() / "configs" / config_filename),
        f"debug_console/configs/{config_filename} (bundled)",
    ]


def load_config(config_name_or_path: str | None = None) -> Config:
    """Load configuration from a YAML file.

    Args:
        config_name_or_path: Name of config file (without .yml extension),
                            or path to a config file. If None or empty, uses 'default'.

    Returns:
        Config object with loaded values merged over defaults.

    Raises:
        FileNotFoundError: If a non-default config is specified but not found.
        ValueError: If the file sets an unusable prompt.
    """
    if not config_name_or_path:
        config_name_or_path = "default"

    config_path = _find_config_file(config_name_or_path)
    config = Config()

    if config_path is None and config_name_or_path != "default":
        if _is_path(config_name_or_path):
            raise FileNotFoundError(f"Config file not found: {config_name_or_path}")
        paths_str = "\n  - ".join(_get_config_search_paths(config_name_or_path))
        raise FileNotFoundError(
            f"Config '{config_name_or_path}' not found. Searched:\n  - {paths_str}"
        )

    if config_path is not None:
        with open(config_path, encoding="utf-8") as f:
            _merge_config(config, parse_simple_yaml(f.read()))

    return config


def _merge_config(config: Config, data: dict):
    """Merge parsed YAML data into a Config object."""
    if not isinstance(data, dict):
        return

    if isinstance(data.get("editor"), dict):
        ed = data["editor"]
        if "prompt" in ed:
            config.editor.prompt = validate_prompt(ed["prompt"])

    if isinstance(data.get("evaluator"), dict):
        ev = data["evaluator"]
        if ev.get("name"):
            config.evaluator.name = str(ev["name"])

    if isinstance(data.get("debug"), dict):
        dbg = data["debug"]
        if dbg.get("key_log"):
            config.debug.key_log = str(dbg["key_log"])
        if dbg.get("session_log"):
            config.debug.session_log = str(dbg["session_log"])


def validate_prompt(value) -> str:
    """Return ``value`` as a prompt string, or raise ValueError."""
    if value is None:
        raise ValueError("prompt must not be empty")
    prompt = str(value)
    if not prompt or not is_printable(prompt):
        raise ValueError(f"prompt must be printable ASCII, got {prompt!r}")
    return prompt


def get_default_config() -> Config:
    """Return a Config with all default values."""
    return Config()
