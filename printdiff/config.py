# printdiff/config.py
"""Rendering configuration.

DiffConfig is an immutable value passed explicitly to every renderer.
Overrides coming from users (environment variables, command line flags,
option dicts) are validated one by one: an invalid value is logged and
skipped so the previous value stays in effect. Configuration parsing
never fails a render.
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

# Environment variable prefix for overrides
ENV_PREFIX = "PRINTDIFF_"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class DiffConfig:
    """Options for one diff render.

    Attributes:
        wrap_width: Display width budget, in columns.
        max_chunks: Ceiling on rows emitted for the whole render.
        max_chunks_per_line: Ceiling on rows emitted for one changed line.
        max_columns: Characters shown per highlighted span before "...".
        context_lines: Unchanged lines shown around each change.
        context_columns: Unchanged characters shown around each span.
        colors: Emit ANSI styling (True) or plain text (False).
        show_gaps: Emit a "..." row where unchanged lines were skipped.
        merge_distance: Largest column gap across which two spans share one
            display entry. None means 2 * context_columns.
        indent: Spaces prepended to wrapped continuation rows.
    """
    wrap_width: int = 80
    max_chunks: int = 200
    max_chunks_per_line: int = 20
    max_columns: int = 50
    context_lines: int = 3
    context_columns: int = 25
    colors: bool = True
    show_gaps: bool = False
    merge_distance: Optional[int] = None
    indent: int = 4

    @property
    def span_merge_distance(self) -> int:
        if self.merge_distance is None:
            return 2 * self.context_columns
        return self.merge_distance

    def with_overrides(
        self, options: Optional[Mapping[str, Any]] = None, **kwargs: Any
    ) -> "DiffConfig":
        """Return a copy with the valid overrides applied.

        Accepts snake_case names and their camelCase spellings
        (``maxChunks``). Unknown names and invalid values are logged at
        warning level and ignored.
        """
        merged: Dict[str, Any] = dict(options or {})
        merged.update(kwargs)

        changes: Dict[str, Any] = {}
        for key, raw in merged.items():
            name = _ALIASES.get(key, key)
            if name not in _OPTIONS:
                logger.warning("Ignoring unknown diff option: %s", key)
                continue
            ok, value = _OPTIONS[name](raw)
            if not ok:
                logger.warning(
                    "Ignoring invalid value for %s: %r (keeping %r)",
                    key, raw, changes.get(name, getattr(self, name)),
                )
                continue
            changes[name] = value

        if not changes:
            return self
        return replace(self, **changes)

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        base: Optional["DiffConfig"] = None,
    ) -> "DiffConfig":
        """Build a config from PRINTDIFF_* environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ).
            base: Config supplying the values that are not overridden.

        Returns:
            New DiffConfig.
        """
        if environ is None:
            environ = os.environ
        config = base if base is not None else cls()

        overrides: Dict[str, Any] = {}
        for name in _OPTIONS:
            env_name = ENV_PREFIX + name.upper()
            if env_name in environ:
                overrides[name] = environ[env_name]

        # https://no-color.org: any value disables color
        if "NO_COLOR" in environ and "colors" not in overrides:
            overrides["colors"] = False

        return config.with_overrides(overrides)


def default_config(environ: Optional[Mapping[str, str]] = None) -> DiffConfig:
    """Config for the current process: detected terminal, then env overrides."""
    from .terminal import detect

    caps = detect()
    base = DiffConfig(wrap_width=caps["width"], colors=caps["colors"])
    return DiffConfig.from_env(environ, base=base)


# ==================== Value parsing ====================

def _parse_int(value: Any, minimum: int) -> Tuple[bool, Optional[int]]:
    if isinstance(value, bool):
        return False, None
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and value.strip().isdecimal():
        number = int(value.strip())
    else:
        return False, None
    if number < minimum:
        return False, None
    return True, number


def _parse_bool(value: Any) -> Tuple[bool, Optional[bool]]:
    if isinstance(value, bool):
        return True, value
    if isinstance(value, int) and value in (0, 1):
        return True, bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True, True
        if lowered in _FALSE_VALUES:
            return True, False
    return False, None


def _parse_optional_int(value: Any) -> Tuple[bool, Optional[int]]:
    if value is None:
        return True, None
    return _parse_int(value, 0)


_OPTIONS = {
    "wrap_width": lambda v: _parse_int(v, 1),
    "max_chunks": lambda v: _parse_int(v, 0),
    "max_chunks_per_line": lambda v: _parse_int(v, 0),
    "max_columns": lambda v: _parse_int(v, 1),
    "context_lines": lambda v: _parse_int(v, 0),
    "context_columns": lambda v: _parse_int(v, 0),
    "colors": _parse_bool,
    "show_gaps": _parse_bool,
    "merge_distance": _parse_optional_int,
    "indent": lambda v: _parse_int(v, 0),
}

_ALIASES = {
    "wrapWidth": "wrap_width",
    "maxChunks": "max_chunks",
    "maxChunksPerLine": "max_chunks_per_line",
    "maxColumns": "max_columns",
    "contextLines": "context_lines",
    "contextColumns": "context_columns",
    "showGaps": "show_gaps",
    "mergeDistance": "merge_distance",
}
