# topmark:header:start
#
#   project      : OptScan
#   file         : specs_file.py
#   file_relpath : src/optscan/config/specs_file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load option specs from a TOML file.

Two layouts are accepted:

```toml
# optscan.toml
[optscan]
specs = ["config:", "size:", "quiet"]
```

```toml
# pyproject.toml
[tool.optscan]
specs = ["config:", "size:", "quiet"]
```

Parsing is done with `tomlkit`. Non-string entries in ``specs`` are dropped
with a warning, which is also recorded on the returned `SpecsFile` so the CLI
can show it to the user.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from optscan.config.logging import get_logger
from optscan.constants import PYPROJECT_SPECS_TABLE, SPECS_KEY, SPECS_TABLE

if TYPE_CHECKING:
    from pathlib import Path

    from optscan.config.logging import OptscanLogger

logger: OptscanLogger = get_logger(__name__)


class SpecsFileError(Exception):
    """A spec definition file is missing, unreadable, or does not declare specs."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load option specs from {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass
class SpecsFile:
    """Spec strings loaded from a TOML file.

    Attributes:
        path (Path): File the specs were read from.
        table (str): Dotted name of the table holding the specs.
        specs (list[str]): Spec strings, in file order.
        warnings (list[str]): Problems found while reading ``specs``.
    """

    path: Path
    table: str
    specs: list[str] = field(default_factory=lambda: [])
    warnings: list[str] = field(default_factory=lambda: [])


def _find_table(data: dict[str, Any], dotted: str) -> dict[str, Any] | None:
    node: Any = data
    for part in dotted.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = cast("dict[str, Any]", node)[part]
    return cast("dict[str, Any]", node) if isinstance(node, dict) else None


def load_specs_file(path: Path) -> SpecsFile:
    """Load the option specs declared in ``path``.

    Args:
        path (Path): Standalone TOML file or ``pyproject.toml``.

    Returns:
        SpecsFile: The declared specs.

    Raises:
        SpecsFileError: If the file cannot be read or parsed, or declares no
            ``[optscan]`` / ``[tool.optscan]`` table.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise SpecsFileError(path, str(e)) from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise SpecsFileError(path, str(e)) from e

    data = cast("dict[str, Any]", doc.unwrap())
    for dotted in (SPECS_TABLE, PYPROJECT_SPECS_TABLE):
        table = _find_table(data, dotted)
        if table is not None:
            break
    else:
        raise SpecsFileError(path, f"no [{SPECS_TABLE}] or [{PYPROJECT_SPECS_TABLE}] table")

    result = SpecsFile(path=path, table=dotted)
    loc = f"[{dotted}].{SPECS_KEY}"
    value: Any = table.get(SPECS_KEY)
    if value is None:
        result.warnings.append(f"No {loc} declared")
    elif not isinstance(value, list):
        result.warnings.append(f"Expected list in {loc}, got {type(value).__name__}: {value!r}")
    else:
        for v in cast("list[Any]", value):
            if isinstance(v, str):
                result.specs.append(v)
            else:
                result.warnings.append(f"Ignoring non-string entry in {loc}: {v!r}")

    for w in result.warnings:
        logger.warning("%s (%s)", w, path)
    logger.debug("Loaded %d spec(s) from %s %s", len(result.specs), path, loc)
    return result
