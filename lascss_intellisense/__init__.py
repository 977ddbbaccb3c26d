"""
Editor intelligence for the LASCSS utility-first CSS framework.

LASCSS ships two generated stylesheets: ``meta.min.css``, which encodes the
design tokens (colors, shades, breakpoints, variants) as custom
properties, and ``utility.min.css``, which holds the compiled utility
classes.  This package turns those two artefacts into a completion
catalog and serves it to editors.

The code is organised into several modules:

* ``core`` – the generation engine.  It parses both stylesheets into flat
  tables, classifies the token keys, resolves ``var(--x, fallback)``
  indirection, synthesises missing shades by mixing toward white or
  black and expands everything into the full ``utility-color-shade``
  surface, including every ``variant:`` prefixed form.
* ``catalog`` – locates the ``node_modules/lascss`` installation for a
  document, merges the generated catalog with the literal utility
  declarations and memoises the result per installation.
* ``lsp`` – a pygls language server offering completion and hover.
* ``cli`` – a command line interface to start the server or dump the
  catalog as JSON.
"""

import re
from pathlib import Path
from importlib import metadata as _metadata


def _local_version() -> str | None:
  root = Path(__file__).resolve().parents[1]
  pyproject = root / "pyproject.toml"
  if not pyproject.exists():
    return None
  try:
    text = pyproject.read_text(encoding="utf-8")
  except OSError:  # pragma: no cover - IO errors should not break imports
    return None
  match = re.search(r"^version\s*=\s*\"([^\"]+)\"", text, flags=re.MULTILINE)
  if match:
    return match.group(1)
  return None


try:  # pragma: no cover - metadata fallback for editable installs
    __version__ = _metadata.version("lascss-intellisense")
except _metadata.PackageNotFoundError:  # pragma: no cover - source tree
  __version__ = _local_version() or "0.1.0"

__all__ = ["__version__"]
