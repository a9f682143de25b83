"""Loading ``dummyfiles.yaml``.

Files are looked up in order: an explicit ``--config`` path, then
``./dummyfiles.yaml``, then ``~/.dummyfiles/config.yaml``. The first file with
any content wins; nothing is merged. ``${VAR}`` references in string values
are replaced from the environment before validation.
"""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import DummyFilesConfig

CONFIG_FILENAME = "dummyfiles.yaml"

_ENV_REF = re.compile(r"\$\{(\w+)\}")


def candidate_paths(cli_path: str | None = None) -> list[Path]:
    """Config files to try, most specific first."""
    paths = [Path(CONFIG_FILENAME), Path.home() / ".dummyfiles" / "config.yaml"]
    if cli_path:
        paths.insert(0, Path(cli_path))
    return paths


def _read_mapping(path: Path) -> dict | None:
    """Parsed top-level mapping of *path*, or None for an empty file."""
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping")
    return raw


def load_config(cli_path: str | None = None) -> DummyFilesConfig:
    """Resolve and validate the configuration.

    Raises ValueError naming the file when an explicit *cli_path* is missing,
    or when the chosen file is not valid YAML, is not a mapping, or holds
    unknown keys or bad values.
    """
    if cli_path and not Path(cli_path).is_file():
        raise ValueError(f"Config file not found: {cli_path}")

    for path in candidate_paths(cli_path):
        if not path.is_file():
            continue
        raw = _read_mapping(path)
        if raw is None:
            continue
        try:
            return DummyFilesConfig(**_expand_env_vars(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e

    return DummyFilesConfig()


def _expand_env_vars(obj: object) -> object:
    """Replace ${VAR} in every string of a parsed YAML document; unset vars become ""."""
    if isinstance(obj, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), ""), obj)
    if isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `dummyfiles config init`
DEFAULT_CONFIG_TEMPLATE = """\
# dummyfiles.yaml

# Marker files
marker:
  encoding: "latin-1"          # any single-byte codec
  ignore_prefix: "content"     # legacy files starting with this are skipped

# Flattening
flatten:
  basename: "dummy"
  start_index: 100

# Reports (defaults to <tmpdir>/dummy-report.html)
# report:
#   html_path: "/tmp/dummy-report.html"

# Logging
log_level: "info"              # debug | info | warn | error
"""
