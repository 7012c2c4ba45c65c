"""
Export service for starred-repos.

Writes the fetched repo list, in fetch order, to JSON or TOML files:
- JSON: a top-level array of repository objects
- TOML: a `repos` array of tables (TOML has no top-level arrays)

Both use the API field names, so an export reads back with the same
decoder as a response body. Exports are best effort: failures are
logged and reported through the return value.
"""

import json
import logging
import tomllib
from pathlib import Path
from typing import List, Union

import toml

from ..domain.repo import Repo
from ..exit_codes import DeserializationError

logger = logging.getLogger(__name__)

TOML_TABLE = "repos"


def _dump_basic_string(value: str) -> str:
    # JSON string escapes are a subset of TOML basic-string escapes;
    # DEL is the one control character json leaves raw.
    return json.dumps(value, ensure_ascii=False).replace('\x7f', '\\u007f')


class _ExportTomlEncoder(toml.TomlEncoder):
    """TomlEncoder whose strings read back unchanged, control characters included."""

    def __init__(self, _dict=dict, preserve=False):
        super().__init__(_dict, preserve)
        self.dump_funcs[str] = _dump_basic_string


def _write_text(path: Path, text: str) -> bool:
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
    except OSError as e:
        logger.error(f"Writing to {path} failed with {e}")
        return False
    return True


def export_json(repos: List[Repo], path: Union[str, Path]) -> bool:
    """
    Export repos as a JSON array.

    Args:
        repos: Repos to export, written in the given order
        path: Output file

    Returns:
        True if the file was written
    """
    path = Path(path)
    try:
        text = json.dumps([repo.to_dict() for repo in repos], indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        logger.error(f"Failed serializing json with {e}")
        return False

    if not _write_text(path, text + '\n'):
        return False

    logger.info(f"Exported {len(repos)} repositories to {path}")
    return True


def export_toml(repos: List[Repo], path: Union[str, Path]) -> bool:
    """
    Export repos as a TOML document with a `repos` array of tables.

    Args:
        repos: Repos to export, written in the given order
        path: Output file

    Returns:
        True if the file was written
    """
    path = Path(path)
    data = {TOML_TABLE: [repo.to_dict() for repo in repos]}
    try:
        text = toml.dumps(data, encoder=_ExportTomlEncoder())
        if tomllib.loads(text) != data:
            raise ValueError("serialized document does not read back unchanged")
    except (TypeError, ValueError) as e:
        logger.error(f"Failed serializing toml with {e}")
        return False

    if not _write_text(path, text):
        return False

    logger.info(f"Exported {len(repos)} repositories to {path}")
    return True


def load_json(path: Union[str, Path]) -> List[Repo]:
    """
    Read a JSON export back into repos.

    Raises:
        DeserializationError: If the file is not a valid export
        OSError: If the file cannot be read
    """
    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise DeserializationError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, list):
        raise DeserializationError(f"Expected a JSON array in {path}")
    return [Repo.from_api_response(item) for item in data]


def load_toml(path: Union[str, Path]) -> List[Repo]:
    """
    Read a TOML export back into repos.

    A document without a `repos` table holds no repos.

    Raises:
        DeserializationError: If the file is not a valid export
        OSError: If the file cannot be read
    """
    with open(path, 'rb') as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise DeserializationError(f"Invalid TOML in {path}: {e}") from e

    items = data.get(TOML_TABLE, [])
    if not isinstance(items, list):
        raise DeserializationError(f"Expected [[{TOML_TABLE}]] tables in {path}")
    return [Repo.from_api_response(item) for item in items]
