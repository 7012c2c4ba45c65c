"""
Response cache for starred-repos.

Stores the raw API response body per user, one flat file each:

    <directory>/<username>

Writes are atomic (write to temp, then rename). Cache failures are
logged and never fatal; a broken cache only costs a refetch.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_CACHE_DIR = "cache"


class CacheStore:
    """
    Flat-file cache of raw API responses keyed by user name.

    Example:
        cache = CacheStore(Path("cache"))
        cache.write("octocat", body)
        body = cache.read("octocat")
    """

    def __init__(self, directory: Union[str, Path] = DEFAULT_CACHE_DIR):
        """
        Initialize CacheStore.

        Args:
            directory: Cache directory; created lazily on first write
        """
        self.directory = Path(directory).expanduser()

    def path_for(self, user: str) -> Path:
        """Path of the cache file for a user."""
        return self.directory / user

    def _write_atomic(self, path: Path, body: str) -> None:
        """Write text atomically using temp file and rename."""
        fd, temp_path = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp"
        )

        try:
            # newline='' keeps the body byte-identical on every platform
            with os.fdopen(fd, 'w', encoding='utf-8', newline='') as f:
                f.write(body)

            os.replace(temp_path, path)

        except Exception:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise

    def write(self, user: str, body: str) -> bool:
        """
        Cache a response body.

        Args:
            user: User name the body belongs to
            body: Raw response text

        Returns:
            True if the body was written
        """
        path = self.path_for(user)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            self._write_atomic(path, body)
        except OSError as e:
            logger.error(f"Error writing to cache {path}: {e}")
            return False

        logger.debug(f"Cached response for {user} at {path}")
        return True

    def read(self, user: str) -> Optional[str]:
        """
        Read a cached response body.

        Args:
            user: User name to look up

        Returns:
            Cached body, or None if nothing usable is cached
        """
        path = self.path_for(user)
        try:
            with open(path, 'r', encoding='utf-8', newline='') as f:
                return f.read()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Ignoring unreadable cache file {path}: {e}")
            return None

    def has(self, user: str) -> bool:
        """Check if a response is cached for a user."""
        return self.path_for(user).is_file()

    def users(self) -> List[str]:
        """Names of all cached users."""
        if not self.directory.is_dir():
            return []
        return sorted(
            p.name for p in self.directory.iterdir()
            if p.is_file() and not p.name.startswith('.')
        )

    def clear(self) -> bool:
        """
        Remove the whole cache directory.

        Returns:
            True if a cache directory was removed
        """
        try:
            shutil.rmtree(self.directory)
        except FileNotFoundError:
            logger.info(f"Cache directory {self.directory} does not exist, nothing to clear")
            return False
        except OSError as e:
            logger.error(f"Failed clearing cache {self.directory}: {e}")
            return False

        logger.info(f"Cleared cache {self.directory}")
        return True

    def __contains__(self, user: str) -> bool:
        return self.has(user)
