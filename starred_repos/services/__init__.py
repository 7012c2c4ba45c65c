"""
Service layer for starred-repos.
"""

from .repo_service import RepoService
from .export_service import export_json, export_toml, load_json, load_toml

__all__ = [
    'RepoService',
    'export_json',
    'export_toml',
    'load_json',
    'load_toml',
]
