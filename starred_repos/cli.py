#!/usr/bin/env python3

import sys

import click

from starred_repos.config import (
    DEBUG_LOG_FORMAT,
    load_config,
    resolve_token,
    setup_logging,
)
from starred_repos.exit_codes import (
    CommandError,
    PARTIAL_SUCCESS,
    USAGE_ERROR,
)
from starred_repos.infra import CacheStore, GitHubClient
from starred_repos.render import list_repos
from starred_repos.services import RepoService, export_json, export_toml


def build_client(config, token):
    """Create the GitHub client described by the config."""
    github = config["github"]
    return GitHubClient(
        token=token,
        api_url=github["api_url"],
        per_page=github["per_page"],
        user_agent=github["user_agent"],
        timeout=github["timeout_seconds"],
    )


@click.command()
@click.version_option(package_name='starred-repos')
@click.option('-u', '--user', help='Which user to get the starred repos from')
@click.option('-c', '--clear-cache', is_flag=True, help='Clears cache')
@click.option('-j', '--json', 'json_path', type=click.Path(dir_okay=False),
              help='Write the repos to a JSON file instead of the terminal (exit 71 if it cannot be written)')
@click.option('-t', '--toml', 'toml_path', type=click.Path(dir_okay=False),
              help='Write the repos to a TOML file instead of the terminal (exit 71 if it cannot be written)')
@click.option('--cache-dir', type=click.Path(file_okay=False),
              help='Cache directory (default from config, "cache")')
@click.option('--debug', is_flag=True, help='Enable debug logging')
def cli(user, clear_cache, json_path, toml_path, cache_dir, debug):
    """starred-repos - List a GitHub user's starred repositories.

    Responses are cached per user under the cache directory; use
    --clear-cache to force a fresh request. The access token is read
    from the config file or the GITHUB_ACCESS environment variable.
    An export that cannot be written is logged and the command exits 71.

    \b
    Examples:
        starred-repos -u octocat
        starred-repos -u octocat --json stars.json --toml stars.toml
        starred-repos -c -u octocat
    """
    config = load_config()
    if debug:
        setup_logging("DEBUG", DEBUG_LOG_FORMAT)
    else:
        setup_logging(config["logging"]["level"], config["logging"]["format"])

    cache = CacheStore(cache_dir or config["cache"]["directory"])

    if clear_cache:
        cache.clear()

    if not user:
        if clear_cache:
            return
        click.echo("No user was specified", err=True)
        sys.exit(USAGE_ERROR)

    client = build_client(config, resolve_token(config))
    service = RepoService(cache, client)

    try:
        repos = service.get(user)
    except CommandError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(e.exit_code)
    finally:
        client.close()

    # File output silences the terminal listing
    if json_path or toml_path:
        ok = True
        if toml_path:
            ok = export_toml(repos, toml_path) and ok
        if json_path:
            ok = export_json(repos, json_path) and ok
        if not ok:
            sys.exit(PARTIAL_SUCCESS)
    else:
        list_repos(repos)


def main():
    cli()


if __name__ == "__main__":
    main()
