"""CLI options and arguments for conv-changelog commands."""

import typer

from conv_changelog.settings import ENV_PREFIX

argument_version = typer.Argument(
    ...,
    help="Version of the new changelog section, e.g. 1.2.0 (without tag prefix)",
)

option_repo_root = typer.Option(
    None,
    "-r",
    "--repo-root",
    help="Repository root directory (auto-detected from .git if not provided)",
)

option_repo_url = typer.Option(
    None,
    "--repo-url",
    envvar=f"{ENV_PREFIX}REPO_URL",
    help="Base url for pull request and compare links. Uses pyproject.toml or the git remote if not set.",
)

option_tag_prefix = typer.Option(
    None,
    "--tag-prefix",
    envvar=f"{ENV_PREFIX}TAG_PREFIX",
    help="{tag_prefix}{version} used in the compare links. Uses pyproject.toml or 'v' if not set.",
)

option_changelog_filename = typer.Option(
    None,
    "--changelog",
    envvar=f"{ENV_PREFIX}CHANGELOG_FILENAME",
    help="Changelog file relative to the repo root, defaults to CHANGELOG.md",
)

option_since = typer.Option(
    "",
    "--since",
    envvar=f"{ENV_PREFIX}SINCE",
    help="git ref to read commits from, defaults to the last git tag",
)

option_date = typer.Option(
    None,
    "--date",
    help="Date in the section header, defaults to today (UTC) as YYYY-MM-DD",
)

option_dry_run = typer.Option(
    False,
    "--dry-run",
    help="Only print the generated section, don't update the changelog file",
)
