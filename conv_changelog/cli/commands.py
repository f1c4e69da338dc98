"""CLI commands for conv-changelog."""

import logging
from dataclasses import dataclass
from pathlib import Path

import typer
from typer import Typer
from zero_3rdparty.datetime_utils import utc_now

from conv_changelog.cli.options import (
    argument_version,
    option_changelog_filename,
    option_date,
    option_dry_run,
    option_repo_root,
    option_repo_url,
    option_since,
    option_tag_prefix,
)
from conv_changelog.document import read_entry, update_changelog_file
from conv_changelog.errors import (
    MissingUnreleasedSectionError,
    NotAGitRepositoryError,
    VersionAlreadyExistsError,
    VersionNotFoundError,
)
from conv_changelog.git_log import fetch_raw_commits
from conv_changelog.render import generate_entry
from conv_changelog.settings import ChangelogSettings, changelog_settings

logger = logging.getLogger(__name__)
app = Typer(
    name="conv-changelog",
    help="Generate a changelog section from conventional commits",
)


def resolve_repo_root(cwd: Path) -> Path:
    """Find the repository root by looking for .git folder in cwd or parent directories."""
    for path in [cwd] + list(cwd.parents):
        if (path / ".git").exists():
            return path
    raise ValueError(f"Repository root not found starting from {cwd}")


def today() -> str:
    return utc_now().date().isoformat()


@dataclass
class CliOptions:
    repo_root: Path | None
    repo_url: str | None
    tag_prefix: str | None
    changelog_filename: str | None


def resolve_settings(
    ctx: typer.Context, *, resolve_remote_url: bool = True
) -> ChangelogSettings:
    options: CliOptions = ctx.obj
    repo_root = options.repo_root
    if repo_root is None:
        try:
            repo_root = resolve_repo_root(Path.cwd())
        except ValueError as e:
            logger.error(str(e))
            raise typer.Exit(1)
    return changelog_settings(
        repo_root,
        repo_url=options.repo_url,
        tag_prefix=options.tag_prefix,
        changelog_filename=options.changelog_filename,
        resolve_remote_url=resolve_remote_url,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    repo_root: Path | None = option_repo_root,
    repo_url: str | None = option_repo_url,
    tag_prefix: str | None = option_tag_prefix,
    changelog_filename: str | None = option_changelog_filename,
):
    """conv-changelog: Generate a changelog section from conventional commits"""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()
    # settings are resolved by each command, the callback also runs for `<command> --help`
    ctx.obj = CliOptions(repo_root, repo_url, tag_prefix, changelog_filename)


@app.command()
def generate(
    ctx: typer.Context,
    version: str = argument_version,
    date: str | None = option_date,
    since: str = option_since,
    dry_run: bool = option_dry_run,
):
    """Add a section for VERSION to the changelog with the commits since the last tag."""
    settings = resolve_settings(ctx)
    if since:
        settings.since = since
    try:
        raws = fetch_raw_commits(settings.repo_root, settings.since)
    except NotAGitRepositoryError as e:
        logger.error(str(e))
        raise typer.Exit(1)
    entry = generate_entry(version, date or today(), raws, settings.pull_request_url)
    if entry.is_empty:
        logger.info("No commits found, nothing to generate")
        return
    typer.echo(entry.markdown, nl=False)
    if dry_run:
        return
    try:
        path = update_changelog_file(
            settings.changelog_md, entry, settings.repo_url, settings.tag_prefix
        )
    except (MissingUnreleasedSectionError, VersionAlreadyExistsError) as e:
        logger.error(str(e))
        raise typer.Exit(1)
    logger.info(
        f"Generated changelog section for {version} with {entry.commit_count} commits @ {path}"
    )


@app.command()
def show(
    ctx: typer.Context,
    version: str = argument_version,
):
    """Print the changelog section of VERSION, e.g. to use as release notes."""
    settings = resolve_settings(ctx, resolve_remote_url=False)
    path = settings.changelog_md
    if not path.exists():
        logger.error(f"no changelog @ {path}")
        raise typer.Exit(1)
    try:
        content = read_entry(path.read_text(), version)
    except VersionNotFoundError as e:
        logger.error(str(e))
        raise typer.Exit(1)
    typer.echo(content, nl=False)
