import logging
from typing import Iterable, Sequence

from conv_changelog.classify import group_commits
from conv_changelog.models import ChangelogEntry, Commit, RawCommit
from conv_changelog.parsing import parse_commits

logger = logging.getLogger(__name__)


def _pr_link(pr: str, pull_request_url: str) -> str:
    if pull_request_url:
        return f"[#{pr}]({pull_request_url}/{pr})"
    return f"#{pr}"


def render_commit_line(commit: Commit, pull_request_url: str = "") -> str:
    """
    >>> from conv_changelog.models import Commit
    >>> commit = Commit(hash="abc1234", type="fix", scope="api", subject="handle timeout (#42)", pr="42")
    >>> render_commit_line(commit, "https://github.com/org/repo/pull")
    '- **api**: handle timeout (#42) ([#42](https://github.com/org/repo/pull/42))'
    """
    if commit.scope:
        line = f"- **{commit.scope}**: {commit.subject}"
    else:
        line = f"- {commit.subject}"
    if commit.pr:
        line += f" ({_pr_link(commit.pr, pull_request_url)})"
    return line


def render_entry(
    version: str, date: str, commits: Iterable[Commit], pull_request_url: str = ""
) -> str:
    blocks = [f"## [{version}] - {date}"]
    for section in group_commits(commits):
        lines = [f"### {section.name}", ""]
        lines.extend(
            render_commit_line(commit, pull_request_url) for commit in section.commits
        )
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"


def generate_entry(
    version: str,
    date: str,
    raws: Sequence[RawCommit],
    pull_request_url: str = "",
) -> ChangelogEntry:
    commits = parse_commits(raws)
    logger.info(f"{len(commits)} of {len(raws)} commits are conventional")
    if not commits:
        return ChangelogEntry(version=version, date=date)
    return ChangelogEntry(
        version=version,
        date=date,
        markdown=render_entry(version, date, commits, pull_request_url),
        commit_count=len(commits),
    )
