"""Splice a rendered version entry into a Keep a Changelog document.

The entry goes below the manual notes of the `## [Unreleased]` section and above
the newest released version. The link references at the bottom are updated so
`[Unreleased]` compares from the new tag and the new version compares against
the previous version heading.
"""

import logging
import re
from pathlib import Path

from zero_3rdparty.file_utils import ensure_parents_write_text

from conv_changelog.errors import (
    MissingUnreleasedSectionError,
    VersionAlreadyExistsError,
    VersionNotFoundError,
)
from conv_changelog.models import ChangelogEntry

logger = logging.getLogger(__name__)

UNRELEASED = "Unreleased"
DEFAULT_CHANGELOG = """\
# Changelog

All notable changes to this project will be documented in this file.

The format is based on [Keep a Changelog](https://keepachangelog.com/en/1.1.0/),
and this project adheres to [Semantic Versioning](https://semver.org/spec/v2.0.0.html).

## [Unreleased]
"""

_version_heading_regex = re.compile(r"^## \[(?P<version>[^\]]+)\]", re.M)
_unreleased_heading_regex = re.compile(r"^## \[Unreleased\].*$", re.M)
_link_ref_regex = re.compile(r"^\[[^\]]+\]:\s*\S+", re.M)
_unreleased_link_regex = re.compile(r"^\[Unreleased\]:.*$", re.M)


def find_versions(content: str) -> list[str]:
    """
    >>> find_versions("## [Unreleased]\\n## [1.1.0] - 2024-02-01\\n## [1.0.0] - 2024-01-01\\n")
    ['1.1.0', '1.0.0']
    """
    return [
        heading_match["version"]
        for heading_match in _version_heading_regex.finditer(content)
        if heading_match["version"] != UNRELEASED
    ]


def _section_end(content: str, start: int) -> int:
    """Index of the next version heading or link reference block after `start`."""
    candidates = [len(content)]
    if next_heading := _version_heading_regex.search(content, start):
        candidates.append(next_heading.start())
    if link_ref := _link_ref_regex.search(content, start):
        candidates.append(link_ref.start())
    return min(candidates)


def _insert_block(content: str, index: int, block: str) -> str:
    head = content[:index].rstrip("\n")
    tail = content[index:]
    new_content = f"{head}\n\n{block.strip()}\n"
    if tail:
        new_content += f"\n{tail}"
    return new_content


def compare_url(repo_url: str, old_tag: str, new_tag: str) -> str:
    return f"{repo_url}/compare/{old_tag}...{new_tag}"


def release_url(repo_url: str, tag: str) -> str:
    return f"{repo_url}/releases/tag/{tag}"


def _update_links(
    content: str,
    version: str,
    previous_version: str | None,
    repo_url: str,
    tag_prefix: str,
) -> str:
    new_tag = f"{tag_prefix}{version}"
    if previous_version:
        version_url = compare_url(repo_url, f"{tag_prefix}{previous_version}", new_tag)
    else:
        version_url = release_url(repo_url, new_tag)
    links = (
        f"[{UNRELEASED}]: {compare_url(repo_url, new_tag, 'HEAD')}\n"
        f"[{version}]: {version_url}"
    )
    if unreleased_link := _unreleased_link_regex.search(content):
        return content[: unreleased_link.start()] + links + content[unreleased_link.end() :]
    return f"{content.rstrip()}\n\n{links}\n"


def splice_entry(
    content: str,
    entry_markdown: str,
    version: str,
    repo_url: str,
    tag_prefix: str = "v",
) -> str:
    unreleased = _unreleased_heading_regex.search(content)
    if not unreleased:
        raise MissingUnreleasedSectionError(f"## [{UNRELEASED}]")
    existing_versions = find_versions(content)
    if version in existing_versions:
        raise VersionAlreadyExistsError(version)
    insert_at = _section_end(content, unreleased.end())
    new_content = _insert_block(content, insert_at, entry_markdown)
    if not repo_url:
        logger.warning("no repo url, skipping changelog link references")
        return new_content
    previous_version = existing_versions[0] if existing_versions else None
    return _update_links(new_content, version, previous_version, repo_url, tag_prefix)


def read_entry(content: str, version: str) -> str:
    version_heading_regex = re.compile(rf"^## \[{re.escape(version)}\]", re.M)
    if header_match := version_heading_regex.search(content):
        section_end = _section_end(content, header_match.end())
        return content[header_match.start() : section_end].strip() + "\n"
    raise VersionNotFoundError(version)


def update_changelog_file(
    path: Path, entry: ChangelogEntry, repo_url: str, tag_prefix: str = "v"
) -> Path:
    if path.exists():
        content = path.read_text()
    else:
        logger.info(f"creating new changelog @ {path}")
        content = DEFAULT_CHANGELOG
    new_content = splice_entry(
        content, entry.markdown, entry.version, repo_url, tag_prefix
    )
    ensure_parents_write_text(path, new_content)
    return path
