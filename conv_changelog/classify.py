from typing import Iterable

from conv_changelog.models import ChangelogSection, Commit, SectionName

DEFAULT_SECTION = SectionName.CHANGED
SECTION_BY_TYPE: dict[str, SectionName] = {
    "feat": SectionName.ADDED,
    "fix": SectionName.FIXED,
    "docs": SectionName.DOCUMENTATION,
    "style": SectionName.CHANGED,
    "refactor": SectionName.CHANGED,
    "perf": SectionName.CHANGED,
    "test": SectionName.CHANGED,
    "build": SectionName.CHANGED,
    "ci": SectionName.CHANGED,
    "chore": SectionName.CHANGED,
    "revert": SectionName.REMOVED,
}


def section_for_type(commit_type: str) -> SectionName:
    """
    >>> section_for_type("feat").value
    'Added'
    >>> section_for_type("wibble").value
    'Changed'
    """
    return SECTION_BY_TYPE.get(commit_type, DEFAULT_SECTION)


def section_for_commit(commit: Commit) -> SectionName:
    if commit.breaking:
        return SectionName.BREAKING_CHANGES
    return section_for_type(commit.type)


def group_commits(commits: Iterable[Commit]) -> list[ChangelogSection]:
    """Returns the non-empty sections in render order.

    A breaking commit is only placed in the breaking section, never in its type section.
    """
    sections = {name: ChangelogSection(name) for name in SectionName}
    for commit in commits:
        sections[section_for_commit(commit)].commits.append(commit)
    return [section for section in sections.values() if section]
