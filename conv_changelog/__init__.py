# Conventional commit changelog generation

from .classify import SECTION_BY_TYPE, group_commits, section_for_commit, section_for_type
from .document import find_versions, read_entry, splice_entry, update_changelog_file
from .git_log import fetch_raw_commits
from .models import ChangelogEntry, ChangelogSection, Commit, RawCommit, SectionName
from .parsing import parse_commit, parse_commits, parse_raw_record
from .render import generate_entry, render_commit_line, render_entry

__all__ = [
    "SECTION_BY_TYPE",
    "group_commits",
    "section_for_commit",
    "section_for_type",
    "find_versions",
    "read_entry",
    "splice_entry",
    "update_changelog_file",
    "fetch_raw_commits",
    "ChangelogEntry",
    "ChangelogSection",
    "Commit",
    "RawCommit",
    "SectionName",
    "parse_commit",
    "parse_commits",
    "parse_raw_record",
    "generate_entry",
    "render_commit_line",
    "render_entry",
]
