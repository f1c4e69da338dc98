"""Turn raw commit records into `Commit` models.

A subject that does not follow `type(scope)!: description` is expected and
common, `parse_commit` returns None for it instead of raising.
"""

import logging
import re
from typing import Iterable

from conv_changelog.models import Commit, RawCommit

logger = logging.getLogger(__name__)

RECORD_DELIMITER = "|"
BREAKING_SUBJECT_MARKER = "!:"
BREAKING_BODY_MARKER = "BREAKING CHANGE"
CLOSING_KEYWORDS = (
    "close",
    "closes",
    "closed",
    "fix",
    "fixes",
    "fixed",
    "resolve",
    "resolves",
    "resolved",
)

# feat(cli)!: add retry flag
_subject_regex = re.compile(
    r"^(?P<type>\w*)(?:\((?P<scope>[^)]*)\))?(?P<bang>!)?:\s*(?P<description>.+)$"
)
_pr_regex = re.compile(r"#(\d+)")
_issue_regex = re.compile(
    r"(?:" + "|".join(CLOSING_KEYWORDS) + r")\s+#(\d+)", re.IGNORECASE
)


def parse_raw_record(line: str, delimiter: str = RECORD_DELIMITER) -> RawCommit:
    """
    >>> parse_raw_record("abc123|feat: x|body with | inside")
    RawCommit(full_hash='abc123', subject='feat: x', body='body with | inside')
    >>> parse_raw_record("abc123|chore: y")
    RawCommit(full_hash='abc123', subject='chore: y', body='')
    """
    full_hash, _, rest = line.partition(delimiter)
    subject, _, body = rest.partition(delimiter)
    return RawCommit(full_hash.strip(), subject.strip(), body.strip())


def extract_pr(subject: str) -> str | None:
    """
    >>> extract_pr("fix: handle timeout (#42)")
    '42'
    >>> extract_pr("fix: handle timeout") is None
    True
    """
    if pr_match := _pr_regex.search(subject):
        return pr_match[1]
    return None


def extract_issues(text: str) -> list[str]:
    """
    >>> extract_issues("Fixes #10 and closes #11")
    ['10', '11']
    """
    return _issue_regex.findall(text)


def is_breaking(subject: str, body: str) -> bool:
    return BREAKING_SUBJECT_MARKER in subject or BREAKING_BODY_MARKER in body


def parse_commit(raw: RawCommit) -> Commit | None:
    subject_match = _subject_regex.match(raw.subject)
    if not subject_match:
        return None
    commit_type = subject_match["type"]
    if not commit_type:
        return None
    return Commit(
        hash=raw.full_hash[: Commit.HASH_LEN],
        type=commit_type,
        scope=subject_match["scope"] or None,
        subject=subject_match["description"],
        body=raw.body,
        breaking=is_breaking(raw.subject, raw.body),
        pr=extract_pr(raw.subject),
        issues=tuple(extract_issues(f"{raw.subject}\n{raw.body}")),
    )


def parse_commits(raws: Iterable[RawCommit]) -> list[Commit]:
    commits: list[Commit] = []
    for raw in raws:
        if commit := parse_commit(raw):
            commits.append(commit)
        else:
            logger.debug(f"skipping non-conventional commit {raw.full_hash[:7]}: {raw.subject}")
    return commits
