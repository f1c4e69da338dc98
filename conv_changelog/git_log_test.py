import pytest

from conv_changelog.conftest import GitRepoFixture
from conv_changelog.errors import NotAGitRepositoryError, RemoteURLNotFound
from conv_changelog.git_log import (
    fetch_raw_commits,
    last_tag,
    parse_log_output,
    read_remote_url,
)
from conv_changelog.models import RawCommit


@pytest.fixture()
def tagged_repo(git_repo: GitRepoFixture) -> GitRepoFixture:
    git_repo.commit("chore: initial commit")
    git_repo.tag("v1.0.0")
    git_repo.commit("feat(cli)!: add retry flag\n\nBREAKING CHANGE: removes --no-retry")
    git_repo.commit("fix: handle timeout (#42)")
    git_repo.commit("update readme")
    return git_repo


def test_fetch_raw_commits_since_last_tag_newest_first(tagged_repo):
    raws = fetch_raw_commits(tagged_repo.path)
    assert [raw.subject for raw in raws] == [
        "update readme",
        "fix: handle timeout (#42)",
        "feat(cli)!: add retry flag",
    ]
    assert raws[-1].body == "BREAKING CHANGE: removes --no-retry"
    assert all(len(raw.full_hash) == 40 for raw in raws)


def test_fetch_raw_commits_explicit_since(tagged_repo):
    raws = fetch_raw_commits(tagged_repo.path, since="HEAD~1")
    assert [raw.subject for raw in raws] == ["update readme"]


def test_fetch_raw_commits_without_tags_reads_full_history(git_repo):
    git_repo.commit("chore: initial commit")
    git_repo.commit("feat: first feature")
    assert last_tag(git_repo.repo) is None
    raws = fetch_raw_commits(git_repo.path)
    assert [raw.subject for raw in raws] == ["feat: first feature", "chore: initial commit"]


def test_fetch_raw_commits_body_with_delimiters(git_repo):
    git_repo.commit("feat: pipes\n\nuse a | b | c")
    [raw] = fetch_raw_commits(git_repo.path)
    assert raw.body == "use a | b | c"


def test_fetch_raw_commits_empty_repo(git_repo):
    assert fetch_raw_commits(git_repo.path) == []


def test_fetch_raw_commits_unknown_since_is_empty(git_repo):
    git_repo.commit("feat: first feature")
    assert fetch_raw_commits(git_repo.path, since="does-not-exist") == []


def test_fetch_raw_commits_not_a_repo(tmp_path):
    with pytest.raises(NotAGitRepositoryError):
        fetch_raw_commits(tmp_path)
    with pytest.raises(NotAGitRepositoryError):
        fetch_raw_commits(tmp_path / "missing")


def test_parse_log_output():
    output = "aaa|feat: x|\x00\nbbb|fix: y|body line\n\nsecond | line\n\x00"
    assert parse_log_output(output) == [
        RawCommit("aaa", "feat: x", ""),
        RawCommit("bbb", "fix: y", "body line\n\nsecond | line"),
    ]


def test_read_remote_url(git_repo):
    git_repo.repo.create_remote("origin", "git@github.com:tachikoma/tachikoma.git")
    assert read_remote_url(git_repo.path) == "https://github.com/tachikoma/tachikoma"


def test_read_remote_url_no_remotes(git_repo):
    with pytest.raises(RemoteURLNotFound, match="no remotes"):
        read_remote_url(git_repo.path)


def test_read_remote_url_not_a_repo(tmp_path):
    with pytest.raises(RemoteURLNotFound) as exc_info:
        read_remote_url(tmp_path)
    assert exc_info.value.path == tmp_path
    assert isinstance(exc_info.value.__cause__, NotAGitRepositoryError)


def test_read_remote_url_prefers_origin(git_repo):
    git_repo.repo.create_remote("fork", "https://github.com/someone/tachikoma.git")
    git_repo.repo.create_remote("origin", "git@github.com:tachikoma/tachikoma.git")
    assert read_remote_url(git_repo.path) == "https://github.com/tachikoma/tachikoma"
