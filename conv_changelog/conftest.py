from dataclasses import dataclass
from pathlib import Path

import pytest
from git import Actor, Repo

REPO_URL = "https://github.com/tachikoma/tachikoma"
TEST_DATE = "2026-10-19"
_test_actor = Actor("Test Author", "test@example.com")


@dataclass
class GitRepoFixture:
    repo: Repo
    path: Path

    def commit(self, message: str, filename: str = "changes.txt") -> str:
        path = self.path / filename
        old_content = path.read_text() if path.exists() else ""
        path.write_text(f"{old_content}{message}\n")
        self.repo.index.add([filename])
        commit = self.repo.index.commit(
            message, author=_test_actor, committer=_test_actor
        )
        return commit.hexsha

    def tag(self, name: str) -> None:
        self.repo.create_tag(name)


@pytest.fixture()
def git_repo(tmp_path) -> GitRepoFixture:
    repo_path = tmp_path / "repo"
    repo_path.mkdir()
    return GitRepoFixture(Repo.init(repo_path), repo_path)
