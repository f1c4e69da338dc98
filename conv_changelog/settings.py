import logging
import tomllib
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, DirectoryPath, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from conv_changelog.errors import RemoteURLNotFound
from conv_changelog.git_log import read_remote_url

logger = logging.getLogger(__name__)

ENV_PREFIX = "CONV_CHANGELOG_"


class ProjectConfig(BaseModel):
    """`[tool.conv-changelog]` in pyproject.toml"""

    PYPROJECT_KEY: ClassVar[str] = "conv-changelog"

    changelog_filename: str | None = None
    repo_url: str | None = None
    tag_prefix: str | None = None


def load_project_config(repo_root: Path) -> ProjectConfig:
    pyproject_toml = repo_root / "pyproject.toml"
    if not pyproject_toml.exists():
        return ProjectConfig()
    with pyproject_toml.open("rb") as f:
        pyproject = tomllib.load(f)
    raw_config = pyproject.get("tool", {}).get(ProjectConfig.PYPROJECT_KEY, {})
    return ProjectConfig(**raw_config)


class ChangelogSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX)

    DEFAULT_CHANGELOG_FILENAME: ClassVar[str] = "CHANGELOG.md"
    DEFAULT_TAG_PREFIX: ClassVar[str] = "v"

    repo_root: DirectoryPath
    changelog_filename: str = DEFAULT_CHANGELOG_FILENAME
    repo_url: str = Field(
        default="",
        description="Base url used for pull request and compare links, e.g. https://github.com/org/repo",
    )
    tag_prefix: str = Field(
        default=DEFAULT_TAG_PREFIX,
        description="{tag_prefix}{version} is the git tag of a version",
    )
    since: str = Field(
        default="",
        description="git ref to read commits from, defaults to the last tag",
    )

    @property
    def changelog_md(self) -> Path:
        return self.repo_root / self.changelog_filename

    @property
    def pull_request_url(self) -> str:
        if self.repo_url:
            return f"{self.repo_url}/pull"
        return ""


def resolve_repo_url(repo_root: Path) -> str:
    try:
        return read_remote_url(repo_root)
    except RemoteURLNotFound as e:
        logger.warning(f"{e!r}, links will not be rendered")
        return ""


def changelog_settings(
    repo_root: Path,
    *,
    repo_url: str | None = None,
    tag_prefix: str | None = None,
    since: str | None = None,
    changelog_filename: str | None = None,
    resolve_remote_url: bool = True,
) -> ChangelogSettings:
    # CLI arg → Env var (via typer envvar) → pyproject.toml → git remote / default
    project_config = load_project_config(repo_root)
    repo_url = repo_url or project_config.repo_url or ""
    if not repo_url and resolve_remote_url:
        repo_url = resolve_repo_url(repo_root)
    if tag_prefix is None:
        tag_prefix = project_config.tag_prefix
    return ChangelogSettings(
        repo_root=repo_root,
        repo_url=repo_url.removesuffix("/"),
        tag_prefix=tag_prefix
        if tag_prefix is not None
        else ChangelogSettings.DEFAULT_TAG_PREFIX,
        since=since or "",
        changelog_filename=changelog_filename
        or project_config.changelog_filename
        or ChangelogSettings.DEFAULT_CHANGELOG_FILENAME,
    )
