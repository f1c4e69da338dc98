from pathlib import Path


class NotAGitRepositoryError(Exception):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"not a git repository @ {path}: {reason}")


class RemoteURLNotFound(Exception):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"no remote url for git repo @ {path}: {reason}")


class MissingUnreleasedSectionError(Exception):
    def __init__(self, header: str) -> None:
        self.header = header
        super().__init__(f"changelog has no '{header}' section to insert after")


class VersionAlreadyExistsError(Exception):
    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"changelog already has a section for {version}")


class VersionNotFoundError(Exception):
    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"unable to find {version} in changelog")
