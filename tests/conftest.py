"""
测试用的假平台客户端和配置档
"""

from typing import Dict, List, Optional, Tuple

import pytest
from loguru import logger

from modadd.api.modrinth import check_id_or_slug
from modadd.checks import Checks
from modadd.exceptions import CurseForgeAPIError, GitHubAPIError, ModrinthAPIError
from modadd.models import (
    CurseForgeFile,
    CurseForgeProject,
    GitHubRelease,
    GitHubRepo,
    ModLoader,
    ModrinthProject,
    ModrinthVersion,
    Profile,
)


class FakeCurseForgeClient:
    def __init__(
        self,
        projects: Optional[Dict[int, CurseForgeProject]] = None,
        files: Optional[Dict[int, List[CurseForgeFile]]] = None,
        error: Optional[CurseForgeAPIError] = None,
    ):
        self.projects = projects or {}
        self.files = files or {}
        self.error = error
        self.calls: List[int] = []

    async def get_mod(self, project_id: int) -> CurseForgeProject:
        self.calls.append(project_id)
        if self.error:
            raise self.error
        if project_id not in self.projects:
            raise CurseForgeAPIError("Not Found", status=404)
        return self.projects[project_id]

    async def get_mod_files(self, project_id: int) -> List[CurseForgeFile]:
        return self.files.get(project_id, [])


class FakeModrinthClient:
    def __init__(
        self,
        projects: Optional[Dict[str, ModrinthProject]] = None,
        versions: Optional[Dict[str, List[ModrinthVersion]]] = None,
        error: Optional[ModrinthAPIError] = None,
    ):
        self.projects = projects or {}
        self.versions = versions or {}
        self.error = error
        self.calls: List[str] = []

    async def get_project(self, idx: str) -> ModrinthProject:
        self.calls.append(idx)
        check_id_or_slug(idx)
        if self.error:
            raise self.error
        for project in self.projects.values():
            if idx in (project.id, project.slug):
                return project
        raise ModrinthAPIError("Not Found", status=404)

    async def get_versions(self, idx: str) -> List[ModrinthVersion]:
        return self.versions.get(idx, [])


class FakeGitHubClient:
    def __init__(
        self,
        repos: Optional[Dict[Tuple[str, str], GitHubRepo]] = None,
        releases: Optional[Dict[Tuple[str, str], List[GitHubRelease]]] = None,
        error: Optional[GitHubAPIError] = None,
    ):
        self.repos = repos or {}
        self.releases = releases or {}
        self.error = error
        self.calls: List[Tuple[str, str]] = []

    async def get_repo(self, owner: str, repo: str) -> GitHubRepo:
        self.calls.append((owner, repo))
        if self.error:
            raise self.error
        if (owner, repo) not in self.repos:
            raise GitHubAPIError("Not Found", status=404)
        return self.repos[(owner, repo)]

    async def list_releases(self, owner: str, repo: str) -> List[GitHubRelease]:
        return self.releases.get((owner, repo), [])


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    # 移除测试中添加的 sink，避免写入已关闭的捕获流
    logger.remove()


@pytest.fixture
def profile() -> Profile:
    return Profile(name="test", game_version="1.20.1", mod_loader=ModLoader.FABRIC)


@pytest.fixture
def checks() -> Checks:
    return Checks.new_all_set()


@pytest.fixture
def curseforge_client() -> FakeCurseForgeClient:
    return FakeCurseForgeClient(
        projects={
            12345: CurseForgeProject(
                id=12345,
                name="Just Enough Items",
                slug="jei",
                class_id=6,
                allow_mod_distribution=True,
            ),
        },
        files={
            12345: [
                CurseForgeFile(
                    id=1,
                    filename="jei-1.20.1-fabric.jar",
                    game_versions=["1.20.1", "Fabric", "Client"],
                )
            ],
        },
    )


@pytest.fixture
def modrinth_client() -> FakeModrinthClient:
    return FakeModrinthClient(
        projects={
            "AANobbMI": ModrinthProject(
                id="AANobbMI",
                slug="sodium",
                title="Sodium",
                description="Rendering engine",
                project_type="mod",
            ),
        },
        versions={
            "AANobbMI": [
                ModrinthVersion(
                    id="v1",
                    name="Sodium 0.5.3",
                    version_number="mc1.20.1-0.5.3",
                    loaders=["fabric", "quilt"],
                    game_versions=["1.20.1"],
                )
            ],
        },
    )


@pytest.fixture
def github_client() -> FakeGitHubClient:
    return FakeGitHubClient(
        repos={
            ("owner", "repo"): GitHubRepo(
                owner="owner", name="repo", full_name="owner/repo"
            ),
        },
        releases={
            ("owner", "repo"): [
                GitHubRelease(
                    tag_name="v1.0.0",
                    assets=["repo-fabric-1.20.1-1.0.0.jar", "repo-sources.zip"],
                )
            ],
        },
    )
