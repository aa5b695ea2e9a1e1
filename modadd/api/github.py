from typing import List, Optional

import aiohttp

from modadd.api.base import APIClient
from modadd.exceptions import GitHubAPIError
from modadd.models import GitHubRelease, GitHubRepo

GITHUB_BASE_URL = "https://api.github.com"


class GitHubClient(APIClient):
    """GitHub REST API 客户端，token 可选"""

    BASE_URL = GITHUB_BASE_URL
    error_class = GitHubAPIError

    def __init__(
        self, token: str = "", session: Optional[aiohttp.ClientSession] = None
    ):
        super().__init__(session)
        self.token = token

    def _headers(self) -> dict:
        headers = {"Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def get_repo(self, owner: str, repo: str) -> GitHubRepo:
        response = await self._request(f"/repos/{owner}/{repo}")
        return self._parse(GitHubRepo.from_github, response)

    async def list_releases(self, owner: str, repo: str) -> List[GitHubRelease]:
        response = await self._request(f"/repos/{owner}/{repo}/releases")
        return self._parse(
            lambda data: [GitHubRelease.from_github(release) for release in data],
            response,
        )
