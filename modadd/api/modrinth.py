import re
from typing import List

from modadd.api.base import APIClient
from modadd.exceptions import ModrinthAPIError, ModrinthInvalidIDError
from modadd.models import ModrinthProject, ModrinthVersion

MODRINTH_BASE_URL = "https://api.modrinth.com/v2"

# Modrinth 接受的项目 ID / slug 格式
ID_OR_SLUG_PATTERN = re.compile(r"[\w!@$()`.+,\"\-']{3,64}")


def check_id_or_slug(idx: str):
    if not ID_OR_SLUG_PATTERN.fullmatch(idx):
        raise ModrinthInvalidIDError(idx)


class ModrinthClient(APIClient):
    """Modrinth API 客户端"""

    BASE_URL = MODRINTH_BASE_URL
    error_class = ModrinthAPIError

    async def get_project(self, idx: str) -> ModrinthProject:
        """通过 slug 或 id 获取项目详情"""
        check_id_or_slug(idx)
        response = await self._request(f"/project/{idx}")
        return self._parse(ModrinthProject.from_modrinth, response)

    async def get_versions(self, idx: str) -> List[ModrinthVersion]:
        """获取项目的全部版本"""
        check_id_or_slug(idx)
        response = await self._request(f"/project/{idx}/version")
        return self._parse(
            lambda data: [ModrinthVersion.from_modrinth(version) for version in data],
            response,
        )
