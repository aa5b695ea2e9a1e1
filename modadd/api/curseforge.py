from typing import List, Optional

import aiohttp

from modadd.api.base import APIClient
from modadd.exceptions import CurseForgeAPIError
from modadd.models import CurseForgeFile, CurseForgeProject

CURSEFORGE_BASE_URL = "https://api.curseforge.com/v1"


class CurseForgeClient(APIClient):
    """CurseForge API 客户端，需要 API key"""

    BASE_URL = CURSEFORGE_BASE_URL
    error_class = CurseForgeAPIError

    def __init__(
        self, api_key: str = "", session: Optional[aiohttp.ClientSession] = None
    ):
        super().__init__(session)
        self.api_key = api_key

    def _headers(self) -> dict:
        if self.api_key:
            return {"x-api-key": self.api_key}
        return {}

    async def get_mod(self, project_id: int) -> CurseForgeProject:
        """获取项目信息"""
        response = await self._request(f"/mods/{project_id}")
        return self._parse(
            lambda data: CurseForgeProject.from_curseforge(data["data"]), response
        )

    async def get_mod_files(self, project_id: int) -> List[CurseForgeFile]:
        """获取项目的文件列表"""
        response = await self._request(f"/mods/{project_id}/files")
        return self._parse(
            lambda data: [
                CurseForgeFile.from_curseforge(file) for file in data["data"]
            ],
            response,
        )
