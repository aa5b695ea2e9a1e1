"""
模组来源调度

根据标识符的形状选择 CurseForge / GitHub / Modrinth 之一完成添加。
"""

import re
from typing import Optional, Tuple, Union

from loguru import logger

from modadd.api import CurseForgeClient, GitHubClient, ModrinthClient
from modadd.checks import Checks
from modadd.exceptions import InvalidIdentifier, translate_errors
from modadd.models import Profile, Provider
from modadd.services import curseforge, github, modrinth

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_project_id(identifier: str) -> Optional[int]:
    """标识符能解析为 32 位有符号整数时返回该整数"""
    if not _INTEGER_PATTERN.fullmatch(identifier):
        return None
    value = int(identifier)
    if INT32_MIN <= value <= INT32_MAX:
        return value
    return None


def route_identifier(
    identifier: str,
) -> Tuple[Provider, Union[int, str, Tuple[str, str]]]:
    """
    按形状对标识符分类，先匹配者优先

    1. 32 位整数 -> CurseForge 项目 ID
    2. 恰好一个 "/" -> GitHub owner/repo
    3. 其他 -> Modrinth slug 或 ID
    """
    project_id = parse_project_id(identifier)
    if project_id is not None:
        return Provider.CURSEFORGE, project_id
    elif identifier.count("/") == 1:
        owner, repo = identifier.split("/")
        return Provider.GITHUB, (owner, repo)
    else:
        return Provider.MODRINTH, identifier


class ModProvider:
    """
    模组来源调度器

    借用三个平台客户端、检查标志和配置档；配置档只在单次 add 期间被修改。
    """

    def __init__(
        self,
        modrinth: ModrinthClient,
        curseforge: CurseForgeClient,
        github: GitHubClient,
        checks: Checks,
        profile: Profile,
    ):
        self.modrinth_client = modrinth
        self.curseforge_client = curseforge
        self.github_client = github
        self.checks = checks
        self.profile = profile

    async def add(self, identifier: str) -> str:
        """添加一个模组并返回其名称，失败时抛出 AddError"""
        provider, value = route_identifier(identifier)
        logger.debug(f"标识符 '{identifier}' 路由至 {provider.value}")

        if provider == Provider.CURSEFORGE:
            return await self.curseforge(value)  # type: ignore
        elif provider == Provider.GITHUB:
            return await self.github(identifier)
        else:
            return await self.modrinth(identifier)

    async def curseforge(self, project_id: int) -> str:
        with translate_errors():
            return await curseforge.resolve(
                self.curseforge_client, project_id, self.profile, self.checks
            )

    async def github(self, identifier: str) -> str:
        owner, _, repo = identifier.partition("/")
        # 空的 owner 或 repo 在请求之前直接拒绝
        if not owner or not repo or "/" in repo:
            raise InvalidIdentifier()
        with translate_errors():
            return await github.resolve(
                self.github_client, owner, repo, self.profile, self.checks
            )

    async def modrinth(self, identifier: str) -> str:
        with translate_errors():
            name, _ = await modrinth.resolve(
                self.modrinth_client, identifier, self.profile, self.checks
            )
        return name
