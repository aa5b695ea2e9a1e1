"""
平台 API 客户端

CurseForge、GitHub、Modrinth 三个平台的 aiohttp 客户端。
"""

from modadd.api.base import APIClient
from modadd.api.curseforge import CurseForgeClient
from modadd.api.github import GitHubClient
from modadd.api.modrinth import ModrinthClient

__all__ = [
    "APIClient",
    "CurseForgeClient",
    "GitHubClient",
    "ModrinthClient",
]
