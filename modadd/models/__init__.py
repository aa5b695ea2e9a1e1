"""
ModAdd 数据模型包

包含配置档模型和 API 模型定义。
"""

from modadd.models.profile import (
    ModLoader,
    Provider,
    ModIdentifier,
    Mod,
    Profile,
)
from modadd.models.api import (
    CURSEFORGE_MODS_CLASS_ID,
    CurseForgeFile,
    CurseForgeProject,
    ModrinthProject,
    ModrinthVersion,
    GitHubRepo,
    GitHubRelease,
)

__all__ = [
    # 配置档模型
    "ModLoader",
    "Provider",
    "ModIdentifier",
    "Mod",
    "Profile",
    # API 模型
    "CURSEFORGE_MODS_CLASS_ID",
    "CurseForgeFile",
    "CurseForgeProject",
    "ModrinthProject",
    "ModrinthVersion",
    "GitHubRepo",
    "GitHubRelease",
]
