"""
API 数据模型

定义三个平台返回数据对应的数据类。
"""

from dataclasses import dataclass, field
from typing import List, Optional

# CurseForge 中 Minecraft 模组分类的 classId
CURSEFORGE_MODS_CLASS_ID = 6


@dataclass
class CurseForgeFile:
    """CurseForge 文件信息"""

    id: int
    filename: str
    game_versions: List[str]

    @classmethod
    def from_curseforge(cls, data: dict) -> "CurseForgeFile":
        return cls(
            id=data["id"],
            filename=data.get("fileName", ""),
            game_versions=data.get("gameVersions", []),
        )


@dataclass
class CurseForgeProject:
    """CurseForge 项目信息"""

    id: int
    name: str
    slug: str
    class_id: Optional[int]
    allow_mod_distribution: Optional[bool]

    @property
    def is_mod(self) -> bool:
        return self.class_id == CURSEFORGE_MODS_CLASS_ID

    @classmethod
    def from_curseforge(cls, data: dict) -> "CurseForgeProject":
        """
        将 CurseForge API 返回的项目信息转换为 CurseForgeProject 对象。
        """
        return cls(
            id=data["id"],
            name=data["name"],
            slug=data.get("slug", ""),
            class_id=data.get("classId"),
            allow_mod_distribution=data.get("allowModDistribution"),
        )


@dataclass
class ModrinthProject:
    """
    Modrinth 项目信息。
    """

    id: str
    slug: str
    title: str
    description: str
    project_type: str
    versions: List[str] = field(default_factory=list)

    @classmethod
    def from_modrinth(cls, data: dict) -> "ModrinthProject":
        return cls(
            id=data["id"],
            slug=data.get("slug", ""),
            title=data["title"],
            description=data.get("description", ""),
            project_type=data.get("project_type", ""),
            versions=data.get("versions", []),
        )


@dataclass
class ModrinthVersion:
    """
    Modrinth 版本信息。
    """

    id: str
    name: str
    version_number: str
    loaders: List[str]
    game_versions: List[str]

    @classmethod
    def from_modrinth(cls, data: dict) -> "ModrinthVersion":
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            version_number=data.get("version_number", ""),
            loaders=data.get("loaders", []),
            game_versions=data.get("game_versions", []),
        )


@dataclass
class GitHubRepo:
    """GitHub 仓库信息"""

    owner: str
    name: str
    full_name: str
    description: Optional[str] = None

    @classmethod
    def from_github(cls, data: dict) -> "GitHubRepo":
        return cls(
            owner=data["owner"]["login"],
            name=data["name"],
            full_name=data.get("full_name", ""),
            description=data.get("description"),
        )


@dataclass
class GitHubRelease:
    """GitHub Release 信息，assets 只保留文件名"""

    tag_name: str
    assets: List[str]

    @property
    def jar_assets(self) -> List[str]:
        return [name for name in self.assets if name.endswith(".jar")]

    @classmethod
    def from_github(cls, data: dict) -> "GitHubRelease":
        return cls(
            tag_name=data.get("tag_name", ""),
            assets=[asset["name"] for asset in data.get("assets", [])],
        )
