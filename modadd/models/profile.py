"""
配置档模型

配置档由调用方持有，添加流程只在单次添加期间借用并修改它。
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union


class ModLoader(Enum):
    """模组加载器"""

    FORGE = "forge"
    NEOFORGE = "neoforge"
    FABRIC = "fabric"
    QUILT = "quilt"


class Provider(Enum):
    """模组来源平台"""

    CURSEFORGE = "curseforge"
    GITHUB = "github"
    MODRINTH = "modrinth"


@dataclass(frozen=True)
class ModIdentifier:
    """
    模组在来源平台上的标识

    value 根据平台不同分别为 CurseForge 项目 ID (int)、
    GitHub (owner, repo) 元组或 Modrinth 项目 ID。
    """

    provider: Provider
    value: Union[int, str, Tuple[str, str]]

    @classmethod
    def curseforge(cls, project_id: int) -> "ModIdentifier":
        return cls(Provider.CURSEFORGE, project_id)

    @classmethod
    def github(cls, owner: str, repo: str) -> "ModIdentifier":
        return cls(Provider.GITHUB, (owner, repo))

    @classmethod
    def modrinth(cls, project_id: str) -> "ModIdentifier":
        return cls(Provider.MODRINTH, project_id)

    def matches(self, other: "ModIdentifier") -> bool:
        if self.provider != other.provider:
            return False
        # GitHub 的 owner/repo 不区分大小写
        if self.provider == Provider.GITHUB:
            return tuple(s.lower() for s in self.value) == tuple(  # type: ignore
                s.lower() for s in other.value  # type: ignore
            )
        return self.value == other.value


@dataclass
class Mod:
    """配置档中的一个模组"""

    name: str
    identifier: ModIdentifier
    check_game_version: bool = True
    check_mod_loader: bool = True


@dataclass
class Profile:
    """用户的模组集合"""

    name: str
    game_version: str
    mod_loader: ModLoader
    mods: List[Mod] = field(default_factory=list)

    def find_mod(self, identifier: ModIdentifier, name: str) -> Optional[Mod]:
        """按标识或名称 (不区分大小写) 查找已添加的模组"""
        for mod in self.mods:
            if mod.identifier.matches(identifier):
                return mod
            if mod.name.lower() == name.lower():
                return mod
        return None

    def add_mod(self, mod: Mod):
        self.mods.append(mod)
