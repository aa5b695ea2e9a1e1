"""
版本匹配服务

根据检查标志判断游戏版本、模组加载器是否与配置档兼容。
"""

from typing import Iterable, List

from modadd.checks import Checks
from modadd.models import ModLoader, Profile


def accepted_loaders(loader: ModLoader) -> List[str]:
    """配置档的加载器可以使用的构建，Quilt 兼容 Fabric 模组"""
    if loader == ModLoader.QUILT:
        return [ModLoader.QUILT.value, ModLoader.FABRIC.value]
    return [loader.value]


def split_game_versions(values: Iterable[str]) -> tuple[List[str], List[str]]:
    """
    将 CurseForge 混合的 gameVersions 拆分为 (游戏版本, 加载器)

    CurseForge 把 "1.20.1"、"Fabric"、"Client" 等放在同一个列表里。
    """
    loader_names = {loader.value for loader in ModLoader}
    game_versions, loaders = [], []
    for value in values:
        if value.lower() in loader_names:
            loaders.append(value.lower())
        else:
            game_versions.append(value)
    return game_versions, loaders


class VersionMatcher:
    """版本匹配器"""

    def __init__(self, profile: Profile, checks: Checks):
        self.profile = profile
        self.checks = checks

    def matches(
        self,
        game_versions: Iterable[str],
        loaders: Iterable[str],
    ) -> bool:
        """
        检查一个构建是否匹配配置档

        Args:
            game_versions: 构建支持的游戏版本
            loaders: 构建支持的加载器

        Returns:
            是否匹配
        """
        if self.checks.game_version:
            if self.profile.game_version not in game_versions:
                return False

        if self.checks.mod_loader:
            wanted = accepted_loaders(self.profile.mod_loader)
            if not any(loader.lower() in wanted for loader in loaders):
                return False

        return True

    def matches_filename(self, filename: str) -> bool:
        """只有文件名可用时 (GitHub Release 附件) 按子串匹配"""
        lowered = filename.lower()
        if self.checks.game_version and self.profile.game_version not in lowered:
            return False
        if self.checks.mod_loader:
            wanted = accepted_loaders(self.profile.mod_loader)
            if not any(loader in lowered for loader in wanted):
                return False
        return True
