"""
Modrinth 添加服务
"""

from typing import Tuple

from loguru import logger

from modadd.api import ModrinthClient
from modadd.checks import Checks
from modadd.exceptions import AlreadyAdded, Incompatible, NotAMod
from modadd.models import Mod, ModIdentifier, ModrinthProject, Profile
from modadd.services.version_matcher import VersionMatcher


async def resolve(
    client: ModrinthClient,
    idx: str,
    profile: Profile,
    checks: Checks,
) -> Tuple[str, ModrinthProject]:
    """
    获取 Modrinth 项目，校验后加入配置档

    Returns:
        (项目名称, 项目信息)
    """
    project = await client.get_project(idx)
    identifier = ModIdentifier.modrinth(project.id)

    if profile.find_mod(identifier, project.title):
        raise AlreadyAdded()

    if project.project_type != "mod":
        raise NotAMod()

    if checks.perform_checks:
        matcher = VersionMatcher(profile, checks)
        versions = await client.get_versions(project.id)
        if not any(matcher.matches(v.game_versions, v.loaders) for v in versions):
            raise Incompatible()

    profile.add_mod(
        Mod(
            name=project.title,
            identifier=identifier,
            check_game_version=checks.game_version,
            check_mod_loader=checks.mod_loader,
        )
    )
    logger.debug(f"Modrinth 项目 '{project.title}' (ID: {project.id}) 已写入配置档")
    return project.title, project
