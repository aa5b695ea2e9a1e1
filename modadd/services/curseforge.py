"""
CurseForge 添加服务
"""

from loguru import logger

from modadd.api import CurseForgeClient
from modadd.checks import Checks
from modadd.exceptions import AlreadyAdded, DistributionDenied, Incompatible, NotAMod
from modadd.models import Mod, ModIdentifier, Profile
from modadd.services.version_matcher import VersionMatcher, split_game_versions


async def resolve(
    client: CurseForgeClient,
    project_id: int,
    profile: Profile,
    checks: Checks,
) -> str:
    """
    获取 CurseForge 项目，校验后加入配置档

    Returns:
        项目名称
    """
    project = await client.get_mod(project_id)
    identifier = ModIdentifier.curseforge(project.id)

    if profile.find_mod(identifier, project.name):
        raise AlreadyAdded()

    if project.allow_mod_distribution is False:
        raise DistributionDenied()

    if not project.is_mod:
        raise NotAMod()

    if checks.perform_checks:
        matcher = VersionMatcher(profile, checks)
        files = await client.get_mod_files(project.id)
        if not any(
            matcher.matches(*split_game_versions(file.game_versions))
            for file in files
        ):
            raise Incompatible()

    profile.add_mod(
        Mod(
            name=project.name,
            identifier=identifier,
            check_game_version=checks.game_version,
            check_mod_loader=checks.mod_loader,
        )
    )
    logger.debug(f"CurseForge 项目 '{project.name}' (ID: {project.id}) 已写入配置档")
    return project.name
