"""
GitHub 添加服务

GitHub 仓库没有项目类型，以 Release 中是否有 .jar 附件判断是否为模组。
"""

from loguru import logger

from modadd.api import GitHubClient
from modadd.checks import Checks
from modadd.exceptions import AlreadyAdded, Incompatible, NotAMod
from modadd.models import Mod, ModIdentifier, Profile
from modadd.services.version_matcher import VersionMatcher


async def resolve(
    client: GitHubClient,
    owner: str,
    repo: str,
    profile: Profile,
    checks: Checks,
) -> str:
    """
    获取 GitHub 仓库，校验后加入配置档

    Returns:
        仓库名称
    """
    repository = await client.get_repo(owner, repo)
    identifier = ModIdentifier.github(repository.owner, repository.name)

    if profile.find_mod(identifier, repository.name):
        raise AlreadyAdded()

    releases = await client.list_releases(repository.owner, repository.name)
    assets = [name for release in releases for name in release.jar_assets]
    if not assets:
        raise NotAMod()

    if checks.perform_checks:
        matcher = VersionMatcher(profile, checks)
        if not any(matcher.matches_filename(name) for name in assets):
            raise Incompatible()

    profile.add_mod(
        Mod(
            name=repository.name,
            identifier=identifier,
            check_game_version=checks.game_version,
            check_mod_loader=checks.mod_loader,
        )
    )
    logger.debug(f"GitHub 仓库 '{repository.full_name}' 已写入配置档")
    return repository.name
