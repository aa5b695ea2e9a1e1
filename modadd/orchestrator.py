"""
添加流程编排

顺序处理一个或多个标识符，单个失败不会中断批量添加。
"""

from typing import List, Tuple

from loguru import logger

from modadd.api import CurseForgeClient, GitHubClient, ModrinthClient
from modadd.checks import Checks
from modadd.exceptions import (
    AddError,
    InvalidIdentifier,
    ModrinthError,
    ModrinthInvalidIDError,
)
from modadd.models import Profile
from modadd.services import ModProvider


def _rekind(err: AddError) -> AddError:
    """Modrinth 的 ID/slug 格式错误统一报告为无效标识符"""
    if isinstance(err, ModrinthError) and isinstance(
        err.source, ModrinthInvalidIDError
    ):
        return InvalidIdentifier()
    return err


async def add_multiple(
    mod_provider: ModProvider,
    identifiers: List[str],
) -> Tuple[List[str], List[Tuple[str, AddError]]]:
    """
    按顺序添加多个模组

    Args:
        mod_provider: 模组来源调度器
        identifiers: 标识符列表

    Returns:
        tuple: (成功添加的模组名称, [(标识符, 错误)])
    """
    success_names: List[str] = []
    failures: List[Tuple[str, AddError]] = []

    logger.info(f"开始添加 {len(identifiers)} 个模组...")
    for identifier in identifiers:
        try:
            name = await mod_provider.add(identifier)
        except AddError as e:
            error = _rekind(e)
            logger.warning(f"无法添加 '{identifier}': {error}")
            failures.append((identifier, error))
        else:
            logger.success(f"已添加 '{name}'")
            success_names.append(name)

    logger.info(f"添加完成: {len(success_names)} 成功, {len(failures)} 失败")
    return success_names, failures


async def add_single(
    modrinth: ModrinthClient,
    curseforge: CurseForgeClient,
    github: GitHubClient,
    profile: Profile,
    identifier: str,
    checks: Checks,
) -> str:
    """添加单个模组，失败时直接抛出归一化的 AddError"""
    return await ModProvider(modrinth, curseforge, github, checks, profile).add(
        identifier
    )
