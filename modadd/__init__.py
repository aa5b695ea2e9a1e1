"""
ModAdd - Minecraft 模组添加工具

把 CurseForge 项目 ID、GitHub owner/repo 或 Modrinth slug 解析到对应平台，
校验后写入配置档。
"""

from modadd.checks import Checks
from modadd.exceptions import AddError, ErrorKind
from modadd.models import Mod, ModIdentifier, ModLoader, Profile
from modadd.orchestrator import add_multiple, add_single
from modadd.services import ModProvider

__version__ = "0.1.0"

__all__ = [
    "Checks",
    "AddError",
    "ErrorKind",
    "Mod",
    "ModIdentifier",
    "ModLoader",
    "Profile",
    "ModProvider",
    "add_multiple",
    "add_single",
]
