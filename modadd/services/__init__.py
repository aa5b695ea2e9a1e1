"""
ModAdd 服务层

包含业务逻辑服务：三个平台的添加服务、版本匹配、来源调度。
"""

from modadd.services import curseforge, github, modrinth
from modadd.services.version_matcher import VersionMatcher
from modadd.services.mod_provider import ModProvider, route_identifier

__all__ = [
    "curseforge",
    "github",
    "modrinth",
    "VersionMatcher",
    "ModProvider",
    "route_identifier",
]
