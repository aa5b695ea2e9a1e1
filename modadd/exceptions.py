"""
ModAdd 统一异常体系

提供分层的异常结构，支持错误代码、上下文信息和 JSON 序列化。
三个平台各自的原始错误 (APIError 子类) 在进入调度器时被归一化为
AddError 的封闭集合。
"""

from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, Optional


class ModAddError(Exception):
    """ModAdd 基础异常类"""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self._get_default_code()
        self.context = context or {}

    def _get_default_code(self) -> str:
        """获取默认错误代码"""
        return "E000"

    def to_dict(self) -> Dict[str, Any]:
        """将异常转换为字典格式"""
        return {
            "error": True,
            "code": self.code,
            "message": self.message,
            "context": self.context,
            "type": self.__class__.__name__,
        }

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ConfigError(ModAddError):
    """配置相关错误"""

    def _get_default_code(self) -> str:
        return "E100"


class ConfigParseError(ConfigError):
    """配置解析错误"""

    def _get_default_code(self) -> str:
        return "E101"


# ---------------------------------------------------------------------------
# 平台原始错误
# ---------------------------------------------------------------------------


class APIError(ModAddError):
    """
    API 相关错误

    status 为 HTTP 状态码；请求未得到响应时为 None。
    """

    provider = "unknown"

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        url: Optional[str] = None,
        code: Optional[str] = None,
    ):
        super().__init__(message, code or (f"E{status}" if status else None))
        self.status = status
        self.url = url
        if status is not None:
            self.context["status_code"] = status
        if url is not None:
            self.context["url"] = url
        self.context["provider"] = self.provider

    def _get_default_code(self) -> str:
        return "E200"


class CurseForgeAPIError(APIError):
    """CurseForge API 错误"""

    provider = "curseforge"


class ModrinthAPIError(APIError):
    """Modrinth API 错误"""

    provider = "modrinth"


class ModrinthInvalidIDError(ModrinthAPIError):
    """Modrinth 项目 ID 或 slug 格式无效 (请求前的本地校验)"""

    def __init__(self, idx: str):
        super().__init__(f"无效的 Modrinth ID 或 slug: {idx!r}", code="E201")
        self.context["identifier"] = idx


class GitHubAPIError(APIError):
    """
    GitHub API 错误

    message 保存 GitHub 返回体中的 "message" 字段。
    """

    provider = "github"


# ---------------------------------------------------------------------------
# 归一化的添加错误
# ---------------------------------------------------------------------------


class ErrorKind(Enum):
    """添加模组时可能出现的错误类型 (封闭集合)"""

    DISTRIBUTION_DENIED = "distribution_denied"
    ALREADY_ADDED = "already_added"
    DOES_NOT_EXIST = "does_not_exist"
    INCOMPATIBLE = "incompatible"
    NOT_A_MOD = "not_a_mod"
    INVALID_IDENTIFIER = "invalid_identifier"
    CURSEFORGE_ERROR = "curseforge_error"
    MODRINTH_ERROR = "modrinth_error"
    GITHUB_ERROR = "github_error"


class AddError(ModAddError):
    """添加模组失败"""

    kind: ErrorKind
    default_message = ""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)

    def _get_default_code(self) -> str:
        return "E600"

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["kind"] = self.kind.value
        return data


class DistributionDenied(AddError):
    """
    项目作者禁止第三方应用下载

    用户可以手动下载该模组放入输出目录的 user 文件夹，但之后需要手动更新。
    """

    kind = ErrorKind.DISTRIBUTION_DENIED
    default_message = "该项目的开发者禁止第三方应用下载"

    def _get_default_code(self) -> str:
        return "E601"


class AlreadyAdded(AddError):
    kind = ErrorKind.ALREADY_ADDED
    default_message = "该项目已经添加过了"

    def _get_default_code(self) -> str:
        return "E602"


class DoesNotExist(AddError):
    kind = ErrorKind.DOES_NOT_EXIST
    default_message = "该项目不存在"

    def _get_default_code(self) -> str:
        return "E603"


class Incompatible(AddError):
    kind = ErrorKind.INCOMPATIBLE
    default_message = "该项目与当前配置不兼容"

    def _get_default_code(self) -> str:
        return "E604"


class NotAMod(AddError):
    kind = ErrorKind.NOT_A_MOD
    default_message = "该项目不是模组"

    def _get_default_code(self) -> str:
        return "E605"


class InvalidIdentifier(AddError):
    kind = ErrorKind.INVALID_IDENTIFIER
    default_message = "无效的标识符"

    def _get_default_code(self) -> str:
        return "E606"


class ProviderError(AddError):
    """原样包装无法识别的平台错误，消息沿用被包装错误自身的描述"""

    def __init__(self, source: APIError):
        super().__init__(str(source))
        self.source = source
        self.context.update(source.context)

    def __str__(self) -> str:
        return str(self.source)


class CurseForgeError(ProviderError):
    kind = ErrorKind.CURSEFORGE_ERROR

    def _get_default_code(self) -> str:
        return "E610"


class ModrinthError(ProviderError):
    kind = ErrorKind.MODRINTH_ERROR

    def _get_default_code(self) -> str:
        return "E611"


class GitHubError(ProviderError):
    kind = ErrorKind.GITHUB_ERROR

    def _get_default_code(self) -> str:
        return "E612"


def from_curseforge(err: CurseForgeAPIError) -> AddError:
    if err.status == 404:
        return DoesNotExist()
    return CurseForgeError(err)


def from_modrinth(err: ModrinthAPIError) -> AddError:
    if err.status == 404:
        return DoesNotExist()
    return ModrinthError(err)


def from_github(err: GitHubAPIError) -> AddError:
    if err.message == "Not Found":
        return DoesNotExist()
    return GitHubError(err)


def normalize(err: APIError) -> AddError:
    """
    将平台原始错误转换为归一化的添加错误

    Args:
        err: CurseForge / Modrinth / GitHub 的原始错误

    Returns:
        对应的 AddError

    Raises:
        TypeError: 错误不属于任何已知平台
    """
    if isinstance(err, CurseForgeAPIError):
        return from_curseforge(err)
    elif isinstance(err, ModrinthAPIError):
        return from_modrinth(err)
    elif isinstance(err, GitHubAPIError):
        return from_github(err)
    raise TypeError(f"未知的平台错误: {type(err).__name__}")


@contextmanager
def translate_errors():
    """在代码块中把平台原始错误重新抛出为归一化错误"""
    try:
        yield
    except (CurseForgeAPIError, ModrinthAPIError, GitHubAPIError) as err:
        raise normalize(err) from err


__all__ = [
    # 基础异常
    "ModAddError",
    # 配置异常
    "ConfigError",
    "ConfigParseError",
    # API 异常
    "APIError",
    "CurseForgeAPIError",
    "ModrinthAPIError",
    "ModrinthInvalidIDError",
    "GitHubAPIError",
    # 添加异常
    "ErrorKind",
    "AddError",
    "DistributionDenied",
    "AlreadyAdded",
    "DoesNotExist",
    "Incompatible",
    "NotAMod",
    "InvalidIdentifier",
    "ProviderError",
    "CurseForgeError",
    "ModrinthError",
    "GitHubError",
    # 转换
    "from_curseforge",
    "from_modrinth",
    "from_github",
    "normalize",
    "translate_errors",
]
