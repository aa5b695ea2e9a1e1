"""
配置模块

加载 API 密钥、默认检查标志和日志设置，支持 TOML / JSON / YAML。
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import aiofiles
import toml
import yaml
from loguru import logger

from modadd.api import CurseForgeClient, GitHubClient, ModrinthClient
from modadd.checks import Checks
from modadd.exceptions import ConfigParseError
from modadd.logger import setup_logger

ENV_CURSEFORGE_API_KEY = "MODADD_CURSEFORGE_API_KEY"
ENV_GITHUB_TOKEN = "MODADD_GITHUB_TOKEN"
ENV_LOG_LEVEL = "MODADD_LOG_LEVEL"


@dataclass
class ModAddConfig:
    """ModAdd 配置"""

    curseforge_api_key: str = ""
    github_token: str = ""
    perform_checks: bool = True
    check_game_version: bool = True
    check_mod_loader: bool = True
    log_level: Optional[str] = None
    log_file: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "ModAddConfig":
        checks = data.get("checks", {})
        logging = data.get("logging", {})
        return cls(
            curseforge_api_key=data.get("curseforge_api_key", ""),
            github_token=data.get("github_token", ""),
            perform_checks=checks.get("perform_checks", True),
            check_game_version=checks.get("game_version", True),
            check_mod_loader=checks.get("mod_loader", True),
            log_level=logging.get("level"),
            log_file=logging.get("file"),
        )

    def apply_env(self) -> "ModAddConfig":
        """环境变量优先于配置文件"""
        if api_key := os.environ.get(ENV_CURSEFORGE_API_KEY):
            self.curseforge_api_key = api_key
        if token := os.environ.get(ENV_GITHUB_TOKEN):
            self.github_token = token
        if level := os.environ.get(ENV_LOG_LEVEL):
            self.log_level = level
        return self

    def setup_logging(self) -> str:
        """按配置重新设置 loguru，返回实际日志级别"""
        return setup_logger(self.log_level, self.log_file)

    def checks(self) -> Checks:
        return Checks.from_flags(
            self.perform_checks, self.check_game_version, self.check_mod_loader
        )


def parse_config(text: str, suffix: str) -> dict:
    """按文件后缀解析配置内容"""
    try:
        if suffix == ".toml":
            data = toml.loads(text)
        elif suffix == ".json":
            data = json.loads(text)
        elif suffix in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            raise ConfigParseError(f"不支持的配置文件格式: {suffix}")
    except (toml.TomlDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigParseError(f"配置文件解析失败: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigParseError("配置文件顶层必须是表/对象")
    return data


async def load_config(config_path: str) -> ModAddConfig:
    """加载配置文件，并按其中的日志设置配置 loguru"""
    path = Path(config_path)
    if not path.exists():
        raise ConfigParseError(f"配置文件不存在: {config_path}")

    async with aiofiles.open(path) as cfg_file:
        text = await cfg_file.read()

    config = ModAddConfig.from_dict(parse_config(text, path.suffix.lower()))
    config.apply_env()
    config.setup_logging()
    logger.debug(f"已加载配置 {config_path}")
    return config


def create_clients(
    config: ModAddConfig,
) -> Tuple[ModrinthClient, CurseForgeClient, GitHubClient]:
    """根据配置创建三个平台的客户端"""
    if not config.curseforge_api_key:
        logger.warning("未配置 CurseForge API key，CurseForge 请求可能被拒绝")
    return (
        ModrinthClient(),
        CurseForgeClient(config.curseforge_api_key),
        GitHubClient(config.github_token),
    )
