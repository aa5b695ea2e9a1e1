"""
API 客户端基类

提供 aiohttp session 管理和统一的请求/错误处理。
"""

import asyncio
from typing import Any, Callable, Optional, Type, TypeVar

import aiohttp
from loguru import logger

from modadd.exceptions import APIError

T = TypeVar("T")


class APIClient:
    """平台 API 客户端基类"""

    BASE_URL = ""
    error_class: Type[APIError] = APIError

    def __init__(self, session: Optional[aiohttp.ClientSession] = None):
        self._session = session
        self._owned_session = session is None

    @property
    def session(self) -> aiohttp.ClientSession:
        """获取或创建 aiohttp session"""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    def _headers(self) -> dict:
        return {}

    async def _request(self, endpoint: str, params: Optional[dict] = None) -> Any:
        """发送 API 请求，非 200 响应抛出平台对应的 APIError"""
        url = self.BASE_URL + endpoint
        logger.debug(f"请求 {url}")
        try:
            async with self.session.get(
                url, params=params, headers=self._headers()
            ) as response:
                if response.status == 200:
                    return await response.json()
                message = await self._error_message(response)
                raise self.error_class(
                    message, status=response.status, url=str(response.url)
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise self.error_class(f"请求失败: {e!r}", url=url) from e
        except ValueError as e:
            # 200 响应但返回体不是合法 JSON
            raise self.error_class(f"无法解析响应: {e}", url=url) from e

    def _parse(self, build: Callable[[Any], T], data: Any) -> T:
        """把返回体转换为模型，字段缺失或类型不符时抛出平台对应的 APIError"""
        try:
            return build(data)
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            raise self.error_class(f"响应数据格式异常: {e!r}") from e

    async def _error_message(self, response: aiohttp.ClientResponse) -> str:
        """尽量从返回体中取出错误描述"""
        try:
            body = await response.json(content_type=None)
        except (aiohttp.ContentTypeError, ValueError):
            body = None
        if isinstance(body, dict):
            for key in ("message", "description", "error"):
                if isinstance(body.get(key), str):
                    return body[key]
        return f"API 请求失败 (状态码: {response.status})"

    async def close(self):
        """关闭客户端"""
        if self._owned_session and self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        """异步上下文管理器入口"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """异步上下文管理器出口"""
        await self.close()
