"""
假的 aiohttp session / response，用于在不联网的情况下测试客户端
"""


class FakeResponse:
    def __init__(self, status, body, url="https://example.invalid"):
        self.status = status
        self.body = body
        self.url = url

    async def json(self, content_type="application/json"):
        if isinstance(self.body, Exception):
            raise self.body
        return self.body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False


class FakeSession:
    closed = False

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    def get(self, url, params=None, headers=None):
        self.requests.append((url, headers))
        if self.error:
            raise self.error
        return self.response
