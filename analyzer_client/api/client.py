"""
分析服务 HTTP 客户端

封装后端的两个接口：
- POST /upload-documents/  多文件上传并返回合并分析结果
- GET  /logs/              请求/响应日志列表

所有传输错误、非 2xx 状态、以及无法解析的响应体统一转换为 AnalysisServiceError，
调用方只需捕获这一种异常。
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

import requests
from pydantic import TypeAdapter, ValidationError

from analyzer_client.api.schemas import AnalysisResult, LogEntry

logger = logging.getLogger(__name__)

UPLOAD_PATH = "/upload-documents/"
LOGS_PATH = "/logs/"
UPLOAD_FIELD = "files"

_LOG_LIST = TypeAdapter(List[LogEntry])


@dataclass
class PendingFile:
    """A file picked by the user and staged for upload."""

    name: str
    content: bytes
    content_type: str = "application/octet-stream"


class ServiceErrorKind(str, Enum):
    """Why a backend call failed; all kinds are shown to the user the same way."""

    TRANSPORT = "transport"
    SERVER_REJECTED = "server_rejected"
    MALFORMED = "malformed"


class AnalysisServiceError(RuntimeError):
    """Failure talking to the analysis backend."""

    def __init__(self, kind: ServiceErrorKind, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code


class DocumentAnalysisClient:
    """
    分析服务客户端

    使用 requests 直接调用后端接口；异步方法通过 run_in_executor 包装同步调用，
    避免阻塞 UI 事件循环。

    使用方式：
        client = DocumentAnalysisClient("https://analyzer.example.com")
        result = client.upload_documents(files)

        # 异步调用
        result = await client.aupload_documents(files)
    """

    def __init__(self, base_url: str, timeout: float = 300):
        """
        Args:
            base_url: 后端地址（不含路径）
            timeout: 单次请求的传输超时（秒）
        """
        if not base_url:
            raise ValueError("base_url must not be empty")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def upload_documents(self, files: Sequence[PendingFile]) -> AnalysisResult:
        """
        上传全部文件并返回合并分析结果（同步）

        每个文件对应一个名为 ``files`` 的 multipart 分段。
        """
        url = f"{self.base_url}{UPLOAD_PATH}"
        parts = [(UPLOAD_FIELD, (f.name, f.content, f.content_type)) for f in files]
        payload = self._send("POST", url, files=parts)
        try:
            result = AnalysisResult.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Malformed analysis response from {url}: {e}")
            raise AnalysisServiceError(ServiceErrorKind.MALFORMED, f"Malformed analysis response: {e}")
        logger.info(f"Analyzed {len(files)} file(s) via {url}")
        return result

    def list_logs(self) -> List[LogEntry]:
        """获取后端请求日志（同步）"""
        url = f"{self.base_url}{LOGS_PATH}"
        payload = self._send("GET", url)
        try:
            entries = _LOG_LIST.validate_python(payload)
        except ValidationError as e:
            logger.error(f"Malformed log response from {url}: {e}")
            raise AnalysisServiceError(ServiceErrorKind.MALFORMED, f"Malformed log response: {e}")
        logger.info(f"Fetched {len(entries)} log entries")
        return entries

    async def aupload_documents(self, files: Sequence[PendingFile]) -> AnalysisResult:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, lambda: self.upload_documents(files))

    async def alist_logs(self) -> List[LogEntry]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.list_logs)

    def _send(self, method: str, url: str, **kwargs):
        try:
            response = requests.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise AnalysisServiceError(ServiceErrorKind.TRANSPORT, f"Request to {url} failed: {e}")

        if not response.ok:
            logger.error(f"{method} {url} returned {response.status_code}: {response.text[:200]}")
            raise AnalysisServiceError(
                ServiceErrorKind.SERVER_REJECTED,
                f"Backend returned {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{method} {url} returned a non-JSON body: {e}")
            raise AnalysisServiceError(ServiceErrorKind.MALFORMED, f"Response is not JSON: {e}")
