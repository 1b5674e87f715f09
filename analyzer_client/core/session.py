"""
分析页面状态容器

与 UI 框架无关：Reflex 的 AppState 只负责把这里的状态投影到前端变量。

每个联网操作拆成 begin_* / finish_* 两段，便于 UI 在两段之间释放状态锁、
在锁外等待网络请求；analyze() / fetch_logs() 则把两段串起来直接使用。
"""

import logging
from enum import Enum
from typing import Iterable, List, Optional, Set, Tuple

from analyzer_client.api.client import AnalysisServiceError, DocumentAnalysisClient, PendingFile
from analyzer_client.api.schemas import AnalysisResult, LogEntry

logger = logging.getLogger(__name__)

NO_FILES_MESSAGE = "Please select at least one file."
ANALYZE_FAILED_MESSAGE = "Failed to analyze the documents."
LOGS_FAILED_MESSAGE = "Failed to fetch logs."

ANALYZE = "analyze"
FETCH_LOGS = "fetch_logs"


async def request_analysis(
    client: DocumentAnalysisClient,
    files: List[PendingFile],
) -> Tuple[Optional[AnalysisResult], Optional[AnalysisServiceError]]:
    """Upload files; service failures come back as the second element instead of raising."""
    try:
        return await client.aupload_documents(files), None
    except AnalysisServiceError as e:
        return None, e


async def request_logs(
    client: DocumentAnalysisClient,
) -> Tuple[Optional[List[LogEntry]], Optional[AnalysisServiceError]]:
    try:
        return await client.alist_logs(), None
    except AnalysisServiceError as e:
        return None, e


class ViewMode(str, Enum):
    ANALYZER = "analyzer"
    LOGS = "logs"


class AnalyzerSession:
    """Pending files, last result, logs, loading flag and view mode of one user."""

    def __init__(self, client: DocumentAnalysisClient):
        self.client = client
        self.files: List[PendingFile] = []
        self.result: Optional[AnalysisResult] = None
        self.logs: List[LogEntry] = []
        self.view: ViewMode = ViewMode.ANALYZER
        self._in_flight: Set[str] = set()
        self._notices: List[str] = []

    @property
    def loading(self) -> bool:
        return bool(self._in_flight)

    def is_busy(self, kind: str) -> bool:
        return kind in self._in_flight

    def drain_notices(self) -> List[str]:
        """Return user-facing messages raised since the last call and forget them."""
        notices, self._notices = self._notices, []
        return notices

    # ==================== 文件选择 ====================
    def select_files(self, files: Iterable[PendingFile]) -> None:
        # 追加而非替换，同名文件也保留
        self.files.extend(files)

    def clear_files(self) -> None:
        self.files = []

    # ==================== 分析 ====================
    def begin_analyze(self) -> Optional[List[PendingFile]]:
        """
        Validate and mark an analyze request as in flight.

        Returns the snapshot of files to upload, or None when nothing should be sent.
        """
        if not self.files:
            self._notices.append(NO_FILES_MESSAGE)
            return None
        if self.is_busy(ANALYZE):
            logger.warning("Analyze requested while a previous analyze is still running; ignored")
            return None
        self._in_flight.add(ANALYZE)
        return list(self.files)

    def finish_analyze(
        self,
        result: Optional[AnalysisResult] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self._in_flight.discard(ANALYZE)
        if error is not None:
            logger.error(f"Error uploading files: {error}")
            self._notices.append(ANALYZE_FAILED_MESSAGE)
        elif result is not None:
            self.result = result

    async def analyze(self) -> bool:
        """Upload every pending file and replace the result on success."""
        files = self.begin_analyze()
        if files is None:
            return False

        outcome = (None, None)
        try:
            outcome = await request_analysis(self.client, files)
        finally:
            self.finish_analyze(*outcome)
        return outcome[1] is None

    # ==================== 日志 ====================
    def begin_fetch_logs(self) -> bool:
        if self.is_busy(FETCH_LOGS):
            logger.warning("Log fetch requested while a previous fetch is still running; ignored")
            return False
        self._in_flight.add(FETCH_LOGS)
        return True

    def finish_fetch_logs(
        self,
        entries: Optional[List[LogEntry]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self._in_flight.discard(FETCH_LOGS)
        if error is not None:
            logger.error(f"Error fetching logs: {error}")
            self._notices.append(LOGS_FAILED_MESSAGE)
        elif entries is not None:
            self.logs = list(entries)

    async def fetch_logs(self) -> bool:
        if not self.begin_fetch_logs():
            return False

        outcome = (None, None)
        try:
            outcome = await request_logs(self.client)
        finally:
            self.finish_fetch_logs(*outcome)
        return outcome[1] is None

    # ==================== 视图切换 ====================
    def show_logs(self) -> None:
        self.view = ViewMode.LOGS

    async def view_logs(self) -> bool:
        self.show_logs()
        return await self.fetch_logs()

    def return_to_analyzer(self) -> None:
        self.view = ViewMode.ANALYZER
