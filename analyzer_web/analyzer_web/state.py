"""
Reflex 应用状态管理
所有业务状态保存在 AnalyzerSession 中，这里只做事件转发和前端变量投影
"""
from typing import Dict, List, Optional

import reflex as rx

from analyzer_client.api.client import DocumentAnalysisClient, PendingFile
from analyzer_client.core.session import AnalyzerSession, ViewMode, request_analysis, request_logs
from analyzer_client.utils.config_loader import configure_logging, load_settings
from analyzer_client.utils.display import LOG_COLUMNS, project_session

# 启动时读取配置：后端地址缺失直接报错，不会退化为相对路径请求
SETTINGS = load_settings()
configure_logging(SETTINGS.log_level)


class AppState(rx.State):
    """应用全局状态"""

    # ==================== 视图状态 ====================
    view_mode: str = ViewMode.ANALYZER.value  # analyzer, logs
    is_loading: bool = False
    backend_url: str = SETTINGS.backend_url

    # ==================== 文件状态 ====================
    file_names: List[str] = []

    # ==================== 结果状态 ====================
    has_result: bool = False
    summary: List[str] = []
    risk_score: str = ""
    opportunity_score: str = ""
    risk_clauses: List[str] = []
    opportunity_clauses: List[str] = []
    neutral_clauses: List[str] = []
    anomalies: List[str] = []

    # ==================== 日志状态 ====================
    log_rows: List[Dict[str, str]] = []
    log_placeholder: str = ""
    log_placeholder_span: int = len(LOG_COLUMNS)

    # 仅后端可见
    _session: Optional[AnalyzerSession] = None

    def _get_session(self) -> AnalyzerSession:
        if self._session is None:
            client = DocumentAnalysisClient(SETTINGS.backend_url, timeout=SETTINGS.request_timeout)
            self._session = AnalyzerSession(client)
        return self._session

    def _commit(self, session: AnalyzerSession) -> None:
        """把 session 写回并刷新前端变量"""
        # 重新赋值以标记后端变量已修改
        self._session = session
        view = project_session(session, SETTINGS.score_scale, SETTINGS.log_cell_chars)
        for name, value in view.items():
            setattr(self, name, value)

    # ==================== 文件选择 ====================
    async def select_files(self, files: List[rx.UploadFile]):
        """追加用户选择的文件（不去重、不限类型）"""
        picked = []
        for file in files:
            content = await file.read()
            picked.append(PendingFile(
                name=file.filename,
                content=content,
                content_type=file.content_type or "application/octet-stream",
            ))

        session = self._get_session()
        session.select_files(picked)
        self._commit(session)

    def clear_files(self):
        session = self._get_session()
        session.clear_files()
        self._commit(session)

    # ==================== 分析 (后台任务) ====================
    @rx.event(background=True)
    async def analyze(self):
        """上传全部已选文件并刷新分析结果"""
        async with self:
            session = self._get_session()
            files = session.begin_analyze()
            client = session.client
            self._commit(session)
            notices = session.drain_notices()

        if files is not None:
            outcome = (None, None)
            try:
                outcome = await request_analysis(client, files)
            finally:
                async with self:
                    session = self._get_session()
                    session.finish_analyze(*outcome)
                    self._commit(session)
                    notices = session.drain_notices()

        for message in notices:
            yield rx.window_alert(message)

    # ==================== 日志 (后台任务) ====================
    @rx.event(background=True)
    async def view_logs(self):
        """切换到日志视图并拉取日志"""
        async with self:
            session = self._get_session()
            session.show_logs()
            started = session.begin_fetch_logs()
            client = session.client
            self._commit(session)

        if not started:
            return

        outcome = (None, None)
        try:
            outcome = await request_logs(client)
        finally:
            async with self:
                session = self._get_session()
                session.finish_fetch_logs(*outcome)
                self._commit(session)
                notices = session.drain_notices()

        for message in notices:
            yield rx.window_alert(message)

    def return_to_analyzer(self):
        session = self._get_session()
        session.return_to_analyzer()
        self._commit(session)
