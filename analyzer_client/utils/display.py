from typing import Any, Dict, List, Sequence, Union

from analyzer_client.api.schemas import LogEntry
from analyzer_client.core.session import AnalyzerSession

NO_LOGS_MESSAGE = "No logs found."
LOG_COLUMNS = ("ID", "Request", "Response", "Timestamp")
ELLIPSIS = "…"


def format_score(score: Union[int, float], scale: int = 10) -> str:
    """Render a rating against its fixed scale, e.g. ``2 / 10``; the number itself is shown in full."""
    value = float(score)
    text = str(int(value)) if value.is_integer() else repr(value)
    return f"{text} / {scale}"


def single_line(text: str) -> str:
    """Collapse all whitespace runs (newlines included) into single spaces."""
    return " ".join(str(text).split())


def truncate_cell(text: str, limit: int) -> str:
    """
    Cap the visible characters of a table cell.

    Display-only: callers keep the full value for the tooltip.
    """
    flat = single_line(text)
    if len(flat) <= limit:
        return flat
    return flat[: limit - 1].rstrip() + ELLIPSIS


def log_table_rows(entries: Sequence[LogEntry], cell_chars: int) -> List[Dict[str, str]]:
    """Turn log entries into table rows, in backend order, with truncated request/response cells."""
    rows = []
    for entry in entries:
        rows.append({
            "id": str(entry.id),
            "request": truncate_cell(entry.request, cell_chars),
            "request_full": entry.request,
            "response": truncate_cell(entry.response, cell_chars),
            "response_full": entry.response,
            "timestamp": entry.timestamp,
        })
    return rows


def log_table_view(entries: Sequence[LogEntry], cell_chars: int) -> Dict[str, Any]:
    """
    日志表的前端变量

    有日志时给出逐行数据；列表为空时给出占满整行的提示文本和跨列数，二者只会出现其一。
    """
    rows = log_table_rows(entries, cell_chars)
    return {
        "log_rows": rows,
        "log_placeholder": "" if rows else NO_LOGS_MESSAGE,
        "log_placeholder_span": len(LOG_COLUMNS),
    }


def project_session(session: AnalyzerSession, score_scale: int, cell_chars: int) -> Dict[str, Any]:
    """
    把 AnalyzerSession 投影为前端变量字典（键名与 AppState 的变量一致）

    Args:
        session: 当前用户的会话
        score_scale: 评分满分
        cell_chars: 日志单元格最大可见字符数
    """
    view = {
        "view_mode": session.view.value,
        "is_loading": session.loading,
        "file_names": [f.name for f in session.files],
        "has_result": session.result is not None,
        "summary": [],
        "risk_score": "",
        "opportunity_score": "",
        "risk_clauses": [],
        "opportunity_clauses": [],
        "neutral_clauses": [],
        "anomalies": [],
    }

    result = session.result
    if result is not None:
        view.update({
            "summary": list(result.summary),
            "risk_score": format_score(result.ratings.risk_score, score_scale),
            "opportunity_score": format_score(result.ratings.opportunity_score, score_scale),
            "risk_clauses": list(result.clauses.risk),
            "opportunity_clauses": list(result.clauses.opportunity),
            "neutral_clauses": list(result.clauses.neutral),
            "anomalies": list(result.anomalies),
        })

    view.update(log_table_view(session.logs, cell_chars))
    return view
