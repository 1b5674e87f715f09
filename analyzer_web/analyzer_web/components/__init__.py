from .sidebar import sidebar
from .analyzer_panel import analyzer_page
from .log_table import logs_page

__all__ = ["sidebar", "analyzer_page", "logs_page"]
