from .config import get_logger, setup_logging
from .context import bind_project_context, clear_context, unbind_project_context

__all__ = [
    "setup_logging",
    "get_logger",
    "bind_project_context",
    "unbind_project_context",
    "clear_context",
]
