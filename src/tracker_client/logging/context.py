import structlog


def bind_project_context(project_id: str) -> None:
    """Attach the project being synced to every log line in this context."""
    structlog.contextvars.bind_contextvars(project_id=project_id)


def clear_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()


def unbind_project_context() -> None:
    """Drop the project binding, keeping the rest of the context."""
    structlog.contextvars.unbind_contextvars("project_id")
