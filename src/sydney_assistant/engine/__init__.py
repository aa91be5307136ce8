from sydney_assistant.engine.responses import ResponseGenerator
from sydney_assistant.engine.statistics import compute_statistics
from sydney_assistant.engine.summary import (
    render_offline_summary,
    render_summary,
    summary_filename,
)

__all__ = [
    "ResponseGenerator",
    "compute_statistics",
    "render_offline_summary",
    "render_summary",
    "summary_filename",
]
