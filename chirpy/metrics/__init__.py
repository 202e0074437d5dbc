"""Hit counting and metrics rendering."""

from chirpy.metrics.hit_counter import (
    ADMIN_METRICS_TEMPLATE,
    HitCounter,
    HitCounterMiddleware,
    render_admin_metrics,
    render_plain_metrics,
)

__all__ = [
    "ADMIN_METRICS_TEMPLATE",
    "HitCounter",
    "HitCounterMiddleware",
    "render_admin_metrics",
    "render_plain_metrics",
]
