from __future__ import annotations

from .generation_dashboard import make_generation_dashboard, rejection_counts

__all__ = ["make_generation_dashboard", "rejection_counts"]
