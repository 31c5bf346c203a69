from __future__ import annotations

from pathlib import Path
from typing import Optional

HAS_MPL = False
plt = None  # type: ignore[assignment]

try:  # pragma: no cover - optional dependency
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    HAS_MPL = True
except Exception:  # pragma: no cover - optional dependency missing
    plt = None  # type: ignore[assignment]


def ensure_parent(pathlike) -> Path:
    """Create the parent directory of *pathlike* and return it as a Path."""
    target = Path(pathlike)
    target.parent.mkdir(parents=True, exist_ok=True)
    return target


def panel_grid(cols: int):
    """One row of dashboard panels, or ``(None, None)`` without matplotlib."""
    if not HAS_MPL:
        return None, None
    fig, axes = plt.subplots(1, cols, figsize=(cols * 5.5, 4.0), squeeze=False)
    return fig, axes[0]


def style_axes(ax, title: str, xlabel: Optional[str] = None, ylabel: Optional[str] = None):
    if ax is None:
        return ax
    ax.set_title(title)
    if xlabel:
        ax.set_xlabel(xlabel)
    if ylabel:
        ax.set_ylabel(ylabel)
    ax.grid(True, axis="y", alpha=0.3)
    return ax


def save(fig, path) -> Path:
    """Write *fig* to *path*; without matplotlib only the directory is created."""
    target = ensure_parent(path)
    if fig is None or not HAS_MPL:
        return target
    fig.savefig(str(target), bbox_inches="tight")
    plt.close(fig)
    return target


__all__ = ["HAS_MPL", "ensure_parent", "panel_grid", "save", "style_axes"]
