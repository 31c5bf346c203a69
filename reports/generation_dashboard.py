from __future__ import annotations

from pathlib import Path
from typing import Dict, Tuple

from fips_keygen.keypair import KeyPair
from utils.plotting import HAS_MPL, ensure_parent, panel_grid, save, style_axes

_TITLE = "Pseudo-prime Generation"
_REASONS: Tuple[Tuple[str, str], ...] = (
    ("too_close", "Too close to p"),
    ("undersized", "n² < 2^(2L-1)"),
    ("not_coprime", "gcd(n-1, e) ≠ 1"),
    ("composite", "Composite"),
)


def rejection_counts(keypair: KeyPair) -> Dict[str, Tuple[int, int]]:
    """Rejections per reason as ``{reason: (first prime, second prime)}``."""
    p_stats = keypair.p_stats.as_dict()
    q_stats = keypair.q_stats.as_dict()
    return {key: (p_stats[key], q_stats[key]) for key, _ in _REASONS}


def make_generation_dashboard(keypair: KeyPair, save_path: str | Path) -> Path:
    """Render the rejection-sampling dashboard to *save_path* and return the file path."""
    if not HAS_MPL:
        return ensure_parent(save_path)

    fig, axes = panel_grid(2)
    fig.suptitle(f"{_TITLE} (nlen={keypair.nlen}, seed={keypair.seed})", fontsize=14)

    counts = rejection_counts(keypair)
    labels = [label for _, label in _REASONS]
    positions = list(range(len(labels)))
    width = 0.4

    ax_rej = style_axes(axes[0], "Rejected candidates", ylabel="Count")
    ax_rej.bar([x - width / 2 for x in positions], [counts[k][0] for k, _ in _REASONS],
               width, label="p", color="#4c72b0")
    ax_rej.bar([x + width / 2 for x in positions], [counts[k][1] for k, _ in _REASONS],
               width, label="q", color="#dd8452")
    ax_rej.set_xticks(positions)
    ax_rej.set_xticklabels(labels, rotation=20, ha="right")
    ax_rej.legend()

    half = keypair.nlen // 2
    ax_bits = style_axes(axes[1], "Bit lengths", ylabel="Bits")
    names = ["p", "q", "n", "d", "e"]
    values = [int(v).bit_length() for v in (keypair.p, keypair.q, keypair.n, keypair.d, keypair.e)]
    ax_bits.bar(names, values, color=["#4c72b0", "#dd8452", "#55a868", "#c44e52", "#8172b2"])
    ax_bits.axhline(half, color="black", linestyle="--", linewidth=1, label=f"nlen/2 = {half}")
    ax_bits.legend()

    fig.tight_layout(rect=[0, 0, 1, 0.93])
    return save(fig, save_path)
