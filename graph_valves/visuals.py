"""Visualization helpers that turn release timelines into charts and GIFs."""
from __future__ import annotations

import io
from typing import Dict, List, Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.ticker import MaxNLocator  # noqa: E402
from PIL import Image  # noqa: E402

ACTION_COLOURS: Dict[str, str] = {
    "move": "#1f77b4",
    "activate": "#ff7f0e",
    "wait": "#7f7f7f",
}


def _draw(timeline: Sequence[dict], current_step: int) -> "plt.Figure":
    steps = [int(entry["step"]) for entry in timeline]
    flows = [int(entry["flow"]) for entry in timeline]
    released = [int(entry["released"]) for entry in timeline]
    horizon = max(steps) + 1

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.set_facecolor("#111111")
    fig.patch.set_facecolor("#111111")

    for step, flow, entry in zip(steps, flows, timeline):
        colour = ACTION_COLOURS.get(entry["action"], "#bbbbbb")
        alpha = 0.9 if step <= current_step else 0.25
        ax.bar(step + 1, flow, width=0.8, color=colour, alpha=alpha)

    ax_total = ax.twinx()
    shown = [value for step, value in zip(steps, released) if step <= current_step]
    ax_total.plot(range(1, len(shown) + 1), shown, color="#2ca02c", linewidth=2.0)
    ax_total.set_ylim(0, max(1, max(released) * 1.05))
    ax_total.tick_params(colors="white")
    ax_total.set_ylabel("Released", color="white")

    ax.axvline(current_step + 1, color="#ffffff", linewidth=1.5, linestyle="--", alpha=0.7)
    ax.set_xlim(0.5, horizon + 0.5)
    ax.set_ylim(0, max(1, max(flows) * 1.2))
    ax.set_xlabel("Minute", color="white")
    ax.set_ylabel("Flow per minute", color="white")
    ax.set_title("Valve release", color="white", fontsize=12)
    ax.xaxis.set_major_locator(MaxNLocator(integer=True, nbins=10))
    ax.tick_params(colors="white")
    fig.tight_layout()
    return fig


def render_release_chart(timeline: Sequence[dict], output_path: str, dpi: int = 120) -> None:
    """Save a PNG with per-step flow bars and the cumulative release line."""

    if not timeline:
        return
    fig = _draw(timeline, current_step=len(timeline) - 1)
    fig.savefig(output_path, format="png", dpi=dpi, bbox_inches="tight")
    plt.close(fig)


def render_release_gif(timeline: Sequence[dict], output_path: str, dpi: int = 80) -> None:
    """Render a GIF with one frame per step of the timeline."""

    if not timeline:
        return

    frames: List[Image.Image] = []
    for idx in range(len(timeline)):
        fig = _draw(timeline, current_step=idx)
        buf = io.BytesIO()
        fig.savefig(buf, format="png", dpi=dpi, bbox_inches="tight")
        plt.close(fig)
        buf.seek(0)
        frames.append(Image.open(buf).convert("P"))
        buf.close()

    first, *rest = frames
    first.save(output_path, format="GIF", save_all=True, append_images=rest, duration=200, loop=0)


__all__ = ["render_release_chart", "render_release_gif"]
