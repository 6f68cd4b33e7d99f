# portal_check/viz.py
"""
Frame status diagram.

Draws the two columns and two rafters with each member coloured by its
check result (green safe, red unsafe). Drawing units are the input
millimetres; the apex rise is a drawing convention, not the analysed
geometry.
"""

import io
import os
from typing import Optional

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from .model import FrameInput, MEMBER_LABELS
from .results import FrameVerdict

COLORS = {
    'safe': '#2ca02c',
    'unsafe': '#d9534f',
    'outline': '#333333',
    'ground': '#333333',
    'background': '#FAFAFA',
    'text': '#2C3E50',
}


def _member_color(safe: bool) -> str:
    return COLORS['safe'] if safe else COLORS['unsafe']


def frame_outline(frame: FrameInput):
    """
    Key drawing points (mm): column bases, column heads and apex.

    Returns:
        dict with 'base_left', 'base_right', 'top_left', 'top_right', 'apex'
    """
    B = frame.width_mm
    H = frame.height_mm
    rise = min(B * 0.25, H * 0.6)
    return {
        'base_left': (0.0, 0.0),
        'base_right': (B, 0.0),
        'top_left': (0.0, H),
        'top_right': (B, H),
        'apex': (B / 2, H + rise),
    }


def plot_frame_status(
    frame: FrameInput,
    verdict: FrameVerdict,
    outpath: Optional[str] = None,
    ax=None,
    title: str = "Portal Frame: Member Status",
):
    """
    Plot the frame with members coloured by safe/unsafe status.

    Args:
        frame: Frame input (geometry)
        verdict: Result of run_analysis(frame)
        outpath: Optional file to save (.svg, .png, .pdf)
        ax: Optional matplotlib Axes to draw into
        title: Plot title

    Returns:
        The matplotlib Figure
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 6))
    else:
        fig = ax.figure
    ax.set_facecolor(COLORS['background'])

    pts = frame_outline(frame)
    B = frame.width_mm
    col_w = B * 0.018

    for key, x in (('col1', 0.0), ('col2', B - col_w)):
        worst = getattr(verdict, key)
        ax.add_patch(Rectangle(
            (x, 0.0), col_w, frame.height_mm,
            facecolor=_member_color(worst.safe), edgecolor=COLORS['outline'],
            label=MEMBER_LABELS[key],
        ))

    apex_x, apex_y = pts['apex']
    rafters = (
        ('beam1', (col_w / 2, frame.height_mm)),
        ('beam2', (B - col_w / 2, frame.height_mm)),
    )
    for key, (x0, y0) in rafters:
        worst = getattr(verdict, key)
        ax.plot(
            [x0, apex_x], [y0, apex_y],
            color=_member_color(worst.safe), linewidth=8, solid_capstyle='round',
            label=MEMBER_LABELS[key],
        )
        ax.annotate(
            f"{worst.util:.2f}", ((x0 + apex_x) / 2, (y0 + apex_y) / 2),
            textcoords='offset points', xytext=(0, 10), ha='center',
            color=COLORS['text'], fontsize=9,
        )

    for key, x in (('col1', 0.0), ('col2', B)):
        worst = getattr(verdict, key)
        ax.annotate(
            f"U={worst.util:.2f}\nN/Pcr={worst.buckling_ratio:.2f}",
            (x, frame.height_mm / 2), textcoords='offset points',
            xytext=(-12 if x == 0.0 else 12, 0), ha='right' if x == 0.0 else 'left',
            color=COLORS['text'], fontsize=9,
        )

    ax.axhline(0.0, color=COLORS['ground'], linewidth=2)
    ax.set_xlim(-0.15 * B, 1.15 * B)
    ax.set_ylim(-0.05 * apex_y, 1.1 * apex_y)
    ax.set_aspect('equal')
    ax.axis('off')
    status = "SAFE" if verdict.safe else "UNSAFE"
    ax.set_title(f"{title} ({status})", color=COLORS['text'])

    if outpath:
        directory = os.path.dirname(outpath)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fig.savefig(outpath, bbox_inches='tight')

    return fig


def frame_svg(frame: FrameInput, verdict: FrameVerdict) -> str:
    """Render the status diagram as an SVG string."""
    fig = plot_frame_status(frame, verdict)
    buf = io.StringIO()
    fig.savefig(buf, format='svg', bbox_inches='tight')
    plt.close(fig)
    return buf.getvalue()
