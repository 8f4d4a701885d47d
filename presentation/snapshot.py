from io import BytesIO

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.patches import Rectangle  # noqa: E402

from analytics.breakdown import inputs_panel, results_panel  # noqa: E402
from config import SNAPSHOT  # noqa: E402
from logging_utils import get_logger  # noqa: E402
from models import Inputs, Results  # noqa: E402
from presentation.theme import palette, pill_colour  # noqa: E402

logger = get_logger(__name__)

FORMATS = {"jpeg": "image/jpeg", "jpg": "image/jpeg", "png": "image/png"}

TITLE = "PROPERTY WIZARD"
FOOTER = "Property Wizard — Analytical Tools for Investors"


def mime_type(fmt: str) -> str:
    return FORMATS[fmt.lower()]


def _panel_pairs(left, right):
    """Zip two panels row by row, padding the shorter with blanks."""
    left_rows = list(left.itertuples(index=False))
    right_rows = list(right.itertuples(index=False))
    n = max(len(left_rows), len(right_rows))
    left_rows += [None] * (n - len(left_rows))
    right_rows += [None] * (n - len(right_rows))
    return list(zip(left_rows, right_rows))


def _draw_header(ax, y, titles, p):
    for col, title in enumerate(titles):
        ax.add_patch(
            Rectangle((col, y), 1, 1, facecolor=p["header_bg"], edgecolor=p["header_border"])
        )
        ax.text(
            col + 0.5, y + 0.5, title.upper(),
            ha="center", va="center", family="monospace", weight="bold",
            fontsize=10, color=p["header_text"],
        )


def _draw_row(ax, y, pair, p, theme, stripe):
    fill = p["surface_alt"] if stripe else p["surface"]
    for col, row in enumerate(pair):
        ax.add_patch(Rectangle((col, y), 1, 1, facecolor=fill, edgecolor=p["border"]))
        if row is None:
            continue
        ax.text(col + 0.04, y + 0.5, row.Label, ha="left", va="center",
                family="monospace", fontsize=9, color=p["text"])
        value_kwargs = {}
        if row.Tone != "neutral":
            value_kwargs["bbox"] = {
                "boxstyle": "round,pad=0.25",
                "facecolor": pill_colour(row.Tone == "positive", theme),
                "edgecolor": "none",
            }
        ax.text(col + 0.96, y + 0.5, row.Value, ha="right", va="center",
                family="monospace", fontsize=9, weight="bold", color=p["text"],
                **value_kwargs)


def render_snapshot(inputs: Inputs, res: Results, theme: str = "light", fmt: str = "jpeg") -> bytes:
    """
    Render the calculator panel (inputs and results) to image bytes.

    fmt is 'jpeg'/'jpg' or 'png'. The image uses the theme background so a dark
    snapshot stays dark, matching what is on screen.
    """
    fmt = fmt.lower()
    if fmt not in FORMATS:
        raise ValueError(f"unsupported snapshot format: {fmt}")

    p = palette(theme)
    ipanel = inputs_panel(inputs)
    rpanel = results_panel(res)
    input_pairs = _panel_pairs(
        ipanel[ipanel["Panel"] == "Annual Expenses"],
        ipanel[ipanel["Panel"] == "Purchase & Finance"],
    )
    result_pairs = _panel_pairs(
        rpanel[rpanel["Panel"] == "Income"],
        rpanel[rpanel["Panel"] == "Performance Summary"],
    )

    n_rows = len(input_pairs) + len(result_pairs) + 2
    fig = plt.figure(figsize=(10, 0.45 * n_rows + 1.4), facecolor=p["surface"])
    try:
        ax = fig.add_axes([0.04, 0.1, 0.92, 0.78])
        ax.set_xlim(0, 2)
        ax.set_ylim(0, n_rows)
        ax.axis("off")

        y = n_rows - 1
        _draw_header(ax, y, ["Annual Expenses", "Purchase & Finance"], p)
        for i, pair in enumerate(input_pairs):
            y -= 1
            _draw_row(ax, y, pair, p, theme, stripe=i % 2 == 1)
        y -= 1
        _draw_header(ax, y, ["Income", "Performance Summary"], p)
        for i, pair in enumerate(result_pairs):
            y -= 1
            _draw_row(ax, y, pair, p, theme, stripe=i % 2 == 1)

        fig.text(0.04, 0.93, TITLE, family="monospace", weight="bold",
                 fontsize=16, color=p["text"])
        fig.text(0.04, 0.04, FOOTER, family="monospace", style="italic",
                 fontsize=8, color=p["muted"])

        buf = BytesIO()
        save_kwargs = {"format": "jpeg" if fmt in ("jpeg", "jpg") else "png",
                       "dpi": SNAPSHOT["dpi"], "facecolor": fig.get_facecolor()}
        if save_kwargs["format"] == "jpeg":
            save_kwargs["pil_kwargs"] = {"quality": SNAPSHOT["quality"]}
        fig.savefig(buf, **save_kwargs)
    finally:
        plt.close(fig)

    data = buf.getvalue()
    logger.info("rendered %s snapshot (%s theme, %d bytes)", fmt, theme, len(data))
    return data
