"""Dark grey theme."""

from petal_plot.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    frame_stroke="#aaaaaa",
    frame_stroke_width=1.0,
    wedge_stroke="#e0e0e0",
    wedge_stroke_width=1.0,
    piece_colors=("#4a90c2", "#c27a4a"),
    spoke_color="#ffffff",
    spoke_width=1.5,
    separator_color="#888888",
    separator_width=1.0,
    separator_dasharray="2,3",
    label_color="#e0e0e0",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=12.0,
    title_color="#ffffff",
    title_font_size=16.0,
    axis_label_font_size=12.0,
    legend_background="rgba(0, 0, 0, 0.3)",
    legend_stroke="rgba(255, 255, 255, 0.2)",
    legend_text_color="#e0e0e0",
    legend_font_size=12.0,
)
