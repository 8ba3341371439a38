"""Classic theme: black outlines on white, white and grey petals."""

from petal_plot.render.style import Theme

CLASSIC_THEME = Theme(
    name="classic",
    background_color="#ffffff",
    frame_stroke="#000000",
    frame_stroke_width=1.0,
    wedge_stroke="#000000",
    wedge_stroke_width=1.0,
    piece_colors=("white", "gray"),
    spoke_color="black",
    spoke_width=1.5,
    separator_color="#000000",
    separator_width=1.0,
    separator_dasharray="2,3",
    label_color="#000000",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=12.0,
    title_color="#000000",
    title_font_size=16.0,
    axis_label_font_size=12.0,
    legend_background="#ffffff",
    legend_stroke="#000000",
    legend_text_color="#000000",
    legend_font_size=12.0,
)
