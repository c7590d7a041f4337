from grid import Grid
from pieces import glyph


def render_text(grid: Grid) -> str:
    """Board drawing with column indices, e.g. for the default puzzle::

             0 1 2 3 4
             ----------
          0 |┘ ^ < └ v |
          1 |┬ ┤ ┴ ├ ├ |
    """
    w = grid.cols
    rule = "     " + "-" * (2 * w)
    lines = ["     " + "".join(f"{j} " for j in range(w)), rule]
    for i in range(grid.rows):
        cells = "".join(
            f"{glyph(grid.get_shape(i, j), grid.get_orientation(i, j))} " for j in range(w)
        )
        lines.append(f"  {i} |{cells}|")
    lines.append(rule)
    return "\n".join(lines) + "\n"
