# chartkit

Building blocks for drawing charts in pure Python. It uses only the
standard library.

## What it contains

**`chartkit.drawing`** holds the vector-drawing primitives:

- `color`: `Color`, a frozen RGBA value. Build one with `Color.from_hex("13c158")`
  or `Color.from_hex("F00")`, or with `Color.from_alpha_mixed_rgba` from 16-bit
  premultiplied channels. It also offers `rgba`, `with_alpha`, `average_with`,
  `is_zero` and `is_transparent`. The module defines the constants `COLOR_WHITE`,
  `COLOR_BLACK`, `COLOR_RED`, `COLOR_GREEN`, `COLOR_BLUE` and `COLOR_TRANSPARENT`,
  and the function `color_channel_from_float`.
- `matrix`: `Matrix`, a 2D affine transform. Build one with `identity`,
  `translating`, `scaling_by`, `rotating` or `from_rects`. It can compose,
  scale, translate, rotate and invert itself in place. It can transform points,
  flat point lists and rectangles, and it can be compared with `is_close`,
  `is_identity` and `is_translation`.
- `path`: `Path`, a sequence of move, line, quadratic, cubic, arc and close
  commands, each tagged with a `PathComponent`.
- `curve`: Bézier subdivision (`subdivide_quad`, `subdivide_cubic`) and
  flattening (`trace_quad`, `trace_cubic`, `trace_arc`).
- `flattener`: `flatten` turns a `Path` into straight segments. The module also
  provides the `Transformer`, `DemuxFlattener` and `SegmentedPath` sinks and the
  `Liner` and `Flattener` protocols.
- `dasher`: `DashVertexConverter` splits lines into dashes and gaps.
- `stroker`: `LineStroker` turns centre lines into outline polygons.
- `context`: `StackGraphicContext` holds a drawing state with a current path.
  Call `save` and `restore` on it, or use the `saved()` context manager.
- `line`: `bresenham` and `polyline_bresenham`, generators that yield pixel
  coordinates.
- `text`: `draw_contour` traces a glyph contour given as fixed-point points.
  `FontExtents.scaled` computes font extents.
- `styles`: enums such as `LineCap`, `LineJoin`, `FillRule`, `Halign`, `Valign`,
  `ScalingPolicy` and `ImageFilter`, and style records such as `StrokeStyle`,
  `SolidFillStyle`, `TextStyle` and `ImageScaling`.
- `util`: DPI conversions (`pixels_to_points`, `points_to_pixels`), distances,
  fixed-point conversion and `DEFAULT_DPI`.

**Top-level modules** hold data and series helpers:

- `sequence`: `LinearSeq`, `linear_range` and `linear_range_with_step`.
- `series`: the `ValuesProvider` protocol, `EMASeries` (exponential moving
  average) and `HistogramSeries`.
- `regression`: `LinearRegressionSeries`, `LinearCoefficientSet`,
  `linear_coefficients` and `normalized_linear_coefficients`.
- `grid_line`: `GridLine` and `generate_grid_lines`.
- `colormap`: the `jet` colour map.
- `fileutil`: `read_lines` and `read_chunks`.

## Example

```python
from chartkit.sequence import linear_range
from chartkit.series import EMASeries
from chartkit.regression import LinearRegressionSeries
from chartkit.drawing.path import Path
from chartkit.drawing.flattener import flatten, SegmentedPath


class Points:
    def __init__(self, xs, ys):
        self.xs, self.ys = xs, ys

    def __len__(self):
        return len(self.xs)

    def values_at(self, index):
        return self.xs[index], self.ys[index]


xs = linear_range(1.0, 100.0)
data = Points(xs, xs)

ema = EMASeries(inner_series=data, period=26)
print(ema.last_values())

reg = LinearRegressionSeries(inner_series=data)
print(reg.first_values(), reg.last_values())

path = Path()
path.move_to(10, 20)
path.quad_curve_to(20, 20, 20, 10)
out = SegmentedPath()
flatten(path, out, 1.0)
print(out.points)
```

## What it does not do

chartkit does not assemble or render whole charts. It has no chart, axis or
legend objects, no raster or SVG output, and no font loading or glyph
rasterisation. Fonts and style fields are passed through as plain values.
The drawing modules produce geometry, such as flattened points, stroke
outlines and pixel coordinates. Painting that geometry is left to the caller.

## Running the tests

```
pip install -e .[test]
pytest
```