# chaoslab

A small laboratory of discrete dynamical systems and wavelet experiments,
built on NumPy. Every model keeps its state in NumPy arrays and advances one
generation per call, so you can drive it from a script, a notebook or your own
drawing loop.

## What is inside

- `chaoslab.sandpile`
  - `Sandpile(size, reach)`: an unstable interior cell gives `i` grains to each
    orthogonal neighbour at distance `i` (up to `reach`) and to each diagonal
    neighbour at distance `i` (up to `reach // 4`). `add_grains(x, y, amount)`,
    `clear_upper_half()`, `step()` (returns how many cells toppled) and the
    `threshold` property.
  - `AlternatingSandpile(size)`: cells with four grains or more shed two
    grains, alternating between horizontal and vertical neighbours each step.
  - `Sandpile3D(size, band)`: a cube where only a band of layers around the
    middle topples to its six face neighbours. `add_grains(layer, amount)` drops
    grains on a layer's centre cell; `layer(index)` returns a copy of one layer.
  - The outer rim never topples, so grains are conserved.
- `chaoslab.wire`: `WireGrid` with `random(size, rng)`, `toggle(x, y)`,
  `clear_upper_half()` and `step()`, plus `count_neighbours(cells, x, y)`.
  Cell states are `EMPTY`, `HEAD`, `TAIL` and `CONDUCTOR`.
- `chaoslab.langton`: `Ant(size)`, an ant on a torus; `step()` returns its new
  position and `is_set(x, y)` tells whether a cell is black.
- `chaoslab.lenia`: `growth` and `bell` curves, a `Kernel` of weighted offsets
  (`Kernel.ring(outer_radius)`, `shift`, `convolve`, `convolve_all`) and
  `Lenia(grid, kernel, mu, sigma, time_scale)` with `seed(x, y, rng)` and
  `step()`.
- `chaoslab.lyapunov`: `iterate`, `periodic_rate`, `lyapunov_exponent` (clamped
  to [-4, 4]), `exponent_at` for a pixel of a zoomable, rotatable view, and
  `exponent_colour` to turn an exponent into an RGB triple.
- `chaoslab.imaging`: `read_bmp(path)` for uncompressed 24-bit BMP files
  (rows top to bottom, `Rgb` named tuples; raises `BmpError`),
  `next_power_of_2(n)` and `normalize_for_display(coefficients)` to map a plane
  onto 0..255 bytes.
- `chaoslab.haar`: 1D and multi-level 2D Haar transforms, their inverses,
  `threshold_coefficients` and `compress(plane, levels, threshold)`.
- `chaoslab.daubechies`: the same for the four-tap Daubechies D4 wavelet:
  `decompose_1d`, `reconstruct_1d`, `transform_2d`, `inverse_transform_2d` and
  `compress`.

## Installation

```
pip install chaoslab
```

## Examples

Drop grains on a sandpile and let it topple:

```python
from chaoslab.sandpile import Sandpile

pile = Sandpile(size=64, reach=1)
pile.add_grains(32, 32, 10_000)
while pile.step():
    pass
```

Compress the red channel of a BMP image with Haar wavelets and show its
coefficients as bytes:

```python
import numpy as np
from chaoslab.imaging import read_bmp, normalize_for_display
from chaoslab import haar

pixels = read_bmp("picture.bmp")
red = np.array([[p.r for p in row] for row in pixels], dtype=float)
smoothed = haar.compress(red, levels=3, threshold=10.0)
preview = normalize_for_display(haar.haar_transform_2d(red, 3))
```

Colour one pixel of a Lyapunov fractal:

```python
from chaoslab.lyapunov import exponent_at, exponent_colour

exponent = exponent_at(300, 150, size=600, zoom=1.0)
r, g, b = exponent_colour(exponent)
```

Run Lenia from a random start:

```python
import numpy as np
from chaoslab.lenia import Lenia

world = Lenia(np.random.default_rng(1).random((64, 64)))
for _ in range(10):
    grid = world.step()
```

Walk Langton's ant:

```python
from chaoslab.langton import Ant

ant = Ant(size=100)
for _ in range(11_000):
    ant.step()
```

## What it does not do

- There is no window, viewer or command: models only compute their next
  state, and showing them is up to you.
- There is no colour-space conversion: `read_bmp` gives RGB pixels, and
  turning them into luma or chroma planes (or back) is left to the caller.
- There are no graph or adjacency-matrix tools.

## Running the tests

```
pip install "chaoslab[test]"
pytest
```