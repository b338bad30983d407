"""Rendering subpackage.

Turns a composited :class:`texel_universe.buffer.Grid` into something a
person can look at:

* :mod:`texel_universe.renderer.text` for plain text and 24-bit ANSI colour
  output suitable for a terminal.
* :mod:`texel_universe.renderer.image` for Pillow images (and NumPy arrays)
  with one rectangle per cell.

Renderers only read the grid; they never mutate it.
"""
