"""Rendering subpackage.

Turns immutable ``State`` snapshots into images. Rock, settled sand, the
source and the virtual floor each get a flat color; the grid is composed as a
NumPy RGB array and handed to Pillow, upscaled with nearest-neighbour so cells
stay crisp.

See :mod:`sandfall.renderer.image` for the palette and composition routine.
"""
