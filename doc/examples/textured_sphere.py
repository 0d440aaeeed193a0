"""
================
Textured Spheres
================

This example shows how to build a sphere mesh with texture coordinates from a
subdivided octahedron, ready to be wrapped with an earth texture such as the
NASA Blue Marble images.

Let's start by importing the necessary modules.
"""

import numpy as np

from octasphere.core.sphere import create_sphere
from octasphere.core.subdivide import create_unit_sphere
from octasphere.core.texture import pole_mask, polygon_texture_coords
from octasphere.core.topology import euler_characteristic_check, weld_vertices

###############################################################################
# ``create_unit_sphere`` splits each of the 8 faces of the octahedron in four,
# ``recursion_depth`` times, and pushes the new vertices onto the unit sphere.

vertices, faces = create_unit_sphere(recursion_depth=3)
print("%d vertices, %d faces" % (len(vertices), len(faces)))

###############################################################################
# Every face creates its own midpoints, so the vertices along shared edges are
# duplicated. The mesh is not a closed surface until they are welded.

print(euler_characteristic_check(faces))
welded, welded_faces = weld_vertices(vertices, faces)
print("%d distinct vertices" % len(welded))
print(euler_characteristic_check(welded_faces))

###############################################################################
# Texture coordinates are given per face corner. The faces along the texture
# seam and around the poles get their own ``u`` so that no face spans the
# whole width of the texture.

uv = polygon_texture_coords(vertices, faces)
poles = pole_mask(vertices[faces])
u = np.where(poles, np.nan, uv[..., 0])
spread = np.nanmax(u, -1) - np.nanmin(u, -1)
print("widest face: %.3f of the texture" % spread.max())

###############################################################################
# ``create_sphere`` does all of the above, scales the sphere and assigns a
# color to each face. ``color=-1`` keeps one color per octahedron face.

model = create_sphere(scale=6371, recursion_depth=4, color=-1,
                      texture_url="textures/earth.jpg")
print(model)
print(np.unique(model.polygon_colors))
