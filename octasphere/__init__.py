"""
Sphere meshes in Python
=======================

Subpackages
-----------
::

 core            -- Sphere meshes and their texture coordinates
 core.geometry   -- Vector norms, face normals, longitude and latitude
 core.subdivide  -- Recursive subdivision of the octahedron
 core.texture    -- Per-corner texture coordinates with seam correction
 core.sphere     -- Textured sphere models and their options
 core.topology   -- Edges, vertex welding, Euler characteristic
 testing         -- Assertions for meshes
 utils           -- Logging

Utilities
---------
::

 __version__   -- octasphere version

"""
from octasphere.info import __version__

submodules = [
    'core',
    'testing',
    'utils',
]

__all__ = submodules + ['__version__']
