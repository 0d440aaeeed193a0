"""Textured sphere models built from a subdivided octahedron."""
import numbers

import numpy as np

from octasphere.core.subdivide import (OCTAHEDRON_COLORS, _check_depth,
                                       create_unit_sphere)
from octasphere.core.texture import texture_coordinates
from octasphere.utils.logging import logger

__all__ = ['SphereParameters', 'SphereModel', 'create_sphere', 'apply_scale',
           'set_color_for_all_polygons']


class SphereParameters:
    """Options of `create_sphere`.

    Options left as None take their default value.

    Parameters
    ----------
    scale : float, optional
        Radius of the sphere, applied to the unit vertices. Default 250.
    recursion_depth : int, optional
        Number of subdivision levels of the octahedron. Default 3.
    color : int, optional
        Color index given to all faces. -1 keeps a different color for the
        faces descending from each face of the octahedron. Default 9.
    texture_url : str, optional
        Location of the texture image, passed through to the model.
        Default "".
    weld : bool, optional
        Share edge midpoints between neighbouring faces. Default False.

    """
    defaults = {'scale': 250,
                'recursion_depth': 3,
                'color': 9,
                'texture_url': "",
                'weld': False}

    def __init__(self, scale=None, recursion_depth=None, color=None,
                 texture_url=None, weld=None):
        given = dict(scale=scale, recursion_depth=recursion_depth,
                     color=color, texture_url=texture_url, weld=weld)
        for name, value in given.items():
            if value is None:
                value = self.defaults[name]
            setattr(self, name, value)
        self._validate()

    @classmethod
    def from_dict(cls, parameters):
        """Create options from a mapping, e.g. parsed from a scene file.

        Unknown keys raise a TypeError.
        """
        return cls(**dict(parameters))

    def _validate(self):
        self.recursion_depth = _check_depth(self.recursion_depth)
        if not isinstance(self.scale, numbers.Real) or self.scale <= 0:
            raise ValueError("scale must be a positive number, got %r"
                             % (self.scale,))
        if isinstance(self.color, bool) or \
                not isinstance(self.color, numbers.Integral) or \
                self.color < -1:
            raise ValueError("color must be a color index or -1, got %r"
                             % (self.color,))
        if not isinstance(self.texture_url, str):
            raise ValueError("texture_url must be a string")
        if not isinstance(self.weld, (bool, np.bool_)):
            raise ValueError("weld must be True or False, got %r"
                             % (self.weld,))
        self.weld = bool(self.weld)

    def as_dict(self):
        return {name: getattr(self, name) for name in self.defaults}

    def __eq__(self, other):
        if not isinstance(other, SphereParameters):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        options = ", ".join("%s=%r" % item for item in self.as_dict().items())
        return "SphereParameters(%s)" % options


class SphereModel:
    """A sphere mesh ready to be rendered.

    Attributes
    ----------
    vertices : (V, 3) ndarray
        Scaled vertex positions. Index 0 is a placeholder that no face uses
        unless the mesh was welded after the fact.
    normals : (V, 3) ndarray
        Vertex normals, i.e. the unscaled vertex positions. Rows of vertices
        referenced by a face have unit length; the placeholder row 0 is
        zero.
    faces : (T, 3) ndarray
        Vertex indices of each triangle, counter-clockwise from outside.
    polygon_colors : (T,) ndarray
        Color index of each face.
    texture_coords : (3 * T, 2) ndarray
        (u, v) of every face corner.
    polygon_texture_indices : (T, 3) ndarray
        Indices into `texture_coords` of the corners of each face.
    texture_url : str
    parameters : SphereParameters
        The options the model was created with.

    """

    def __init__(self, vertices, normals, faces, polygon_colors,
                 texture_coords, polygon_texture_indices, texture_url="",
                 parameters=None):
        self.vertices = vertices
        self.normals = normals
        self.faces = faces
        self.polygon_colors = polygon_colors
        self.texture_coords = texture_coords
        self.polygon_texture_indices = polygon_texture_indices
        self.texture_url = texture_url
        self.parameters = parameters

    @property
    def polygon_texture_coords(self):
        """(T, 3, 2) texture coordinates of each face corner."""
        return self.texture_coords[self.polygon_texture_indices]

    def __repr__(self):
        return "SphereModel(%d vertices, %d faces)" % (len(self.vertices),
                                                        len(self.faces))


def apply_scale(vertices, scale):
    """Return a copy of `vertices` scaled by `scale`."""
    return np.asarray(vertices, dtype=float) * scale


def set_color_for_all_polygons(n_faces, color, default_colors=None):
    """Color index for each of `n_faces` faces.

    Parameters
    ----------
    n_faces : int
    color : int
        Color index for all faces, or -1 to use `default_colors`.
    default_colors : (N,) array_like, optional
        One color per face of the mesh before subdivision, the octahedron
        colors by default. As subdivision keeps the children of a face
        together, face ``t`` of the subdivided mesh gets
        ``default_colors[t // (n_faces // N)]``.

    Returns
    -------
    polygon_colors : (n_faces,) ndarray

    """
    if color != -1:
        return np.full(n_faces, color, dtype=np.intp)
    if default_colors is None:
        default_colors = OCTAHEDRON_COLORS
    default_colors = np.asarray(default_colors, dtype=np.intp)
    children, remainder = divmod(n_faces, len(default_colors))
    if remainder:
        raise ValueError("%d faces cannot descend from %d parent faces"
                         % (n_faces, len(default_colors)))
    return np.repeat(default_colors, children)


def create_sphere(parameters=None, **options):
    """Create a textured sphere model.

    The octahedron is subdivided, texture coordinates are computed on the
    unit sphere, then the vertices are scaled and the faces colored.

    Parameters
    ----------
    parameters : SphereParameters or dict, optional
        Options of the model. See `SphereParameters`.
    **options
        Options overriding those in `parameters`.

    Returns
    -------
    model : SphereModel

    """
    if isinstance(parameters, SphereParameters):
        parameters = parameters.as_dict()
    parameters = SphereParameters.from_dict(dict(parameters or {}, **options))

    unit_vertices, faces = create_unit_sphere(parameters.recursion_depth,
                                              weld=parameters.weld)
    texture_coords, texture_indices = texture_coordinates(unit_vertices,
                                                          faces)
    model = SphereModel(
        vertices=apply_scale(unit_vertices, parameters.scale),
        normals=unit_vertices,
        faces=faces,
        polygon_colors=set_color_for_all_polygons(len(faces),
                                                  parameters.color),
        texture_coords=texture_coords,
        polygon_texture_indices=texture_indices,
        texture_url=parameters.texture_url,
        parameters=parameters)
    logger.info("Created sphere with %d vertices and %d faces "
                "(recursion depth %d)", len(model.vertices), len(faces),
                parameters.recursion_depth)
    return model
