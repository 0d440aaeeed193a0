"""Equirectangular texture coordinates for triangles on the unit sphere.

Texture coordinates are generated per face corner rather than per vertex:
a vertex on the texture seam needs ``u = 0`` in the faces on one side of the
seam and ``u = 1`` in the faces on the other side, and a vertex at a pole
needs the longitude of whichever face it closes.

The texture follows the OpenGL convention of an origin at the bottom left,
so the north pole (``y = 1``) is at ``v = 1`` and the seam (the meridian
through ``(-1, 0, 0)``) is at the left and right edges.
"""
import warnings

import numpy as np

from octasphere.core.geometry import cart2lonlat, vector_norm

__all__ = ['SEAM_THRESHOLD', 'POLE_TOLERANCE', 'vertex_uv', 'pole_mask',
           'correct_seam', 'polygon_texture_coords', 'texture_coordinates']

# Largest u range a face may span before it is taken to straddle the seam.
SEAM_THRESHOLD = 0.5

# Distance from the y axis below which a point's longitude is undefined.
POLE_TOLERANCE = 1e-9


def vertex_uv(vertices):
    r"""Longitude/latitude texture coordinates of points on the unit sphere.

    Parameters
    ----------
    vertices : (..., 3) array_like
        Unit vectors.

    Returns
    -------
    uv : (..., 2) ndarray
        $u = (\phi + \pi) / 2\pi$ with $\phi$ = atan2(z, x), and
        $v = 1 - \theta / \pi$ with $\theta$ = acos(y), both in [0, 1].

    Examples
    --------
    >>> vertex_uv([[1., 0, 0], [0, 1., 0], [0, 0, -1.]])
    array([[ 0.5 ,  0.5 ],
           [ 0.5 ,  1.  ],
           [ 0.25,  0.5 ]])

    """
    x, y, z = np.moveaxis(np.asarray(vertices, dtype=float), -1, 0)
    phi, theta = cart2lonlat(x, y, z)
    u = (phi + np.pi) / (2 * np.pi)
    v = 1. - theta / np.pi
    return np.stack([u, v], axis=-1)


def pole_mask(vertices, tol=POLE_TOLERANCE):
    """Find points at the poles, where the longitude is undefined.

    Parameters
    ----------
    vertices : (..., 3) array_like
    tol : float, optional

    Returns
    -------
    poles : (...) ndarray of bool

    """
    x, _, z = np.moveaxis(np.asarray(vertices, dtype=float), -1, 0)
    return np.hypot(x, z) <= tol


def correct_seam(u, poles, threshold=SEAM_THRESHOLD):
    """Make the u coordinates of each face contiguous across the seam.

    ``u = 0`` and ``u = 1`` are the same meridian. A face next to the seam
    can get corners on both ends of the texture, which would stretch the
    texture over its whole width. For each face whose corners (ignoring
    poles) span more than `threshold`, the side of the seam the face lies on
    is decided from the mean u of its corners that are not on the seam
    itself, or of all its corners if they all are. Corners on the other side
    are then moved by one full turn.

    Pole corners get the mean u of the other corners of their face.

    Parameters
    ----------
    u : (T, 3) array_like
        u coordinate of each corner of each face.
    poles : (T, 3) array_like of bool
        Which corners are at a pole.
    threshold : float, optional
        Largest u range of a face that does not straddle the seam. Also the
        mean u above which a straddling face belongs to the right edge of
        the texture.

    Returns
    -------
    u : (T, 3) ndarray
        Corrected u coordinates.

    Notes
    -----
    Corners are moved by exactly one, so u stays within [0, 1] as long as
    the seam meridian is made of mesh edges, which holds for the
    subdivided octahedron at every level.

    """
    u = np.array(u, dtype=float)
    valid = ~np.asarray(poles, dtype=bool)

    spread = (np.where(valid, u, -np.inf).max(-1) -
              np.where(valid, u, np.inf).min(-1))
    crosses = spread > threshold

    on_seam = np.isclose(u, 0.) | np.isclose(u, 1.)
    deciding = valid & ~on_seam
    deciding = np.where(deciding.any(-1, keepdims=True), deciding, valid)
    band = ((u * deciding).sum(-1) /
            np.maximum(deciding.sum(-1), 1))
    high = (band >= threshold)[:, None]

    wrap = valid & crosses[:, None]
    u += wrap & high & (u < threshold)
    u -= wrap & ~high & (u > threshold)

    n_valid = valid.sum(-1)
    sibling_u = np.where(n_valid > 0,
                         (u * valid).sum(-1) / np.maximum(n_valid, 1),
                         0.5)
    return np.where(valid, u, sibling_u[:, None])


def polygon_texture_coords(vertices, faces):
    """Texture coordinates for every corner of every face.

    Parameters
    ----------
    vertices : (V, 3) array_like
        Vertices on the unit sphere (not scaled yet).
    faces : (T, 3) array_like
        Indices into vertices.

    Returns
    -------
    uv : (T, 3, 2) ndarray
        ``uv[t, k]`` are the (u, v) coordinates of vertex ``faces[t, k]``
        as a corner of face ``t``.

    """
    vertices = np.asarray(vertices, dtype=float)
    corners = vertices[np.asarray(faces, dtype=np.intp)]
    if not np.allclose(vector_norm(corners), 1):
        warnings.warn("Vertices are not on the unit sphere.")

    uv = vertex_uv(corners)
    uv[..., 0] = correct_seam(uv[..., 0], pole_mask(corners))
    return uv


def texture_coordinates(vertices, faces):
    """Texture coordinates as a flat list with one index triple per face.

    Parameters
    ----------
    vertices : (V, 3) array_like
    faces : (T, 3) array_like

    Returns
    -------
    texture_coords : (3 * T, 2) ndarray
        One (u, v) pair per face corner.
    polygon_texture_indices : (T, 3) ndarray
        Indices into `texture_coords` for the corners of each face.

    See Also
    --------
    polygon_texture_coords

    """
    uv = polygon_texture_coords(vertices, faces)
    indices = np.arange(uv.shape[0] * 3, dtype=np.intp).reshape(-1, 3)
    return uv.reshape(-1, 2), indices
