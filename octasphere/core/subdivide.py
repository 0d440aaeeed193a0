r"""Create a unit sphere by subdividing all triangles of an octahedron
recursively.

The unit sphere has a radius of 1, which also means that all points in this
sphere (assumed to have centre at [0, 0, 0]) have an absolute value (modulus)
of 1. Another feature of the unit sphere is that the unit normals of this
sphere are exactly the same as the vertices.

Each level splits every face in four::

            c
            /\
           /  \
    m_ca  /____\  m_bc
         /\    /\
        /  \  /  \
       /____\/____\
      a     m_ab    b

The new vertices are the edge midpoints pushed back onto the sphere. By
default every face creates its own three midpoints, so an edge shared by two
faces yields two coincident vertices. Passing ``weld=True`` shares them
instead; see `FaceMidpointEmitter` and `EdgeMidpointEmitter`.

If you require a sphere with a radius other than 1, multiply the vertex array
by the new radius (see `octasphere.core.sphere.apply_scale`).
"""
import numbers

import numpy as np
from tqdm import tqdm

from octasphere.core.geometry import normalized_vector
from octasphere.core.topology import unique_edges
from octasphere.utils.logging import logger

__all__ = ['FaceMidpointEmitter', 'EdgeMidpointEmitter', 'subdivide',
           'create_unit_sphere', 'expected_face_count',
           'expected_vertex_count', 'OCTAHEDRON_VERTICES', 'OCTAHEDRON_FACES',
           'OCTAHEDRON_COLORS']


# Vertex 0 is a placeholder that no face references.
OCTAHEDRON_VERTICES = np.array(
    [[0.0, 0.0, 0.0],
     [-1.0, 0.0, 0.0],
     [1.0, 0.0, 0.0],
     [0.0, -1.0, 0.0],
     [0.0, 1.0, 0.0],
     [0.0, 0.0, -1.0],
     [0.0, 0.0, 1.0], ])
OCTAHEDRON_VERTICES.flags.writeable = False

# counter-clockwise seen from outside, so face normals point outwards
OCTAHEDRON_FACES = np.array(
    [[1, 6, 4],
     [3, 6, 1],
     [6, 3, 2],
     [6, 2, 4],
     [4, 2, 5],
     [5, 1, 4],
     [3, 5, 2],
     [3, 1, 5], ], dtype=np.intp)
OCTAHEDRON_FACES.flags.writeable = False

OCTAHEDRON_COLORS = np.array([0, 1, 2, 7, 3, 4, 5, 6], dtype=np.intp)
OCTAHEDRON_COLORS.flags.writeable = False


def _edge_midpoints(vertices, edges):
    """Midpoints of ``edges`` (..., 2) projected onto the unit sphere.

    An edge with antipodal end points has its midpoint at the origin, which
    `normalized_vector` rejects.
    """
    return normalized_vector(vertices[edges].sum(-2) / 2.)


class FaceMidpointEmitter:
    """Emit three new midpoints for every face.

    Midpoints are appended face by face, in the order of the edges
    (a, b), (b, c), (c, a). Nothing is shared with neighbouring faces, so
    one level adds exactly ``3 * len(faces)`` vertices.
    """

    def __call__(self, vertices, faces):
        """
        Parameters
        ----------
        vertices : (V, 3) ndarray
        faces : (T, 3) ndarray

        Returns
        -------
        new_vertices : (N, 3) ndarray
            Vertices to append after `vertices`.
        mapping : (T, 3) ndarray
            Index of the midpoint of the edges (a, b), (b, c), (c, a) of
            each face, in the concatenated vertex array.
        """
        edges = np.stack([faces, np.roll(faces, -1, axis=1)], axis=-1)
        new_vertices = _edge_midpoints(vertices, edges).reshape(-1, 3)
        mapping = np.arange(len(vertices), len(vertices) + 3 * len(faces))
        return new_vertices, mapping.reshape(-1, 3)


class EdgeMidpointEmitter:
    """Emit one midpoint per unordered edge, shared by the faces around it.

    Edges are keyed by their sorted pair of parent vertex indices, so the
    two faces sharing an edge reference the same new vertex and the mesh
    stays welded from one level to the next.
    """

    def __call__(self, vertices, faces):
        edges, mapping = unique_edges(faces, return_mapping=True)
        new_vertices = _edge_midpoints(vertices, edges)
        return new_vertices, mapping + len(vertices)


def _check_depth(recursion_depth):
    if isinstance(recursion_depth, bool) or \
            not isinstance(recursion_depth, numbers.Integral):
        raise ValueError("recursion_depth must be an integer, got %r"
                         % (recursion_depth,))
    if recursion_depth < 0:
        raise ValueError("recursion_depth must be non-negative, got %d"
                         % recursion_depth)
    return int(recursion_depth)


def subdivide(vertices, faces, recursion_depth=3, weld=False, verbose=False):
    """Subdivide each face into four new faces, `recursion_depth` times.

    For a face [a, b, c] the midpoints m_ab, m_bc and m_ca are created and
    normalized, then the face is replaced by the faces [m_ab, m_bc, m_ca],
    [a, m_ab, m_ca], [b, m_bc, m_ab] and [c, m_ca, m_bc], in that order.
    All four keep the winding of their parent.

    Parameters
    ----------
    vertices : (V, 3) array_like
        Vertices, assumed to be on the unit sphere.
    faces : (T, 3) array_like
        Indices into vertices that form triangular faces.
    recursion_depth : int, optional
        Number of subdivision levels. 0 returns copies of the input.
    weld : bool, optional
        If True, midpoints are shared between the faces on both sides of an
        edge. The default creates them per face.
    verbose : bool, optional
        Show a progress bar over the levels.

    Returns
    -------
    vertices : (V', 3) ndarray
        The input vertices followed by the new ones.
    faces : (T * 4**recursion_depth, 3) ndarray
        The new faces; those of face ``t`` of the input are
        ``faces[t * 4**recursion_depth:(t + 1) * 4**recursion_depth]``.

    Raises
    ------
    ValueError
        If `recursion_depth` is not a non-negative integer or an edge has
        antipodal end points.
    IndexError
        If `faces` references vertices that do not exist.
    """
    recursion_depth = _check_depth(recursion_depth)
    vertices = np.array(vertices, dtype=float)
    faces = np.array(faces, dtype=np.intp)
    emit = EdgeMidpointEmitter() if weld else FaceMidpointEmitter()

    for level in tqdm(range(recursion_depth), disable=not verbose,
                      desc="Subdividing faces"):
        new_vertices, mapping = emit(vertices, faces)
        vertices = np.vstack([vertices, new_vertices])

        a, b, c = faces.T
        m_ab, m_bc, m_ca = mapping.T
        faces = np.stack([mapping,
                          np.column_stack([a, m_ab, m_ca]),
                          np.column_stack([b, m_bc, m_ab]),
                          np.column_stack([c, m_ca, m_bc])], axis=1)
        faces = faces.reshape(-1, 3)
        logger.debug("subdivision level %d: %d vertices, %d faces",
                     level + 1, len(vertices), len(faces))

    return vertices, faces


def create_unit_sphere(recursion_depth=3, weld=False, verbose=False):
    """Create a unit sphere by subdividing a unit octahedron.

    Starts with a unit octahedron and subdivides the faces, projecting the
    resulting points onto the surface of a unit sphere.

    Parameters
    ----------
    recursion_depth : int, optional
        Level of subdivision, recursion_depth=0 returns the octahedron.
    weld : bool, optional
        Share edge midpoints between neighbouring faces.
    verbose : bool, optional
        Show a progress bar.

    Returns
    -------
    vertices : ndarray
        Vertices of the sphere, including the unused placeholder at index 0.
    faces : ndarray
        ``8 * 4**recursion_depth`` faces.

    See Also
    --------
    subdivide, octasphere.core.sphere.create_sphere
    """
    return subdivide(OCTAHEDRON_VERTICES, OCTAHEDRON_FACES,
                     recursion_depth, weld=weld, verbose=verbose)


def expected_face_count(recursion_depth):
    """Number of faces of the octahedron after `recursion_depth` levels."""
    return 8 * 4 ** _check_depth(recursion_depth)


def expected_vertex_count(recursion_depth, weld=False):
    """Number of vertices of the subdivided octahedron.

    Includes the placeholder vertex. Without welding each level adds three
    vertices per face; with welding the closed mesh has
    ``4**(recursion_depth + 1) + 2`` vertices on the sphere.
    """
    recursion_depth = _check_depth(recursion_depth)
    if weld:
        return 4 ** (recursion_depth + 1) + 3
    return 7 + 3 * sum(8 * 4 ** k for k in range(recursion_depth))
