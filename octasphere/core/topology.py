"""Edges, vertex welding and topological checks for triangle meshes."""
import numpy as np
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import connected_components
from scipy.spatial import cKDTree

__all__ = ['unique_sets', 'unique_edges', 'weld_vertices',
           'euler_characteristic_check']


def unique_sets(sets, return_inverse=False):
    """Remove duplicate sets.

    Parameters
    ----------
    sets : array (N, k)
        N sets of size k.
    return_inverse : bool
        If True, also returns the indices of unique_sets that can be used
        to reconstruct `sets` (the original ordering of each set may not be
        preserved).

    Returns
    -------
    unique_sets : array
        Unique sets.
    inverse : array (N,)
        The indices to reconstruct `sets` from `unique_sets`.

    """
    sets = np.sort(sets, 1)
    order = np.lexsort(sets.T)
    sets = sets[order]
    flag = np.ones(len(sets), 'bool')
    flag[1:] = (sets[1:] != sets[:-1]).any(-1)
    uniqsets = sets[flag]
    if return_inverse:
        inverse = np.empty_like(order)
        inverse[order] = np.arange(len(order))
        index = flag.cumsum() - 1
        return uniqsets, index[inverse]
    else:
        return uniqsets


def unique_edges(faces, return_mapping=False):
    r"""Extract all unique edges from given triangular faces.

    Parameters
    ----------
    faces : (N, 3) ndarray
        Vertex indices forming triangular faces.
    return_mapping : bool
        If true, a mapping to the edges of each face is returned.

    Returns
    -------
    edges : (E, 2) ndarray
        Unique edges, each sorted.
    mapping : (N, 3)
        For each face, [x, y, z], the index of its edges [a, b, c].
        ::

                y
                /\
               /  \
             a/    \b
             /      \
            /        \
           /__________\
          x      c     z

    """
    faces = np.asarray(faces)
    edges = np.concatenate([faces[:, 0:2], faces[:, 1:3], faces[:, ::2]])
    if return_mapping:
        ue, inverse = unique_sets(edges, return_inverse=True)
        return ue, inverse.reshape((3, -1)).T
    else:
        return unique_sets(edges)


def weld_vertices(vertices, faces, tol=1e-9):
    """Merge vertices that share a position.

    Vertices closer than `tol` are grouped, following chains of close
    neighbours, and each group is replaced by its first vertex. Vertices not
    referenced by any face are dropped.

    Parameters
    ----------
    vertices : (V, 3) ndarray
    faces : (T, 3) ndarray
    tol : float, optional
        Distance below which two vertices are the same.

    Returns
    -------
    vertices : (V', 3) ndarray
        Distinct referenced vertices, in order of first appearance.
    faces : (T, 3) ndarray
        Faces reindexed into the new vertices. Face order and winding are
        unchanged.

    """
    vertices = np.asarray(vertices, dtype=float)
    faces = np.asarray(faces)
    used = np.unique(faces)
    points = vertices[used]

    n = len(points)
    pairs = cKDTree(points).query_pairs(tol, output_type='ndarray')
    pairs = pairs.reshape(-1, 2)
    graph = coo_matrix((np.ones(len(pairs)), (pairs[:, 0], pairs[:, 1])),
                       shape=(n, n))
    n_groups, labels = connected_components(graph, directed=False)
    first = np.full(n_groups, n, dtype=np.intp)
    np.minimum.at(first, labels, np.arange(n))
    representative = first[labels]
    keep = representative == np.arange(n)
    compact = np.cumsum(keep) - 1

    index = np.full(len(vertices), -1, dtype=np.intp)
    index[used] = compact[representative]
    return points[keep], index[faces]


def euler_characteristic_check(faces, chi=2):
    r"""Checks the euler characteristic of a mesh

    If $f$ = number of faces, $e$ = number_of_edges and $v$ = number of
    vertices, the Euler formula says $f-e+v = 2$ for a mesh on a sphere. More
    generally, whether $f -e + v == \chi$ where $\chi$ is the Euler
    characteristic of the mesh.

    Only vertices referenced by a face are counted, so placeholder vertices
    do not matter. Meshes with duplicated vertices along shared edges are
    not closed surfaces and fail the check; weld them first.

    Parameters
    ----------
    faces : (T, 3) ndarray
    chi : int, optional
       The Euler characteristic of the mesh to be checked

    Returns
    -------
    check : bool
       True if the mesh has Euler characteristic $\chi$

    """
    faces = np.asarray(faces)
    v = len(np.unique(faces))
    e = len(unique_edges(faces))
    f = len(faces)
    return (f - e + v) == chi
