import numpy as np
import numpy.testing as npt

from octasphere.core.subdivide import OCTAHEDRON_FACES, create_unit_sphere
from octasphere.core.topology import (euler_characteristic_check,
                                      unique_edges, unique_sets,
                                      weld_vertices)
from octasphere.testing import assert_false, assert_true


def array_to_set(a):
    return {frozenset(i) for i in a}


def test_unique_edges():
    faces = np.array([[0, 1, 2], [1, 2, 0]])
    e = array_to_set([[1, 2], [0, 1], [0, 2]])

    u = unique_edges(faces)
    npt.assert_equal(e, array_to_set(u))

    u, m = unique_edges(faces, return_mapping=True)
    npt.assert_equal(e, array_to_set(u))
    edges = [[[0, 1], [1, 2], [2, 0]], [[1, 2], [2, 0], [0, 1]]]
    npt.assert_equal(np.sort(u[m], -1), np.sort(edges, -1))


def test_unique_sets():
    sets = np.array([[0, 1, 2], [1, 2, 0], [0, 2, 1], [1, 2, 3]])
    e = array_to_set([[0, 1, 2], [1, 2, 3]])

    # Run without inverse
    u = unique_sets(sets)
    npt.assert_equal(len(u), len(e))
    npt.assert_equal(array_to_set(u), e)

    # Run with inverse
    u, m = unique_sets(sets, return_inverse=True)
    npt.assert_equal(len(u), len(e))
    npt.assert_equal(array_to_set(u), e)
    npt.assert_equal(np.sort(u[m], -1), np.sort(sets, -1))


def test_octahedron_edges():
    edges = unique_edges(OCTAHEDRON_FACES)
    npt.assert_equal(len(edges), 12)
    # no edge joins antipodal vertices
    npt.assert_equal(array_to_set(edges) & array_to_set([[1, 2], [3, 4],
                                                         [5, 6]]), set())


def test_weld_vertices():
    vertices = np.array([[0., 0, 0],
                         [1, 0, 0],
                         [0, 1, 0],
                         [0, 0, 1],
                         [1, 0, 0],
                         [0, 1, 1e-12]])
    faces = np.array([[1, 2, 3], [4, 3, 5]])
    welded, welded_faces = weld_vertices(vertices, faces)
    npt.assert_array_equal(welded, vertices[1:4])
    npt.assert_array_equal(welded_faces, [[0, 1, 2], [0, 2, 1]])

    # only exact duplicates merge with a tiny tolerance
    welded, welded_faces = weld_vertices(vertices, faces, tol=1e-15)
    npt.assert_equal(len(welded), 4)
    npt.assert_array_equal(welded[welded_faces], vertices[faces])


def test_weld_keeps_geometry():
    vertices, faces = create_unit_sphere(3)
    welded, welded_faces = weld_vertices(vertices, faces)
    npt.assert_equal(len(welded), 4 ** 4 + 2)
    npt.assert_array_almost_equal(welded[welded_faces], vertices[faces])


def test_euler_characteristic():
    assert_true(euler_characteristic_check(OCTAHEDRON_FACES))
    # a single triangle is a disk
    assert_true(euler_characteristic_check([[0, 1, 2]], chi=1))
    assert_false(euler_characteristic_check([[0, 1, 2]]))
    # a subdivided sphere with duplicated midpoints is not closed
    _, faces = create_unit_sphere(1)
    assert_false(euler_characteristic_check(faces))


def test_weld_chained_vertices():
    # 2 is close to 0 and 3 is close to 2, but 3 is not close to 0
    vertices = np.array([[0., 0, 1],
                         [1, 0, 0],
                         [6e-10, 0, 1],
                         [1.2e-9, 0, 1]])
    faces = np.array([[0, 1, 2], [1, 2, 3]])
    welded, welded_faces = weld_vertices(vertices, faces)
    npt.assert_array_equal(welded, vertices[:2])
    npt.assert_array_equal(welded_faces, [[0, 1, 0], [1, 0, 0]])
    npt.assert_array_almost_equal(welded[welded_faces], vertices[faces])
