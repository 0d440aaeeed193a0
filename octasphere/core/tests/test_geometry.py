""" Testing vector and triangle utility functions

"""
import numpy as np
import numpy.testing as npt

from octasphere.core.geometry import (cart2lonlat, face_normals,
                                      normalized_vector, outward_winding,
                                      vector_norm)


def test_vector_norm():
    A = np.array([[1, 0, 0],
                  [3, 4, 0],
                  [0, 5, 12],
                  [1, 2, 3]])
    expected = np.array([1, 5, 13, np.sqrt(14)])
    npt.assert_array_almost_equal(vector_norm(A), expected)
    expected.shape = (4, 1)
    npt.assert_array_almost_equal(vector_norm(A, keepdims=True), expected)
    npt.assert_array_almost_equal(vector_norm(A.T, axis=0, keepdims=True),
                                  expected.T)


def test_normalized_vector():
    vec = [[3., 4, 0], [0, 0, 2]]
    npt.assert_array_almost_equal(normalized_vector(vec),
                                  [[0.6, 0.8, 0], [0, 0, 1]])
    npt.assert_raises(ValueError, normalized_vector, [[1., 0, 0], [0, 0, 0]])
    npt.assert_raises(ValueError, normalized_vector, [1e-300, 0, 0])


def test_cart2lonlat():
    phi, theta = cart2lonlat([1, 0, -1, 0, 0], [0, 1, 0, -1, 0],
                             [0, 0, 0, 0, 1])
    npt.assert_array_almost_equal(phi, [0, 0, np.pi, 0, np.pi / 2])
    npt.assert_array_almost_equal(theta, [np.pi / 2, 0, np.pi / 2, np.pi,
                                          np.pi / 2])
    # rounding errors above one do not give NaN
    _, theta = cart2lonlat(0, 1 + 1e-12, 0)
    npt.assert_equal(theta, 0)


def test_face_normals():
    vertices = np.array([[1., 0, 0], [0, 1., 0], [0, 0, 1.]])
    normals = face_normals(vertices, [[0, 1, 2], [0, 2, 1]])
    npt.assert_array_almost_equal(normals, [[1, 1, 1], [-1, -1, -1]])
    normals = face_normals(vertices, [[0, 1, 2]], normalize=True)
    npt.assert_array_almost_equal(normals, np.ones((1, 3)) / np.sqrt(3))


def test_outward_winding():
    vertices = np.array([[1., 0, 0], [0, 1., 0], [0, 0, 1.]])
    npt.assert_array_equal(outward_winding(vertices, [[0, 1, 2], [1, 0, 2],
                                                      [1, 2, 0]]),
                           [True, False, True])
