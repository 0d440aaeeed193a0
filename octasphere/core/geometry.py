""" Utility functions for vectors and triangles on the unit sphere """

import numpy as np

# norms below this are treated as zero-length vectors
_EPS = np.finfo(float).eps * 4.0


def vector_norm(vec, axis=-1, keepdims=False):
    """ Return vector Euclidean (L2) norm

    Parameters
    ----------
    vec : array_like
        Vectors to norm.
    axis : int
        Axis over which to norm. By default norm over last axis. If `axis` is
        None, `vec` is flattened then normed.
    keepdims : bool
        If True, the output will have the same number of dimensions as `vec`,
        with shape 1 on `axis`.

    Returns
    -------
    norm : array
        Euclidean norms of vectors.

    Examples
    --------
    >>> import numpy as np
    >>> vec = [[8, 15, 0], [0, 36, 77]]
    >>> vector_norm(vec)
    array([ 17.,  85.])
    >>> vector_norm(vec, keepdims=True)
    array([[ 17.],
           [ 85.]])
    >>> vector_norm(vec, axis=0)
    array([  8.,  39.,  77.])

    """
    vec = np.asarray(vec)
    vec_norm = np.sqrt((vec * vec).sum(axis))
    if keepdims:
        if axis is None:
            shape = [1] * vec.ndim
        else:
            shape = list(vec.shape)
            shape[axis] = 1
        vec_norm = vec_norm.reshape(shape)
    return vec_norm


def normalized_vector(vec, axis=-1):
    """ Return vector divided by its Euclidean (L2) norm

    Zero-length vectors have no direction, so they are rejected instead of
    being turned into NaNs.

    Parameters
    ----------
    vec : array_like shape (..., 3)

    Returns
    -------
    nvec : array
       vector divided by L2 norm

    Raises
    ------
    ValueError
        If any of the vectors has (numerically) zero length.

    Examples
    --------
    >>> vec = [1, 2, 3]
    >>> l2n = np.sqrt(np.dot(vec, vec))
    >>> nvec = normalized_vector(vec)
    >>> np.allclose(np.array(vec) / l2n, nvec)
    True
    >>> normalized_vector([[0, 0, 0]])
    Traceback (most recent call last):
        ...
    ValueError: cannot normalize a zero-length vector

    """
    norms = vector_norm(vec, axis, keepdims=True)
    if np.any(norms <= _EPS):
        raise ValueError("cannot normalize a zero-length vector")
    return np.asarray(vec) / norms


def cart2lonlat(x, y, z):
    r""" Return longitude and polar angle of Cartesian 3D coordinates

    The sphere is oriented with the y axis running south-north. The longitude
    `phi` is the angle between the positive x axis and the projection of the
    point onto the XZ plane, measured towards the positive z axis, so that
    $-\pi\le\phi\le\pi$. The polar angle `theta` is measured from the north
    pole (positive y), $0\le\theta\le\pi$.

    Parameters
    ----------
    x : array_like
       x coordinate in Cartesian space
    y : array_like
       y coordinate in Cartesian space
    z : array_like
       z coordinate

    Returns
    -------
    phi : array
       longitude
    theta : array
       polar angle from the north pole

    Notes
    -----
    Points are assumed to lie on the unit sphere. `y` is clipped to
    [-1, 1] before taking the arc cosine so rounding errors do not produce
    NaNs at the poles. The longitude of the poles themselves is undefined;
    whatever ``arctan2`` returns there is meaningless.

    """
    phi = np.arctan2(z, x)
    theta = np.arccos(np.clip(y, -1., 1.))
    phi, theta = np.broadcast_arrays(phi, theta)
    return phi, theta


def face_normals(vertices, faces, normalize=False):
    """ Normals of triangular faces from the cross product of two edges

    For a face [a, b, c] the normal is (b - a) x (c - a), so faces wound
    counter-clockwise when seen from outside get outward pointing normals.

    Parameters
    ----------
    vertices : (V, 3) ndarray
        XYZ coordinates of the vertices.
    faces : (T, 3) ndarray
        Indices into vertices.
    normalize : bool, optional
        Return unit normals.

    Returns
    -------
    normals : (T, 3) ndarray

    """
    vertices = np.asarray(vertices, dtype=float)
    a, b, c = (vertices[f] for f in np.asarray(faces).T)
    normals = np.cross(b - a, c - a)
    if normalize:
        normals = normalized_vector(normals)
    return normals


def outward_winding(vertices, faces):
    """ Check which faces of a closed mesh around the origin face outwards

    Parameters
    ----------
    vertices : (V, 3) ndarray
    faces : (T, 3) ndarray

    Returns
    -------
    outward : (T,) ndarray of bool
        True where the face normal points away from the origin, i.e. has a
        positive dot product with the face centroid.

    """
    vertices = np.asarray(vertices, dtype=float)
    centroids = vertices[np.asarray(faces)].mean(1)
    normals = face_normals(vertices, faces)
    return (normals * centroids).sum(-1) > 0
