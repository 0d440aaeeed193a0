"""Utilities for testing."""
from functools import partial
import operator

import numpy as np
import numpy.testing as npt

from octasphere.core.geometry import outward_winding, vector_norm


def assert_operator(value1, value2, msg="", op=operator.eq):
    """Check Boolean statement."""
    try:
        if op == operator.is_:
            value1 = bool(value1)
        assert op(value1, value2)
    except AssertionError:
        raise AssertionError(msg.format(str(value2), str(value1)))


assert_greater_equal = partial(assert_operator, op=operator.ge,
                               msg="{0} >= {1}")
assert_less_equal = partial(assert_operator, op=operator.le,
                            msg="{0} =< {1}")
assert_true = partial(assert_operator, value2=True, op=operator.is_,
                      msg="False is not true")
assert_false = partial(assert_operator, value2=False, op=operator.is_,
                       msg="True is not false")


def assert_unit_norm(vertices, faces=None, atol=1e-9):
    """Check that vertices lie on the unit sphere.

    If `faces` is given only the vertices referenced by a face are checked,
    which skips placeholder vertices.
    """
    vertices = np.asarray(vertices)
    if faces is not None:
        vertices = vertices[np.unique(faces)]
    npt.assert_allclose(vector_norm(vertices), 1, rtol=0, atol=atol)


def assert_outward_winding(vertices, faces):
    """Check that every face is wound counter-clockwise seen from outside."""
    outward = outward_winding(vertices, faces)
    if not outward.all():
        raise AssertionError("faces %s point inwards"
                             % np.flatnonzero(~outward)[:10].tolist())


def check_for_warnings(warn_printed, w_msg):
    selected_w = [w for w in warn_printed if issubclass(w.category,
                                                        UserWarning)]
    assert len(selected_w) >= 1
    msg = [str(m.message) for m in selected_w]
    npt.assert_equal(w_msg in msg, True)
