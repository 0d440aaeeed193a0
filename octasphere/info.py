""" This file contains defines parameters for octasphere that we use to fill
settings in setup.py, the octasphere top-level docstring, and for building the
docs.  In setup.py in particular, we exec this file, so it cannot import
octasphere
"""

# octasphere version information.  An empty _version_extra corresponds to a
# full release.  '.dev' as a _version_extra string means this is a development
# version
_version_major = 0
_version_minor = 3
_version_micro = 0
_version_extra = 'dev0'
# _version_extra = ''

# Format expected by setup.py and doc/source/conf.py: string of form "X.Y.Z"
__version__ = f"{_version_major}.{_version_minor}.{_version_micro}{_version_extra}"

CLASSIFIERS = ["Development Status :: 3 - Alpha",
               "Environment :: Console",
               "Intended Audience :: Developers",
               "Intended Audience :: Science/Research",
               "License :: OSI Approved :: BSD License",
               "Operating System :: OS Independent",
               "Programming Language :: Python :: 3",
               "Topic :: Multimedia :: Graphics :: 3D Modeling",
               "Topic :: Scientific/Engineering :: Mathematics"]

description = 'Textured unit spheres from recursively subdivided octahedra'

long_description = """
==========
octasphere
==========

octasphere builds triangle meshes of the unit sphere by recursively splitting
the faces of an octahedron and projecting the new vertices back onto the
sphere. It computes equirectangular (longitude/latitude) texture coordinates
for every face corner, with the texture seam and the poles handled per face,
so that an earth-like texture can be wrapped around the result.

License
=======
octasphere is licensed under the terms of the BSD license.
"""

# versions for dependencies. Check these against:
# README
# pyproject / requirements
NUMPY_MIN_VERSION = '1.22.4'
SCIPY_MIN_VERSION = '1.8'
TQDM_MIN_VERSION = '4.30.0'
LAZY_LOADER_MIN_VERSION = '0.1'
PYTEST_MIN_VERSION = '7.0'

# Main setup parameters
NAME = 'octasphere'
MAINTAINER = "octasphere developers"
MAINTAINER_EMAIL = ""
DESCRIPTION = description
LONG_DESCRIPTION = long_description
URL = ""
DOWNLOAD_URL = ""
LICENSE = "BSD license"
AUTHOR = "octasphere developers"
AUTHOR_EMAIL = ""
PLATFORMS = "OS Independent"
VERSION = __version__
PROVIDES = ["octasphere"]
INSTALL_REQUIRES = ["numpy>=%s" % NUMPY_MIN_VERSION,
                    "scipy>=%s" % SCIPY_MIN_VERSION,
                    "tqdm>=%s" % TQDM_MIN_VERSION,
                    "lazy_loader>=%s" % LAZY_LOADER_MIN_VERSION]
EXTRAS_REQUIRE = {"test": ["pytest>=%s" % PYTEST_MIN_VERSION]}
