# Init for core octasphere objects
"""Core objects"""

import lazy_loader as lazy

__getattr__, __dir__, __all__ = lazy.attach(
    __name__,
    submodules=[
        "geometry",
        "sphere",
        "subdivide",
        "texture",
        "topology",
    ],
)

__all__ += [
    "geometry",
    "sphere",
    "subdivide",
    "texture",
    "topology",
]
