from ._cubic_bezier_basis import cubic_bezier_basis
from ._cubic_bezier_evaluate import cubic_bezier_evaluate
from ._cubic_bezier_invert import cubic_bezier_invert
from ._cubic_bezier_is_monotonic import cubic_bezier_is_monotonic
from ._cubic_bezier_split import cubic_bezier_split

__all__ = [
    "cubic_bezier_basis",
    "cubic_bezier_evaluate",
    "cubic_bezier_invert",
    "cubic_bezier_is_monotonic",
    "cubic_bezier_split",
]
