"""Default numerical settings for subdivision and lookup."""

PRECISION = 1e-3

MAX_DEPTH = 250


def default_tolerances() -> dict[str, float | int]:
    """Return the default subdivision settings.

    Returns
    -------
    dict[str, float | int]
        Dictionary with keys 'precision' (absolute tolerance on x) and
        'max_depth' (maximum number of subdivisions).
    """
    return {"precision": PRECISION, "max_depth": MAX_DEPTH}
