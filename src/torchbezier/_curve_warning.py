class CurveWarning(UserWarning):
    """Warning for curves that are usable but likely malformed."""

    pass
