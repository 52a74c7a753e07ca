# -*- coding: utf-8 -*-


class InvalidParameterError(ValueError):
    """Raised for malformed indicator parameters or misaligned inputs.

    Insufficient history is never an error (it yields NaN) and degenerate
    denominators resolve to sentinel values; only caller mistakes such as
    non-positive lengths or input sequences of different lengths end up
    here.
    """
