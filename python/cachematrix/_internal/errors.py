from __future__ import annotations

import numpy as np


class InversionFailure(np.linalg.LinAlgError):
    """Raised by the inversion routine when a matrix cannot be inverted.

    Subclasses ``numpy.linalg.LinAlgError`` (itself a ``ValueError``) so code
    already handling NumPy's error keeps working.
    """
