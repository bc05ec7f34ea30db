from typing import NamedTuple


class LaguerreResult(NamedTuple):
    """Result of a Laguerre root polishing run.

    Parameters
    ----------
    root : complex
        Last root estimate.
    forward_error : float
        Magnitude of the last step ``|dx|``. ``inf`` when the starting
        guess already satisfied the backward error tolerance.
    backward_error : float
        ``|p(root)|`` evaluated at the working precision.
    iterations : int
        Number of Laguerre steps taken. Equals ``maxit`` when failed.
    failed : bool
        True when neither tolerance was met within ``maxit`` steps.
    """

    root: complex
    forward_error: float
    backward_error: float
    iterations: int
    failed: bool

    @property
    def converged(self) -> bool:
        return not self.failed
