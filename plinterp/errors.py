"""Exceptions raised by the interpolation routines"""


class InterpError(ValueError):
    """Base class for errors raised when the inputs cannot be interpolated."""

    description = "interpolation failed"


class EmptySampleSet(InterpError):
    """The independent data `x` (and hence `y`) has no elements."""

    description = "no data in x"

    def __init__(self, msg="No data in `x` to interpolate from"):
        super().__init__(msg)


class QueryOutOfRange(InterpError):
    """An evaluation site lies outside the closed interval `[x[0], x[-1]]`.

    Attributes
    ----------
    index : int
        Flat index into `xi` of the first offending evaluation site.

    value : float
        The offending evaluation site, `xi.flat[index]`.

    lo, hi : float
        The bounds of the independent data, `x[0]` and `x[-1]`.
    """

    description = "out of bounds"

    def __init__(self, index, value, lo, hi, msg=None):
        self.index = index
        self.value = value
        self.lo = lo
        self.hi = hi
        if msg is None:
            msg = f"xi[{index}] = {value} is not bound by x in [{lo}, {hi}]"
        super().__init__(msg)


class BracketNotFound(QueryOutOfRange):
    """No interval `[x[k], x[k+1]]` contains an evaluation site.

    Raised by `interpolate_unchecked` when given a site it cannot bracket
    (beyond the data, NaN, or `x` too short to have any interval).
    """

    description = "no bracketing interval"

    def __init__(self, index, value, lo, hi):
        super().__init__(
            index,
            value,
            lo,
            hi,
            f"No interval of x brackets xi[{index}] = {value}",
        )
