"""intcalc — integer arithmetic from the command line.

Computes a sum, product, Fibonacci term, or sum of squares and reports
it on a single ``RESULT:`` line with native integer-width semantics.
"""

from intcalc.version import __version__

__all__: list[str] = ["__version__"]
