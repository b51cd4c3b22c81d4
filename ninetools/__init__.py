"""Bitcoin price lookup, an RPN calculator and merge-insertion sort."""

__version__ = "0.1.0"
__all__ = ["bitcoin", "rpn", "pmerge"]