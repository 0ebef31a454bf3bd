"""inlinetypes - inline single-use TypeScript parameter types."""

__version__ = "0.1.0"
