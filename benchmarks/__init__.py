"""Performance benchmarks for qsparse.

This package contains microbenchmarks for hot paths in the library,
currently the local and cross-entry gate engines.
"""
