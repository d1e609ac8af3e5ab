"""Sequential, threaded and multi-process sorting benchmarks over integer files."""

__version__ = "0.1.0"