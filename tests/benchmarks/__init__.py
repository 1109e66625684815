"""Hashing and encryption throughput benchmarks (pytest-benchmark).

    pytest tests/benchmarks/ --benchmark-sort=mean
"""
