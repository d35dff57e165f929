"""
configster Performance Benchmarks

Run with: python -m benchmarks.bench_parsing
"""
