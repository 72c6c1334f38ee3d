#!/usr/bin/env python3
"""
SynHash256 - Benchmark Suite

Compares SynHash256 against common hash algorithms:
  Cryptographic:     MD5, SHA-1, SHA-256, BLAKE2b
  Non-cryptographic: xxHash64, xxHash128, MurmurHash3, CRC32

xxhash and mmh3 are optional (pip install synhash[bench]).
"""

import os
import sys
import time
import hashlib
import zlib

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from synhash.synhash import synhash


def bench(name, func, data, iterations):
    for _ in range(min(5, iterations)):
        func(data)

    start = time.perf_counter()
    for _ in range(iterations):
        func(data)
    elapsed = time.perf_counter() - start

    per_iter = elapsed / iterations
    mb_per_sec = len(data) / per_iter / (1024 * 1024) if elapsed > 0 else 0

    return {
        'name': name,
        'ms_per_iter': per_iter * 1000,
        'mb_per_sec': mb_per_sec,
        'total_time': elapsed,
        'iterations': iterations,
    }


def hash_md5(data): return hashlib.md5(data).digest()
def hash_sha1(data): return hashlib.sha1(data).digest()
def hash_sha256(data): return hashlib.sha256(data).digest()
def hash_blake2b(data): return hashlib.blake2b(data, digest_size=32).digest()
def hash_crc32(data): return zlib.crc32(data).to_bytes(4, 'little')


def hash_xxh64(data):
    import xxhash
    return xxhash.xxh64(data).digest()


def hash_xxh128(data):
    import xxhash
    return xxhash.xxh128(data).digest()


def hash_mmh3_128(data):
    import mmh3
    return mmh3.hash128(data).to_bytes(16, 'little')


def _algorithms():
    algorithms = [
        ('SynHash256 (Python)', synhash, 256),
        ('MD5', hash_md5, 128),
        ('SHA-1', hash_sha1, 160),
        ('SHA-256', hash_sha256, 256),
        ('BLAKE2b-256', hash_blake2b, 256),
    ]

    try:
        import xxhash  # noqa: F401
        algorithms.append(('xxHash64', hash_xxh64, 64))
        algorithms.append(('xxHash128', hash_xxh128, 128))
    except ImportError:
        print("  [INFO] xxhash not installed, skipping")

    try:
        import mmh3  # noqa: F401
        algorithms.append(('MurmurHash3-128', hash_mmh3_128, 128))
    except ImportError:
        print("  [INFO] mmh3 not installed, skipping")

    algorithms.append(('CRC32', hash_crc32, 32))
    return algorithms


def format_size(n):
    if n >= 1024 * 1024:
        return f"{n / (1024 * 1024):.0f} MB"
    elif n >= 1024:
        return f"{n / 1024:.0f} KB"
    else:
        return f"{n} B"


def run_benchmark(data_size_bytes, iterations, algorithms):
    data = os.urandom(data_size_bytes)

    print(f"\n{'=' * 80}")
    print(f"  Benchmark: {format_size(data_size_bytes)} input | {iterations} iterations")
    print(f"{'=' * 80}")
    print(f"  {'Algorithm':<24} {'Output':>8} {'ms/iter':>10} {'MB/s':>12}")
    print(f"  {'-' * 24} {'-' * 8} {'-' * 10} {'-' * 12}")

    results = []
    for name, func, bits in algorithms:
        # The pure Python hash is orders of magnitude slower
        iters = max(1, iterations // 100) if 'Python' in name else iterations
        r = bench(name, func, data, iters)
        r['bits'] = bits
        results.append(r)
        marker = '***' if 'SynHash' in name else '   '
        print(f"  {marker} {name:<21} {bits:>5} bit {r['ms_per_iter']:>9.3f}ms {r['mb_per_sec']:>10.2f}")

    return results


def print_ranking(all_results):
    print(f"\n{'=' * 80}")
    print("  RANKING (by throughput)")
    print(f"{'=' * 80}")

    for size_label, results in all_results:
        print(f"\n  [{size_label}]")
        sha256_tp = next((r['mb_per_sec'] for r in results if r['name'] == 'SHA-256'), 1) or 1

        for r in sorted(results, key=lambda x: x['mb_per_sec'], reverse=True):
            ratio = r['mb_per_sec'] / sha256_tp
            print(f"    {r['name']:<24} {r['mb_per_sec']:>10.2f} MB/s  {ratio:>8.4f}x")


if __name__ == '__main__':
    print("=" * 80)
    print("  SynHash256 - Performance Benchmark")
    print("=" * 80)

    algorithms = _algorithms()
    configs = [
        (64, 20000),
        (1024, 5000),
        (65536, 200),
    ]

    all_results = []
    for data_size, iters in configs:
        results = run_benchmark(data_size, iters, algorithms)
        all_results.append((format_size(data_size), results))

    print_ranking(all_results)

    print(f"\n{'=' * 80}")
    print("  Benchmark complete.")
    print(f"{'=' * 80}")
