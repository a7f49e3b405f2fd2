"""Benchmark runner for matrix traversals.

This module times each traversal on a nested list matrix and on a tensor
matrix of the same shape, so the cost of building reference lists can be
compared with the cost of building tensor views.

Run with: python -m benchmark
"""

import argparse
import time
from typing import Callable, Tuple
import torch
from diagonal_ops import TRAVERSALS


def _synchronize(device: str):
    if device.startswith("cuda"):
        torch.cuda.synchronize()


def benchmark_operation(
    operation: Callable,
    matrix,
    device: str = "cpu",
    warmup_runs: int = 10,
    benchmark_runs: int = 100,
) -> Tuple[float, float]:
    """Benchmark a single traversal.

    Args:
        operation: The traversal function to benchmark
        matrix: Nested list or tensor passed to the traversal
        device: Device the tensor lives on, used to synchronize CUDA work
        warmup_runs: Number of warmup iterations
        benchmark_runs: Number of benchmark iterations

    Returns:
        Tuple of (mean_time_ms, std_time_ms)
    """
    # Warmup
    for _ in range(warmup_runs):
        _ = operation(matrix)

    _synchronize(device)

    # Benchmark
    times = []
    for _ in range(benchmark_runs):
        start = time.perf_counter()
        _ = operation(matrix)
        _synchronize(device)
        times.append((time.perf_counter() - start) * 1000.0)

    times_tensor = torch.tensor(times)
    mean_time = times_tensor.mean().item()
    std_time = times_tensor.std().item() if benchmark_runs > 1 else 0.0

    return mean_time, std_time


def run_benchmarks(
    batch_size: int,
    matrix_size: int,
    dtype: torch.dtype,
    device: str,
    traversals: list,
    warmup_runs: int,
    benchmark_runs: int,
):
    """Run all benchmarks and display results.

    Args:
        batch_size: Batch size for the tensor matrix
        matrix_size: Size of square matrices
        dtype: Data type for tensors
        device: Device for tensors
        traversals: Names of the traversals to benchmark
        warmup_runs: Number of warmup iterations
        benchmark_runs: Number of benchmark iterations
    """
    print(f"\n{'='*80}")
    print(f"Matrix Traversal Benchmark")
    print(f"{'='*80}")
    print(f"Configuration:")
    print(f"  Batch Size: {batch_size}")
    print(f"  Matrix Size: {matrix_size}x{matrix_size}")
    print(f"  Data Type: {dtype}")
    print(f"  Device: {device}")
    print(f"  Warmup Runs: {warmup_runs}")
    print(f"  Benchmark Runs: {benchmark_runs}")
    print(f"{'='*80}\n")

    # Create test data
    if batch_size > 1:
        input_tensor = torch.randn(
            batch_size, matrix_size, matrix_size, device=device, dtype=dtype
        )
    else:
        input_tensor = torch.randn(matrix_size, matrix_size, device=device, dtype=dtype)
    input_list = [
        list(range(row * matrix_size, (row + 1) * matrix_size))
        for row in range(matrix_size)
    ]

    print(f"{'Traversal':<20} {'List (ms)':<15} {'Tensor (ms)':<15} {'Speedup':<10}")
    print(f"{'-'*80}")

    for name in traversals:
        operation = TRAVERSALS[name]
        list_mean, list_std = benchmark_operation(
            operation, input_list, "cpu", warmup_runs, benchmark_runs
        )
        tensor_mean, tensor_std = benchmark_operation(
            operation, input_tensor, device, warmup_runs, benchmark_runs
        )

        speedup = list_mean / tensor_mean

        print(
            f"{name:<20} {list_mean:>6.4f}±{list_std:>5.4f}   "
            f"{tensor_mean:>6.4f}±{tensor_std:>5.4f}   {speedup:>6.2f}x"
        )

    print(f"{'-'*80}\n")


def main():
    """Main benchmark entry point."""
    parser = argparse.ArgumentParser(
        description="Benchmark matrix traversals",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--batch-size", type=int, default=1, help="Batch size for the tensor matrix"
    )
    parser.add_argument(
        "--matrix-size", type=int, default=256, help="Size of square matrices"
    )
    parser.add_argument(
        "--dtype",
        type=str,
        default="float32",
        choices=["float16", "float32", "float64"],
        help="Data type for tensors",
    )
    parser.add_argument(
        "--device",
        type=str,
        default="cpu",
        help="Device for tensors, e.g. cpu or cuda",
    )
    parser.add_argument(
        "--traversal",
        action="append",
        choices=sorted(TRAVERSALS),
        help="Traversal to benchmark, may be repeated (default: all)",
    )
    parser.add_argument(
        "--warmup-runs", type=int, default=10, help="Number of warmup iterations"
    )
    parser.add_argument(
        "--benchmark-runs", type=int, default=100, help="Number of benchmark iterations"
    )

    args = parser.parse_args()

    # Check CUDA availability
    if args.device.startswith("cuda") and not torch.cuda.is_available():
        print("ERROR: CUDA is not available. Use --device cpu.")
        return

    # Parse dtype
    dtype_map = {
        "float16": torch.float16,
        "float32": torch.float32,
        "float64": torch.float64,
    }
    dtype = dtype_map[args.dtype]

    run_benchmarks(
        batch_size=args.batch_size,
        matrix_size=args.matrix_size,
        dtype=dtype,
        device=args.device,
        traversals=args.traversal or list(TRAVERSALS),
        warmup_runs=args.warmup_runs,
        benchmark_runs=args.benchmark_runs,
    )


if __name__ == "__main__":
    main()
