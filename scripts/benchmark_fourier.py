#!/usr/bin/env python3
"""
Forward transform benchmark against numpy.fft

This script measures, for every configured length:
  1. Max absolute error vs numpy.fft.fft (same convention)
  2. Time per transform (ms) for fourier_core and numpy
  3. Which engine the length dispatches to

Usage:
    python benchmark_fourier.py [--config CONFIG_PATH] [--output OUTPUT_DIR]
"""

import sys
import json
import argparse
import time
from pathlib import Path
from datetime import datetime
from typing import Dict, List
from dataclasses import dataclass, asdict

import numpy as np
import yaml
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / 'src'))

from fourier_core import Convention, Scaling, forward, is_power_of_two, load_control, set_control
from fourier_core.utils import get_logger, setup_logging

console = Console()
logger = get_logger("benchmark")


@dataclass
class TimingResult:
    """Timing and accuracy for one transform length."""
    length: int
    engine: str
    max_error: float
    ours_ms: float
    numpy_ms: float

    @property
    def ratio(self) -> float:
        return self.ours_ms / self.numpy_ms

    def to_dict(self) -> Dict:
        return {**asdict(self), 'ratio': self.ratio}


def load_config(config_path: str) -> Dict:
    """Load configuration."""
    with open(config_path, 'r') as f:
        return yaml.safe_load(f)


def numpy_reference(x: np.ndarray, convention: Convention) -> np.ndarray:
    """numpy.fft.fft under the given convention."""
    if convention.forward_sign == 1:
        X = np.fft.ifft(x, norm="forward")
    else:
        X = np.fft.fft(x)
    if convention.scaling is Scaling.SYMMETRIC:
        X = X / np.sqrt(len(x))
    return X


def measure_length(n: int, convention: Convention, iterations: int, naive_max_length: int) -> TimingResult:
    """Time one length and check it against numpy."""
    rng = np.random.default_rng(n)
    x = rng.standard_normal(n) + 1j * rng.standard_normal(n)

    # Warm up JIT
    warm = x.copy()
    forward(warm, convention)
    error = float(np.abs(warm - numpy_reference(x, convention)).max())
    logger.debug(f"N={n}: warm-up error {error:.2e}")

    start = time.perf_counter()
    for _ in range(iterations):
        buffer = x.copy()
        forward(buffer, convention)
    ours_ms = (time.perf_counter() - start) / iterations * 1000

    start = time.perf_counter()
    for _ in range(iterations):
        _ = numpy_reference(x, convention)
    numpy_ms = (time.perf_counter() - start) / iterations * 1000

    if is_power_of_two(n):
        engine = 'radix-2'
    elif n <= naive_max_length:
        engine = 'naive'
    else:
        engine = 'bluestein'

    return TimingResult(n, engine, error, ours_ms, numpy_ms)


def display_results_table(results: List[TimingResult]):
    """Display timing results."""
    table = Table(title="Forward FFT Benchmark", box=box.ROUNDED)
    table.add_column("N", justify="right", style="bold")
    table.add_column("Engine")
    table.add_column("Max Error", justify="right")
    table.add_column("Ours (ms)", justify="right")
    table.add_column("NumPy (ms)", justify="right")
    table.add_column("Ratio", justify="right")

    for r in results:
        status = "green" if r.max_error < 1e-8 else "red"
        table.add_row(
            str(r.length),
            r.engine,
            f"[{status}]{r.max_error:.2e}[/{status}]",
            f"{r.ours_ms:.4f}",
            f"{r.numpy_ms:.4f}",
            f"{r.ratio:.2f}x",
        )

    console.print(table)


def run_benchmark(config_path: str, output_dir: Path) -> List[TimingResult]:
    """Run the benchmark."""
    yaml_config = load_config(config_path)
    control = load_control(config_path)
    set_control(control)

    output_dir.mkdir(parents=True, exist_ok=True)
    setup_logging(log_file=str(output_dir / "benchmark.log"), name="benchmark")

    bench_cfg = yaml_config.get('benchmark', {})
    convention = Convention.from_name(bench_cfg.get('convention', 'default'))
    iterations = int(bench_cfg.get('iterations', 100))
    sizes = bench_cfg.get('sizes', [256, 1000, 1024])

    console.print(Panel.fit(
        "[bold blue]Forward FFT Benchmark[/bold blue]\n"
        f"Convention: {convention.exponent.name} exponent, {convention.scaling.value} scaling\n"
        f"Threads: {control.max_degree_of_parallelism}",
        border_style="blue"
    ))
    logger.info(f"Control: {control.to_dict()}")

    results = []
    with console.status("[cyan]Measuring...") as status:
        for n in sizes:
            status.update(f"[cyan]Measuring N={n}")
            result = measure_length(int(n), convention, iterations, control.naive_max_length)
            results.append(result)
            logger.info(
                f"N={result.length} {result.engine}: err={result.max_error:.2e}, "
                f"ours={result.ours_ms:.4f}ms, numpy={result.numpy_ms:.4f}ms"
            )

    console.print("\n")
    display_results_table(results)

    results_dict = {
        'timestamp': datetime.now().isoformat(),
        'control': control.to_dict(),
        'iterations': iterations,
        'lengths': [r.to_dict() for r in results],
    }

    with open(output_dir / 'timing.json', 'w') as f:
        json.dump(results_dict, f, indent=2)

    console.print(f"\n[green]✓[/green] Results saved to {output_dir}")

    return results


def main():
    parser = argparse.ArgumentParser(description="Forward FFT Benchmark")
    parser.add_argument(
        '--config',
        type=str,
        default=str(PROJECT_ROOT / 'configs' / 'fourier.yaml'),
        help='Path to configuration file'
    )
    parser.add_argument(
        '--output',
        type=str,
        default=None,
        help='Output directory'
    )
    args = parser.parse_args()

    if args.output:
        output_dir = Path(args.output)
    else:
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        output_dir = PROJECT_ROOT / 'results' / 'benchmark' / timestamp

    try:
        run_benchmark(args.config, output_dir)
        console.print(Panel.fit(
            "[bold green]Benchmark completed![/bold green]",
            border_style="green"
        ))
    except Exception as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        raise


if __name__ == '__main__':
    main()
