"""
Speedup chart for benchmark results (CSV produced by benchmark.run_benchmark)
"""

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402
import seaborn as sns  # noqa: E402

from .errors import InvalidArgument  # noqa: E402

TITLE_COLOR = '#2E86AB'

TITLE_FONT = {'family': 'sans-serif', 'weight': 'bold', 'size': 14}
LABEL_FONT = {'family': 'sans-serif', 'weight': 'normal', 'size': 11}

REQUIRED_COLUMNS = {'size', 'generations', 'sequential_ms', 'parallel_ms', 'speedup'}


def load_results(csv_path) -> pd.DataFrame:
    """Load benchmark results and add per-generation timings."""
    df = pd.read_csv(csv_path)
    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise InvalidArgument(f"{csv_path} is missing columns: {', '.join(sorted(missing))}")
    df = df.sort_values('size').reset_index(drop=True)
    df['sequential_per_gen_ms'] = df['sequential_ms'] / df['generations']
    df['parallel_per_gen_ms'] = df['parallel_ms'] / df['generations']
    return df


def plot_speedup(df: pd.DataFrame):
    """Two panels: time per generation for both engines, and speedup per size."""
    sequential_color, parallel_color, speedup_color = sns.color_palette("husl", 3)
    with plt.style.context('seaborn-v0_8-darkgrid'):
        fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 6))
        fig.patch.set_facecolor('white')
        fig.suptitle('Game of Life: Sequential vs Parallel Engine',
                     fontsize=18, fontweight='bold', color=TITLE_COLOR)

        labels = [f"{s}×{s}" for s in df['size']]

        ax1.plot(labels, df['sequential_per_gen_ms'], marker='o', linewidth=3,
                 markersize=8, label='Sequential', color=sequential_color)
        ax1.plot(labels, df['parallel_per_gen_ms'], marker='s', linewidth=3,
                 markersize=8, label='Parallel', color=parallel_color)
        ax1.set_xlabel('Grid Size', **LABEL_FONT)
        ax1.set_ylabel('Time per Generation (ms)', **LABEL_FONT)
        ax1.set_title('Time per Generation', **TITLE_FONT, pad=12)
        ax1.legend()

        bars = ax2.bar(labels, df['speedup'], color=speedup_color, edgecolor='black', alpha=0.85)
        ax2.axhline(y=1.0, color='black', linestyle='--', linewidth=1.5, alpha=0.6)
        for bar, value in zip(bars, df['speedup']):
            ax2.text(bar.get_x() + bar.get_width() / 2, bar.get_height(), f"{value:.2f}x",
                     ha='center', va='bottom', fontsize=10, fontweight='bold')
        ax2.set_xlabel('Grid Size', **LABEL_FONT)
        ax2.set_ylabel('Speedup (sequential / parallel)', **LABEL_FONT)
        ax2.set_title('Speedup (numpy row kernel vs per-cell loop)', **TITLE_FONT, pad=12)

        fig.tight_layout()
    return fig


def save_speedup_chart(csv_path, output_path) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = plot_speedup(load_results(csv_path))
    fig.savefig(output_path, dpi=150, bbox_inches='tight', facecolor='white')
    plt.close(fig)
    return output_path
