"""
Word Table Demo -- Seeded bucket distribution, growth timeline, chain lengths,
and MurmurHash3 avalanche analysis.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from hash_table import MAX_LOAD_FACTOR, WordTable
from murmur_hash import murmur3_32
from tokenizer import split_words

SEED = 42
rng = np.random.default_rng(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}

CORPUS = (
    "The quick brown fox jumps over the lazy dog. THE DOG sleeps, the Fox runs! "
    "A hash table maps keys to buckets; chaining keeps colliding keys in a list. "
    "When the load factor passes seventy percent the table doubles and every key "
    "is filed again. MurmurHash mixes each block of four bytes, then the tail, "
    "then runs a finalization mix so that every output bit depends on every input bit. "
) * 3 + " ".join(f"word{chr(97 + i % 26)}{chr(97 + (i // 26) % 26)}" for i in range(600))


def _random_words(n, min_len=3, max_len=10):
    letters = np.array(list("abcdefghijklmnopqrstuvwxyz"))
    lengths = rng.integers(min_len, max_len + 1, size=n)
    return ["".join(rng.choice(letters, size=k)) for k in lengths]


# ---------------------------------------------------------------------------
# Example 1: Bucket occupancy under two seeds
# ---------------------------------------------------------------------------
def example_1_seed_distribution():
    """Same corpus, two seeds -- different bucket placements."""
    print("=" * 60)
    print("Example 1: Bucket Occupancy Under Two Seeds")
    print("=" * 60)

    words = split_words(CORPUS)
    tables = [WordTable(seed=s) for s in (1, 2)]
    for table in tables:
        table.insert_all(words)

    moved = sum(tables[0].bucket_index(w) != tables[1].bucket_index(w) for w in set(words))
    print(f"\n  {len(words)} words, {len(tables[0])} distinct, capacity {tables[0].capacity}")
    print(f"  Distinct words placed in a different bucket: {moved}")

    fig, axes = plt.subplots(2, 1, figsize=(14, 7), sharex=True)
    for ax, table, color in zip(axes, tables, (COLORS["blue"], COLORS["orange"])):
        lengths = np.array(table.chain_lengths())
        ax.bar(np.arange(len(lengths)), lengths, width=1.0, color=color)
        ax.set_ylabel("chain length")
        ax.set_title(f"seed={table.seed}  max chain={lengths.max()}  "
                     f"empty buckets={np.sum(lengths == 0)}")
    axes[-1].set_xlabel("bucket index")
    fig.suptitle("Bucket occupancy for the same corpus", fontsize=14, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_seed_distribution.png", dpi=120)
    return fig


# ---------------------------------------------------------------------------
# Example 2: Growth timeline
# ---------------------------------------------------------------------------
def example_2_growth_timeline():
    """Capacity doubles whenever the load factor exceeds the threshold."""
    print("\n" + "=" * 60)
    print("Example 2: Growth Timeline")
    print("=" * 60)

    table = WordTable(seed=SEED)
    capacities = []
    loads = []
    for word in _random_words(2000):
        table.insert(word)
        capacities.append(table.capacity)
        loads.append(table.load_factor)

    steps = np.flatnonzero(np.diff(capacities)) + 1
    print(f"\n  Growth events at insertions: {steps.tolist()}")
    print(f"  Final capacity {table.capacity}, load factor {table.load_factor:.3f}")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    axes[0].step(np.arange(1, len(capacities) + 1), capacities, color=COLORS["purple"])
    axes[0].set_yscale("log", base=2)
    axes[0].set_xlabel("insertions")
    axes[0].set_ylabel("capacity")
    axes[0].set_title("Capacity (log2 scale)")

    axes[1].plot(np.arange(1, len(loads) + 1), loads, color=COLORS["green"], linewidth=0.8)
    axes[1].axhline(MAX_LOAD_FACTOR, color=COLORS["red"], linestyle="--",
                    label=f"threshold {MAX_LOAD_FACTOR}")
    axes[1].set_xlabel("insertions")
    axes[1].set_ylabel("entries / capacity")
    axes[1].set_title("Load factor")
    axes[1].legend()
    fig.suptitle("Load-factor-triggered doubling", fontsize=14, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_growth_timeline.png", dpi=120)
    return fig


# ---------------------------------------------------------------------------
# Example 3: Chain length histogram
# ---------------------------------------------------------------------------
def example_3_chain_lengths():
    """Compare chain lengths with the Poisson distribution of an ideal hash."""
    print("\n" + "=" * 60)
    print("Example 3: Chain Length Histogram")
    print("=" * 60)

    table = WordTable(seed=SEED)
    table.insert_all(_random_words(5000))
    lengths = np.array(table.chain_lengths())
    alpha = table.load_factor

    counts = np.bincount(lengths)
    ks = np.arange(len(counts))
    factorials = np.cumprod(np.concatenate([[1.0], np.arange(1, len(counts))]))
    poisson = np.exp(-alpha) * alpha ** ks / factorials * len(lengths)

    for k, observed in enumerate(counts):
        print(f"  length {k}: {observed:5d} buckets (ideal {poisson[k]:8.1f})")

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.bar(ks - 0.2, counts, width=0.4, color=COLORS["blue"], label="observed")
    ax.bar(ks + 0.2, poisson, width=0.4, color=COLORS["orange"], label="Poisson(load factor)")
    ax.set_xlabel("chain length")
    ax.set_ylabel("buckets")
    ax.set_title(f"{len(table)} entries in {table.capacity} buckets (load {alpha:.2f})")
    ax.legend()
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_chain_lengths.png", dpi=120)
    return fig


# ---------------------------------------------------------------------------
# Example 4: Avalanche matrix
# ---------------------------------------------------------------------------
def example_4_avalanche(n_keys=300, key_len=8):
    """P(output bit j flips | input bit i flipped) -- ideal is 0.5 everywhere."""
    print("\n" + "=" * 60)
    print("Example 4: Avalanche Matrix")
    print("=" * 60)

    n_bits = key_len * 8
    flips = np.zeros((n_bits, 32))
    out_bits = np.arange(32, dtype=np.uint64)
    keys = rng.integers(0, 256, size=(n_keys, key_len), dtype=np.uint8)

    for key in keys:
        base = murmur3_32(key.tobytes(), SEED)
        for i in range(n_bits):
            flipped = key.copy()
            flipped[i // 8] ^= np.uint8(1 << (i % 8))
            diff = np.uint64(base ^ murmur3_32(flipped.tobytes(), SEED))
            flips[i] += (diff >> out_bits) & np.uint64(1)

    probs = flips / n_keys
    bias = np.abs(probs - 0.5)
    print(f"\n  Mean flip probability: {probs.mean():.4f}")
    print(f"  Worst bias from 0.5:   {bias.max():.4f}")

    fig, ax = plt.subplots(figsize=(10, 8))
    im = ax.imshow(probs, cmap="RdBu_r", vmin=0.3, vmax=0.7, aspect="auto")
    ax.set_xlabel("output bit")
    ax.set_ylabel("input bit")
    ax.set_title(f"MurmurHash3 avalanche ({n_keys} random {key_len}-byte keys)")
    fig.colorbar(im, ax=ax, label="flip probability")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_avalanche.png", dpi=120)
    return fig


def main():
    figures = [
        example_1_seed_distribution(),
        example_2_growth_timeline(),
        example_3_chain_lengths(),
        example_4_avalanche(),
    ]

    report_path = Path(__file__).parent / "report.pdf"
    with PdfPages(report_path) as pdf:
        for fig in figures:
            pdf.savefig(fig)
            plt.close(fig)

    print(f"\nSaved {len(figures)} figures to {VIZ_DIR} and {report_path}")


if __name__ == "__main__":
    main()
