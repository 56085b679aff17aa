"""
Chained Hash Map Demo -- Basic operations, clearing, bulk accessors, forced
growth through repeated resizes, and collision analysis of the additive hash.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Summary PDF report
"""

import logging
import sys
from itertools import permutations
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent))
from chained_hash_map import ChainedHashMap, LOAD_FACTOR_THRESHOLD, hash_key

SEED = 42
INITIAL_KEYS = 8
EXTRA_KEYS = 56

VIZ_DIR = Path(__file__).parent / "viz"
REPORT_PATH = Path(__file__).parent / "report.pdf"

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}


def _banner(title):
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)


def _load_level(m):
    return f"{m.load_factor() * 100:.2f}%"


# ---------------------------------------------------------------------------
# Example 1: Basic Operations
# ---------------------------------------------------------------------------
def example_1_basic_operations():
    """Set, get, has and remove a single key."""
    _banner("Example 1: Basic Operations")

    m = ChainedHashMap()
    m.set("key1", 1)
    print(f"\n  {m!r}")
    print(f"  Initial load level: {_load_level(m)}")
    print(f"\n  Value stored at key1: {m.get('key1')}")
    print(f"  Map contains key 'key1': {m.has('key1')}")
    print("\n  Removing key 'key1'")
    m.remove("key1")
    print(f"  Map contains key 'key1': {m.has('key1')}")
    print(f"  get('key1') after removal: {m.get('key1')}")
    return m


# ---------------------------------------------------------------------------
# Example 2: Fill and Clear
# ---------------------------------------------------------------------------
def example_2_fill_and_clear(m):
    """Fill the map, clear it, and show that capacity survives the clear."""
    _banner("Example 2: Fill and Clear")

    print(f"\n  Adding {INITIAL_KEYS} keys to the map...")
    for i in range(INITIAL_KEYS):
        m.set(f"key{i}", i)
    print(f"  New load level: {_load_level(m)}")
    print(f"  Number of stored keys: {m.length()}")
    print(f"  {m!r}")

    print("\n  Clearing map...")
    capacity_before = m.capacity
    m.clear()
    print(f"  Number of stored keys: {m.length()}")
    print(f"  Capacity before/after clear: {capacity_before}/{m.capacity}")
    print(f"  {m!r}")

    print(f"\n  Re-adding {INITIAL_KEYS} keys to the map...")
    for i in range(INITIAL_KEYS):
        m.set(f"key{i}", i)
    print(f"  New load level: {_load_level(m)}")
    return m


# ---------------------------------------------------------------------------
# Example 3: Bulk Accessors
# ---------------------------------------------------------------------------
def example_3_bulk_accessors(m):
    """Keys, values and entries in bucket-then-chain order."""
    _banner("Example 3: Bulk Accessors")

    print(f"\n  Keys contained in map: {', '.join(m.keys())}")
    print(f"  Values contained in map: {', '.join(str(v) for v in m.values())}")
    print("\n  Entries contained in map:")
    for line in m.entries():
        print(f"    {line}")

    print(f"\n  Bucket index of each key (capacity {m.capacity}):")
    for key in m.keys():
        print(f"    {key:>6} -> {hash_key(key, m.capacity)}")


# ---------------------------------------------------------------------------
# Example 4: Forced Growth
# ---------------------------------------------------------------------------
def example_4_forced_growth(m):
    """Insert enough keys to force several resizes and chart the growth."""
    _banner("Example 4: Forced Growth")

    print(f"\n  Adding an additional {EXTRA_KEYS} keys to the map to force resize...")
    counts = [m.length()]
    capacities = [m.capacity]
    load_factors = [m.load_factor()]
    for i in range(INITIAL_KEYS, INITIAL_KEYS + EXTRA_KEYS):
        m.set(f"key{i}", i)
        counts.append(m.length())
        capacities.append(m.capacity)
        load_factors.append(m.load_factor())

    resize_points = [counts[i] for i in range(1, len(capacities))
                     if capacities[i] != capacities[i - 1]]
    print(f"\n  Number of stored keys: {m.length()}")
    print(f"  Max number of buckets: {m.capacity}")
    print(f"  Load level: {_load_level(m)}")
    print(f"  Resizes happened on inserts #{', #'.join(str(p) for p in resize_points)}")
    print("\n  Entries contained in map (first 10):")
    for line in m.entries()[:10]:
        print(f"    {line}")

    fig, axes = plt.subplots(1, 3, figsize=(18, 5.5))

    axes[0].plot(counts, load_factors, "o-", color=COLORS["blue"], markersize=3, linewidth=1.5)
    axes[0].axhline(LOAD_FACTOR_THRESHOLD, color=COLORS["red"], linestyle="--",
                    label=f"threshold = {LOAD_FACTOR_THRESHOLD}")
    for point in resize_points:
        axes[0].axvline(point, color=COLORS["orange"], alpha=0.4)
    axes[0].set_xlabel("Stored keys")
    axes[0].set_ylabel("Load factor")
    axes[0].set_title("Load Factor After Each Insert\nDrops by half at every resize",
                      fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=8)
    axes[0].grid(True, alpha=0.3)

    axes[1].step(counts, capacities, where="post", color=COLORS["green"], linewidth=2)
    axes[1].set_xlabel("Stored keys")
    axes[1].set_ylabel("Bucket count")
    axes[1].set_yscale("log", base=2)
    axes[1].set_title("Capacity Growth\nDoubles when (n + 1) / m > 0.75",
                      fontsize=10, fontweight="bold")
    axes[1].grid(True, alpha=0.3)

    lengths = np.array(m.chain_lengths())
    axes[2].bar(np.arange(len(lengths)), lengths, color=COLORS["purple"], width=1.0)
    axes[2].set_xlabel("Bucket index")
    axes[2].set_ylabel("Chain length")
    axes[2].set_title(f"Final Bucket Occupancy ({m.length()} keys, {m.capacity} buckets)",
                      fontsize=10, fontweight="bold")
    axes[2].grid(True, alpha=0.3, axis="y")

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "01_growth.png", dpi=120)
    plt.close(fig)
    print("\n  Saved: viz/01_growth.png")
    return m


# ---------------------------------------------------------------------------
# Example 5: Collision Analysis
# ---------------------------------------------------------------------------
def example_5_collision_analysis(m):
    """Show how the additive hash clusters keys with the same characters."""
    _banner("Example 5: Collision Analysis")

    lengths = np.array(m.chain_lengths())
    histogram = np.bincount(lengths)
    print(f"\n  Chain length distribution over {m.capacity} buckets:")
    print(f"  {'Length':>8} {'Buckets':>10}")
    print(f"  {'-' * 20}")
    for length, buckets in enumerate(histogram):
        print(f"  {length:>8} {buckets:>10}")
    print(f"  Longest chain: {lengths.max()}, empty buckets: {histogram[0]}")

    anagrams = ChainedHashMap()
    words = ["".join(p) for p in permutations("abcd")]
    for word in words:
        anagrams.set(word, len(word))
    shared = {hash_key(word, anagrams.capacity) for word in words}
    print(f"\n  {len(words)} permutations of 'abcd' stored in {anagrams.capacity} buckets")
    print(f"  Distinct bucket indices used: {sorted(shared)}")
    print(f"  Non-empty buckets: {sum(1 for n in anagrams.chain_lengths() if n)}")

    alphabet = np.array(list("abcdefghijklmnopqrstuvwxyz"))
    random_map = ChainedHashMap()
    for _ in range(len(words)):
        random_map.set("".join(np.random.choice(alphabet, size=4)), 0)
    random_lengths = np.array(random_map.chain_lengths())
    print(f"  {random_map.length()} random 4-letter keys use "
          f"{np.count_nonzero(random_lengths)} of {random_map.capacity} buckets")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5.5))

    axes[0].bar(np.arange(len(histogram)), histogram, color=COLORS["blue"], edgecolor="white")
    axes[0].set_xlabel("Chain length")
    axes[0].set_ylabel("Number of buckets")
    axes[0].set_title(f"Chain Lengths for key0..key{m.length() - 1}\n"
                      "Digit anagrams such as key12/key21 share a bucket",
                      fontsize=10, fontweight="bold")
    axes[0].grid(True, alpha=0.3, axis="y")

    anagram_lengths = np.array(anagrams.chain_lengths())
    width = 0.4
    axes[1].bar(np.arange(anagrams.capacity) - width / 2, anagram_lengths, width=width,
                color=COLORS["red"], label="permutations of 'abcd'")
    axes[1].bar(np.arange(random_map.capacity) + width / 2, random_lengths, width=width,
                color=COLORS["green"], label="random 4-letter keys")
    axes[1].set_xlabel("Bucket index")
    axes[1].set_ylabel("Chain length")
    axes[1].set_title("Anagrams Collapse Into One Chain\nThe hash ignores character order",
                      fontsize=10, fontweight="bold")
    axes[1].legend(fontsize=8)
    axes[1].grid(True, alpha=0.3, axis="y")

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "02_collisions.png", dpi=120)
    plt.close(fig)
    print("\n  Saved: viz/02_collisions.png")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    """Bundle a title page, the hashing rules and every figure into a PDF."""
    _banner("Generating PDF Report")

    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(REPORT_PATH)) as pdf:
        # -- Title page --
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Chained Hash Map", fontsize=24, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "Separate chaining with load-factor driven growth",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "This demo covers:\n"
            "  1. Basic operations: set, get, has, remove\n"
            "  2. Clearing: the key count resets, the capacity does not\n"
            "  3. Bulk accessors in bucket-then-chain order\n"
            f"  4. Forced growth: {INITIAL_KEYS + EXTRA_KEYS} keys, repeated doubling\n"
            "  5. Collision analysis of the additive hash\n\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.35, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by hash_map_demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        # -- Rules page --
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.94, "Hashing and Growth Rules", fontsize=20, fontweight="bold",
                ha="center", va="top", transform=ax.transAxes)
        lines = [
            (r"Bucket index: $h(k) = \left(11 \cdot \sum_{i} \mathrm{ord}(k_i)\right) \ \mathrm{mod}\ m$", 13),
            (r"Load factor: $\alpha = n / m$, threshold $\alpha_{\mathrm{max}} = 0.75$", 13),
            (r"Before every set: if $(n + 1) / m > \alpha_{\mathrm{max}}$ then $m \leftarrow 2m$", 13),
            ("Resize rebuilds every entry at its new index, preserving chain order.", 11),
            ("Updating an existing key runs the same check, so it may also grow the map.", 11),
            ("Removal and clear never shrink the bucket array.", 11),
            ("Anagrams always share a bucket because the sum ignores character order.", 11),
        ]
        y = 0.82
        for text, size in lines:
            ax.text(0.06, y, text, fontsize=size, transform=ax.transAxes)
            y -= 0.08
        pdf.savefig(fig)
        plt.close(fig)

        # -- Visualization pages --
        titles = {
            "01_growth.png": "Example 4: Forced Growth",
            "02_collisions.png": "Example 5: Collision Analysis",
        }
        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)
            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: {REPORT_PATH.name} ({len(viz_files) + 2} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    logging.basicConfig(level=logging.INFO, format="  [%(levelname)s] %(name)s: %(message)s")
    logging.getLogger("chained_hash_map").setLevel(logging.DEBUG)
    np.random.seed(SEED)
    VIZ_DIR.mkdir(exist_ok=True)

    print("Chained Hash Map Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")

    m = example_1_basic_operations()
    m = example_2_fill_and_clear(m)
    example_3_bulk_accessors(m)
    m = example_4_forced_growth(m)
    example_5_collision_analysis(m)
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {REPORT_PATH}")
    print("=" * 60)


if __name__ == "__main__":
    main()
