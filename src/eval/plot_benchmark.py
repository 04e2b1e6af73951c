from typing import Optional

import matplotlib.pyplot as plt
import numpy as np

from eval.benchmark import CSV_HEADER

COLORS = {
    "Insert(us)": "blue",
    "Extract(us)": "red",
    "Peek(us)": "green",
    "Decrease(us)": "orange",
}


def plot_benchmark(csv_path: str, png_path: Optional[str] = None) -> str:
    """
    Draws the averages of every operation against the queue size (log-log) and saves the figure.
    Returns the path of the written image.
    """
    if png_path is None:
        png_path = csv_path.rsplit(".", 1)[0] + ".png"
    np_data = np.genfromtxt(csv_path, delimiter=",", skip_header=1, ndmin=2)
    # rows are structured as:
    # size insert extract peek decrease
    columns = CSV_HEADER.split(",")

    fig, ax = plt.subplots()
    for i, column in enumerate(columns[1:], start=1):
        ax.plot(np_data[:, 0], np_data[:, i], marker="o", label=column, color=COLORS[column])
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("Size")
    ax.set_ylabel("Time (us)")
    ax.grid(which="both", axis="both")
    ax.legend()
    fig.savefig(png_path)
    plt.close(fig)
    return png_path
