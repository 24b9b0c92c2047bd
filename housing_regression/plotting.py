# scatterplot of model predictions against actual labels
import logging
from typing import Protocol

import matplotlib.pyplot as plt
import numpy as np

logger = logging.getLogger(__name__)

PREDICTION, LABEL = 1, 2
SERIES = {PREDICTION: ('prediction', 'tab:blue'), LABEL: ('label', 'tab:orange')}


def scatter_arrays(feature, predictions, labels):
    """
    Stack predictions and labels into one plottable series.

    Returns x (the feature twice), y (predictions then labels) and c,
    a category array with 1 for prediction points and 2 for label points.
    """
    feature = np.asarray(feature, dtype=float)
    predictions = np.asarray(predictions, dtype=float)
    labels = np.asarray(labels, dtype=float)
    if not (feature.shape == predictions.shape == labels.shape):
        raise ValueError("feature, predictions and labels must have the same length")
    n = feature.size
    x = np.concatenate([feature, feature])
    y = np.concatenate([predictions, labels])
    c = np.concatenate([np.full(n, PREDICTION), np.full(n, LABEL)])
    return x, y, c


class ScatterRenderer(Protocol):
    def render(self, x, y, c, title: str, xlabel: str, ylabel: str): ...


class MatplotlibScatterRenderer:
    def __init__(self, show=True, save_path=None):
        self.show = show
        self.save_path = save_path

    def render(self, x, y, c, title="Training", xlabel="feature", ylabel="label"):
        fig, ax = plt.subplots(figsize=(10, 6))
        c = np.asarray(c)
        for code, (name, color) in SERIES.items():
            mask = c == code
            ax.scatter(np.asarray(x)[mask], np.asarray(y)[mask], s=4, color=color, label=name)
        ax.set_title(title)
        ax.set_xlabel(xlabel)
        ax.set_ylabel(ylabel)
        ax.legend()
        fig.tight_layout()
        if self.save_path:
            fig.savefig(self.save_path)
            logger.info("Saved scatterplot to %s", self.save_path)
        if self.show:
            plt.show()
        plt.close(fig)
        return fig
