from dataclasses import dataclass

import numpy as np
from sklearn.metrics import mean_squared_error


def rmse(predictions, labels) -> float:
    p = np.asarray(predictions, dtype=float).ravel()
    lab = np.asarray(labels, dtype=float).ravel()
    if p.shape != lab.shape:
        raise ValueError(f"predictions and labels lengths differ: {p.size} != {lab.size}")
    if p.size == 0:
        raise ValueError("cannot compute RMSE of empty arrays")
    return float(np.sqrt(mean_squared_error(lab, p)))


def label_range(labels) -> float:
    lab = np.asarray(labels, dtype=float)
    return float(abs(lab.max() - lab.min()))


@dataclass(frozen=True)
class EvaluationReport:
    predictions: np.ndarray
    rmse: float
    label_range: float

    @property
    def rmse_percent(self) -> float:
        if self.label_range == 0:
            return float('nan')
        return self.rmse / self.label_range * 100

    def lines(self):
        yield f"Label range:    {self.label_range}"
        yield f"RMSE:           {self.rmse} {self.rmse_percent:.2f}%"


def evaluate(model, feature, labels) -> EvaluationReport:
    """Run every feature value through the model and score it against the labels."""
    predictions = model.predict(np.asarray(feature, dtype=float))
    return EvaluationReport(
        predictions=predictions,
        rmse=rmse(predictions, labels),
        label_range=label_range(labels),
    )
