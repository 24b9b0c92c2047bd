# single-feature linear models and the learners that fit them
import logging
from dataclasses import dataclass
from typing import Protocol

import numpy as np
from sklearn.linear_model import LinearRegression

from .errors import DegenerateFeatureError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimpleLinearModel:
    slope: float
    intercept: float

    def predict(self, x):
        if np.ndim(x) == 0:
            return float(self.slope * x + self.intercept)
        return self.slope * np.asarray(x, dtype=float) + self.intercept


class LinearFitter(Protocol):
    def learn(self, x, y) -> SimpleLinearModel: ...


def _as_pair(x, y):
    x = np.asarray(x, dtype=float).ravel()
    y = np.asarray(y, dtype=float).ravel()
    if x.shape != y.shape:
        raise ValueError(f"feature and label lengths differ: {x.size} != {y.size}")
    if x.size < 2:
        raise ValueError(f"need at least 2 samples to fit a line, got {x.size}")
    if not (np.isfinite(x).all() and np.isfinite(y).all()):
        raise ValueError("feature and label values must be finite")
    if np.ptp(x) == 0:
        raise DegenerateFeatureError(f"all {x.size} feature values equal {x[0]!r}; slope is undefined")
    return x, y


class OrdinaryLeastSquares:
    """Closed-form least squares fit of y = slope * x + intercept."""

    def learn(self, x, y) -> SimpleLinearModel:
        x, y = _as_pair(x, y)
        n = x.size
        # centre first so a large common offset in x does not cancel out the variance
        x_mean, y_mean = x.mean(), y.mean()
        xc, yc = x - x_mean, y - y_mean
        sxx = (xc * xc).sum()
        if sxx == 0:
            raise DegenerateFeatureError("feature variance is zero; slope is undefined")
        slope = (xc * yc).sum() / sxx
        intercept = y_mean - slope * x_mean
        logger.info("OLS fit on %s samples: slope=%s intercept=%s", n, slope, intercept)
        return SimpleLinearModel(float(slope), float(intercept))


class SklearnLeastSquares:
    """Same contract as OrdinaryLeastSquares, solved by sklearn's LinearRegression."""

    def learn(self, x, y) -> SimpleLinearModel:
        x, y = _as_pair(x, y)
        reg = LinearRegression().fit(x.reshape(-1, 1), y)
        return SimpleLinearModel(float(reg.coef_[0]), float(reg.intercept_))
