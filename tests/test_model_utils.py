import sys
import os

# Add project root to sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import dataclasses

import numpy as np
import pytest

from housing_regression.errors import DegenerateFeatureError
from housing_regression.model_utils import (OrdinaryLeastSquares, SimpleLinearModel,
                                            SklearnLeastSquares)


def test_ols_recovers_perfect_line():
    x = np.arange(1, 11, dtype=float)
    y = 2 * x + 3
    model = OrdinaryLeastSquares().learn(x, y)
    assert model.slope == pytest.approx(2.0, abs=1e-9)
    assert model.intercept == pytest.approx(3.0, abs=1e-9)


def test_ols_matches_sklearn_on_noisy_data():
    rng = np.random.default_rng(42)
    x = rng.uniform(0.5, 15, size=200)
    y = 40 * x + 45 + rng.normal(0, 30, size=200)
    ours = OrdinaryLeastSquares().learn(x, y)
    theirs = SklearnLeastSquares().learn(x, y)
    assert ours.slope == pytest.approx(theirs.slope, rel=1e-8)
    assert ours.intercept == pytest.approx(theirs.intercept, rel=1e-8)


@pytest.mark.parametrize('learner', [OrdinaryLeastSquares(), SklearnLeastSquares()])
def test_zero_variance_feature_is_rejected(learner):
    with pytest.raises(DegenerateFeatureError):
        learner.learn([5, 5, 5, 5], [1, 2, 3, 4])


def test_invalid_inputs():
    ols = OrdinaryLeastSquares()
    with pytest.raises(ValueError):
        ols.learn([1, 2, 3], [1, 2])
    with pytest.raises(ValueError):
        ols.learn([1], [1])
    with pytest.raises(ValueError):
        ols.learn([1, np.nan], [1, 2])


def test_predict_scalar_and_array():
    model = SimpleLinearModel(slope=2.0, intercept=1.0)
    assert model.predict(3) == 7.0
    np.testing.assert_allclose(model.predict([0, 1, 2]), [1, 3, 5])


def test_model_is_immutable():
    model = SimpleLinearModel(1.0, 0.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        model.slope = 2.0


def test_ols_large_feature_offset_matches_sklearn():
    x = 1e8 + np.arange(10, dtype=float)
    y = 2 * (x - 1e8) + 3
    ours = OrdinaryLeastSquares().learn(x, y)
    theirs = SklearnLeastSquares().learn(x, y)
    assert ours.slope == pytest.approx(2.0, abs=1e-6)
    assert ours.slope == pytest.approx(theirs.slope, abs=1e-6)
    assert ours.intercept == pytest.approx(theirs.intercept, rel=1e-6)
    np.testing.assert_allclose(ours.predict(x), y, atol=1e-4)
