# -*- coding: utf-8 -*-
import numpy as np
import pytest
from numpy.testing import assert_allclose

import pandas_ta_pine as ta

nan = np.nan


def test_stdev_is_population():
    result = ta.stdev([1, 2, 3, 4], 2)
    assert_allclose(result, [nan, 0.5, 0.5, 0.5], equal_nan=True)
    assert result.category == "statistics"


def test_stdev_matches_pandas(ohlcv):
    close = ohlcv["close"]
    expected = close.rolling(20).std(ddof=0)
    assert_allclose(ta.stdev(close, 20), expected, rtol=1e-9, equal_nan=True)


def test_variance_modes():
    assert ta.variance([1, 2, 3], 3).iloc[2] == pytest.approx(2 / 3)
    assert ta.variance([1, 2, 3], 3, biased=False).iloc[2] == pytest.approx(1.0)


def test_unbiased_variance_needs_two_bars():
    with pytest.raises(ta.InvalidParameterError):
        ta.variance([1, 2, 3], 1, biased=False)


def test_dev():
    assert ta.dev([1, 2, 3], 3).iloc[2] == pytest.approx(2 / 3)


def test_linreg_on_a_line():
    x = 2.0 * np.arange(10) + 1.0
    result = ta.linreg(x, 5)
    assert result.iloc[:4].isna().all()
    assert_allclose(result.iloc[4:], x[4:])

    back_one = ta.linreg(x, 5, regression_offset=1)
    assert_allclose(back_one.iloc[4:], x[4:] - 2.0)


def test_correlation():
    a = np.array([1.0, 3.0, 2.0, 5.0, 4.0, 6.0])
    assert_allclose(ta.correlation(a, 2 * a + 1, 3).iloc[2:], 1.0)
    assert_allclose(ta.correlation(a, -a, 3).iloc[2:], -1.0)
    assert ta.correlation(a, np.ones(6), 3).isna().all()


def test_percentrank():
    assert ta.percentrank([1, 2, 3, 4], 3).iloc[2] == 100
    assert ta.percentrank([3, 2, 1], 3).iloc[2] == 0
    assert ta.percentrank([1, 3, 2], 3).iloc[2] == 50
    with pytest.raises(ta.InvalidParameterError):
        ta.percentrank([1, 2, 3], 1)


def test_median():
    assert_allclose(ta.median([3, 1, 2, 5], 3), [nan, nan, 2, 2], equal_nan=True)
    assert ta.median([1, 2, 3, 4], 4).iloc[3] == 2.5


def test_mode_ties_resolve_to_most_recent():
    assert ta.mode([1, 2, 2, 3, 3], 5).iloc[4] == 3
    assert ta.mode([3, 3, 2, 2, 1], 5).iloc[4] == 2
    assert ta.mode([1, 1, 2], 3).iloc[2] == 1
    assert ta.mode([1, 2, 3], 3).iloc[2] == 3


def test_cog():
    result = ta.cog([1, 2, 3], 3)
    assert result.iloc[2] == pytest.approx(-10 / 6)
    assert ta.cog([1, -1], 2).iloc[1] == 0


def test_short_history_is_nan():
    for fn in (ta.stdev, ta.dev, ta.variance, ta.linreg, ta.median, ta.mode, ta.cog):
        assert fn([1.0, 2.0], 5).isna().all()
