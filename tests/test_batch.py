import math

import pandas as pd

from batch import BatchEvaluator


def test_evaluate_many_list():
    evaluator = BatchEvaluator()
    frame = evaluator.evaluate_many(["1+1", "5/0", "sqrt(16)", "(1"])

    assert list(frame.columns) == ["expression", "result", "error"]
    assert frame["expression"].tolist() == ["1+1", "5/0", "sqrt(16)", "(1"]
    assert frame.loc[0, "result"] == 2.0
    assert math.isnan(frame.loc[1, "result"])
    assert frame.loc[1, "error"] == "DIVISION_BY_ZERO"
    assert frame.loc[2, "result"] == 4.0
    assert frame.loc[3, "error"] == "UNMATCHED_PAREN"
    assert frame["error"].isna().tolist() == [True, False, True, False]


def test_evaluate_many_series_keeps_index():
    expressions = pd.Series({"a": "2^3", "b": "2 & 3"})
    frame = BatchEvaluator().evaluate_many(expressions)
    assert frame.index.tolist() == ["a", "b"]
    assert frame.loc["a", "result"] == 8.0
    assert frame.loc["b", "error"] == "UNRECOGNIZED_SYMBOL"


def test_evaluate_single_never_raises():
    evaluator = BatchEvaluator()
    assert evaluator.evaluate("3+4*2") == 11.0
    assert math.isnan(evaluator.evaluate("sqrt(0-1)"))


def test_cache_hits_and_eviction():
    evaluator = BatchEvaluator(cache_size=2)
    evaluator.evaluate("1+1")
    evaluator.evaluate("1+1")
    evaluator.evaluate("2+2")
    evaluator.evaluate("3+3")

    info = evaluator.cache_info()
    assert info["hits"] == 1
    assert info["misses"] == 3
    assert info["size"] == 2

    # 1+1 已被淘汰
    evaluator.evaluate("1+1")
    assert evaluator.cache_info()["misses"] == 4


def test_clear_cache():
    evaluator = BatchEvaluator()
    evaluator.evaluate("1+1")
    evaluator.clear_cache()
    assert evaluator.cache_info() == {"hits": 0, "misses": 0, "size": 0, "max_size": evaluator.cache_size}


def test_cache_disabled():
    evaluator = BatchEvaluator(cache_size=0)
    evaluator.evaluate("1+1")
    evaluator.evaluate("1+1")
    assert evaluator.cache_info()["size"] == 0
    assert evaluator.cache_info()["misses"] == 2


def test_empty_input():
    frame = BatchEvaluator().evaluate_many([])
    assert len(frame) == 0
    assert list(frame.columns) == ["expression", "result", "error"]
