"""配置文件"""

# 表达式引擎参数
ENGINE_CONFIG = {
    "max_expression_length": 1000,  # 超长输入在分词阶段直接报错
    "result_precision": None,  # 结果显示的有效位数；None 为可精确回读的最短表示
}

# 批量求值参数
BATCH_CONFIG = {
    "cache_size": 1000,  # LRU缓存条目数
    "error_marker": "Error",  # 失败时展示给用户的文本
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert ENGINE_CONFIG["max_expression_length"] > 0, "max_expression_length must be positive"
    precision = ENGINE_CONFIG["result_precision"]
    assert precision is None or 1 <= precision <= 17, "float64 carries at most 17 significant digits"
    assert BATCH_CONFIG["cache_size"] >= 0, "cache_size must be non-negative"
    assert BATCH_CONFIG["error_marker"], "error_marker must be non-empty"
    return True
