"""批量求值模块"""
from .evaluator import BatchEvaluator

__all__ = ['BatchEvaluator']
