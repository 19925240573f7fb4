"""计算模块 - 表达式求值流水线"""
from .evaluator import ExpressionEvaluator, EvaluationResult, evaluate_expression

__all__ = ['ExpressionEvaluator', 'EvaluationResult', 'evaluate_expression']
