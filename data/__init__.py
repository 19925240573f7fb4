"""数据模块 - 批量表达式读取和结果保存"""
from .expression_loader import (
    load_expressions, evaluate_expressions, summarize_results, save_results
)

__all__ = [
    'load_expressions', 'evaluate_expressions', 'summarize_results', 'save_results'
]
