"""数据加载模块 - 批量读取表达式并求值"""
import pandas as pd
import logging

from config.config import BATCH_CONFIG
from core.errors import ERROR_KINDS

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ['expression', 'postfix', 'result', 'error', 'message']


def load_expressions(file_path, column=None):
    """
    加载表达式列表

    Parameters:
    - file_path: .csv 文件按列读取；其他文件每行一个表达式
    - column: CSV中的表达式列名, 默认为 BATCH_CONFIG['expression_column']

    Returns:
    - 表达式字符串列表（已去掉空行）
    """
    column = column or BATCH_CONFIG['expression_column']
    logger.info(f"Loading expressions from {file_path}")

    if str(file_path).endswith('.csv'):
        # 表达式中可能出现像数字的文本，统一按字符串读取
        df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        if column not in df.columns:
            raise ValueError(f"Column '{column}' not found in {file_path}. "
                             f"Available columns: {list(df.columns)}")
        expressions = df[column].tolist()
    else:
        with open(file_path, 'r', encoding=BATCH_CONFIG['encoding']) as f:
            expressions = f.read().splitlines()

    expressions = [expr for expr in expressions if expr.strip()]
    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def evaluate_expressions(expressions, evaluator):
    """对每个表达式求值，返回包含 RESULT_COLUMNS 的DataFrame"""
    records = [evaluator.calculate(expr).to_dict() for expr in expressions]
    df = pd.DataFrame.from_records(records, columns=RESULT_COLUMNS)
    df['result'] = pd.to_numeric(df['result'], errors='coerce')
    return df


def summarize_results(df):
    errors = df['error'].dropna()
    summary = {
        'total': len(df),
        'succeeded': int(df['error'].isna().sum()),
        'failed': len(errors),
    }
    counts = errors.value_counts()
    for kind in ERROR_KINDS:
        summary[kind] = int(counts.get(kind, 0))
    return summary


def save_results(df, output_path=None):
    output_path = output_path or BATCH_CONFIG['output_path']
    logger.info(f"Saving {len(df)} results to {output_path}")
    df.to_csv(output_path, index=False, encoding=BATCH_CONFIG['encoding'])
    return output_path
