"""数据加载和批量求值模块"""
import pandas as pd
import numpy as np
import logging

from config.config import BATCH_CONFIG
from rpncalc import Expression, ExpressionError

logger = logging.getLogger(__name__)


def load_expressions(file_path, column=None):
    """
    从文件加载表达式。

    Parameters:
    - file_path: CSV文件或普通文本文件（每行一个表达式）
    - column: CSV中表达式所在列, 默认为 BATCH_CONFIG['default_column']

    Returns:
    - 表达式字符串列表
    """
    column = column or BATCH_CONFIG['default_column']
    logger.info(f"Loading expressions from {file_path}")

    if str(file_path).endswith('.csv'):
        dataset = pd.read_csv(file_path, dtype=str, keep_default_na=False)

        if column not in dataset.columns:
            raise ValueError(f"Expression column '{column}' not found in dataset.")

        expressions = [expr for expr in dataset[column].tolist() if expr.strip()]
    else:
        with open(file_path, 'r', encoding='utf-8') as f:
            # 只去掉行尾换行符，空格交给 Expression 处理
            expressions = [line.rstrip('\r\n') for line in f]
        expressions = [expr for expr in expressions if expr.strip()]

    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def evaluate_expressions(expressions):
    """
    批量求值，单个表达式失败不影响其他表达式

    Parameters:
    - expressions: 表达式字符串序列

    Returns:
    - DataFrame，列为 expression, postfix, result, error
    """
    rows = []
    for text in expressions:
        row = {'expression': text, 'postfix': None, 'result': np.nan, 'error': None}
        try:
            expression = Expression(text)
            row['expression'] = expression.as_str()
            row['postfix'] = expression.postfix_notation()
            row['result'] = expression.evaluate()
        except ExpressionError as e:
            logger.error(f"Error evaluating expression '{text}': {e}")
            row['error'] = type(e).__name__
        rows.append(row)

    # 文本列固定为 object，保证失败行的 postfix/error 保持 None 而不是 NaN
    return pd.DataFrame({
        'expression': pd.Series([row['expression'] for row in rows], dtype=object),
        'postfix': pd.Series([row['postfix'] for row in rows], dtype=object),
        'result': pd.Series([row['result'] for row in rows], dtype=float),
        'error': pd.Series([row['error'] for row in rows], dtype=object),
    })


def summarize_results(results):
    """统计批量求值结果"""
    succeeded = results['error'].isna()
    values = results.loc[succeeded, 'result'].astype(float)

    summary = {
        'total': int(len(results)),
        'succeeded': int(succeeded.sum()),
        'failed': int((~succeeded).sum()),
        'non_finite': int((~np.isfinite(values)).sum()),
    }
    logger.info(f"Batch summary: {summary}")
    return summary
