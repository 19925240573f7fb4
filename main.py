"""主程序入口 - 交互式计算器 / 单次求值 / 批量求值"""
import argparse
import logging
import sys
import pandas as pd

from config.config import *
from calc.evaluator import ExpressionEvaluator
from data.expression_loader import (
    load_expressions,
    evaluate_expressions,
    summarize_results,
    save_results,
)
from utils.formatting import format_result, format_number

logger = logging.getLogger(__name__)


def setup_logging(level=None):
    logging.basicConfig(
        level=getattr(logging, (level or LOGGING_CONFIG['level']).upper()),
        format=LOGGING_CONFIG['format']
    )


def run_repl(evaluator, input_stream=None, output_stream=None, prompt=None):
    """
    读取一行、求值、打印，直到输入结束
    Returns:
        处理的表达式数量
    """
    input_stream = input_stream or sys.stdin
    output_stream = output_stream or sys.stdout
    prompt = CALCULATOR_CONFIG['prompt'] if prompt is None else prompt

    count = 0
    while True:
        output_stream.write(prompt)
        output_stream.flush()
        try:
            line = input_stream.readline()
        except KeyboardInterrupt:
            output_stream.write("\n")
            break
        if not line:
            # EOF
            break

        result = evaluator.calculate(line)
        output_stream.write(f"{format_result(result)}\n\n")
        output_stream.flush()
        count += 1

    return count


def run_batch(evaluator, batch_file, column=None, output_path=None):
    expressions = load_expressions(batch_file, column)
    results = evaluate_expressions(expressions, evaluator)

    summary = summarize_results(results)
    logger.info(f"Batch finished: {summary['succeeded']}/{summary['total']} succeeded")
    for kind, n in summary.items():
        if kind not in ('total', 'succeeded', 'failed') and n:
            logger.info(f"  {kind}: {n}")

    if output_path:
        save_results(results, output_path)
    else:
        for record in results.itertuples(index=False):
            if pd.isna(record.error):
                print(f"{record.expression}\tResult: {format_number(record.result)}")
            else:
                print(f"{record.expression}\tError: {record.message}")

    return results


def main(args):
    setup_logging(args.log_level)
    validate_config()

    evaluator = ExpressionEvaluator(
        strict_parentheses=args.strict_parentheses or CALCULATOR_CONFIG['strict_parentheses'],
        strict_stack=args.strict_stack or CALCULATOR_CONFIG['strict_stack'],
    )

    if args.expression is not None:
        result = evaluator.calculate(args.expression)
        print(format_result(result))
        return 0 if result.ok else 1

    if args.batch_file:
        try:
            results = run_batch(evaluator, args.batch_file, args.column, args.output_path)
        except (OSError, ValueError) as e:
            logger.error(f"Batch evaluation failed: {e}")
            return 1
        return 0 if results['error'].isna().all() else 1

    logger.info("Starting interactive calculator")
    run_repl(evaluator)
    evaluator.log_stats()
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Infix arithmetic calculator")

    parser.add_argument(
        "--expression",
        type=str,
        default=None,
        help="Evaluate a single expression and exit"
    )
    parser.add_argument(
        "--batch_file",
        type=str,
        default=None,
        help="Path to a text file (one expression per line) or CSV file"
    )
    parser.add_argument(
        "--column",
        type=str,
        default=BATCH_CONFIG['expression_column'],
        help="Name of the expression column when --batch_file is a CSV"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Path to save the batch results as CSV"
    )
    parser.add_argument(
        "--strict_parentheses",
        action="store_true",
        help="Report an unmatched right parenthesis as an error"
    )
    parser.add_argument(
        "--strict_stack",
        action="store_true",
        help="Report leftover values after evaluation as an error"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=None,
        choices=VALID_LOG_LEVELS,
        help="Logging level (default from LOGGING_CONFIG)"
    )
    return parser


if __name__ == "__main__":
    args = build_parser().parse_args()
    sys.exit(main(args))
