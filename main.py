"""主程序入口 - 命令行计算器（单个表达式、批量文件、交互模式）"""
import argparse
import logging
import sys
import pandas as pd

from config.config import *
from data.data_loader import load_expressions, evaluate_expressions, summarize_results
from rpncalc import Expression, ExpressionError

logger = logging.getLogger(__name__)


def format_result(expression, result, show_postfix=False):
    """格式化输出：'<表达式>' evaluates to: <结果>"""
    text = SHELL_CONFIG["result_template"].format(expression=expression.as_str(), result=result)
    if show_postfix:
        text += "\n" + SHELL_CONFIG["postfix_template"].format(postfix=expression.postfix_notation())
    return text


def evaluate_text(text, show_postfix=False):
    """求值一个表达式并返回输出文本，失败时抛出 ExpressionError"""
    expression = Expression(text)
    result = expression.evaluate()
    return format_result(expression, result, show_postfix)


def interactive_loop(stdin=None, stdout=None, show_postfix=False):
    """
    交互模式：读取一行、求值、输出，直到 exit/quit 或输入结束
    出错时打印错误信息并继续
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    while True:
        print(SHELL_CONFIG["prompt"], file=stdout)

        line = stdin.readline()
        if not line:
            break
        text = line.strip()

        if text in SHELL_CONFIG["exit_commands"]:
            break

        try:
            print(evaluate_text(text, show_postfix), file=stdout)
        except ExpressionError as e:
            logger.debug(f"Rejected input '{text}': {e!r}")
            print(f"Error: {e}", file=stdout)


def main(args):
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format=LOGGING_CONFIG["format"]
    )
    validate_config()

    exit_code = 0

    for text in args.expr or []:
        try:
            print(evaluate_text(text, args.show_postfix))
        except ExpressionError as e:
            logger.error(f"Failed to evaluate '{text}': {e}")
            exit_code = 1

    if args.file:
        expressions = load_expressions(args.file, args.column)
        results = evaluate_expressions(expressions)
        summary = summarize_results(results)

        for _, row in results.iterrows():
            if pd.isna(row['error']):
                print(SHELL_CONFIG["result_template"].format(expression=row['expression'], result=row['result']))
            else:
                print(f"'{row['expression']}' failed: {row['error']}")

        if args.output_path:
            logger.info(f"Saving results to {args.output_path}")
            results.to_csv(args.output_path, index=False)

        logger.info(f"{summary['succeeded']}/{summary['total']} expressions evaluated")

    if args.interactive or (not args.expr and not args.file):
        interactive_loop(show_postfix=args.show_postfix)

    return exit_code


def build_parser():
    parser = argparse.ArgumentParser(description="Shunting-Yard calculator")

    parser.add_argument(
        "--expr",
        type=str,
        action="append",
        help="Expression to evaluate (can be given multiple times)"
    )
    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="Path to a CSV or text file with expressions to evaluate"
    )
    parser.add_argument(
        "--column",
        type=str,
        default=BATCH_CONFIG["default_column"],
        help="Name of the expression column in a CSV file"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Path to save the batch results as CSV"
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Read expressions from stdin until 'exit' or 'quit'"
    )
    parser.add_argument(
        "--show_postfix",
        action="store_true",
        help="Also print the postfix form of each expression"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    return parser


def run():
    args = build_parser().parse_args()
    sys.exit(main(args))


if __name__ == "__main__":
    run()
