"""主程序入口 - 命令行计算器"""
import argparse
import logging
import sys

from config.config import BATCH_CONFIG, ENGINE_CONFIG, LOGGING_CONFIG, validate_config
from core import ExpressionEngine, ExpressionError, postfix_to_string
from batch import BatchEvaluator
from utils import format_result

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("quit", "exit")


def evaluate_line(engine, expr, show_rpn=False, out=None):
    """
    求值并打印 'expr = result'；失败时打印 'expr = Error'，表达式原样保留
    Returns:
        成功返回True
    """
    out = out or sys.stdout
    try:
        postfix = engine.compile(expr)
        if show_rpn:
            print(f"RPN: {postfix_to_string(postfix)}", file=out)
        result = engine.evaluate_postfix(postfix)
    except ExpressionError as e:
        logger.info(f"{expr!r} failed: {e.kind.name}: {e}")
        print(f"{expr} = {BATCH_CONFIG['error_marker']}", file=out)
        return False
    print(f"{expr} = {format_result(result, ENGINE_CONFIG['result_precision'])}", file=out)
    return True


def run_interactive(engine, show_rpn=False, stream=None, out=None):
    """逐行读取表达式，空行跳过，quit/exit 结束"""
    stream = stream or sys.stdin
    all_ok = True
    for line in stream:
        expr = line.strip()
        if not expr:
            continue
        if expr.lower() in QUIT_COMMANDS:
            break
        all_ok = evaluate_line(engine, expr, show_rpn=show_rpn, out=out) and all_ok
    return all_ok


def run_batch(path, output=None, out=None):
    """对文件中每行一个表达式批量求值，打印表格，可选写出CSV"""
    out = out or sys.stdout
    with open(path, "r", encoding="utf-8") as fh:
        expressions = [line.strip() for line in fh if line.strip()]
    logger.info(f"Loaded {len(expressions)} expressions from {path}")

    evaluator = BatchEvaluator()
    frame = evaluator.evaluate_many(expressions)
    print(frame.to_string(index=False), file=out)

    if output:
        frame.to_csv(output, index=False)
        logger.info(f"Results written to {output}")
    return bool(frame["error"].isna().all())


def main(args):
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format=LOGGING_CONFIG["format"]
    )
    validate_config()
    engine = ExpressionEngine()

    if args.batch:
        ok = run_batch(args.batch, args.output)
    elif args.expressions:
        ok = True
        for expr in args.expressions:
            ok = evaluate_line(engine, expr, show_rpn=args.show_rpn) and ok
    else:
        ok = run_interactive(engine, show_rpn=args.show_rpn)
    return 0 if ok else 1


def build_parser():
    parser = argparse.ArgumentParser(description="Shunting-yard expression calculator")
    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate; reads stdin line by line when omitted"
    )
    parser.add_argument(
        "--show-rpn",
        action="store_true",
        help="Print the postfix (RPN) form before each result"
    )
    parser.add_argument(
        "--batch",
        type=str,
        default=None,
        help="File with one expression per line"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="CSV path for --batch results"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    return parser


def cli():
    sys.exit(main(build_parser().parse_args()))


if __name__ == "__main__":
    cli()
