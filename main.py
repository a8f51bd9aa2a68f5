"""主程序入口 - 命令行计算中缀表达式"""
import argparse
import logging
import sys

from config.config import LOGGING_CONFIG, validate_config
from core import MathExprError, parse

logger = logging.getLogger(__name__)

DEMO_EXPRESSIONS = [
    # sin(rad(12.67)*exp(1.13)) + TAN(COS(RAD(32.1)))*LOG(12) = 3.44461...
    ("Without variables",
     "sin(rad(12.67)*exp(1.13)) + TAN(COS(RAD(32.1)))*LOG(12)", {}),
    ("With variables",
     "sin(rad($var2$)*exp($var1$)) + TAN(COS(RAD($var3$)))*LOG($var4$)",
     {"var1": 1.13, "var2": 12.67, "var3": 32.1, "var4": 12}),
]


def parse_binding(text):
    """NAME=VALUE -> (name, float)"""
    name, sep, value = text.partition('=')
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"Expected NAME=VALUE, got '{text}'")
    try:
        return name.strip(), float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid value for '{name}': '{value}'") from None


def run_expression(expression, bindings, marker=None, show_rpn=False):
    compiled = parse(expression, marker)
    for name, value in bindings:
        compiled.bind(name, value)

    if show_rpn:
        print(f"rpn = {compiled.rpn}")
    result = compiled.evaluate()
    print(f"result = {result}")
    return result


def run_demo(marker=None):
    for i, (title, expression, variables) in enumerate(DEMO_EXPRESSIONS, 1):
        print(f"EXAMPLE {i}: {title}")
        run_expression(expression, list(variables.items()), marker=marker)
        print()


def main(args):
    validate_config()

    try:
        if args.demo:
            run_demo(args.marker)
        elif args.expression is None:
            logger.error("No expression given (use --demo to run the examples)")
            return 2
        else:
            run_expression(args.expression, args.var, marker=args.marker, show_rpn=args.show_rpn)
    except MathExprError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Math Expression Parser")

    parser.add_argument(
        "expression",
        nargs="?",
        help="Infix expression, e.g. \"sin(rad($x$))\""
    )
    parser.add_argument(
        "--var",
        type=parse_binding,
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Bind a variable (repeatable)"
    )
    parser.add_argument(
        "--marker",
        type=str,
        default=None,
        help="Variable marker character (default from PARSER_CONFIG)"
    )
    parser.add_argument(
        "--show_rpn",
        action="store_true",
        help="Print the postfix (RPN) form of the expression"
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Run the built-in examples"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        help="Logging level (default: INFO)"
    )
    return parser


def cli():
    args = build_parser().parse_args()

    # 设置日志
    logging.basicConfig(
        level=args.log_level.upper(),
        format=LOGGING_CONFIG["format"]
    )
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
