"""core/token_system.py"""
from enum import Enum, IntEnum
from typing import NamedTuple

from core.errors import ExpressionSyntaxError


class TokenKind(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    VARIABLE = "variable"
    FUNCTION = "function"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


class Token(NamedTuple):
    lexeme: str
    kind: TokenKind


class Function(IntEnum):
    """支持的函数，序号即plan中的函数标签"""
    NONE = 0
    LOG = 1
    LOG10 = 2
    SIN = 3
    COS = 4
    TAN = 5
    COT = 6
    ASIN = 7
    ACOS = 8
    ATAN = 9
    ATAN2 = 10  # 保留，尚未实现
    ACOT = 11
    DEG = 12
    RAD = 13
    SQRT = 14
    EXP = 15
    ABS = 16


PI_LITERAL = "3.14159265358979323846"

# 优先级：括号/操作数 < +- < */% < ^ < 函数
SENTINEL_PRECEDENCE = 1
FUNCTION_PRECEDENCE = 5
OPERATOR_PRECEDENCE = {
    '+': 2,
    '-': 2,
    '*': 3,
    '/': 3,
    '%': 3,
    '^': 4,
}
OPERATOR_CHARS = frozenset(OPERATOR_PRECEDENCE)
GRAMMAR_CHARS = frozenset('0123456789.()') | OPERATOR_CHARS

# 函数名只接受全小写或全大写，混合大小写不识别
FUNCTION_NAMES = {}
for _func in Function:
    if _func is not Function.NONE:
        FUNCTION_NAMES[_func.name.lower()] = _func
        FUNCTION_NAMES[_func.name] = _func
del _func


def lookup_function(name):
    """返回函数枚举，未识别时返回Function.NONE"""
    return FUNCTION_NAMES.get(name, Function.NONE)


def precedence(token):
    if token.kind is TokenKind.OPERATOR:
        return OPERATOR_PRECEDENCE[token.lexeme]
    if token.kind is TokenKind.FUNCTION:
        return FUNCTION_PRECEDENCE
    return SENTINEL_PRECEDENCE


# 每种token对栈深度的影响：(需要的操作数, 产出)
_STACK_EFFECT = {
    TokenKind.NUMBER: (0, 1),
    TokenKind.VARIABLE: (0, 1),
    TokenKind.OPERATOR: (2, 1),
    TokenKind.FUNCTION: (1, 1),
}


class RPNValidator:
    """只模拟栈深度、不计算数值的后缀程序检查"""

    @staticmethod
    def calculate_stack_size(postfix):
        """
        计算后缀序列执行完后栈中元素的个数
        Returns:
            栈大小；某一步操作数不足时返回 -1
        """
        stack_size = 0
        for token in postfix:
            effect = _STACK_EFFECT.get(token.kind)
            if effect is None:
                return -1
            needed, produced = effect
            if stack_size < needed:
                return -1
            stack_size = stack_size - needed + produced
        return stack_size

    @staticmethod
    def is_complete(postfix):
        return RPNValidator.calculate_stack_size(postfix) == 1

    @staticmethod
    def check(postfix):
        """不完整时抛出ExpressionSyntaxError"""
        stack_size = 0
        for index, token in enumerate(postfix):
            effect = _STACK_EFFECT.get(token.kind)
            if effect is None:
                raise ExpressionSyntaxError(
                    f"Unexpected {token.kind.value} token '{token.lexeme}' in postfix program."
                )
            needed, produced = effect
            if stack_size < needed:
                raise ExpressionSyntaxError(
                    f"Too few operands for '{token.lexeme}' "
                    f"(postfix token {index}: needs {needed}, has {stack_size})."
                )
            stack_size = stack_size - needed + produced

        if stack_size != 1:
            raise ExpressionSyntaxError(
                f"Expression leaves {stack_size} values on the stack, expected 1."
            )
