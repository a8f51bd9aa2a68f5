"""core/errors.py - 表达式引擎的异常类型"""


class MathExprError(ValueError):
    """所有解析/绑定错误的基类"""


class BadInputError(MathExprError):
    """输入表达式为空（或只有空白）"""

    def __init__(self, message="Input expression is empty."):
        super().__init__(message)


class ExpressionSyntaxError(MathExprError):
    """括号不匹配、操作数不足等语法错误"""

    def __init__(self, message="Syntax error in the input expression.", position=None):
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)
        self.position = position


class UnknownExpressionError(MathExprError):
    """函数名不在支持的函数集合中"""

    def __init__(self, name):
        super().__init__(f"Unknown expression in the input: {name}")
        self.name = name


class UnknownVariableError(MathExprError):
    """变量名没有在表达式中被标记过"""

    def __init__(self, name):
        super().__init__(f"Variable not found in the input expression: {name}")
        self.name = name


class VariableMismatchError(MathExprError):
    """按位置绑定时，值的个数与变量表大小不一致"""

    def __init__(self, expected, got):
        super().__init__(
            f"Number of variables defined ({expected}) does not match "
            f"the number of variables set ({got})."
        )
        self.expected = expected
        self.got = got


class UnsupportedFunctionError(MathExprError):
    """函数名可识别，但尚未实现（atan2）"""

    def __init__(self, name):
        super().__init__(f"Function is recognized but not supported yet: {name}")
        self.name = name
