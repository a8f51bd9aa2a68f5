"""核心模块 - 词法分析、Shunting-Yard转换、计划预编译和RPN求值"""
from .errors import (
    MathExprError, BadInputError, ExpressionSyntaxError, UnknownExpressionError,
    UnknownVariableError, VariableMismatchError, UnsupportedFunctionError
)
from .token_system import (
    TokenKind, Token, Function, OPERATOR_PRECEDENCE, FUNCTION_NAMES, PI_LITERAL,
    RPNValidator, lookup_function
)
from .tokenizer import tokenize
from .shunting_yard import to_postfix
from .plan_compiler import Instruction, compile_plan
from .variable_table import VariableTable
from .rpn_evaluator import RPNEvaluator
from .operators import Operators
from .expression import (
    CompiledExpression, Var, parse, variable_names, bind, evaluate,
    evaluate_values, calculate
)

__all__ = [
    'MathExprError', 'BadInputError', 'ExpressionSyntaxError', 'UnknownExpressionError',
    'UnknownVariableError', 'VariableMismatchError', 'UnsupportedFunctionError',
    'TokenKind', 'Token', 'Function', 'OPERATOR_PRECEDENCE', 'FUNCTION_NAMES', 'PI_LITERAL',
    'RPNValidator', 'lookup_function',
    'tokenize', 'to_postfix', 'Instruction', 'compile_plan',
    'VariableTable', 'RPNEvaluator', 'Operators',
    'CompiledExpression', 'Var', 'parse', 'variable_names', 'bind', 'evaluate',
    'evaluate_values', 'calculate'
]
