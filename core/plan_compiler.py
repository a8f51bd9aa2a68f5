"""core/plan_compiler.py - 把后缀Token预先解析成带标签的执行计划"""
from typing import Any, NamedTuple

from core.errors import ExpressionSyntaxError, UnknownExpressionError, UnknownVariableError
from core.token_system import Function, RPNValidator, TokenKind, lookup_function
from core.tokenizer import parse_number


class Instruction(NamedTuple):
    kind: TokenKind
    # NUMBER: float字面值; OPERATOR: 操作符字符; FUNCTION: Function; VARIABLE: 变量槽位
    operand: Any


def compile_plan(postfix, variable_names):
    """
    纯函数：同样的输入总是得到同样的计划，不修改postfix
    Args:
        postfix: to_postfix() 输出的Token序列
        variable_names: 变量表中的名字（按槽位顺序）
    Returns:
        Instruction元组
    """
    RPNValidator.check(postfix)

    slots = {name: index for index, name in enumerate(variable_names)}
    plan = []
    for token in postfix:
        kind = token.kind

        if kind is TokenKind.NUMBER:
            value = parse_number(token.lexeme)
            if value is None:
                raise ExpressionSyntaxError(f"Invalid number '{token.lexeme}'.")
            plan.append(Instruction(kind, value))

        elif kind is TokenKind.OPERATOR:
            plan.append(Instruction(kind, token.lexeme))

        elif kind is TokenKind.FUNCTION:
            func = lookup_function(token.lexeme)
            if func is Function.NONE:
                raise UnknownExpressionError(token.lexeme)
            plan.append(Instruction(kind, func))

        elif kind is TokenKind.VARIABLE:
            if token.lexeme not in slots:
                raise UnknownVariableError(token.lexeme)
            plan.append(Instruction(kind, slots[token.lexeme]))

        else:
            raise ExpressionSyntaxError(f"Unexpected token '{token.lexeme}' in postfix program.")

    return tuple(plan)
