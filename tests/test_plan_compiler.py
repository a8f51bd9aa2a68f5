from __future__ import annotations

import pytest

from core.errors import ExpressionSyntaxError, UnknownExpressionError, UnknownVariableError
from core.plan_compiler import Instruction, compile_plan
from core.shunting_yard import to_postfix
from core.token_system import Function, RPNValidator, Token, TokenKind
from core.tokenizer import tokenize


def _compile(expression: str) -> tuple[Instruction, ...]:
    postfix, names = to_postfix(tokenize(expression))
    return compile_plan(postfix, names)


def test_plan_tags() -> None:
    plan = _compile("sin($x$)*2.5-$y$")
    assert plan == (
        Instruction(TokenKind.VARIABLE, 0),
        Instruction(TokenKind.FUNCTION, Function.SIN),
        Instruction(TokenKind.NUMBER, 2.5),
        Instruction(TokenKind.OPERATOR, '*'),
        Instruction(TokenKind.VARIABLE, 1),
        Instruction(TokenKind.OPERATOR, '-'),
    )


def test_function_ordinals() -> None:
    plan = _compile("ABS(acot(1))")
    assert [int(ins.operand) for ins in plan if ins.kind is TokenKind.FUNCTION] == [11, 16]


def test_compile_is_pure_and_repeatable() -> None:
    postfix, names = to_postfix(tokenize("$a$+log($b$)^2"))
    before = list(postfix)
    first = compile_plan(postfix, names)
    second = compile_plan(postfix, names)
    assert first == second
    assert postfix == before


def test_unresolved_function_fails() -> None:
    postfix = [Token("1", TokenKind.NUMBER), Token("foo", TokenKind.FUNCTION)]
    with pytest.raises(UnknownExpressionError):
        compile_plan(postfix, [])


def test_unresolved_variable_fails() -> None:
    postfix = [Token("x", TokenKind.VARIABLE)]
    with pytest.raises(UnknownVariableError):
        compile_plan(postfix, [])


@pytest.mark.parametrize("expression", ["1+", "*2", "(1)(2)", "sin()", "1.2.3", "sin"])
def test_operand_count_is_checked(expression: str) -> None:
    with pytest.raises(ExpressionSyntaxError):
        _compile(expression)


def test_stack_size_simulation() -> None:
    postfix, _ = to_postfix(tokenize("1+2*3"))
    assert RPNValidator.calculate_stack_size(postfix) == 1
    assert RPNValidator.is_complete(postfix)
    assert RPNValidator.calculate_stack_size(postfix[:2]) == 2
    assert RPNValidator.calculate_stack_size([Token("+", TokenKind.OPERATOR)]) == -1
