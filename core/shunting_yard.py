"""core/shunting_yard.py - Shunting-Yard：中缀Token序列转后缀（RPN）"""
from core.errors import ExpressionSyntaxError, UnknownExpressionError
from core.token_system import Function, TokenKind, lookup_function, precedence


def to_postfix(tokens):
    """
    Args:
        tokens: tokenize() 输出的Token序列
    Returns:
        (postfix, variable_names)
        postfix 中不含括号；variable_names 按首次出现的顺序排列
    """
    operator_stack = []
    output = []
    variable_names = []

    for token in tokens:
        kind = token.kind

        if kind is TokenKind.NUMBER:
            output.append(token)

        elif kind is TokenKind.VARIABLE:
            if token.lexeme not in variable_names:
                variable_names.append(token.lexeme)
            output.append(token)

        elif kind is TokenKind.OPERATOR:
            # 栈顶优先级 >= 当前操作符时先出栈，所有操作符（包括 ^）都是左结合
            current = precedence(token)
            while operator_stack and precedence(operator_stack[-1]) >= current:
                output.append(operator_stack.pop())
            operator_stack.append(token)

        elif kind is TokenKind.FUNCTION or kind is TokenKind.LEFT_PAREN:
            operator_stack.append(token)

        elif kind is TokenKind.RIGHT_PAREN:
            while operator_stack and operator_stack[-1].kind is not TokenKind.LEFT_PAREN:
                output.append(operator_stack.pop())
            if not operator_stack:
                raise ExpressionSyntaxError("An unclosed right parenthesis was found in the input expression.")
            operator_stack.pop()

    while operator_stack:
        output.append(operator_stack.pop())

    validate_postfix(output)
    return output, variable_names


def validate_postfix(postfix):
    """残留的 "(" 说明左括号未闭合；函数名必须在支持的集合中"""
    for token in postfix:
        if token.kind is TokenKind.LEFT_PAREN:
            raise ExpressionSyntaxError("An unclosed left parenthesis was found in the input expression.")

    for token in postfix:
        if token.kind is TokenKind.FUNCTION and lookup_function(token.lexeme) is Function.NONE:
            raise UnknownExpressionError(token.lexeme)


def postfix_to_text(postfix):
    return " ".join(token.lexeme for token in postfix)
