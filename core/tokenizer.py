"""core/tokenizer.py - 中缀表达式的词法分析"""
import re

from config.config import PARSER_CONFIG
from core.errors import BadInputError, ExpressionSyntaxError
from core.token_system import GRAMMAR_CHARS, PI_LITERAL, Token, TokenKind

_DIGITS = frozenset('0123456789')
_NUMBER_RE = re.compile(r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")
_STRICT_OPERATORS = frozenset('*/^%')
_SIGNS = frozenset('+-')


def is_valid_marker(marker):
    """变量标记必须是单个字符，且不能与语法中的其他字符冲突"""
    return (
        isinstance(marker, str)
        and len(marker) == 1
        and marker not in GRAMMAR_CHARS
        and not marker.isspace()
    )


def strip_whitespace(expression):
    return "".join(expression.split())


def parse_number(lexeme):
    """可失败的数字解析：合法时返回float，否则返回None"""
    if _NUMBER_RE.fullmatch(lexeme) is None:
        return None
    return float(lexeme)


def is_operator_at(text, pos):
    """
    判断text[pos]是否为操作符。
    "+"/"-" 在以下情况下不算操作符（而是数字的符号）：
        1. 是整个表达式的第一个字符
        2. 紧跟在 "(" 后面
        3. 紧跟在另一个操作符后面（包括 "-"）
    第3条是递归的，这里从连续符号串的起点往回推，结果逐个取反。
    """
    ch = text[pos]
    if ch in _STRICT_OPERATORS:
        return True
    if ch not in _SIGNS:
        return False

    start = pos
    while start > 0 and text[start - 1] in _SIGNS:
        start -= 1

    if start == 0 or text[start - 1] == '(' or text[start - 1] in _STRICT_OPERATORS:
        result = False
    else:
        result = True

    # 符号串中每一个都与前一个相反
    if (pos - start) % 2 == 1:
        result = not result
    return result


def is_number_at(text, pos):
    ch = text[pos]
    if ch in _DIGITS or ch == '.':
        return True
    if ch == '-':
        return not is_operator_at(text, pos)
    return False


def _scan_number(text, pos):
    """从pos开始读取一个数字：可选的前导"-"，数字，最多一个"." """
    end = pos
    if text[end] == '-':
        end += 1
    seen_dot = False
    while end < len(text):
        ch = text[end]
        if ch in _DIGITS:
            end += 1
        elif ch == '.' and not seen_dot:
            seen_dot = True
            end += 1
        else:
            break
    return end


def tokenize(expression, marker=None):
    """
    去掉所有空白后，从左到右把表达式切分成Token序列
    Args:
        expression: 中缀表达式
        marker: 变量标记字符，默认取PARSER_CONFIG['variable_marker']
    Returns:
        Token列表
    """
    if marker is None:
        marker = PARSER_CONFIG['variable_marker']
    if not is_valid_marker(marker):
        raise BadInputError(f"Invalid variable marker: {marker!r}")

    text = strip_whitespace(expression or "")
    if not text:
        raise BadInputError()

    tokens = []
    pos = 0
    while pos < len(text):
        ch = text[pos]

        if is_operator_at(text, pos):
            tokens.append(Token(ch, TokenKind.OPERATOR))
            pos += 1

        elif ch == '(':
            tokens.append(Token(ch, TokenKind.LEFT_PAREN))
            pos += 1

        elif ch == ')':
            tokens.append(Token(ch, TokenKind.RIGHT_PAREN))
            pos += 1

        elif is_number_at(text, pos):
            end = _scan_number(text, pos)
            lexeme = text[pos:end]
            if parse_number(lexeme) is None:
                raise ExpressionSyntaxError(f"Invalid number '{lexeme}'.", position=pos)
            tokens.append(Token(lexeme, TokenKind.NUMBER))
            pos = end

        elif ch == marker:
            end = text.find(marker, pos + 1)
            if end == -1:
                raise ExpressionSyntaxError("Unterminated variable marker.", position=pos)
            name = text[pos + 1:end]
            if not name:
                raise ExpressionSyntaxError("Empty variable name.", position=pos)

            if name.lower() == PARSER_CONFIG['pi_name']:
                tokens.append(Token(PI_LITERAL, TokenKind.NUMBER))
            else:
                tokens.append(Token(name, TokenKind.VARIABLE))
            pos = end + 1

        else:
            # 其余字符一直读到下一个 "(" 为止，作为函数名；是否合法留给转换后的校验
            end = text.find('(', pos)
            if end == -1:
                end = len(text)
            tokens.append(Token(text[pos:end], TokenKind.FUNCTION))
            pos = end

    return tokens
