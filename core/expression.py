"""
core/expression.py - 对外接口

用法:
    expr = parse("-12.4 + exp(sin(rad($x$))) * log10($y$)")
    variable_names(expr)      # ('x', 'y')
    bind(expr, "x", 68)
    bind(expr, "y", 96)
    evaluate(expr)            # 可以反复 bind + evaluate，不会重新解析

变量名两侧用标记字符（默认 "$"）包围；$pi$ / $PI$ 直接当作常数π。
函数名只能全小写或全大写。
"""
import logging
from typing import NamedTuple

from config.config import PARSER_CONFIG
from core.plan_compiler import compile_plan
from core.rpn_evaluator import RPNEvaluator
from core.shunting_yard import postfix_to_text, to_postfix
from core.tokenizer import tokenize
from core.variable_table import VariableTable

logger = logging.getLogger(__name__)


class Var(NamedTuple):
    name: str
    value: float


class CompiledExpression:
    """解析一次、求值多次的表达式。计划不可变，只有变量表中的值会变"""

    def __init__(self, expression, marker, tokens, postfix, plan, table):
        self._expression = expression
        self._marker = marker
        self._tokens = tuple(tokens)
        self._postfix = tuple(postfix)
        self._plan = plan
        self.table = table

    @property
    def expression(self):
        return self._expression

    @property
    def marker(self):
        return self._marker

    @property
    def tokens(self):
        return self._tokens

    @property
    def postfix(self):
        return self._postfix

    @property
    def plan(self):
        return self._plan

    @property
    def rpn(self):
        return postfix_to_text(self._postfix)

    def variable_names(self):
        return self.table.names

    def bind(self, name, value):
        self.table.bind(name, value)

    def new_table(self):
        """当前变量表的副本，供其他线程独立绑定使用"""
        return self.table.copy()

    def evaluate(self, table=None):
        return RPNEvaluator.evaluate(self._plan, self.table if table is None else table)

    def evaluate_values(self, values):
        self.table.set_values(values)
        return self.evaluate()

    def __repr__(self):
        return f"CompiledExpression({self._expression!r}, rpn={self.rpn!r})"


def parse(expression, marker=None):
    """词法分析 + Shunting-Yard + 计划预编译；所有结构性错误都在这里抛出"""
    if marker is None:
        marker = PARSER_CONFIG['variable_marker']

    tokens = tokenize(expression, marker)
    postfix, names = to_postfix(tokens)
    plan = compile_plan(postfix, names)

    compiled = CompiledExpression(expression, marker, tokens, postfix, plan, VariableTable(names))
    logger.debug(f"Parsed '{expression}' -> RPN: {compiled.rpn}, variables: {list(names)}")
    return compiled


def variable_names(compiled):
    return compiled.variable_names()


def bind(compiled, name, value):
    compiled.bind(name, value)


def evaluate(compiled, table=None):
    return compiled.evaluate(table)


def evaluate_values(compiled, values):
    """按变量表顺序给出所有变量的值后求值"""
    return compiled.evaluate_values(values)


def calculate(expression, variables=None, marker=None):
    """
    一次性解析并求值
    Args:
        expression: 中缀表达式
        variables: {name: value} 字典，或 Var 序列
        marker: 变量标记字符
    """
    compiled = parse(expression, marker)
    if variables is not None:
        items = variables.items() if hasattr(variables, 'items') else variables
        for name, value in items:
            compiled.bind(name, value)
    return compiled.evaluate()
