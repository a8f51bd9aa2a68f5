"""RPN执行计划求值器 - 调用统一的Operators表"""
import contextlib

import numpy as np

from config.config import EVALUATOR_CONFIG
from core.errors import ExpressionSyntaxError, UnsupportedFunctionError
from core.operators import FUNCTION_TABLE, OPERATOR_TABLE
from core.token_system import TokenKind


class RPNEvaluator:
    """从左到右执行一次计划，得到一个标量结果"""

    @staticmethod
    def evaluate(plan, table):
        """
        Args:
            plan: compile_plan() 输出的Instruction序列
            table: VariableTable，提供各槽位的当前值
        Returns:
            float（可能是NaN/Inf）
        """
        if EVALUATOR_CONFIG['suppress_fp_warnings']:
            guard = np.errstate(all='ignore')
        else:
            guard = contextlib.nullcontext()

        with guard:
            result = RPNEvaluator._run(plan, table.values)
        return float(result)

    @staticmethod
    def _run(plan, values):
        stack = []

        for kind, operand in plan:
            if kind is TokenKind.NUMBER:
                stack.append(np.float64(operand))

            elif kind is TokenKind.VARIABLE:
                stack.append(values[operand])

            elif kind is TokenKind.OPERATOR:
                if len(stack) < 2:
                    raise ExpressionSyntaxError(f"Too few operands for operator '{operand}'.")
                rval = stack.pop()
                lval = stack.pop()
                stack.append(OPERATOR_TABLE[operand](lval, rval))

            elif kind is TokenKind.FUNCTION:
                if not stack:
                    raise ExpressionSyntaxError(f"Too few operands for function '{operand.name.lower()}'.")
                func = FUNCTION_TABLE.get(operand)
                if func is None:
                    raise UnsupportedFunctionError(operand.name.lower())
                stack.append(func(stack.pop()))

            else:
                raise ExpressionSyntaxError(f"Unexpected instruction {kind.value} in plan.")

        if len(stack) != 1:
            # compile_plan 已经检查过栈深度，走到这里说明计划本身被破坏
            raise RuntimeError(f"Stack has {len(stack)} elements after evaluation, expected 1")
        return stack[0]
