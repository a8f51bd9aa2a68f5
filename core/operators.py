"""core/operators.py"""
import numpy as np

from core.token_system import Function, PI_LITERAL

PI = np.float64(PI_LITERAL)
ONE = np.float64(1.0)


class Operators:
    """
    所有操作符和函数的静态方法集合。
    输入输出都是np.float64：定义域错误（log负数、asin越界、除零等）
    按浮点语义返回NaN/Inf，不抛异常。
    """

    # 二元操作符========================================
    @staticmethod
    def add(lval, rval):
        return lval + rval

    @staticmethod
    def sub(lval, rval):
        return lval - rval

    @staticmethod
    def mul(lval, rval):
        return lval * rval

    @staticmethod
    def div(lval, rval):
        return lval / rval

    @staticmethod
    def mod(lval, rval):
        """浮点取余，符号跟随被除数（C的fmod）"""
        return np.fmod(lval, rval)

    @staticmethod
    def pow(lval, rval):
        return np.power(lval, rval)

    # 函数====================
    @staticmethod
    def log(val):
        return np.log(val)

    @staticmethod
    def log10(val):
        return np.log10(val)

    @staticmethod
    def sin(val):
        return np.sin(val)

    @staticmethod
    def cos(val):
        return np.cos(val)

    @staticmethod
    def tan(val):
        return np.tan(val)

    @staticmethod
    def cot(val):
        return ONE / np.tan(val)

    @staticmethod
    def asin(val):
        return np.arcsin(val)

    @staticmethod
    def acos(val):
        return np.arccos(val)

    @staticmethod
    def atan(val):
        return np.arctan(val)

    @staticmethod
    def acot(val):
        return np.arctan(ONE / val)

    @staticmethod
    def deg(val):
        """弧度 -> 角度"""
        return (val / (2 * PI)) * 360

    @staticmethod
    def rad(val):
        """角度 -> 弧度"""
        return (val / 360) * 2 * PI

    @staticmethod
    def sqrt(val):
        return np.sqrt(val)

    @staticmethod
    def exp(val):
        return np.exp(val)

    @staticmethod
    def abs(val):
        return np.abs(val)


OPERATOR_TABLE = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
    '%': Operators.mod,
    '^': Operators.pow,
}

# ATAN2 不在表中：求值时报UnsupportedFunctionError
FUNCTION_TABLE = {
    Function.LOG: Operators.log,
    Function.LOG10: Operators.log10,
    Function.SIN: Operators.sin,
    Function.COS: Operators.cos,
    Function.TAN: Operators.tan,
    Function.COT: Operators.cot,
    Function.ASIN: Operators.asin,
    Function.ACOS: Operators.acos,
    Function.ATAN: Operators.atan,
    Function.ACOT: Operators.acot,
    Function.DEG: Operators.deg,
    Function.RAD: Operators.rad,
    Function.SQRT: Operators.sqrt,
    Function.EXP: Operators.exp,
    Function.ABS: Operators.abs,
}
