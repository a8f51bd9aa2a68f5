"""core/variable_table.py - 变量名到当前值的有序表"""
import numpy as np

from config.config import EVALUATOR_CONFIG
from core.errors import UnknownVariableError, VariableMismatchError


class VariableTable:
    """
    槽位在解析时按变量首次出现的顺序分配，之后不再改变；
    重新绑定只修改 values 中的值。
    不加锁：多线程请用 copy() 每个线程一张表。
    """

    def __init__(self, names=(), values=None):
        self._names = list(names)
        if len(set(self._names)) != len(self._names):
            raise ValueError(f"Duplicate variable names: {self._names}")

        if values is None:
            self.values = np.full(len(self._names), EVALUATOR_CONFIG['default_value'], dtype=np.float64)
        else:
            self.values = np.array(values, dtype=np.float64)
            if self.values.shape != (len(self._names),):
                raise VariableMismatchError(len(self._names), len(self.values))

    @property
    def names(self):
        return tuple(self._names)

    def __len__(self):
        return len(self._names)

    def __contains__(self, name):
        return name in self._names

    def index_of(self, name):
        """线性查找变量槽位"""
        for index, existing in enumerate(self._names):
            if existing == name:
                return index
        raise UnknownVariableError(name)

    def bind(self, name, value):
        self.values[self.index_of(name)] = value

    def get(self, name):
        return float(self.values[self.index_of(name)])

    def set_values(self, values):
        """按槽位顺序一次性设置所有变量"""
        values = list(values)
        if len(values) != len(self._names):
            raise VariableMismatchError(len(self._names), len(values))
        self.values[:] = values

    def copy(self):
        return VariableTable(self._names, self.values.copy())

    def as_dict(self):
        return {name: float(value) for name, value in zip(self._names, self.values)}

    def __repr__(self):
        return f"VariableTable({self.as_dict()!r})"
