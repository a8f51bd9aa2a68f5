import logging
from collections import OrderedDict
from typing import Dict, Optional, Union

import numpy as np
import pandas as pd

from config.config import FRAME_EVALUATOR_CONFIG, PARSER_CONFIG
from core import CompiledExpression, VariableMismatchError, parse

logger = logging.getLogger(__name__)


class FrameEvaluator:
    """对表格数据的每一行求同一个表达式，变量从同名列中取值"""

    def __init__(self, cache_size: Optional[int] = None, marker: Optional[str] = None):
        self.cache_size = cache_size or FRAME_EVALUATOR_CONFIG['cache_size']
        self.marker = marker or PARSER_CONFIG['variable_marker']
        # 使用有限大小的OrderedDict实现LRU缓存
        self._compiled_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._compiled_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._compiled_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._compiled_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    def cache_info(self) -> Dict[str, int]:
        return {
            'hits': self._cache_hits,
            'misses': self._cache_misses,
            'size': len(self._compiled_cache),
        }

    def compile(self, expression: str) -> CompiledExpression:
        cache_key = (expression, self.marker)

        if cache_key in self._compiled_cache:
            # 移到末尾（最近使用）
            self._compiled_cache.move_to_end(cache_key)
            self._cache_hits += 1
            return self._compiled_cache[cache_key]

        self._cache_misses += 1
        compiled = parse(expression, self.marker)
        self._compiled_cache[cache_key] = compiled
        self._manage_cache()
        return compiled

    def evaluate(self, expression: str, data: Union[pd.DataFrame, Dict]) -> pd.Series:
        """
        Args:
            expression: 中缀表达式
            data: DataFrame，或 {列名: 等长序列} 字典
        Returns:
            与data行索引对齐的结果Series（定义域错误的行为NaN/Inf）
        """
        compiled = self.compile(expression)
        frame = self._prepare_data(data)

        names = list(compiled.variable_names())
        missing = [name for name in names if name not in frame.columns]
        if missing:
            logger.error(f"Missing columns for variables {missing} in expression '{expression[:50]}'")
            raise VariableMismatchError(len(names), len(names) - len(missing))

        # 每次调用用独立的变量表，缓存中的表达式不被修改
        table = compiled.new_table()

        if not names:
            value = compiled.evaluate(table)
            return pd.Series(value, index=frame.index, name=expression, dtype=np.float64)

        columns = frame[names].to_numpy(dtype=np.float64)
        results = np.empty(len(frame), dtype=np.float64)
        for row_index, row in enumerate(columns):
            table.values[:] = row
            results[row_index] = compiled.evaluate(table)

        return pd.Series(results, index=frame.index, name=expression)

    @staticmethod
    def _prepare_data(data: Union[pd.DataFrame, Dict]) -> pd.DataFrame:
        if isinstance(data, pd.DataFrame):
            return data
        if isinstance(data, dict):
            return pd.DataFrame(data)
        raise TypeError(f"Unsupported data type: {type(data).__name__}")
