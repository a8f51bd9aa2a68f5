"""批量求值模块"""
from .frame_evaluator import FrameEvaluator

__all__ = ['FrameEvaluator']
