"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 解析参数
PARSER_CONFIG = {
    "variable_marker": "$",  # 变量名两侧的标记字符，如 sin($x$)
    "pi_name": "pi",  # $pi$ / $PI$ 直接替换成π，不进入变量表（不区分大小写）
}

# 求值参数
EVALUATOR_CONFIG = {
    "default_value": 0.0,  # 变量从未绑定时的值
    "suppress_fp_warnings": True,  # 屏蔽numpy的除零/无效值警告，结果照常返回NaN/Inf
}

# 批量求值参数
FRAME_EVALUATOR_CONFIG = {
    "cache_size": 128,  # 缓存的已编译表达式数量
}

# 日志
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    marker = PARSER_CONFIG["variable_marker"]
    assert isinstance(marker, str) and len(marker) == 1, "变量标记必须是单个字符"
    assert marker not in "0123456789.()+-*/%^" and not marker.isspace(), \
        f"变量标记 {marker!r} 与表达式语法冲突"
    assert FRAME_EVALUATOR_CONFIG["cache_size"] > 0, "cache_size 必须为正数"
    assert isinstance(logging.getLevelName(LOGGING_CONFIG["level"]), int), \
        f"未知的日志级别: {LOGGING_CONFIG['level']}"
    logger.info("Configuration validated successfully!")
