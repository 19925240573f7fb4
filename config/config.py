"""配置文件"""

# 计算器参数
CALCULATOR_CONFIG = {
    "prompt": "Enter an expression: ",
    "strict_parentheses": False,  # True: 多余的右括号报 MismatchedParentheses
    "strict_stack": False,  # True: 求值后栈中多于一个值报 ExcessOperands
}

# 日志配置
LOGGING_CONFIG = {
    "level": "WARNING",  # 交互模式下保持输出干净
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# 批量求值配置
BATCH_CONFIG = {
    "expression_column": "expression",
    "output_path": "calc_results.csv",
    "encoding": "utf-8",
}

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert isinstance(CALCULATOR_CONFIG["strict_parentheses"], bool), "strict_parentheses must be bool"
    assert isinstance(CALCULATOR_CONFIG["strict_stack"], bool), "strict_stack must be bool"
    assert LOGGING_CONFIG["level"] in VALID_LOG_LEVELS, f"log level must be one of {VALID_LOG_LEVELS}"
    assert BATCH_CONFIG["expression_column"], "expression_column must not be empty"
    return True
