"""配置文件"""

# 词法分析参数
TOKENIZER_CONFIG = {
    "max_literal": 2 ** 64 - 1,  # 数字字面量上限（无符号64位）
    "strip_chars": " ",  # 构造表达式前删除的字符，只删除空格
}

# 求值参数
EVALUATOR_CONFIG = {
    # 传给 np.errstate：除零得到 inf/nan，溢出得到 inf，均不报警告
    "float_errors": {
        "divide": "ignore",
        "invalid": "ignore",
        "over": "ignore",
    },
}

# 交互式命令行参数
SHELL_CONFIG = {
    "prompt": "Input any valid math expression without functions.",
    "exit_commands": ("exit", "quit"),
    "result_template": "'{expression}' evaluates to: {result}",
    "postfix_template": "postfix: {postfix}",
}

# 批量求值参数
BATCH_CONFIG = {
    "default_column": "expression",
    "output_path": "results.csv",
}

# 日志参数
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert TOKENIZER_CONFIG["max_literal"] > 0, "字面量上限必须为正数"
    assert TOKENIZER_CONFIG["strip_chars"] == " ", "只允许删除空格字符"
    assert all(v in ("ignore", "warn", "raise", "call", "print", "log")
               for v in EVALUATOR_CONFIG["float_errors"].values()), "np.errstate 参数非法"
    assert EVALUATOR_CONFIG["float_errors"]["divide"] == "ignore", "除零必须得到 inf 而不是报错"
    assert SHELL_CONFIG["exit_commands"], "至少需要一个退出命令"
    assert BATCH_CONFIG["default_column"], "默认列名不能为空"
    return True
