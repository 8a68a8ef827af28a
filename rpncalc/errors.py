"""rpncalc/errors.py"""


# 所有表达式错误的基类，调用方只需捕获这一个类型
class ExpressionError(Exception):
    pass


class InvalidCharacter(ExpressionError):
    """表达式中出现了不支持的字符"""

    def __init__(self, char, context):
        self.char = char
        self.context = context
        super().__init__(
            f"The expression '{context}' is not valid, because token '{char}' is not a supported token."
        )


class NumericOverflow(ExpressionError):
    """数字字面量超出可表示范围"""

    def __init__(self, literal, context, limit=None):
        self.literal = literal
        self.context = context
        self.limit = limit
        super().__init__(
            f"The number '{literal}' in expression '{context}' exceeds the supported range"
            + (f" (max {limit})." if limit is not None else ".")
        )


class UnbalancedBrackets(ExpressionError):
    """括号不匹配：多余的右括号或未闭合的左括号"""
    pass


class StackUnderflow(ExpressionError):
    """运算符没有足够的操作数"""

    def __init__(self, operator, available):
        self.operator = operator
        self.available = available
        super().__init__(
            f"Insufficient operands for '{operator}': expected 2, got {available}."
        )


class EmptyExpression(ExpressionError):
    """求值结束时栈中不是恰好一个值"""

    def __init__(self, remaining):
        self.remaining = remaining
        super().__init__(
            f"Stack has {remaining} elements after evaluation, expected 1."
        )


# 对非运算符求优先级，或在后缀序列中遇到括号
class InvalidOperator(ExpressionError):
    pass
