"""核心模块 - Token系统、Shunting-Yard转换、RPN评估器和操作符"""
from .errors import (
    ExpressionError, InvalidCharacter, NumericOverflow, UnbalancedBrackets,
    StackUnderflow, EmptyExpression, InvalidOperator
)
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, NEGATE_GROUP,
    PLUS, MINUS, MULTIPLY, DIVIDE, LEFT_PAREN, RIGHT_PAREN, number, precedence
)
from .tokenizer import tokenize, strip_spaces
from .postfix_converter import to_postfix
from .rpn_evaluator import RPNEvaluator
from .operators import Operators
from .expression import Expression, evaluate

__all__ = [
    'ExpressionError', 'InvalidCharacter', 'NumericOverflow', 'UnbalancedBrackets',
    'StackUnderflow', 'EmptyExpression', 'InvalidOperator',
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'NEGATE_GROUP',
    'PLUS', 'MINUS', 'MULTIPLY', 'DIVIDE', 'LEFT_PAREN', 'RIGHT_PAREN', 'number', 'precedence',
    'tokenize', 'strip_spaces', 'to_postfix',
    'RPNEvaluator', 'Operators', 'Expression', 'evaluate'
]
