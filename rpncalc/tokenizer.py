"""词法分析器 - 把去掉空格的表达式字符串转换为Token序列"""
import logging

from config.config import TOKENIZER_CONFIG
from rpncalc.errors import InvalidCharacter, NumericOverflow
from rpncalc.token_system import (
    TOKEN_DEFINITIONS, NEGATE_GROUP, MINUS, MULTIPLY, LEFT_PAREN, number
)

logger = logging.getLogger(__name__)

DIGITS = '0123456789'  # 只接受ASCII数字


def strip_spaces(text):
    """删除所有空格字符（只删除空格，其他空白字符交给词法分析报错）"""
    for ch in TOKENIZER_CONFIG["strip_chars"]:
        text = text.replace(ch, '')
    return text


def emit(char, lookahead):
    """
    根据当前字符和下一个字符产生零个或多个Token
    Args:
        char: 当前字符（非数字）
        lookahead: 下一个字符，末尾时为None
    Returns:
        Token元组；字符不受支持时返回None
    """
    if char == '-':
        if lookahead == LEFT_PAREN.symbol:
            return NEGATE_GROUP
        return (MINUS,)

    token = TOKEN_DEFINITIONS.get(char)
    if token is None:
        return None
    return (token,)


def iter_tokens(expr):
    """逐个产生Token；数字串合并为一个Number，数字后紧跟 '(' 时插入乘号"""
    max_literal = TOKENIZER_CONFIG["max_literal"]
    i = 0
    length = len(expr)

    while i < length:
        char = expr[i]

        if char in DIGITS:
            j = i + 1
            while j < length and expr[j] in DIGITS:
                j += 1

            literal = expr[i:j]
            value = int(literal)
            if value > max_literal:
                raise NumericOverflow(literal, expr, max_literal)
            yield number(value)

            # 2(3+4) 等价于 2*(3+4)；')(' 不做处理
            if j < length and expr[j] == LEFT_PAREN.symbol:
                yield MULTIPLY

            i = j
            continue

        lookahead = expr[i + 1] if i + 1 < length else None
        tokens = emit(char, lookahead)
        if tokens is None:
            raise InvalidCharacter(char, expr)
        yield from tokens

        i += 1


def tokenize(expr):
    """
    词法分析
    Args:
        expr: 已删除空格的表达式
    Returns:
        Token列表（中缀顺序）
    """
    tokens = list(iter_tokens(expr))
    logger.debug(f"Tokenized '{expr}' into {len(tokens)} tokens: {tokens}")
    return tokens
