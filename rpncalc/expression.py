"""rpncalc/expression.py"""
import logging

from rpncalc.tokenizer import strip_spaces, tokenize
from rpncalc.postfix_converter import to_postfix
from rpncalc.rpn_evaluator import RPNEvaluator

logger = logging.getLogger(__name__)


class Expression:
    """
    保存去掉空格的原始表达式和它的后缀Token序列
    构造后不可修改，可以重复求值
    """
    __slots__ = ('_original', '_tokens')

    def __init__(self, text):
        if hasattr(self, '_original'):
            raise AttributeError(f"{type(self).__name__} is immutable")

        original = strip_spaces(text)
        tokens = tuple(to_postfix(tokenize(original)))

        object.__setattr__(self, '_original', original)
        object.__setattr__(self, '_tokens', tokens)
        logger.debug(f"Built expression '{original}' with {len(tokens)} postfix tokens")

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        # copy/pickle 通过构造函数重建
        return (Expression, (self._original,))

    @property
    def original(self):
        return self._original

    @property
    def tokens(self):
        return self._tokens

    def evaluate(self):
        """求值，返回float；每次调用使用独立的栈"""
        return RPNEvaluator.evaluate(self._tokens)

    def as_str(self):
        return self._original

    def postfix_notation(self):
        return ' '.join(token.symbol for token in self._tokens)

    def __eq__(self, other):
        if not isinstance(other, Expression):
            return NotImplemented
        return (self._original, self._tokens) == (other._original, other._tokens)

    def __hash__(self):
        return hash((self._original, self._tokens))

    def __str__(self):
        return self._original

    def __repr__(self):
        return f"Expression({self._original!r})"


def evaluate(text):
    """构造表达式并立即求值"""
    return Expression(text).evaluate()
