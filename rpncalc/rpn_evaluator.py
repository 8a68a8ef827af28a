"""RPN表达式求值器 - 调用统一的Operators类"""
import numpy as np
import logging

from rpncalc.errors import StackUnderflow, EmptyExpression, InvalidOperator
from rpncalc.operators import OPERATOR_FUNCTIONS

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence):
        """
        评估后缀Token序列
        Args:
            token_sequence: 后缀顺序的Token序列
        Returns:
            float结果
        Raises:
            StackUnderflow: 运算符前不足两个操作数
            EmptyExpression: 结束时栈中不是恰好一个值
            InvalidOperator: 序列中出现括号
        """
        stack = []

        for token in token_sequence:
            if token.is_operand():
                stack.append(np.float64(token.value))
                continue

            op_method = OPERATOR_FUNCTIONS.get(token.name)
            if op_method is None:
                logger.error(f"Unknown operator in postfix sequence: {token!r}")
                raise InvalidOperator(f"Tried to use '{token!r}' as an operator when evaluating.")

            if len(stack) < 2:
                logger.error(f"Insufficient operands for {token.symbol}")
                raise StackUnderflow(token.symbol, len(stack))

            # 先弹出的是右操作数：b - a，b / a
            operand2 = stack.pop()
            operand1 = stack.pop()
            stack.append(op_method(operand1, operand2))

        if len(stack) != 1:
            logger.error(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise EmptyExpression(len(stack))

        return float(stack[0])
