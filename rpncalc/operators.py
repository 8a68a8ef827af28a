"""rpncalc/operators.py"""
import numpy as np
import logging

from config.config import EVALUATOR_CONFIG

logger = logging.getLogger(__name__)


class Operators:
    """所有二元运算符的静态方法集合，operand1 是左操作数，operand2 是右操作数"""

    @staticmethod
    def _as_float(operand1, operand2):
        return np.float64(operand1), np.float64(operand2)

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        operand1, operand2 = Operators._as_float(operand1, operand2)
        with np.errstate(**EVALUATOR_CONFIG["float_errors"]):
            return operand1 + operand2

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        operand1, operand2 = Operators._as_float(operand1, operand2)
        with np.errstate(**EVALUATOR_CONFIG["float_errors"]):
            return operand1 - operand2

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符，溢出得到 inf"""
        operand1, operand2 = Operators._as_float(operand1, operand2)
        with np.errstate(**EVALUATOR_CONFIG["float_errors"]):
            return operand1 * operand2

    @staticmethod
    def div(operand1, operand2):
        """除法操作符：除零按IEEE 754得到 ±inf 或 nan，不抛异常"""
        operand1, operand2 = Operators._as_float(operand1, operand2)
        with np.errstate(**EVALUATOR_CONFIG["float_errors"]):
            return operand1 / operand2


# 运算符Token名到计算函数的映射
OPERATOR_FUNCTIONS = {
    'Plus': Operators.add,
    'Minus': Operators.sub,
    'Multiply': Operators.mul,
    'Divide': Operators.div,
}
