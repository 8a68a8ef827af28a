"""中缀转后缀 - Shunting-Yard 算法"""
import logging

from rpncalc.errors import UnbalancedBrackets
from rpncalc.token_system import LEFT_PAREN, RIGHT_PAREN, precedence

logger = logging.getLogger(__name__)


def to_postfix(tokens):
    """
    使用 Shunting-Yard 算法把中缀Token序列转换为后缀序列
    Args:
        tokens: 中缀Token序列
    Returns:
        后缀Token列表，不含括号
    Raises:
        UnbalancedBrackets: 右括号找不到对应的左括号，或左括号没有闭合
    """
    output = []
    operator_stack = []

    for position, token in enumerate(tokens):
        if token.is_operand():
            output.append(token)
        elif token == LEFT_PAREN:
            operator_stack.append(token)
        elif token == RIGHT_PAREN:
            while True:
                if not operator_stack:
                    raise UnbalancedBrackets(
                        f"Closing bracket at token {position} has no matching opening bracket."
                    )
                top = operator_stack.pop()
                if top == LEFT_PAREN:
                    break
                output.append(top)
        else:
            # >= 保证同级运算符左结合：a-b-c -> a b - c -
            while (operator_stack
                   and operator_stack[-1] != LEFT_PAREN
                   and precedence(operator_stack[-1]) >= precedence(token)):
                output.append(operator_stack.pop())
            operator_stack.append(token)

    # 清空运算符栈
    unclosed = sum(1 for t in operator_stack if t == LEFT_PAREN)
    if unclosed:
        raise UnbalancedBrackets(f"{unclosed} opening bracket(s) were never closed.")

    while operator_stack:
        output.append(operator_stack.pop())

    logger.debug(f"Postfix: {' '.join(t.symbol for t in output)}")
    return output
