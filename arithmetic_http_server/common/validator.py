"""Strict validation of operand tokens."""
from arithmetic_http_server.common.operations import to_float32
from arithmetic_http_server.common.parser import PathParser


OPERAND_MIN: float = -1e9
OPERAND_MAX: float = 1e9


class OperandValidator:
    """
    Turn a raw operand token into a bounded single-precision number.

    Policy (strict):
        - The token must be a JSON number literal
        - The value, rounded to float32, must lie in [-1e9, 1e9]
    """

    @staticmethod
    def validate(token: str) -> float:
        """
        Parse and range-check an operand token.

        :param str token: Operand text taken from the URL

        :return: The float32 operand, widened to a Python float
        :rtype: float
        :raises ValueError: If the token is malformed or out of range
        """
        if not PathParser.is_number(token):
            raise ValueError("Invalid number format. Should be a JSON number")

        # Literals too large for float32 (or even float64) become infinities here
        value = to_float32(float(token))

        if value < OPERAND_MIN:
            raise ValueError("Number should not be less than -1e9")
        if value > OPERAND_MAX:
            raise ValueError("Number should not be greater than 1e9")
        return value
