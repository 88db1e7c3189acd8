# Area: Engine
"""
mathroll._engine.board — Board generator
========================================

Builds the fixed board of equations for one match. Each slot draws an
operator uniformly, then operands from operator-specific ranges, and
rejects draws whose result falls outside [RESULT_MIN, RESULT_MAX].
After `max_attempts` rejections a slot is built with the division
construction, whose result is in range by design.
"""

from __future__ import annotations
import logging
import random
from typing import List, Tuple

from .equation import Equation, Operator

logger = logging.getLogger("mathroll.board")

RESULT_MIN = 1
RESULT_MAX = 10
DEFAULT_BOARD_SIZE = 10
DEFAULT_MAX_ATTEMPTS = 100

# Operand bounds per operator
MULTIPLY_OPERAND_MAX = 5
DIVISOR_MAX = 5

_OPERATORS = (Operator.ADD, Operator.SUBTRACT, Operator.MULTIPLY, Operator.DIVIDE)


class BoardGenerator:
    """
    Randomised equation factory.

    Args:
        rng: Source of randomness; anything exposing `randint` and `choice`
            the way `random.Random` does.
        max_attempts: Rejection-sampling cap per slot.
    """

    def __init__(self, rng: random.Random, max_attempts: int = DEFAULT_MAX_ATTEMPTS):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.rng = rng
        self.max_attempts = max_attempts

    def generate(self, count: int = DEFAULT_BOARD_SIZE) -> List[Equation]:
        """Return `count` equations with ids 0..count-1 in order."""
        if count < 1:
            raise ValueError("board must hold at least one equation")
        board = [self._generate_one(equation_id) for equation_id in range(count)]
        logger.debug("Generated board: %s", ", ".join(
            f"{eq.label()}={eq.result}" for eq in board
        ))
        return board

    def _generate_one(self, equation_id: int) -> Equation:
        for _ in range(self.max_attempts):
            operator = self.rng.choice(_OPERATORS)
            left, right = self._draw_operands(operator)
            result = operator.apply(left, right)
            if RESULT_MIN <= result <= RESULT_MAX:
                return Equation(equation_id, left, right, operator, result)

        logger.warning(
            "Slot %d hit the %d-attempt cap; using division construction",
            equation_id, self.max_attempts,
        )
        left, right = self._division_operands()
        return Equation.build(equation_id, left, Operator.DIVIDE, right)

    def _draw_operands(self, operator: Operator) -> Tuple[int, int]:
        randint = self.rng.randint
        if operator is Operator.ADD:
            left = randint(1, RESULT_MAX - 1)
            return left, randint(1, RESULT_MAX - left)
        if operator is Operator.SUBTRACT:
            left = randint(RESULT_MIN + 1, RESULT_MAX + 1)
            return left, randint(1, left - 1)
        if operator is Operator.MULTIPLY:
            return randint(1, MULTIPLY_OPERAND_MAX), randint(1, MULTIPLY_OPERAND_MAX)
        return self._division_operands()

    def _division_operands(self) -> Tuple[int, int]:
        divisor = self.rng.randint(1, DIVISOR_MAX)
        quotient = self.rng.randint(RESULT_MIN, RESULT_MAX)
        return quotient * divisor, divisor


def generate_board(
    rng: random.Random,
    count: int = DEFAULT_BOARD_SIZE,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> List[Equation]:
    """Convenience wrapper around BoardGenerator.generate()."""
    return BoardGenerator(rng, max_attempts=max_attempts).generate(count)
