from __future__ import annotations
import logging
import operator
import re
from math import gcd
from numbers import Integral
from typing import TYPE_CHECKING, Tuple, Union

import numpy as np

from rational_errors import DivisionByZero, InvalidArgument, ParseError

if TYPE_CHECKING:
	from rational_range import RationalRange

logger = logging.getLogger(__name__)

# fixed-width inputs (np.int32, np.int64, ...) are promoted to Python int
IntLike = Union[int, np.integer]

_INT_TOKEN = re.compile(r"-?[0-9]+")


def _as_int(value: IntLike, role: str) -> int:
	# accepts int, bool and numpy fixed-width integers; rejects floats and strings
	try:
		return operator.index(value)
	except TypeError:
		raise TypeError(
			f"{role} must be an integer, not {type(value).__name__}"
		) from None


class Rational:
	"""Exact fraction over Python ints.

	The stored numerator/denominator are kept exactly as given: neither
	construction nor arithmetic reduces them. Equality, hashing, ordering and
	formatting all go through canonical_form(), so ``Rational(2, -4)`` and
	``Rational(-1, 2)`` are the same value.
	"""
	__slots__ = ("_num", "_den")

	def __init__(self, numerator: IntLike, denominator: IntLike = 1) -> None:
		num = _as_int(numerator, "numerator")
		den = _as_int(denominator, "denominator")
		if den == 0:
			raise InvalidArgument("denominator must be non-zero")
		self._num = num
		self._den = den

	@property
	def numerator(self) -> int:
		return self._num

	@property
	def denominator(self) -> int:
		return self._den

	@staticmethod
	def parse(text: str) -> Rational:
		return parse_rational(text)

	# canonical form

	def canonical(self) -> Tuple[int, int]:
		return canonical_form(self)

	def reduced(self) -> Rational:
		n, d = canonical_form(self)
		return Rational(n, d)

	def is_zero(self) -> bool:
		return self._num == 0

	def is_int(self) -> bool:
		return canonical_form(self)[1] == 1

	def sign(self) -> int:
		if self._num == 0:
			return 0
		return 1 if (self._num < 0) == (self._den < 0) else -1

	# arithmetic

	def negate(self) -> Rational:
		return Rational(-self._num, self._den)

	def add(self, other: Rational) -> Rational:
		if self._den == other._den:
			return Rational(self._num + other._num, self._den)
		return Rational(
			self._num * other._den + other._num * self._den,
			self._den * other._den,
		)

	def subtract(self, other: Rational) -> Rational:
		if self._den == other._den:
			return Rational(self._num - other._num, self._den)
		return Rational(
			self._num * other._den - other._num * self._den,
			self._den * other._den,
		)

	def multiply(self, other: Rational) -> Rational:
		return Rational(self._num * other._num, self._den * other._den)

	def divide(self, other: Rational) -> Rational:
		if other._num == 0:
			raise DivisionByZero()
		return Rational(self._num * other._den, self._den * other._num)

	def __neg__(self) -> Rational:
		return self.negate()

	def __pos__(self) -> Rational:
		return self

	def __abs__(self) -> Rational:
		return Rational(abs(self._num), abs(self._den))

	def __add__(self, other: object) -> Rational:
		rhs = lift_rational(other)
		if rhs is None:
			return NotImplemented
		return self.add(rhs)

	def __radd__(self, other: object) -> Rational:
		lhs = lift_rational(other)
		if lhs is None:
			return NotImplemented
		return lhs.add(self)

	def __sub__(self, other: object) -> Rational:
		rhs = lift_rational(other)
		if rhs is None:
			return NotImplemented
		return self.subtract(rhs)

	def __rsub__(self, other: object) -> Rational:
		lhs = lift_rational(other)
		if lhs is None:
			return NotImplemented
		return lhs.subtract(self)

	def __mul__(self, other: object) -> Rational:
		rhs = lift_rational(other)
		if rhs is None:
			return NotImplemented
		return self.multiply(rhs)

	def __rmul__(self, other: object) -> Rational:
		lhs = lift_rational(other)
		if lhs is None:
			return NotImplemented
		return lhs.multiply(self)

	def __truediv__(self, other: object) -> Rational:
		rhs = lift_rational(other)
		if rhs is None:
			return NotImplemented
		return self.divide(rhs)

	def __rtruediv__(self, other: object) -> Rational:
		lhs = lift_rational(other)
		if lhs is None:
			return NotImplemented
		return lhs.divide(self)

	# equality and ordering

	def equals(self, other: object) -> bool:
		rhs = lift_rational(other)
		if rhs is None:
			return False
		return canonical_form(self) == canonical_form(rhs)

	def __eq__(self, other: object) -> bool:
		return self.equals(other)

	def __hash__(self) -> int:
		n, d = canonical_form(self)
		# integral values hash like the int they equal
		if d == 1:
			return hash(n)
		return hash((n, d))

	def compare(self, other: Rational | IntLike) -> int:
		"""Three-way exact comparison: -1, 0 or 1.

		Cross-multiplies instead of dividing; the sign of the difference
		flips when exactly one of the denominators is negative. Integers
		compare as ``Rational(x, 1)``.
		"""
		rhs = lift_rational(other)
		if rhs is None:
			raise TypeError(f"cannot compare Rational with {type(other).__name__}")
		diff = self._num * rhs._den - rhs._num * self._den
		if (self._den < 0) != (rhs._den < 0):
			diff = -diff
		return (diff > 0) - (diff < 0)

	def __lt__(self, other: object) -> bool:
		rhs = lift_rational(other)
		if rhs is None:
			return NotImplemented
		return self.compare(rhs) < 0

	def __le__(self, other: object) -> bool:
		rhs = lift_rational(other)
		if rhs is None:
			return NotImplemented
		return self.compare(rhs) <= 0

	def __gt__(self, other: object) -> bool:
		rhs = lift_rational(other)
		if rhs is None:
			return NotImplemented
		return self.compare(rhs) > 0

	def __ge__(self, other: object) -> bool:
		rhs = lift_rational(other)
		if rhs is None:
			return NotImplemented
		return self.compare(rhs) >= 0

	# ranges

	def range_to(self, end: Rational) -> RationalRange:
		# Local import to avoid circular dependency at module load time
		from rational_range import RationalRange
		return RationalRange(self, end)

	# text

	def to_string(self) -> str:
		n, d = canonical_form(self)
		if d == 1:
			return int_to_decimal(n)
		return f"{int_to_decimal(n)}/{int_to_decimal(d)}"

	def __str__(self) -> str:
		return self.to_string()

	def __repr__(self) -> str:
		return f"Rational({int_to_decimal(self._num)}, {int_to_decimal(self._den)})"


def int_to_decimal(n: int) -> str:
	"""str(n) without the interpreter's digit limit for int/str conversion."""
	if n < 0:
		return "-" + int_to_decimal(-n)
	try:
		return str(n)
	except ValueError:
		pass
	# about half the decimal digits of n; log10(2) > 3/20
	half = n.bit_length() * 3 // 20
	hi, lo = divmod(n, 10 ** half)
	return int_to_decimal(hi) + int_to_decimal(lo).zfill(half)


def decimal_to_int(digits: str) -> int:
	"""int(digits) for a ``-?[0-9]+`` string of any length."""
	try:
		return int(digits)
	except ValueError:
		pass
	if digits.startswith("-"):
		return -decimal_to_int(digits[1:])
	half = len(digits) // 2
	lo = digits[half:]
	return decimal_to_int(digits[:half]) * 10 ** len(lo) + decimal_to_int(lo)


def lift_rational(value: object) -> Rational | None:
	"""value as a Rational; integers become x/1, anything else gives None."""
	if isinstance(value, Rational):
		return value
	if isinstance(value, Integral):
		return Rational(value, 1)
	return None


def canonical_form(r: Rational) -> Tuple[int, int]:
	"""Lowest terms with a positive denominator; the sign lives in the numerator."""
	n, d = r.numerator, r.denominator
	g = gcd(n, d)
	n, d = n // g, d // g
	if d < 0:
		n, d = -n, -d
	return n, d


def div_by(numerator: IntLike, denominator: IntLike) -> Rational:
	"""numerator/denominator from int, np.int32, np.int64 or any other integer type."""
	return Rational(numerator, denominator)


def _parse_int(token: str, text: str) -> int:
	if not _INT_TOKEN.fullmatch(token):
		logger.debug("rejecting %r: bad integer token %r", text, token)
		raise ParseError(text, f"{token!r} is not an integer")
	return decimal_to_int(token)


def parse_rational(text: str) -> Rational:
	"""Parse ``"n"`` or ``"n/d"`` where each part matches ``-?[0-9]+``.

	No surrounding whitespace, ``+`` signs or underscores are accepted. The
	result is not reduced; ``"1/0"`` raises InvalidArgument rather than
	ParseError since the text itself is well formed.
	"""
	if not isinstance(text, str):
		raise TypeError(f"expected str, not {type(text).__name__}")
	if "/" in text:
		tokens = text.split("/")
		if len(tokens) != 2:
			logger.debug("rejecting %r: %d tokens", text, len(tokens))
			raise ParseError(text, f"expected exactly two tokens, got {len(tokens)}")
		return Rational(_parse_int(tokens[0], text), _parse_int(tokens[1], text))
	return Rational(_parse_int(text, text), 1)
