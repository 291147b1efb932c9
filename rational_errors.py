from __future__ import annotations


class InvalidArgument(ValueError):
	"""A Rational would end up with a zero denominator."""


class DivisionByZero(InvalidArgument, ZeroDivisionError):
	"""Division by a Rational whose numerator is zero."""
	def __init__(self, message: str = "division by zero") -> None:
		super().__init__(message)


class ParseError(ValueError):
	"""Text is not an integer or an integer/integer pair."""
	def __init__(self, text: str, reason: str) -> None:
		super().__init__(f"cannot parse {text!r} as a rational: {reason}")
		self.text = text
		self.reason = reason
