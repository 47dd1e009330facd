"""Exceptions raised while analyzing a key."""


class KeyChordsError (Exception):

	"""Base class for all keychords input errors."""

	pass


class UnknownRootError (KeyChordsError, ValueError):

	"""The root note is not one of the 12 pitch class names."""

	pass


class MalformedInputError (KeyChordsError, ValueError):

	"""An input line did not hold both a root note and a mode character."""

	pass


class InvalidModeError (KeyChordsError, ValueError):

	"""The mode character is not ``m`` or ``M`` (strict mode only)."""

	pass
