import io
import typing

import pytest

import keychords.key_analyzer


@pytest.fixture
def analyzer () -> keychords.key_analyzer.KeyAnalyzer:

	"""Default (permissive) analyzer."""

	return keychords.key_analyzer.KeyAnalyzer()


@pytest.fixture
def strict_analyzer () -> keychords.key_analyzer.KeyAnalyzer:

	"""Analyzer that rejects mode characters other than M/m."""

	return keychords.key_analyzer.KeyAnalyzer(strict_mode=True)


@pytest.fixture
def make_stdin () -> typing.Callable[..., io.StringIO]:

	"""Build a fake stdin holding the given lines."""

	def _make (*lines: str) -> io.StringIO:
		return io.StringIO("".join(f"{line}\n" for line in lines))

	return _make
