"""Text rendering of a key analysis.

Produces the report printed after each input line. For A minor it looks like::

	A min	B Maj/min	C Maj	D min	E Maj	F Maj	G Maj	

	Easy version :
	A min
	G Maj
	F Maj
	E Maj

Major keys get a leading blank line and an extra ``Super easy version :``
block with degrees 1, 4 and 5.
"""

import typing

import keychords.chords
import keychords.intervals
import keychords.key_analyzer


DEFAULT_PROMPT = "Input chord with (M/m) : "

EASY_HEADER = "Easy version :"
SUPER_EASY_HEADER = "Super easy version :"


def format_table (triads: typing.Iterable[keychords.chords.DiatonicTriad]) -> str:

	"""
	Return all triads on one line, each followed by a tab.
	"""

	return "".join(f"{triad.name()}\t" for triad in triads)


def format_list (triads: typing.Iterable[keychords.chords.DiatonicTriad]) -> str:

	"""
	Return one triad per line, newline-terminated.
	"""

	return "".join(f"{triad.name()}\n" for triad in triads)


def format_report (analysis: keychords.key_analyzer.KeyAnalysis) -> str:

	"""Render the full table followed by the simplified chord lists.

	Parameters:
		analysis: Result of ``analyze()``.

	Returns:
		The report text, ending in a newline.
	"""

	lines = ""

	if analysis.mode is keychords.intervals.Mode.MAJOR:
		lines += "\n"

	lines += format_table(analysis.triads) + "\n\n"
	lines += EASY_HEADER + "\n" + format_list(analysis.easy())

	super_easy = analysis.super_easy()

	if super_easy is not None:
		lines += SUPER_EASY_HEADER + "\n" + format_list(super_easy)

	return lines
