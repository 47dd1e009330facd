import dataclasses
import logging
import typing

import keychords.chords
import keychords.errors
import keychords.intervals


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class KeyAnalysis:

	"""
	The seven diatonic triads of one key, in scale-degree order.
	"""

	root: str
	mode: keychords.intervals.Mode
	triads: typing.Tuple[keychords.chords.DiatonicTriad, ...]


	def degree (self, number: int) -> keychords.chords.DiatonicTriad:

		"""
		Return the triad on scale degree *number* (1-7).
		"""

		if not 1 <= number <= len(self.triads):
			raise ValueError(f"Scale degree must be 1-{len(self.triads)}, got {number}")

		return self.triads[number - 1]


	def easy (self) -> typing.List[keychords.chords.DiatonicTriad]:

		"""Return the commonly-substituted subset for this mode.

		Minor keys give degrees 1, 7, 6, 5; major keys give 1, 6, 4, 5.
		"""

		return [self.degree(n) for n in keychords.intervals.EASY_DEGREES[self.mode]]


	def super_easy (self) -> typing.Optional[typing.List[keychords.chords.DiatonicTriad]]:

		"""Return degrees 1, 4, 5 for major keys.

		Returns ``None`` for minor keys, which have no super-easy list.
		"""

		degrees = keychords.intervals.SUPER_EASY_DEGREES.get(self.mode)

		if degrees is None:
			return None

		return [self.degree(n) for n in degrees]


def analyze (root_name: str, mode: keychords.intervals.Mode) -> KeyAnalysis:

	"""Return the 7 diatonic triads for a root note and mode.

	The root name has its first character folded to upper case, is located in
	the 12-note cycle, and the cycle is rotated to start on it. Triad roots are
	then read off at the mode's scale offsets and paired with the mode's
	quality table.

	Parameters:
		root_name: Note name (e.g. ``"C"``, ``"f#"``, ``"G#"``). Sharps only.
		mode: ``Mode.MAJOR`` or ``Mode.MINOR``.

	Returns:
		A ``KeyAnalysis`` holding 7 ``DiatonicTriad`` objects.

	Raises:
		UnknownRootError: If the root is not one of the 12 pitch classes.

	Example:
		```python
		from keychords.key_analyzer import analyze
		from keychords.intervals import Mode

		[t.name() for t in analyze("C", Mode.MAJOR).triads]
		# → ["C Maj", "D min", "E min", "F Maj", "G Maj", "A min", "B Maj"]
		```
	"""

	root = keychords.chords.normalize_root_name(root_name)
	rotated = keychords.chords.rotate_pitch_classes(keychords.chords.pitch_class_index(root))

	offsets, qualities = keychords.intervals.MODE_MAP[mode]

	triads = tuple(
		keychords.chords.DiatonicTriad(root=rotated[offset], quality=quality, degree=i + 1)
		for i, (offset, quality) in enumerate(zip(offsets, qualities))
	)

	logger.debug("Analyzed %s %s: %s", root, mode.name.lower(), ", ".join(t.name() for t in triads))

	return KeyAnalysis(root=root, mode=mode, triads=triads)


class KeyAnalyzer:

	"""
	Turns raw user tokens into a `KeyAnalysis`.
	"""

	def __init__ (self, strict_mode: bool = False) -> None:

		"""Set up the analyzer.

		Parameters:
			strict_mode: When True, mode characters other than ``m``/``M``
				raise ``InvalidModeError`` instead of selecting major.
		"""

		self.strict_mode = strict_mode


	def analyze (self, root_name: str, mode: keychords.intervals.Mode) -> KeyAnalysis:

		"""
		Analyze a key given an already-parsed mode.
		"""

		return analyze(root_name, mode)


	def analyze_tokens (self, root_token: str, mode_token: str) -> KeyAnalysis:

		"""Analyze a root token and a mode token as typed by the user.

		Raises:
			UnknownRootError: If the root is not recognised.
			InvalidModeError: In strict mode, for an unrecognised mode.
		"""

		mode = keychords.intervals.parse_mode(mode_token, strict=self.strict_mode)

		return self.analyze(root_token, mode)


	def analyze_line (self, line: str) -> KeyAnalysis:

		"""Parse one input line of the form ``<root> <mode>`` and analyze it.

		Tokens beyond the second are ignored.

		Raises:
			MalformedInputError: If the line holds fewer than two tokens.
			UnknownRootError: If the root is not recognised.
			InvalidModeError: In strict mode, for an unrecognised mode.
		"""

		tokens = line.split()

		if len(tokens) < 2:
			raise keychords.errors.MalformedInputError(
				f"Expected a root note and a mode (e.g. 'C M' or 'a m'), got {line.strip()!r}"
			)

		if len(tokens) > 2:
			logger.debug("Ignoring extra tokens: %s", tokens[2:])

		return self.analyze_tokens(tokens[0], tokens[1])
