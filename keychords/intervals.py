import enum
import typing

import keychords.chords
import keychords.errors


class Mode (enum.Enum):

	"""
	Key mode. Selects the scale offsets and the quality table.
	"""

	MAJOR = "M"
	MINOR = "m"


# Semitone offsets from the key root for scale degrees 1-7.
MAJOR_SCALE_OFFSETS: typing.Tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)
MINOR_SCALE_OFFSETS: typing.Tuple[int, ...] = (0, 2, 3, 5, 7, 8, 10)


# ---------------------------------------------------------------------------
# Chord quality per scale degree.
#
# The minor table is the simplified labelling used for quick accompaniment:
# degree 2 is marked "Maj/min" and degrees 5-7 are all major.
# ---------------------------------------------------------------------------

MAJOR_QUALITIES: typing.Tuple[keychords.chords.ChordQuality, ...] = (
	keychords.chords.ChordQuality.MAJ,
	keychords.chords.ChordQuality.MIN,
	keychords.chords.ChordQuality.MIN,
	keychords.chords.ChordQuality.MAJ,
	keychords.chords.ChordQuality.MAJ,
	keychords.chords.ChordQuality.MIN,
	keychords.chords.ChordQuality.MAJ,
)

MINOR_QUALITIES: typing.Tuple[keychords.chords.ChordQuality, ...] = (
	keychords.chords.ChordQuality.MIN,
	keychords.chords.ChordQuality.MAJ_MIN,
	keychords.chords.ChordQuality.MAJ,
	keychords.chords.ChordQuality.MIN,
	keychords.chords.ChordQuality.MAJ,
	keychords.chords.ChordQuality.MAJ,
	keychords.chords.ChordQuality.MAJ,
)


# Scale degrees (1-based) picked for the simplified chord lists, in display order.
EASY_DEGREES: typing.Dict[Mode, typing.Tuple[int, ...]] = {
	Mode.MINOR: (1, 7, 6, 5),
	Mode.MAJOR: (1, 6, 4, 5),
}

# Minor keys have no super-easy list.
SUPER_EASY_DEGREES: typing.Dict[Mode, typing.Tuple[int, ...]] = {
	Mode.MAJOR: (1, 4, 5),
}


MODE_MAP: typing.Dict[Mode, typing.Tuple[typing.Tuple[int, ...], typing.Tuple[keychords.chords.ChordQuality, ...]]] = {
	Mode.MAJOR: (MAJOR_SCALE_OFFSETS, MAJOR_QUALITIES),
	Mode.MINOR: (MINOR_SCALE_OFFSETS, MINOR_QUALITIES),
}


def parse_mode (token: str, strict: bool = False) -> Mode:

	"""Map a mode character to a `Mode`.

	Only the first character of *token* is considered. ``"m"`` selects minor;
	every other character selects major, unless *strict* is set, in which case
	anything other than ``"m"`` or ``"M"`` is rejected.

	Parameters:
		token: Mode token as typed by the user (e.g. ``"m"``, ``"M"``).
		strict: Reject characters other than ``"m"`` and ``"M"``.

	Returns:
		The selected mode.

	Raises:
		MalformedInputError: If *token* is empty.
		InvalidModeError: In strict mode, for an unrecognised character.

	Example:
		```python
		parse_mode("m")               # → Mode.MINOR
		parse_mode("M")               # → Mode.MAJOR
		parse_mode("x")               # → Mode.MAJOR
		parse_mode("x", strict=True)  # raises InvalidModeError
		```
	"""

	if not token:
		raise keychords.errors.MalformedInputError("Missing mode character (M/m)")

	char = token[0]

	if char == Mode.MINOR.value:
		return Mode.MINOR

	if strict and char != Mode.MAJOR.value:
		raise keychords.errors.InvalidModeError(
			f"Unknown mode: {char!r}. Expected 'M' (major) or 'm' (minor)."
		)

	return Mode.MAJOR
