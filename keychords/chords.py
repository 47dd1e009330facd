"""Pitch class names and diatonic triad types.

This module provides the fixed chromatic cycle used for key analysis, the chord
quality labels, and the `DiatonicTriad` value type.

Module-level constants:
- `PITCH_CLASSES`: The 12 note names in cyclic order, starting from A (sharps only)

Module-level helpers:
- `normalize_root_name(name)`: Fold the first character of a note name to upper case.
- `pitch_class_index(name)`: Return the position of a note name in `PITCH_CLASSES`.
  Raises `UnknownRootError` for names outside the cycle.

Chord qualities: `"Maj"`, `"min"`, `"Maj/min"`
"""

import dataclasses
import enum
import typing

import keychords.errors


PITCH_CLASSES: typing.Tuple[str, ...] = (
	"A",
	"A#",
	"B",
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
)


class ChordQuality (enum.Enum):

	"""
	Chord type label shown next to each triad root.
	"""

	MAJ = "Maj"
	MIN = "min"

	# Ambiguous marker, only used for degree 2 of the minor table.
	MAJ_MIN = "Maj/min"


	def __str__ (self) -> str:

		return self.value


def normalize_root_name (name: str) -> str:

	"""Upper-case the first character of a note name when it is ASCII a–z.

	Only the first character is folded; accidentals and anything after them
	pass through unchanged.

	Example:
		```python
		normalize_root_name("f#")  # → "F#"
		normalize_root_name("C")   # → "C"
		normalize_root_name("éb")  # → "éb" (not ASCII, left alone)
		```
	"""

	if name and "a" <= name[0] <= "z":
		return name[0].upper() + name[1:]

	return name


def pitch_class_index (name: str) -> int:

	"""Return the index (0–11) of a note name within `PITCH_CLASSES`.

	The match is exact: the name must already be normalized.

	Parameters:
		name: Note name (e.g. ``"A"``, ``"C#"``, ``"G#"``).

	Returns:
		Index into `PITCH_CLASSES`.

	Raises:
		UnknownRootError: If the name is not one of the 12 pitch classes.

	Example:
		```python
		pitch_class_index("A")   # → 0
		pitch_class_index("C")   # → 3
		pitch_class_index("G#")  # → 11
		```
	"""

	if name not in PITCH_CLASSES:
		raise keychords.errors.UnknownRootError(
			f"Unknown root note: {name!r}. Expected one of {', '.join(PITCH_CLASSES)}."
		)

	return PITCH_CLASSES.index(name)


def rotate_pitch_classes (start: int) -> typing.List[str]:

	"""
	Return the 12 pitch classes rotated so that index *start* comes first.
	"""

	return [PITCH_CLASSES[(start + k) % len(PITCH_CLASSES)] for k in range(len(PITCH_CLASSES))]


@dataclasses.dataclass(frozen=True)
class DiatonicTriad:

	"""
	A triad built on one scale degree of a key.
	"""

	root: str
	quality: ChordQuality
	degree: int


	def __post_init__ (self) -> None:

		if self.root not in PITCH_CLASSES:
			raise ValueError(f"Unknown pitch class: {self.root}")

		if not 1 <= self.degree <= 7:
			raise ValueError(f"Scale degree must be 1-7, got {self.degree}")


	def name (self) -> str:

		"""
		Return the display name, e.g. ``"F# min"``.
		"""

		return f"{self.root} {self.quality}"
