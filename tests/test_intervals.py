import pytest

import keychords.chords
import keychords.errors
import keychords.intervals


def test_scale_offsets () -> None:

	"""Offsets should be the natural major and natural minor scales."""

	assert keychords.intervals.MAJOR_SCALE_OFFSETS == (0, 2, 4, 5, 7, 9, 11)
	assert keychords.intervals.MINOR_SCALE_OFFSETS == (0, 2, 3, 5, 7, 8, 10)


def test_quality_tables () -> None:

	"""The quality tables are fixed, including the simplified minor labelling."""

	assert [q.value for q in keychords.intervals.MAJOR_QUALITIES] == ["Maj", "min", "min", "Maj", "Maj", "min", "Maj"]
	assert [q.value for q in keychords.intervals.MINOR_QUALITIES] == ["min", "Maj/min", "Maj", "min", "Maj", "Maj", "Maj"]


def test_subset_degrees () -> None:

	assert keychords.intervals.EASY_DEGREES[keychords.intervals.Mode.MINOR] == (1, 7, 6, 5)
	assert keychords.intervals.EASY_DEGREES[keychords.intervals.Mode.MAJOR] == (1, 6, 4, 5)
	assert keychords.intervals.SUPER_EASY_DEGREES[keychords.intervals.Mode.MAJOR] == (1, 4, 5)
	assert keychords.intervals.Mode.MINOR not in keychords.intervals.SUPER_EASY_DEGREES


def test_mode_map_covers_every_mode () -> None:

	for mode in keychords.intervals.Mode:
		offsets, qualities = keychords.intervals.MODE_MAP[mode]
		assert len(offsets) == 7
		assert len(qualities) == 7


def test_parse_mode_minor () -> None:

	assert keychords.intervals.parse_mode("m") is keychords.intervals.Mode.MINOR


def test_parse_mode_major () -> None:

	assert keychords.intervals.parse_mode("M") is keychords.intervals.Mode.MAJOR


@pytest.mark.parametrize("token", ["x", "j", "1", "?", "Major"])
def test_parse_mode_anything_else_is_major (token: str) -> None:

	"""Characters other than 'm' fall through to major."""

	assert keychords.intervals.parse_mode(token) is keychords.intervals.Mode.MAJOR


def test_parse_mode_uses_first_character () -> None:

	assert keychords.intervals.parse_mode("minor") is keychords.intervals.Mode.MINOR
	assert keychords.intervals.parse_mode("Minor") is keychords.intervals.Mode.MAJOR


def test_parse_mode_strict_accepts_m_and_M () -> None:

	assert keychords.intervals.parse_mode("m", strict=True) is keychords.intervals.Mode.MINOR
	assert keychords.intervals.parse_mode("M", strict=True) is keychords.intervals.Mode.MAJOR


def test_parse_mode_strict_rejects_other () -> None:

	with pytest.raises(keychords.errors.InvalidModeError, match="Unknown mode"):
		keychords.intervals.parse_mode("x", strict=True)


def test_parse_mode_empty () -> None:

	with pytest.raises(keychords.errors.MalformedInputError):
		keychords.intervals.parse_mode("")
