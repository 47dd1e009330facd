"""
keychords - the diatonic triads of a major or minor key.

Give it a root note and a mode and it prints the seven chords that belong to
the key, followed by shorter lists of the chords most often used to
accompany a tune in that key:

- **Full table.** All seven degrees, e.g. for C major
  ``C Maj  D min  E min  F Maj  G Maj  A min  B Maj``.
- **Easy version.** Degrees 1, 6, 4, 5 in major; 1, 7, 6, 5 in minor.
- **Super easy version.** Degrees 1, 4, 5 (major keys only).

Notes are spelled with sharps only (``A A# B C C# D D# E F F# G G#``). The
first letter of the root may be typed in lower case.

Interactive use:

    ```
    $ python -m keychords
    Input chord with (M/m) : a m
    A min	B Maj/min	C Maj	D min	E Maj	F Maj	G Maj	

    Easy version :
    A min
    G Maj
    F Maj
    E Maj
    ```

Library use:

    ```python
    import keychords

    analysis = keychords.analyze("G#", keychords.Mode.MAJOR)
    analysis.degree(5).name()   # → "D# Maj"
    ```

Package-level exports: ``analyze``, ``KeyAnalyzer``, ``KeyAnalysis``, ``Mode``,
``ChordQuality``, ``DiatonicTriad``, ``UnknownRootError``.
"""

import keychords.chords
import keychords.errors
import keychords.intervals
import keychords.key_analyzer


analyze = keychords.key_analyzer.analyze
KeyAnalyzer = keychords.key_analyzer.KeyAnalyzer
KeyAnalysis = keychords.key_analyzer.KeyAnalysis
Mode = keychords.intervals.Mode
ChordQuality = keychords.chords.ChordQuality
DiatonicTriad = keychords.chords.DiatonicTriad
UnknownRootError = keychords.errors.UnknownRootError
