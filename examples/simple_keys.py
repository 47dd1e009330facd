import logging

import keychords
import keychords.display

logging.basicConfig(level=logging.INFO)

# Every major key, with its three-chord (I IV V) accompaniment.
for root in keychords.chords.PITCH_CLASSES:
	analysis = keychords.analyze(root, keychords.Mode.MAJOR)
	print(f"{root:<3}", "  ".join(triad.name() for triad in analysis.super_easy()))

print()

# The full report for one minor key, as the interactive prompt prints it.
print(keychords.display.format_report(keychords.analyze("e", keychords.Mode.MINOR)), end="")
