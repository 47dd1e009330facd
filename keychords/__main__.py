import argparse
import logging
import os
import sys
import typing

import yaml

import keychords.display
import keychords.errors
import keychords.key_analyzer


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "keychords.yaml"


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.debug(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		config = yaml.safe_load(f)

	if config is None:
		return {}

	if not isinstance(config, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping, got {type(config).__name__}")

	return config


def run_loop (
	analyzer: keychords.key_analyzer.KeyAnalyzer,
	stdin: typing.TextIO,
	stdout: typing.TextIO,
	prompt: str = keychords.display.DEFAULT_PROMPT
) -> int:

	"""Prompt, read a root and a mode, print the report, until end of input.

	Input is consumed as a stream of whitespace-separated tokens, so the root
	and the mode may sit on separate lines, and one line may hold several
	keys. The prompt is shown only when no tokens are left over from the
	previous line. Input errors are reported on *stdout* and the loop carries
	on with the next pair of tokens.

	Returns:
		Number of keys successfully analyzed.
	"""

	analyzed = 0
	tokens: typing.List[str] = []

	while True:

		if not tokens:
			stdout.write(prompt)
			stdout.flush()

		while len(tokens) < 2:
			line = stdin.readline()
			if not line:
				break
			tokens.extend(line.split())

		if len(tokens) < 2:

			# End of input.
			if tokens:
				exc = keychords.errors.MalformedInputError(
					f"Expected a root note and a mode (e.g. 'C M' or 'a m'), got {' '.join(tokens)!r}"
				)
				logger.info("Rejected input %r: %s", " ".join(tokens), exc)
				stdout.write(f"Error: {exc}\n")
			else:
				stdout.write("\n")
			break

		root_token, mode_token = tokens[0], tokens[1]
		del tokens[:2]

		try:
			analysis = analyzer.analyze_tokens(root_token, mode_token)
		except keychords.errors.KeyChordsError as exc:
			logger.info("Rejected input %r: %s", f"{root_token} {mode_token}", exc)
			stdout.write(f"Error: {exc}\n")
			continue

		stdout.write(keychords.display.format_report(analysis))
		analyzed += 1

	return analyzed


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the keychords application.
	"""

	parser = argparse.ArgumentParser(description="Print the diatonic triads of a major or minor key")
	parser.add_argument("root", nargs="?", help="Root note for a one-shot analysis (e.g. C, f#)")
	parser.add_argument("mode", nargs="?", help="Mode character: m for minor, anything else for major")
	parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help=f"YAML config file (default: {DEFAULT_CONFIG_PATH})")
	parser.add_argument("--strict", action="store_true", help="Reject mode characters other than M/m")
	parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
	args = parser.parse_args(argv)

	if args.root is not None and args.mode is None:
		parser.error("a mode character is required after the root note")

	config = load_config(args.config)

	log_level = "DEBUG" if args.verbose else str(config.get("log_level", "WARNING")).upper()

	# getLevelName() maps known names to ints and anything else to a string.
	if not isinstance(logging.getLevelName(log_level), int):
		parser.error(f"log_level in {args.config} must be a logging level name (e.g. WARNING), got {log_level!r}")

	strict_mode = config.get("strict_mode", False)

	if not isinstance(strict_mode, bool):
		parser.error(f"strict_mode in {args.config} must be true or false, got {strict_mode!r}")

	logging.basicConfig(level=log_level)

	analyzer = keychords.key_analyzer.KeyAnalyzer(
		strict_mode = args.strict or strict_mode
	)

	if args.root is not None:

		try:
			analysis = analyzer.analyze_line(f"{args.root} {args.mode}")
		except keychords.errors.KeyChordsError as exc:
			print(f"Error: {exc}", file=sys.stderr)
			return 1

		sys.stdout.write(keychords.display.format_report(analysis))
		return 0

	prompt = config.get("prompt", keychords.display.DEFAULT_PROMPT)

	try:
		run_loop(analyzer, sys.stdin, sys.stdout, prompt=prompt)
	except KeyboardInterrupt:
		print()
		logger.info("Stopping...")

	return 0


if __name__ == "__main__":
	sys.exit(main())
