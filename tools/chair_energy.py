#!/usr/bin/env python3
"""Report chair conformer strain energies for a substituted ring or a sugar."""

# Standard Library
import argparse
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
CHAIRFLIP_DIR = os.path.join(REPO_ROOT, "packages", "chairflip")
if CHAIRFLIP_DIR not in sys.path:
	sys.path.insert(0, CHAIRFLIP_DIR)

# local repo modules
import chairflip


#============================================
def parse_substituent(text):
	"""Parse 'C:POSITION:GROUP' with a 1-based carbon number."""
	parts = [part.strip() for part in text.split(":")]
	if len(parts) != 3 or not all(parts):
		raise argparse.ArgumentTypeError(
			f"expected CARBON:POSITION:GROUP, got {text!r}"
		)
	carbon_text, position_text, group = parts
	try:
		carbon = int(carbon_text.upper().removeprefix("C"))
	except ValueError as error:
		raise argparse.ArgumentTypeError(f"bad carbon number {carbon_text!r}") from error
	if not 1 <= carbon <= 6:
		raise argparse.ArgumentTypeError(f"carbon number must be 1-6, got {carbon}")
	try:
		position = chairflip.vocabulary.as_position(position_text)
	except ValueError as error:
		raise argparse.ArgumentTypeError(str(error)) from error
	return (carbon - 1, position, group)


#============================================
def build_parser():
	parser = argparse.ArgumentParser(
		description="Compare the two chair conformers of cyclohexane or a pyranose sugar."
	)
	parser.add_argument(
		"-s",
		"--substituent",
		dest="substituents",
		action="append",
		type=parse_substituent,
		default=[],
		help="Cyclohexane substituent as CARBON:POSITION:GROUP, e.g. 1:ax:CH3 (repeatable).",
	)
	parser.add_argument(
		"--sugar",
		dest="sugar",
		default=None,
		help="Load a pyranose sugar template by key, e.g. glucose.",
	)
	parser.add_argument(
		"--anomer",
		dest="anomer",
		choices=[anomer.value for anomer in chairflip.Anomer],
		default=chairflip.Anomer.BETA.value,
		help="Anomer used with --sugar.",
	)
	parser.add_argument(
		"--flip",
		action="store_true",
		help="Report from the ring-flipped chair.",
	)
	parser.add_argument(
		"--list-sugars",
		action="store_true",
		help="List the sugar templates and exit.",
	)
	parser.add_argument(
		"--list-substituents",
		action="store_true",
		help="List the known substituent A-values and exit.",
	)
	return parser


#============================================
def build_state(args, parser):
	"""Build the molecule state described by parsed arguments."""
	if args.sugar and args.substituents:
		parser.error("--sugar and --substituent cannot be combined")
	if args.sugar:
		try:
			state = chairflip.instantiate_sugar(args.sugar, args.anomer)
		except chairflip.UnknownTemplateError as error:
			parser.error(str(error))
	else:
		state = chairflip.create_molecule_state()
		for carbon_index, position, group in args.substituents:
			state = chairflip.set_substituent(state, carbon_index, position, group)
	if args.flip:
		state = chairflip.flip_chair(state)
	return state


#============================================
def report_lines(state):
	"""Return the text report for one state."""
	comparison = chairflip.compare_conformers(state)
	lines = [f"Molecule: {chairflip.export_basename(state)}"]
	subs = chairflip.sorted_substituents(state)
	if not subs:
		lines.append("Substituents: none")
	else:
		lines.append("Substituents:")
		for sub in subs:
			lines.append(f"  {chairflip.substituent_summary(sub)}")
	lines.append(f"Current chair: {chairflip.format_energy(comparison.energy_current)}")
	lines.append(f"Flipped chair: {chairflip.format_energy(comparison.energy_flipped)}")
	lines.append(f"Delta E: {chairflip.format_energy(comparison.delta_e)}")
	lines.append(f"Preferred: {chairflip.preferred_description(comparison)}")
	return lines


#============================================
def main(argv=None):
	parser = build_parser()
	args = parser.parse_args(argv)
	if args.list_sugars:
		for summary in chairflip.list_sugars():
			print(f"{summary.key}\t{summary.display_name}")
		return 0
	if args.list_substituents:
		for group, a_value in chairflip.list_known_substituents():
			print(f"{group}\t{a_value:.3f}")
		return 0
	state = build_state(args, parser)
	for line in report_lines(state):
		print(line)
	return 0


if __name__ == "__main__":
	sys.exit(main())
