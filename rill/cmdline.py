"""
This runs the built-in specimen programs of the Rill evaluation engine.

{0}

For example:

    rill all_in_one

will run the all-in-one fixture from its `main0` function.

    rill factorial -e fact -a 10 -v

will compute 10! while tracing each call.

    rill -h

will explain all the arguments.
"""
import sys, argparse

parser = argparse.ArgumentParser(
	prog="rill",
	description="Run a built-in specimen program through the tree-walking evaluator.",
)
parser.add_argument("specimen", nargs="?", default="all_in_one", help="which specimen to run; try 'all_in_one'.")
parser.add_argument('-e', "--entry", help="the function to call; each specimen has a default.")
parser.add_argument('-a', "--arg", type=int, action="append", default=[], help="an integer argument for the entry function; repeat as needed.")
parser.add_argument('-c', "--check", action="store_true", help="Check the program but do not actually execute it.")
parser.add_argument('-v', "--verbose", action="count", help="Trace each call and its result.")
parser.add_argument("--step-limit", type=int, help="Give up after this many steps.")
parser.add_argument("--depth-limit", type=int, help="Give up when calls nest deeper than this.")
parser.add_argument("--list", action="store_true", help="List the specimens and stop.")

def run(args):
	from .diagnostics import Report, TooManyIssues
	from .specimens import SPECIMENS
	if args.list:
		for name, (_, entry) in SPECIMENS.items():
			print("%s (entry: %s)" % (name, entry))
		return
	if args.specimen not in SPECIMENS:
		print("No specimen called %r. Try --list." % args.specimen, file=sys.stderr)
		return 1
	build, entry = SPECIMENS[args.specimen]
	program = build()
	report = Report(verbose=args.verbose)
	try:
		from .static.check import check_program
		check_program(program, report)
	except TooManyIssues:
		pass
	if report.sick():
		report.complain_to_console()
		return 1
	if args.check:
		print("Looks plausible to me.", file=sys.stderr)
		return
	from .faults import EngineError
	from .tree_walker.executive import run_program
	try:
		result = run_program(
			program, args.entry or entry, args.arg,
			report=report, step_limit=args.step_limit, depth_limit=args.depth_limit,
		)
	except EngineError as ex:
		report.runtime_fault(ex)
		report.complain_to_console()
		return 1
	print(result)

def main():
	if len(sys.argv) > 1:
		exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
