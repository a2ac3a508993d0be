import sys
from .cmdline import parser, run

exit(run(parser.parse_args(sys.argv[1:])))
