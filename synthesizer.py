import os
import sys
import traceback
from pathlib import Path

path = Path(__file__)
rootpath = str(path.parent.absolute())
sys.path.append(rootpath)

from subsynth.argument_parser.parser import parse_args
from subsynth.config.settings import Setting
from subsynth.core.synthesizer import Synthesizer, enable_debug
from subsynth.domain.loader import load_domain
from subsynth.errors import InvalidRange, SynthesisError
from subsynth.printer.pretty import pretty_substance
from subsynth.utils.file_handlers import ensure_directory, program_file_names, write_program


def main(argv=None):
    """Generate programs for a domain file and write them under ``--path``."""
    args = parse_args(argv)
    if args.debug:
        enable_debug()

    try:
        schema = load_domain(args.domain)
        setting = Setting.from_names(args.min_length, args.max_length, args.arg_option)
        synthesizer = Synthesizer(schema, setting, seed=args.seed)
        if args.num_programs < 0:
            raise InvalidRange(f"number of programs must not be negative (got {args.num_programs})")

        ensure_directory(args.path)
        files = program_file_names(args.path, args.num_programs)
        written = 0
        for program, file in zip(synthesizer.iter_programs(args.num_programs), files):
            text = pretty_substance(program)
            write_program(file, text)
            written += 1
            if not args.quiet:
                print(f"Generated new program ({file}):")
                print(text)
    except SynthesisError as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.debug:
            traceback.print_exc()
        return 1

    print(f"Wrote {written} program(s) to {os.path.abspath(args.path)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
