"""Command-line interface to the box geometry resolver."""

import argparse
import json
import logging
import sys

from . import DEFAULT_OPTIONS, LOGGER, __version__, layout
from .errors import InvalidTreeData, LayoutError
from .formatting_structure.build import tree_from_json

#: Exit status when the input can't be read as box records.
PARSE_FAILURE = 1
#: Exit status when the boxes can't be laid out.
LAYOUT_FAILURE = 3


class Parser(argparse.ArgumentParser):
    def __init__(self, *args, **kwargs):
        self._arguments = {}
        super().__init__(*args, **kwargs)

    def add_argument(self, *args, **kwargs):
        super().add_argument(*args, **kwargs)
        key = args[-1].lstrip('-')
        kwargs['flags'] = args
        kwargs['positional'] = args[-1][0] != '-'
        self._arguments[key] = kwargs

    @property
    def docstring(self):
        self._arguments['help'] = self._arguments.pop('help')
        data = []
        for key, args in self._arguments.items():
            data.append('.. option:: ')
            action = args.get('action', 'store')
            for flag in args['flags']:
                data.append(flag)
                if not args['positional'] and action == 'store':
                    data.append(f' <{key}>')
                data.append(', ')
            data[-1] = '\n\n'
            data.append(f'  {args["help"][0].upper()}{args["help"][1:]}.\n\n')
        return ''.join(data)


PARSER = Parser(
    prog='boxlayout', description='Compute the geometry of a box tree.')
PARSER.add_argument(
    'input', help='filename of the JSON box tree, or - for stdin')
PARSER.add_argument(
    'output', help='filename where JSON geometry is written, or - for stdout')
PARSER.add_argument(
    '-w', '--viewport-width', type=float,
    help='width of the containing block of the root box, overrides the '
    'viewportWidth given by the input')
PARSER.add_argument(
    '--indent', type=int, help='indent the JSON output with spaces')
PARSER.add_argument(
    '-v', '--verbose', action='store_true',
    help='show warnings and information messages')
PARSER.add_argument(
    '-d', '--debug', action='store_true', help='show debugging messages')
PARSER.add_argument(
    '-q', '--quiet', action='store_true', help='hide logging messages')
PARSER.add_argument(
    '--version', action='version',
    version=f'boxlayout version {__version__}',
    help='print boxlayout’s version number and exit')
PARSER.set_defaults(**DEFAULT_OPTIONS)


def read_input(filename, stdin):
    if filename == '-':
        source = stdin or sys.stdin.buffer
        return source.read()
    with open(filename, 'rb') as fd:
        return fd.read()


def write_output(filename, stdout, string):
    if filename == '-':
        output = stdout or sys.stdout.buffer
        output.write(string.encode())
    else:
        with open(filename, 'w', encoding='utf-8') as fd:
            fd.write(string)


def main(argv=None, stdout=None, stdin=None):
    """The ``boxlayout`` program takes two arguments:

    .. code-block:: sh

        boxlayout [options] <input> <output>

    It exits with status 1 when the input can't be read or is not a valid box
    tree document, and with status 3 when the tree can't be laid out.

    """
    args = PARSER.parse_args(argv)

    # Default to logging to stderr.
    if args.debug:
        LOGGER.setLevel(logging.DEBUG)
    elif args.verbose:
        LOGGER.setLevel(logging.INFO)
    if not args.quiet:
        handler = logging.StreamHandler()
        if args.debug:
            # Add extra information when debug logging
            handler.setFormatter(
                logging.Formatter(
                    '%(levelname)s: %(filename)s:%(lineno)d '
                    '(%(funcName)s): %(message)s'))
        else:
            handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        LOGGER.addHandler(handler)

    try:
        tree, viewport_width = tree_from_json(read_input(args.input, stdin))
    except (InvalidTreeData, OSError) as exception:
        LOGGER.error('Invalid input: %s', exception)
        sys.exit(PARSE_FAILURE)
    except LayoutError as exception:
        LOGGER.error('Layout failed: %s', exception)
        sys.exit(LAYOUT_FAILURE)

    if args.viewport_width is not None:
        viewport_width = args.viewport_width

    try:
        result = layout(tree, viewport_width)
    except LayoutError as exception:
        LOGGER.error('Layout failed: %s', exception)
        sys.exit(LAYOUT_FAILURE)

    write_output(
        args.output, stdout,
        json.dumps(result.to_dict(), indent=args.indent) + '\n')


main.__doc__ += '\n\n' + PARSER.docstring


if __name__ == '__main__':  # pragma: no cover
    main()
