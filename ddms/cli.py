#
# Copyright (c), 2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
# mypy: ignore-errors
"""Command Line Interface"""
import sys
import os
import argparse
import logging

from ddms.exceptions import DdmsException, InvalidDdmsError
from ddms.settings import DdmsSettings
from ddms.reader import DdmsReader
from ddms.renderers import OUTPUT_FORMATS, render

PROGRAM_NAME = os.path.basename(sys.argv[0])


def output_format(value):
    if value not in OUTPUT_FORMATS:
        raise argparse.ArgumentTypeError("%r is not an output format" % value)
    return value


def defuse_data(value):
    if value not in ('always', 'remote', 'nonlocal', 'never'):
        raise argparse.ArgumentTypeError("%r is not a valid value" % value)
    return value


def get_loglevel(verbosity):
    if verbosity <= 0:
        return logging.ERROR
    elif verbosity == 1:
        return logging.WARNING
    elif verbosity == 2:
        return logging.INFO
    else:
        return logging.DEBUG


def get_settings(args):
    return DdmsSettings(
        schema_dir=args.schema_dir,
        defuse=args.defuse,
        schema_validation=False if args.no_schema else None,
    )


def add_common_arguments(parser):
    parser.add_argument('-v', dest='verbosity', action='count', default=0,
                        help="increase output verbosity.")
    parser.add_argument('--schema-dir', type=str, metavar='DIR', default=None,
                        help="base directory of the DDMS schemas, if not provided "
                             "the XML files are not validated against schemas.")
    parser.add_argument('--no-schema', action='store_true', default=False,
                        help="skip the validation against schemas.")
    parser.add_argument('--defuse', metavar='(always, remote, nonlocal, never)',
                        type=defuse_data, default='remote',
                        help="when to defuse XML data, on remote resources for default.")


def validate():
    parser = argparse.ArgumentParser(prog=PROGRAM_NAME, add_help=True,
                                     description="validate a set of DDMS XML files.")
    parser.usage = "%(prog)s [OPTION]... [FILE]...\n" \
                   "Try '%(prog)s --help' for more information."
    add_common_arguments(parser)
    parser.add_argument('files', metavar='[XML_FILE ...]', nargs='+',
                        help="DDMS XML files to be validated.")

    args = parser.parse_args()
    loglevel = get_loglevel(args.verbosity)
    reader = DdmsReader(get_settings(args))

    tot_errors = 0
    for filepath in args.files:
        try:
            component = reader.read(filepath, loglevel=loglevel)
        except InvalidDdmsError as err:
            tot_errors += 1
            sys.stderr.write(f"{filepath} is not valid\n")
            sys.stderr.write(f"{err.as_message()}\n")
        except DdmsException as err:
            tot_errors += 1
            sys.stderr.write(f"{filepath} is not valid\n")
            sys.stderr.write(f"{err}\n")
        else:
            sys.stdout.write(f"{filepath} is valid\n")
            if args.verbosity > 0:
                for message in component.validation_warnings:
                    sys.stdout.write(f"{message}\n")

    sys.exit(tot_errors)


def render_file():
    parser = argparse.ArgumentParser(prog=PROGRAM_NAME, add_help=True,
                                     description="render a DDMS XML file.")
    parser.usage = "%(prog)s [OPTION]... FILE\n" \
                   "Try '%(prog)s --help' for more information."
    add_common_arguments(parser)
    parser.add_argument('-f', '--format', dest='fmt', type=output_format, default='text',
                        metavar='(html, text, json, xml)',
                        help="the output format, text for default.")
    parser.add_argument('file', metavar='XML_FILE', help="DDMS XML file to be rendered.")

    args = parser.parse_args()
    loglevel = get_loglevel(args.verbosity)
    reader = DdmsReader(get_settings(args))

    try:
        component = reader.read(args.file, loglevel=loglevel)
    except DdmsException as err:
        sys.stderr.write(f"{err}\n")
        sys.exit(1)

    output = render(component, args.fmt)
    sys.stdout.write(output if output.endswith('\n') else f"{output}\n")
    sys.exit(0)
