#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright (C) 2019—2021  wikigrams contributors
#
# This file is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#

r"""Count word n-grams in a Wikipedia dump.

Usage::

    ngramcount N PATH

PATH is either a directory with WikiExtractor JSON output or a contexts
file written by a previous run. For a directory, the extracted contexts
are first saved to OUTDIR/contexts.txt, so that counts for another N can
be computed later from that file without tokenizing the dump again.
N-gram counts are written to OUTDIR/N-grams.txt, one n-gram per line,
in no particular order unless --sort is given.
"""

import os
import sys
import argparse

import wikigrams.formats
from wikigrams.contexts import Processor
from wikigrams.ngrams import NgramCounter
from wikigrams.tokenizer import Tokenizer


class UsageParser(argparse.ArgumentParser):
    """Argument parser that answers bad arguments with usage and a clean exit"""
    def error(self, message):
        self.print_usage(sys.stdout)
        sys.stdout.write(u'{}\n'.format(message))
        self.exit(0)


def contexts_path(outdir):
    return os.path.join(outdir, 'contexts.txt')


def ngrams_path(outdir, n):
    return os.path.join(outdir, '{}-grams.txt'.format(n))


def extract_contexts(reader, outfile, io, tokenizer, verbose=False):
    if verbose:
        sys.stderr.write(u'Processing {0}...\n'.format(reader.filename))
    pp = Processor(tokenizer=tokenizer)
    ncontexts = io.write_contexts(outfile, pp.iter_contexts(reader))
    if verbose:
        sys.stderr.write(u'Written {0} : {1} contexts\n'.format(outfile, ncontexts))


def count_file(reader, outfile, io, counter, sort=False, verbose=False):
    if verbose:
        sys.stderr.write(u'Counting {0}-grams in {1}...\n'.format(counter.n, reader.filename))
    table = counter.update(reader)
    io.write_ngrams(outfile, table, sort=sort)
    if verbose:
        sys.stderr.write(u'Finished {0} : {1} distinct {2}-grams\n'.format(outfile, len(table), counter.n))
    return table


def main(argv=None):
    tkz = Tokenizer()

    aparser = UsageParser(prog='ngramcount', description='Word n-gram counts for Wikipedia dumps.')
    aparser.add_argument('n', help='N-gram size (positive integer)')
    aparser.add_argument('path', help='WikiExtractor output directory or contexts file')
    aparser.add_argument('-o', '--outdir', help='Output directory', default='out')
    aparser.add_argument('-z', '--tokenizer', action='store', choices=tkz.methods, default="default", help="Tokenizer to use")
    aparser.add_argument('-s', '--sort', action='store_true', help='Sort n-grams by descending frequency')
    aparser.add_argument('-v', '--verbose', action='store_true', help='Print info messages')
    args = aparser.parse_args(argv)

    io = wikigrams.formats.FileWrapper()
    try:
        counter = NgramCounter(int(args.n))
        reader = io.read(args.path)
    except ValueError as e:
        aparser.error(str(e))

    tkz.use_method(args.tokenizer)
    os.makedirs(args.outdir, exist_ok=True)
    if io.format == 'corpus':
        cachefile = contexts_path(args.outdir)
        extract_contexts(reader, cachefile, io, tkz, verbose=args.verbose)
        reader = io.read(cachefile)
    count_file(reader, ngrams_path(args.outdir, counter.n), io, counter, sort=args.sort, verbose=args.verbose)
    return 0


if __name__ == '__main__':
    sys.exit(main())
