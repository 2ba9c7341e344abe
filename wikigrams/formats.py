#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Library for input/output formats supported by wikigrams
#
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

# Corpus: directory tree of WikiExtractor --json output, one article per line:
# {"id": ..., "url": ..., "title": ..., "text": ...}
# Context cache: one context per line, tokens separated by a space
# N-gram table: one n-gram per line, "<count> <token> <token>..."

import os
import json


def iter_files(directory):
    for root, dirs, files in os.walk(directory):
        dirs.sort()
        for name in sorted(files):
            path = os.path.join(root, name)
            if os.path.isfile(path):
                yield path


class BaseReader(object):
    def __init__(self, filename, encoding="utf-8"):
        self.filename = filename
        self.encoding = encoding


class JsonlReader(BaseReader):
    """Article texts from a directory of JSON-lines files"""
    def __iter__(self):
        for path in iter_files(self.filename):
            with open(path, encoding=self.encoding, errors='replace') as f:
                for line in f:
                    text = self.parse_record(line)
                    if text is not None:
                        yield text

    def parse_record(self, line):
        # malformed records carry no text
        if not line.strip():
            return None
        try:
            record = json.loads(line)
        except ValueError:
            return None
        if not isinstance(record, dict):
            return None
        text = record.get('text')
        if isinstance(text, str):
            return text
        return None


class ContextsReader(BaseReader):
    """Contexts from a cache file, one per line"""
    def __iter__(self):
        with open(self.filename, encoding=self.encoding) as f:
            for line in f:
                context = line.split()
                if context:
                    yield context


class BaseWriter(object):
    def __init__(self, filename, encoding="utf-8"):
        self.filename = filename
        self.encoding = encoding


class ContextsWriter(BaseWriter):
    def write(self, contexts):
        ncontexts = 0
        with open(self.filename, 'w', encoding=self.encoding) as outfile:
            for context in contexts:
                outfile.write(u' '.join(context))
                outfile.write(u'\n')
                ncontexts += 1
        return ncontexts


class NgramsWriter(BaseWriter):
    def write(self, table, sort=False):
        if sort:
            items = table.most_common()
        else:
            items = table.items()
        with open(self.filename, 'w', encoding=self.encoding) as outfile:
            for ngram, count in items:
                outfile.write(u'{} {}\n'.format(count, ngram))


class FileWrapper(object):
    def __init__(self, encoding='utf-8'):
        self.encoding = encoding

    def read(self, path):
        if os.path.isdir(path):
            self.format = 'corpus'
            self._reader = JsonlReader(path, self.encoding)
        elif os.path.isfile(path) and os.access(path, os.R_OK):
            self.format = 'contexts'
            self._reader = ContextsReader(path, self.encoding)
        else:
            raise ValueError("Neither a corpus directory nor a contexts file: {}".format(path))
        return self._reader

    def write_contexts(self, filename, contexts):
        return ContextsWriter(filename, self.encoding).write(contexts)

    def write_ngrams(self, filename, table, sort=False):
        NgramsWriter(filename, self.encoding).write(table, sort=sort)
