#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import re
import funcparserlib.lexer


class TokenizerData(object):
    def __init__(self):
        self.ptb = [
                ('Space', (r'\s+', re.UNICODE)),
                ('Quote', (r'``',)),
                ('EndQuote', (r"''",)),
                # opening quote: at text start or after whitespace/open bracket
                ('Quote', (r'(?<![^\s(\[{])["“]|“', re.UNICODE)),
                ('EndQuote', (r'["”]',)),
                ('LRB', (r'\(',)),
                ('RRB', (r'\)',)),
                ('LCB', (r'\{',)),
                ('RCB', (r'\}',)),
                ('Punct', (r'[\[\]]',)),
                ('Clitic', (r"(?i)n't(?!\w)", re.UNICODE)),
                ('Clitic', (r"(?i)'(s|re|ve|ll|d|m)(?!\w)", re.UNICODE)),
                ('Word', (r'(\w\.){2,}', re.UNICODE)),
                ('Word', (r"\w+(?=(?i:n't)(?!\w))", re.UNICODE)),
                ('Cardinal', (r'\d+([.,:]\d+)+', re.UNICODE)),
                ('Word', (r'\w+(-\w+)*', re.UNICODE)),
                ('SentPunct', (r'[.!?]+',)),
                ('Punct', (r'(-{2,}|\.{3})',)),
                ('Nonword', (r'\W', re.UNICODE)),
                ]

        self.whitespace = [
                ('Space', (r'\s+', re.UNICODE)),
                ('Word', (r'\S+', re.UNICODE)),
                ]

        self._methods = {
            "ptb": self.ptb,
            "whitespace": self.whitespace,
            "default": self.ptb
        }
        self.methods = list(self._methods.keys())

    def get(self, method):
        return self._methods[method]


class Tokenizer(object):
    """Sentence splitter and word tokenizer producing Penn Treebank tokens.

    Round brackets become -LRB- and -RRB-, opening double quotes two
    backticks and closing ones two apostrophes, so that paired punctuation
    can be recognized by its token value downstream.
    """
    bordertypes = ('SentPunct',)
    trailingtypes = ('EndQuote', 'RRB', 'RCB')
    blanktypes = ('Space',)
    values = {
        'Quote': '``',
        'EndQuote': "''",
        'LRB': '-LRB-',
        'RRB': '-RRB-',
        'LCB': '-LCB-',
        'RCB': '-RCB-',
    }

    def __init__(self, method="default"):
        self._data = TokenizerData()
        self.methods = self._data.methods
        self.use_method(method)

    def use_method(self, method):
        self.specs = self._data.get(method)
        self._tokenize = funcparserlib.lexer.make_tokenizer(self.specs)

    def tokenize(self, string):
        'str -> Sequence(Token)'
        return self._tokenize(string)

    def split_sentences(self, toklist):
        senttoks = []
        border = False
        for tok in toklist:
            if tok.type in self.blanktypes:
                continue
            if tok.type in self.bordertypes:
                border = True
            elif border and tok.type not in self.trailingtypes:
                border = False
                yield senttoks
                senttoks = []
            senttoks.append(tok)
        if senttoks:
            yield senttoks

    def words(self, senttoks):
        return [self.values.get(tok.type, tok.value) for tok in senttoks]

    def sentences(self, paragraph):
        """Yield each sentence of a paragraph as a list of token strings"""
        for senttoks in self.split_sentences(self.tokenize(paragraph)):
            yield self.words(senttoks)
