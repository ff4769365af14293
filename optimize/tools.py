import logging
import os
from os.path import abspath, join, exists

import numpy as np

logger = logging.getLogger(__name__)

# name, header, row format
COLUMNS = [
    ('iter', '%5s', '%5d'),
    ('f', '%10s', '%10.3e'),
    ('dual', '%10s', '%10.3e'),
    ('slope', '%10s', '%10.3e'),
    ('bk', '%3s', '%3d'),
]
HEADER_LABELS = {'f': 'f(x)', 'dual': '|g|', 'slope': 'g\'d'}


class LogReporter(object):
    """ Sends one table row per iteration to a logger
    """
    def __init__(self, log=None, level=logging.INFO):
        self.log = log or logger
        self.level = level

    def header(self):
        line = '  '.join(fmt % HEADER_LABELS.get(name, name) for name, fmt, _ in COLUMNS)
        self.log.log(self.level, line)

    def report(self, row):
        cells = []
        for name, hfmt, fmt in COLUMNS:
            val = row.get(name)
            cells.append(hfmt % '' if val is None else fmt % val)
        self.log.log(self.level, '  '.join(cells).rstrip())


class History(object):
    """ Keeps every reported row in memory
    """
    def __init__(self):
        self.rows = []

    def header(self):
        self.rows = []

    def report(self, row):
        self.rows.append(dict(row))

    def __len__(self):
        return len(self.rows)

    def __getitem__(self, name):
        """ Column as an array, nan where a row has no value
        """
        return np.array([np.nan if row.get(name) is None else row[name]
                         for row in self.rows], dtype=float)


class Writer(object):
    """ Utility for appending values to text files

    Each reported column goes to its own file under `path`, one value
    per line.
    """
    def __init__(self, path='./output.stat'):
        self.path = abspath(path)
        os.makedirs(self.path, exist_ok=True)

    def __call__(self, filename, val):
        fullfile = join(self.path, filename)
        with open(fullfile, 'a') as f:
            f.write('%e\n' % val)

    def header(self):
        # a new solve starts new files
        for name, _, _ in COLUMNS:
            fullfile = join(self.path, name)
            if exists(fullfile):
                os.remove(fullfile)

    def report(self, row):
        for name, _, _ in COLUMNS:
            if row.get(name) is not None:
                self(name, row[name])


def loadstat(path, name):
    """ Reads back a column written by Writer
    """
    return np.loadtxt(join(abspath(path), name), ndmin=1)


class Tee(object):
    """ Forwards rows to several reporters
    """
    def __init__(self, *reporters):
        self.reporters = reporters

    def header(self):
        for reporter in self.reporters:
            reporter.header()

    def report(self, row):
        for reporter in self.reporters:
            reporter.report(row)
