# Copyright (C) 2013 Wesley Baugh
"""Labeled forum posts stored as comma-separated values.

The first row is a header. The label of each post is read from the
`tag` column and its text from the `content` column.
"""
import csv
import logging
from collections import namedtuple

from unidecode import unidecode


LABEL_COLUMN = 'tag'
TEXT_COLUMN = 'content'

LabeledPost = namedtuple('LabeledPost', 'label text')


class MissingColumnError(ValueError):
    """Raised when a corpus header lacks a required column."""


def post_generator(csv_file, ascii_fold=False):
    """Parses a CSV corpus and yields LabeledPost tuples.

    Args:
        csv_file: File object (or any iterable of lines) containing a
            header row followed by one post per record.
        ascii_fold: Boolean indicating if the text should be
            transliterated to ASCII. (default False)

    Returns:
        LabeledPost (a namedtuple) with the following attributes:
            - label: String from the `tag` column.
            - text: String from the `content` column.
    """
    reader = csv.DictReader(csv_file)
    header = reader.fieldnames or []
    missing = [x for x in (LABEL_COLUMN, TEXT_COLUMN) if x not in header]
    if missing:
        raise MissingColumnError('Missing column(s): {0}'.format(
            ', '.join(missing)))
    for row in reader:
        text = row[TEXT_COLUMN] or ''
        if ascii_fold:
            text = unidecode(text)
        yield LabeledPost(row[LABEL_COLUMN], text)


def read_posts(fname, encoding='utf-8', ascii_fold=False):
    """Read every post from a CSV corpus on disk.

    Returns:
        List of LabeledPost tuples in file order.
    """
    logger = logging.getLogger('inferpost.corpus')
    with open(fname, encoding=encoding, newline='') as f:
        posts = list(post_generator(f, ascii_fold=ascii_fold))
    logger.info('Read {0} posts from {1}'.format(len(posts), fname))
    return posts
