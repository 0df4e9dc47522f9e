# Copyright (C) 2013 Wesley Baugh
"""Natural language processing (NLP) utility functions."""


def unique_words(document, tokenizer=str.split):
    """Set of the distinct whitespace-delimited words in a document.

    Args:
        document: An untokenized document string.
        tokenizer: Function that tokenizes a document. (default
            `str.split`, which splits on runs of whitespace)

    Returns:
        A frozenset of the words in `document`. A word appearing more
        than once is only present once; an empty or all-whitespace
        document has no words.
            Example:
                unique_words('y x y') == frozenset(['x', 'y'])
    """
    if not isinstance(document, str):
        raise TypeError('Documents must be an untokenized string')
    return frozenset(tokenizer(document))
