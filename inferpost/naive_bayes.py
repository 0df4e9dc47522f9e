# Copyright (C) 2013 Wesley Baugh
"""Naive Bayes frequency model for text classification."""
import logging
from collections import defaultdict

from inferpost.nlp import unique_words


class ModelBuilder(object):
    """Accumulates document frequencies from labeled posts.

    Each post contributes its set of unique words, so a word repeated
    within a single post is only counted once for that post.

    Attributes:
        labels: List of class labels in the order they were first seen.
    """
    def __init__(self, *posts):
        """Create a new ModelBuilder.
        Args:
            posts: Optional label-content pairs for training.
        """
        self.labels = []
        self._total_posts = 0
        # Number of posts containing a word.
        self._word_count = defaultdict(int)
        # Number of posts with a label.
        self._label_count = defaultdict(int)
        # Number of posts with a label containing a word.
        self._joint_count = defaultdict(lambda: defaultdict(int))
        if posts:
            self.add(*posts)

    def add(self, *posts):
        """Train on label-content pair(s).

        Args:
            posts: Tuple of (label, content) pair(s). The label must be
                a non-empty string. The content is an untokenized
                string and may be empty.
        """
        for label, content in posts:
            if not isinstance(label, str) or not label:
                raise ValueError('Posts must carry a non-empty label: '
                                 '{0!r}'.format(label))
            words = unique_words(content)
            if label not in self._label_count:
                self.labels.append(label)
            self._label_count[label] += 1
            for word in words:
                self._word_count[word] += 1
                self._joint_count[label][word] += 1
            self._total_posts += 1

    def build(self):
        """Freeze the accumulated counts into a FrequencyModel."""
        return FrequencyModel(
            total_posts=self._total_posts,
            word_count=self._word_count,
            label_count=self._label_count,
            joint_count=self._joint_count,
            labels=self.labels)


class FrequencyModel(object):
    """Immutable document frequencies gathered from a training corpus.

    Lookups for a word or label that was never seen return zero and do
    not create an entry.

    Attributes:
        total_posts: Number of training posts.
        vocab_size: Number of distinct words across all training posts.
        labels: Tuple of class labels in the order they were first seen
            during training. Prediction breaks ties using this order.
        vocabulary: Frozenset of every word seen in training.
    """
    __slots__ = ('_total_posts', '_word_count', '_label_count',
                 '_joint_count', '_labels', '_frozen')

    def __init__(self, total_posts, word_count, label_count, joint_count,
                 labels):
        self._total_posts = total_posts
        self._word_count = dict(word_count)
        self._label_count = dict(label_count)
        self._joint_count = {label: dict(joint_count.get(label, {}))
                             for label in labels}
        self._labels = tuple(labels)
        self._frozen = True

    def __setattr__(self, name, value):
        if getattr(self, '_frozen', False):
            raise AttributeError('FrequencyModel is read-only')
        super(FrequencyModel, self).__setattr__(name, value)

    def __repr__(self):
        return '<FrequencyModel posts={0} vocab={1} labels={2}>'.format(
            self.total_posts, self.vocab_size, len(self.labels))

    @property
    def total_posts(self):
        return self._total_posts

    @property
    def vocab_size(self):
        return len(self._word_count)

    @property
    def labels(self):
        return self._labels

    @property
    def vocabulary(self):
        return frozenset(self._word_count)

    def word_count(self, word):
        """Number of training posts containing `word`."""
        return self._word_count.get(word, 0)

    def label_count(self, label):
        """Number of training posts labeled `label`."""
        return self._label_count.get(label, 0)

    def joint_count(self, label, word):
        """Number of training posts labeled `label` containing `word`."""
        return self._joint_count.get(label, {}).get(word, 0)

    def label_counts(self):
        """List of (label, count) pairs in label order."""
        return [(label, self._label_count[label]) for label in self._labels]

    def joint_counts(self, label):
        """List of (word, count) pairs seen with `label`, sorted by word."""
        return sorted(self._joint_count.get(label, {}).items())


def train(posts):
    """Build a FrequencyModel with a single pass over labeled posts.

    Args:
        posts: Iterable of (label, content) pairs, such as `LabeledPost`
            tuples read from a corpus.

    Returns:
        The trained FrequencyModel.
    """
    logger = logging.getLogger('inferpost.naive_bayes')
    builder = ModelBuilder()
    for post in posts:
        builder.add(post)
    model = builder.build()
    logger.debug('Trained on {0} posts: {1} labels, vocabulary size {2}'
                 .format(model.total_posts, len(model.labels),
                         model.vocab_size))
    return model
