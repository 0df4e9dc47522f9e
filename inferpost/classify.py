# Copyright (C) 2013 Wesley Baugh
"""Tools for text classification."""
import abc
import logging
import math
from collections import OrderedDict, namedtuple

from nltk.metrics import ConfusionMatrix

from inferpost.nlp import unique_words


class EmptyModelError(ValueError):
    """Raised when predicting with a model that has no labels."""


class Classifier(object, metaclass=abc.ABCMeta):
    """Abstract base class for classifiers."""
    Prediction = namedtuple('Prediction', 'label score')

    @abc.abstractmethod
    def classify(self, document):
        """Get the most probable class label for a document."""


class PostNB(Classifier):
    """Naive Bayes over the set of unique words in a post.

    Scores are unnormalized log-probabilities. They can be compared
    across labels for the same post, but are not confidences.

    Attributes:
        model: The trained `FrequencyModel`. It is only ever read.
    """
    def __init__(self, model):
        self.model = model

    @property
    def labels(self):
        """Tuple of class labels in training order."""
        return self.model.labels

    def _check_label(self, label):
        if self.model.label_count(label) == 0:
            raise KeyError(label)

    def log_prior(self, label):
        """Log prior probability of a label.

        Args:
            label: The target class label.

        Returns:
            The log of the number of training posts that had the target
            `label`, divided by the total number of training posts.
        """
        self._check_label(label)
        return math.log(self.model.label_count(label) /
                        self.model.total_posts)

    def log_likelihood(self, word, label):
        """Log conditional probability for a word given a label.

        Args:
            word: The target word.
            label: The target class label.

        Returns:
            If `word` was seen in training but never with `label`, the
            log of the fraction of all posts containing `word`. If it
            was never seen at all, the log of one over the number of
            training posts. Otherwise the log of the fraction of posts
            with `label` that contain `word`.
        """
        self._check_label(label)
        model = self.model
        joint = model.joint_count(label, word)
        seen = model.word_count(word)
        # Order matters: a zero joint count must never reach the last case.
        if joint == 0 and seen != 0:
            return math.log(seen / model.total_posts)
        elif seen == 0:
            return math.log(1 / model.total_posts)
        else:
            return math.log(joint / model.label_count(label))

    def log_score(self, document, label):
        """Log-probability score of a document given a label.

        Args:
            document: An untokenized post string.
            label: The target class label.

        Returns:
            The log prior of `label` plus the log likelihood of each
            unique word in the `document`.
        """
        score = self.log_prior(label)
        # Summed in sorted order so the float result is reproducible.
        for word in sorted(unique_words(document)):
            score += self.log_likelihood(word, label)
        return score

    def score_all(self, document):
        """Log-probability score of a document for all labels.

        Returns:
            An OrderedDict mapping class labels, in training order, to
            the log-probability score of the `document`.
        """
        if not self.labels:
            raise EmptyModelError('Cannot score with an untrained model')
        return OrderedDict((label, self.log_score(document, label))
                           for label in self.labels)

    def classify(self, document):
        """Get the highest scoring class label for a document.

        Args:
            document: An untokenized post string.

        Returns:
            A namedtuple of the best `label` and its `score`. When
            labels tie, the one seen first during training wins.
            For example:

            As tuple:
                ('math', -0.69)
            As namedtuple:
                Prediction(label='math', score=-0.69)
        """
        scores = self.score_all(document)
        best = None
        for label, score in scores.items():
            if best is None or score > scores[best]:
                best = label
        return self.Prediction(best, scores[best])


PostResult = namedtuple('PostResult', 'correct predicted score content')


class Performance(namedtuple('Performance', 'correct total')):
    """Number of correct predictions out of the total."""
    __slots__ = ()

    @property
    def accuracy(self):
        if not self.total:
            return 0.0
        return self.correct / self.total


def log_prior(model, label):
    return PostNB(model).log_prior(label)


def log_likelihood(model, label, word):
    return PostNB(model).log_likelihood(word, label)


def log_score(model, label, content):
    return PostNB(model).log_score(content, label)


def predict(model, content):
    return PostNB(model).classify(content)


def iter_results(classifier, posts):
    """Classify each post and yield a PostResult for it.

    Args:
        classifier: A trained `Classifier`.
        posts: Iterable of (label, content) pairs.
    """
    for label, content in posts:
        prediction = classifier.classify(content)
        yield PostResult(label, prediction.label, prediction.score, content)


def evaluate(classifier, posts, report=None):
    """Count how many posts are assigned their correct label.

    Args:
        classifier: A trained `Classifier`.
        posts: Iterable of (label, content) pairs.
        report: Optional callable given each `PostResult` as it is
            produced, for display.

    Returns:
        Performance namedtuple of (correct, total).
    """
    logger = logging.getLogger('inferpost.classify')
    correct = total = 0
    for result in iter_results(classifier, posts):
        if report is not None:
            report(result)
        if result.correct == result.predicted:
            correct += 1
        total += 1
    logger.debug('Evaluated {0} posts, {1} correct'.format(total, correct))
    return Performance(correct, total)


def _label_totals(matrix, labels):
    """Yield (label, true positives, reference total, predicted total)."""
    for label in labels:
        reference_total = sum(matrix[label, x] for x in labels)
        predicted_total = sum(matrix[x, label] for x in labels)
        yield label, matrix[label, label], reference_total, predicted_total


def performance(reference, test, beta=1):
    """Compute various performance metrics.

    Args:
        reference: An ordered list of correct class labels.
        test: A corresponding ordered list of class labels to evaluate.
        beta: A float parameter for F-measure (default = 1).

    Returns:
        A dictionary with an entry for each metric: the
        'confusionmatrix', the 'accuracy', and for each label the
        'recall-', 'precision-' and 'f-' value, as well as their
        'average' and 'weighted' (by reference count) versions.
    """
    if not reference:
        raise ValueError('Cannot compute performance of zero labels')
    metrics = dict()

    # Everything can be computed from a confusion matrix.
    matrix = ConfusionMatrix(reference, test)
    labels = sorted(set(reference) | set(test))
    total = len(reference)
    correct = sum(x == y for x, y in zip(reference, test))
    metrics['confusionmatrix'] = matrix
    metrics['accuracy'] = correct / total

    per_label = {'recall': {}, 'precision': {}, 'f': {}}
    weights = {}
    totals = _label_totals(matrix, labels)
    for label, true_positive, actual, predicted in totals:
        weights[label] = actual
        # Nothing to find, or nothing predicted, counts as perfect.
        if actual == 0:
            recall = 1
        else:
            recall = true_positive / actual
        if predicted == 0:
            precision = 1
        else:
            precision = true_positive / predicted
        denom = (beta ** 2) * precision + recall
        if denom > 0:
            f_measure = (1 + beta ** 2) * precision * recall / denom
        else:
            f_measure = 0
        per_label['recall'][label] = recall
        per_label['precision'][label] = precision
        per_label['f'][label] = f_measure

    for name, values in per_label.items():
        for label, value in values.items():
            metrics['{0}-{1}'.format(name, label)] = value
        average = sum(values.values()) / len(values)
        weighted = sum(values[x] * weights[x] for x in values) / total
        if name == 'f':
            name = 'f_measure'
        metrics['average {0}'.format(name)] = average
        metrics['weighted {0}'.format(name)] = weighted

    return metrics
