# Copyright (C) 2013 Wesley Baugh
"""Train a post classifier and report its performance on a test set."""
import argparse
import configparser
import logging
import sys

from inferpost.classify import EmptyModelError, PostNB, evaluate, performance
from inferpost.config import CONFIG_FNAME, load_config
from inferpost.corpus.posts import read_posts
from inferpost.naive_bayes import train


def setup_logging(config, debug=False):
    if debug:
        log_level = logging.DEBUG
    else:
        level = config.get('logging', 'level')
        log_level = logging.getLevelName(level.upper())
        if not isinstance(log_level, int):
            raise ValueError('Unknown logging level: {0}'.format(level))

    logger = logging.getLogger('')  # Root logger.
    logger.setLevel(log_level)
    # Replace handlers left by an earlier call.
    for handler in list(logger.handlers):
        if getattr(handler, 'inferpost', False):
            logger.removeHandler(handler)
            handler.close()

    console = logging.StreamHandler()
    console.setLevel(log_level)
    console_formatter = logging.Formatter(
        fmt='%(asctime)s|%(levelname)s|%(name)s|%(message)s',
        datefmt='%m-%d %H:%M:%S')
    console.setFormatter(console_formatter)
    console.inferpost = True
    logger.addHandler(console)

    log_file = config.get('logging', 'file')
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_formatter = logging.Formatter(
            fmt='%(asctime)s.%(msecs)d\t%(levelname)s\t%(name)s\t%(message)s',
            datefmt='%Y-%m-%d %H:%M:%S')
        file_handler.setFormatter(file_formatter)
        file_handler.inferpost = True
        logger.addHandler(file_handler)


def format_number(value, precision):
    """Format a number with `precision` significant digits."""
    return '{0:.{1}g}'.format(value, precision)


def print_training_data(posts):
    print('training data:')
    for post in posts:
        print('  label = {0}, content = {1}'.format(post.label, post.text))


def print_debug_data(classifier, precision):
    """Print the classes and the per-word parameters of the classifier."""
    model = classifier.model
    print('classes:')
    for label, count in model.label_counts():
        print('  {0}, {1} examples, log-prior = {2}'.format(
            label, count,
            format_number(classifier.log_prior(label), precision)))

    print('classifier parameters:')
    for label in model.labels:
        for word, count in model.joint_counts(label):
            likelihood = classifier.log_likelihood(word, label)
            print('  {0}:{1}, count = {2}, log-likelihood = {3}'.format(
                label, word, count, format_number(likelihood, precision)))
    print()


def print_metrics(reference, test, precision):
    metrics = performance(reference, test)
    print('confusion matrix:')
    print(metrics['confusionmatrix'].pretty_format())
    for label in sorted(set(reference + test)):
        print('  {0}: precision = {1}, recall = {2}, f-measure = {3}'.format(
            label,
            format_number(metrics['precision-{0}'.format(label)], precision),
            format_number(metrics['recall-{0}'.format(label)], precision),
            format_number(metrics['f-{0}'.format(label)], precision)))
    print('average f-measure = {0}'.format(
        format_number(metrics['average f_measure'], precision)))


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='inferpost',
        description='Train a Naive Bayes post classifier and test it.')
    parser.add_argument('train_file', metavar='TRAIN_FILE')
    parser.add_argument('test_file', metavar='TEST_FILE')
    parser.add_argument('--debug', action='store_true',
                        help='print the training data and model parameters')
    parser.add_argument('--metrics', action='store_true',
                        help='print a confusion matrix and per-label scores')
    parser.add_argument('--config',
                        help='configuration file (default: {0} if it '
                             'exists)'.format(CONFIG_FNAME))
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        setup_logging(config, debug=args.debug)
        precision = config.getint('classifier', 'precision')
        encoding = config.get('corpus', 'encoding')
        ascii_fold = config.getboolean('corpus', 'ascii_fold')
    except (configparser.Error, ValueError) as e:
        print('Error in configuration: {0}'.format(e))
        return 1

    logger = logging.getLogger('inferpost.main')

    corpora = []
    for fname in (args.train_file, args.test_file):
        try:
            corpora.append(read_posts(fname, encoding=encoding,
                                      ascii_fold=ascii_fold))
        except OSError as e:
            logger.debug('Could not open {0}: {1}'.format(fname, e))
            print('Error opening file: {0}'.format(fname))
            return 1
        except (LookupError, ValueError) as e:
            # Missing columns, undecodable bytes or an unknown encoding.
            print('Error reading file: {0}: {1}'.format(fname, e))
            return 1
    train_posts, test_posts = corpora

    if args.debug:
        print_training_data(train_posts)

    try:
        model = train(train_posts)
    except ValueError as e:
        print('Error reading file: {0}: {1}'.format(args.train_file, e))
        return 1
    classifier = PostNB(model)

    print('trained on {0} examples'.format(model.total_posts))
    if args.debug:
        print('vocabulary size = {0}'.format(model.vocab_size))
    print()

    if args.debug:
        print_debug_data(classifier, precision)

    def report(result):
        print('  correct = {0}, predicted = {1}, '
              'log-probability score = {2}'.format(
                  result.correct, result.predicted,
                  format_number(result.score, precision)))
        print('  content = {0}'.format(result.content))
        print()
        reference.append(result.correct)
        predicted.append(result.predicted)

    reference, predicted = [], []
    print('test data:')
    try:
        result = evaluate(classifier, test_posts, report=report)
    except EmptyModelError as e:
        print('Error: {0}'.format(e))
        return 1
    print('performance: {0} / {1} posts predicted correctly'.format(
        result.correct, result.total))
    logger.info('Accuracy: {0:.4f}'.format(result.accuracy))

    if args.metrics and reference:
        print_metrics(reference, predicted, precision)

    return 0


if __name__ == '__main__':
    sys.exit(main())
