# Copyright (C) 2013 Wesley Baugh
import logging

import pytest

from inferpost import main as m


TRAIN_DATA = """\
tag,content
math,x y
cs,y z
"""

TEST_DATA = """\
tag,content
math,y
cs,z z
math,q
"""


class TestMain(object):
    @pytest.fixture(autouse=True)
    def files(self, tmp_path):
        self.train_file = tmp_path / 'train.csv'
        self.train_file.write_text(TRAIN_DATA)
        self.test_file = tmp_path / 'test.csv'
        self.test_file.write_text(TEST_DATA)
        self.config_file = tmp_path / 'inferpost.ini'
        self.argv = [str(self.train_file), str(self.test_file),
                     '--config', str(self.config_file)]

    def test_output(self, capsys):
        assert m.main(self.argv) == 0
        out = capsys.readouterr().out
        expected = """\
trained on 2 examples

test data:
  correct = math, predicted = math, log-probability score = -0.693
  content = y

  correct = cs, predicted = cs, log-probability score = -0.693
  content = z z

  correct = math, predicted = math, log-probability score = -1.39
  content = q

performance: 3 / 3 posts predicted correctly
"""
        assert out == expected

    def test_debug_output(self, capsys):
        assert m.main(self.argv + ['--debug']) == 0
        out = capsys.readouterr().out
        expected = """\
training data:
  label = math, content = x y
  label = cs, content = y z
trained on 2 examples
vocabulary size = 3

classes:
  math, 1 examples, log-prior = -0.693
  cs, 1 examples, log-prior = -0.693
classifier parameters:
  math:x, count = 1, log-likelihood = 0
  math:y, count = 1, log-likelihood = 0
  cs:y, count = 1, log-likelihood = 0
  cs:z, count = 1, log-likelihood = 0

test data:
"""
        assert out.startswith(expected)
        assert out.endswith('performance: 3 / 3 posts predicted correctly\n')

    def test_metrics(self, capsys):
        assert m.main(self.argv + ['--metrics']) == 0
        out = capsys.readouterr().out
        assert 'confusion matrix:' in out
        assert '  math: precision = 1, recall = 1, f-measure = 1' in out
        assert 'average f-measure = 1' in out

    def test_precision_from_config(self, capsys):
        self.config_file.write_text('[classifier]\nprecision = 5\n\n'
                                    '[corpus]\nencoding = utf-8\n'
                                    'ascii_fold = false\n\n'
                                    '[logging]\nlevel = INFO\nfile =\n')
        assert m.main(self.argv) == 0
        out = capsys.readouterr().out
        assert 'log-probability score = -0.69315' in out

    def test_missing_train_file(self, tmp_path, capsys):
        missing = str(tmp_path / '__missing__.csv')
        argv = [missing, str(self.test_file),
                '--config', str(self.config_file)]
        assert m.main(argv) == 1
        out = capsys.readouterr().out
        assert out == 'Error opening file: {0}\n'.format(missing)

    def test_missing_test_file(self, tmp_path, capsys):
        missing = str(tmp_path / '__missing__.csv')
        argv = [str(self.train_file), missing,
                '--config', str(self.config_file)]
        assert m.main(argv) == 1
        out = capsys.readouterr().out
        assert out == 'Error opening file: {0}\n'.format(missing)

    def test_missing_column(self, capsys):
        self.train_file.write_text('label,content\nmath,x y\n')
        assert m.main(self.argv) == 1
        out = capsys.readouterr().out
        assert 'Missing column(s): tag' in out

    def test_empty_label(self, capsys):
        self.train_file.write_text('tag,content\n,x y\n')
        assert m.main(self.argv) == 1
        assert 'non-empty label' in capsys.readouterr().out

    def test_empty_training_set(self, capsys):
        self.train_file.write_text('tag,content\n')
        assert m.main(self.argv) == 1
        out = capsys.readouterr().out
        assert 'trained on 0 examples' in out
        assert 'untrained model' in out

    def test_partial_config(self, capsys):
        self.config_file.write_text('[classifier]\nprecision = 5\n')
        assert m.main(self.argv) == 0
        out = capsys.readouterr().out
        assert 'log-probability score = -0.69315' in out
        assert out.endswith('performance: 3 / 3 posts predicted correctly\n')

    def test_invalid_logging_level(self, capsys):
        self.config_file.write_text('[logging]\nlevel = verbose\n')
        assert m.main(self.argv) == 1
        out = capsys.readouterr().out
        expected = 'Error in configuration: Unknown logging level: verbose\n'
        assert out == expected

    def test_invalid_precision(self, capsys):
        self.config_file.write_text('[classifier]\nprecision = many\n')
        assert m.main(self.argv) == 1
        assert capsys.readouterr().out.startswith('Error in configuration:')

    def test_missing_config_notice(self, capsys):
        assert m.main(self.argv) == 0
        captured = capsys.readouterr()
        assert 'not found' in captured.err
        assert captured.out.startswith('trained on 2 examples\n')

    def test_invalid_encoding(self, capsys):
        self.train_file.write_bytes(b'tag,content\nmath,caf\xe9 x\n')
        assert m.main(self.argv) == 1
        out = capsys.readouterr().out
        assert out.startswith(
            'Error reading file: {0}: '.format(self.train_file))
        assert 'codec' in out

    def test_root_logger_configured(self):
        def installed():
            return [x for x in root.handlers if getattr(x, 'inferpost', False)]

        root = logging.getLogger('')
        level = root.level
        try:
            assert m.main(self.argv + ['--debug']) == 0
            assert len(installed()) == 1
            assert root.level == logging.DEBUG
            assert m.main(self.argv) == 0
            assert len(installed()) == 1
            assert root.level == logging.WARNING
        finally:
            for handler in installed():
                root.removeHandler(handler)
            root.setLevel(level)

    def test_usage(self, capsys):
        with pytest.raises(SystemExit) as e:
            m.main([str(self.train_file)])
        assert e.value.code == 2
        assert 'TRAIN_FILE TEST_FILE' in capsys.readouterr().err


def test_format_number():
    tests = [(-0.6931471805599453, 3, '-0.693'),
             (-1.3862943611198906, 3, '-1.39'),
             (0.0, 3, '0'),
             (-13.815510557964274, 3, '-13.8'),
             (-1234.5, 3, '-1.23e+03')]
    for value, precision, expected in tests:
        assert m.format_number(value, precision) == expected
