# -*- coding: utf-8 -*-
"""Test cases for logging helpers."""
import logging
import os
import unittest
from unittest import mock

from sudoku.common.constants import LOG_LEVEL_ENV_VAR
from sudoku.utils.log import NewLineFormatter, get_logger, package_handlers


class TestGetLogger(unittest.TestCase):
    def setUp(self):
        # start every test from an unconfigured package logger
        self.root = logging.getLogger("sudoku")
        self.saved_handlers = package_handlers(self.root)
        for handler in self.saved_handlers:
            self.root.removeHandler(handler)

    def tearDown(self):
        for handler in package_handlers(self.root):
            self.root.removeHandler(handler)
        for handler in self.saved_handlers:
            self.root.addHandler(handler)

    def test_loggers_share_package_handler(self):
        root = get_logger()
        self.assertIs(root, self.root)
        self.assertEqual(len(package_handlers(root)), 1)
        self.assertFalse(root.propagate)

        child = get_logger("sudoku.solver.solver")
        self.assertEqual(child.name, "sudoku.solver.solver")
        self.assertEqual(get_logger("bench").name, "sudoku.bench")

        get_logger("other")
        self.assertEqual(len(package_handlers(root)), 1)

    def test_foreign_handlers_do_not_count_as_configured(self):
        foreign = logging.StreamHandler()
        self.root.addHandler(foreign)
        try:
            get_logger()
            self.assertEqual(len(package_handlers(self.root)), 1)
            self.assertNotIn(foreign, package_handlers(self.root))
        finally:
            self.root.removeHandler(foreign)

    def test_level_argument_sets_package_level(self):
        get_logger(level="debug")
        self.assertEqual(self.root.level, logging.DEBUG)
        self.assertTrue(get_logger("sudoku.generator").isEnabledFor(logging.DEBUG))
        get_logger(level="WARNING")
        self.assertFalse(get_logger("sudoku.generator").isEnabledFor(logging.INFO))

    def test_invalid_level_raises(self):
        with self.assertRaises(ValueError):
            get_logger(level="loud")

    def test_level_from_environment(self):
        with mock.patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: "error"}):
            logger = get_logger()
        self.assertEqual(logger.level, logging.ERROR)


class TestNewLineFormatter(unittest.TestCase):
    def test_multiline_messages_keep_prefix(self):
        formatter = NewLineFormatter("%(levelname)s] %(message)s")
        record = logging.LogRecord("sudoku", logging.INFO, __file__, 1, "a\nb", None, None)
        self.assertEqual(formatter.format(record), "INFO] a\r\nINFO] b")
