import unittest
import logging
import os
import tempfile

from pystrapdown.logger import (
    LogLevel, ColoredFormatter, setup_logger, get_logger, LogContext,
    LoggerConfig, setup_logger_from_config, ROOT_LOGGER_NAME
)


class TestSetupLogger(unittest.TestCase):

    def setUp(self):
        self.name = 'pystrapdown.test_logger'

    def tearDown(self):
        logger = logging.getLogger(self.name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)

    def test_console_handler(self):
        logger = setup_logger(self.name, level='DEBUG')
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(len(logger.handlers), 1)
        self.assertIsInstance(logger.handlers[0].formatter, ColoredFormatter)

    def test_handlers_replaced(self):
        setup_logger(self.name)
        logger = setup_logger(self.name, level='WARNING')
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.WARNING)

    def test_file_handler(self):
        fd, log_file = tempfile.mkstemp(suffix='.log')
        os.close(fd)
        try:
            logger = setup_logger(self.name, level='INFO', log_file=log_file, console=False)
            logger.info("navigation step")
            for handler in logger.handlers:
                handler.flush()
            with open(log_file) as f:
                self.assertIn("navigation step", f.read())
        finally:
            self.tearDown()
            os.remove(log_file)

    def test_trace_level(self):
        logger = setup_logger(self.name, level='TRACE', console=False)
        self.assertEqual(logger.level, LogLevel.TRACE.value)
        with self.assertLogs(self.name, level=LogLevel.TRACE.value) as cm:
            logger.trace("fine detail")
        self.assertIn("fine detail", cm.output[0])

    def test_unknown_level(self):
        with self.assertRaises(ValueError):
            setup_logger(self.name, level='VERBOSE')

    def test_get_logger(self):
        self.assertIs(get_logger(self.name), logging.getLogger(self.name))


class TestColoredFormatter(unittest.TestCase):

    def test_levelname_restored(self):
        formatter = ColoredFormatter('%(levelname)s %(message)s')
        record = logging.LogRecord('x', logging.ERROR, __file__, 1, "failed", None, None)
        output = formatter.format(record)
        self.assertIn('\033[31m', output)
        self.assertEqual(record.levelname, 'ERROR')


class TestLogContext(unittest.TestCase):

    def test_temporary_level(self):
        logger = logging.getLogger('pystrapdown.test_context')
        logger.setLevel(logging.WARNING)
        with LogContext(logger, 'DEBUG') as context_logger:
            self.assertIs(context_logger, logger)
            self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(logger.level, logging.WARNING)

    def test_level_restored_on_error(self):
        logger = logging.getLogger('pystrapdown.test_context')
        logger.setLevel(logging.INFO)
        with self.assertRaises(RuntimeError):
            with LogContext(logger, 'ERROR'):
                raise RuntimeError("boom")
        self.assertEqual(logger.level, logging.INFO)


class TestLoggerConfig(unittest.TestCase):

    def tearDown(self):
        for name in (ROOT_LOGGER_NAME, 'pystrapdown.navigation.trajectory'):
            logger = logging.getLogger(name)
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()
            logger.setLevel(logging.NOTSET)

    def test_configure_from_dict(self):
        config = LoggerConfig()
        config.configure_from_dict({
            'default_level': 'WARNING',
            'console': False,
            'module_levels': {'pystrapdown.navigation.trajectory': 'DEBUG'}
        })
        self.assertEqual(config.default_level, 'WARNING')
        self.assertFalse(config.console)
        self.assertEqual(config.get_level_for_module('pystrapdown.navigation.trajectory'), 'DEBUG')
        self.assertEqual(config.get_level_for_module('pystrapdown.io.imu_reader'), 'WARNING')

    def test_invalid_default_level(self):
        with self.assertRaises(ValueError):
            LoggerConfig().set_default_level('LOUD')

    def test_setup_logger_from_config(self):
        setup_logger_from_config({
            'default_level': 'ERROR',
            'console': False,
            'module_levels': {'pystrapdown.navigation.trajectory': 'DEBUG'}
        })
        self.assertEqual(logging.getLogger(ROOT_LOGGER_NAME).level, logging.ERROR)
        self.assertEqual(logging.getLogger('pystrapdown.navigation.trajectory').level, logging.DEBUG)


if __name__ == '__main__':
    unittest.main()
