import logging
import os
import unittest
import warnings
from unittest import mock

import numpy as np

import cachematrix
from cachematrix._internal.runtime import Runtime


class TestRuntimeSettings(unittest.TestCase):
    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            rt = Runtime()
            self.assertEqual(rt.log_level(), logging.INFO)
            self.assertTrue(rt.warn_on_param_mismatch())

    def test_level_by_name_and_number(self):
        with mock.patch.dict(os.environ, {"CACHEMATRIX_LOG_LEVEL": "debug"}):
            self.assertEqual(Runtime().log_level(), logging.DEBUG)
        with mock.patch.dict(os.environ, {"CACHEMATRIX_LOG_LEVEL": "25"}):
            self.assertEqual(Runtime().log_level(), 25)

    def test_unknown_level_falls_back_to_default(self):
        with mock.patch.dict(os.environ, {"CACHEMATRIX_LOG_LEVEL": "chatty"}):
            self.assertEqual(Runtime().log_level(), logging.INFO)

    def test_warn_params_disabled(self):
        for token in ("0", "false", "No", " off "):
            with mock.patch.dict(os.environ, {"CACHEMATRIX_WARN_PARAMS": token}):
                self.assertFalse(Runtime().warn_on_param_mismatch())

    def test_values_are_cached_until_reset(self):
        rt = Runtime()
        with mock.patch.dict(os.environ, {"CACHEMATRIX_LOG_LEVEL": "WARNING"}):
            self.assertEqual(rt.log_level(), logging.WARNING)
        with mock.patch.dict(os.environ, {"CACHEMATRIX_LOG_LEVEL": "ERROR"}):
            self.assertEqual(rt.log_level(), logging.WARNING)
            rt.reset()
            self.assertEqual(rt.log_level(), logging.ERROR)

    def test_custom_prefix(self):
        with mock.patch.dict(os.environ, {"MYAPP_LOG_LEVEL": "ERROR"}):
            self.assertEqual(Runtime(env_prefix="MYAPP").log_level(), logging.ERROR)


class TestRuntimeWiring(unittest.TestCase):
    def tearDown(self):
        cachematrix.reload_settings()

    def test_cache_hit_logged_at_configured_level(self):
        m = cachematrix.CachedMatrix(np.eye(2))
        cachematrix.compute_or_fetch_inverse(m)

        with mock.patch.dict(os.environ, {"CACHEMATRIX_LOG_LEVEL": "WARNING"}):
            cachematrix.reload_settings()
            with self.assertLogs("cachematrix", level="WARNING") as captured:
                cachematrix.compute_or_fetch_inverse(m)

        self.assertEqual(captured.records[0].levelno, logging.WARNING)

    def test_param_warning_can_be_disabled(self):
        m = cachematrix.CachedMatrix(np.eye(2))
        cachematrix.compute_or_fetch_inverse(m, [1.0, 0.0])

        with mock.patch.dict(os.environ, {"CACHEMATRIX_WARN_PARAMS": "off"}):
            cachematrix.reload_settings()
            with warnings.catch_warnings(record=True) as w:
                warnings.simplefilter("always")
                with self.assertLogs("cachematrix", level="INFO"):
                    cachematrix.compute_or_fetch_inverse(m, [0.0, 1.0])

        self.assertEqual([item for item in w if issubclass(item.category, cachematrix.CacheMatrixWarning)], [])


if __name__ == "__main__":
    unittest.main()
