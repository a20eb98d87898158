import contextlib
import io
import pathlib
import runpy
import threading
import unittest

import numpy as np

import mlprim
import mlprim.functions as F
from mlprim.core import Config, as_array, check_lengths


class TestConfig(unittest.TestCase):
    def test_using_config_restores(self):
        self.assertFalse(Config.validate_inputs.get())
        with mlprim.using_config("validate_inputs", True):
            self.assertTrue(Config.validate_inputs.get())
        self.assertFalse(Config.validate_inputs.get())

    def test_restores_on_error(self):
        with self.assertRaises(RuntimeError):
            with mlprim.unstable_softmax():
                self.assertFalse(Config.stable_softmax.get())
                raise RuntimeError
        self.assertTrue(Config.stable_softmax.get())

    def test_flags_are_per_thread(self):
        entered = threading.Event()
        done = threading.Event()
        results = {}

        def validating():
            with mlprim.validate_inputs():
                entered.set()
                done.wait(5)

        def default_policy():
            entered.wait(5)
            try:
                with self.assertLogs("mlprim.functions.loss", level="WARNING"):
                    results["ce"] = F.cross_entropy([1.0], [0.0])
            finally:
                done.set()

        threads = [threading.Thread(target=validating), threading.Thread(target=default_policy)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(10)
        self.assertTrue(np.isinf(results["ce"]))
        self.assertFalse(Config.validate_inputs.get())


class TestAsArray(unittest.TestCase):
    def test_dtypes(self):
        self.assertEqual(as_array([1, 2]).dtype, np.float64)
        self.assertEqual(as_array(np.ones(2, dtype=np.float32)).dtype, np.float32)
        self.assertEqual(as_array([True, False]).dtype, np.float64)

    def test_read_only_view(self):
        x = np.ones(3)
        y = as_array(x)
        self.assertFalse(y.flags.writeable)
        self.assertTrue(x.flags.writeable)

    def test_check_lengths(self):
        self.assertEqual(check_lengths([1], [2], [3]), 1)
        with self.assertRaises(mlprim.LengthMismatch):
            check_lengths([1], [2, 3], [4])

    def test_error_hierarchy(self):
        for cls in (mlprim.LengthMismatch, mlprim.DomainViolation, mlprim.InvalidParameter):
            self.assertTrue(issubclass(cls, mlprim.MlprimError))
            self.assertTrue(issubclass(cls, ValueError))


class TestDemo(unittest.TestCase):
    def test_demo_runs(self):
        path = pathlib.Path(__file__).resolve().parents[1] / "examples" / "demo.py"
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            runpy.run_path(str(path), run_name="__main__")
        values = dict(line.split(" = ", 1) for line in out.getvalue().splitlines() if " = " in line)
        self.assertAlmostEqual(float(values["sigmoid(2)"]), 0.8807970779778823)
        self.assertAlmostEqual(float(values["L1"]), 1.7)
        self.assertIn("Triplet Ranking", values)
