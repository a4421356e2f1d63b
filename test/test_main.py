import contextlib
import io
import logging
import unittest

import main


class DemoEntryPoint(unittest.TestCase):
    def setUp(self):
        root = logging.getLogger()
        self._handlers = root.handlers[:]
        self._level = root.level

    def tearDown(self):
        root = logging.getLogger()
        root.handlers[:] = self._handlers
        root.setLevel(self._level)

    def run_main(self, *argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(io.StringIO()):
            code = main.main(list(argv))
        return code, out.getvalue()

    def test_shamir_demo(self):
        code, output = self.run_main("shamir")
        self.assertEqual(code, 0)
        self.assertIn("Reconstructed secret from 3 shares: 22773311", output)

    def test_feldman_demo(self):
        code, output = self.run_main("feldman", "-t", "2", "-n", "3")
        self.assertEqual(code, 0)
        self.assertIn("Tampered share 1 verification: Invalid", output)
        self.assertIn("Shares passing verification: [2, 3]", output)
        self.assertIn("123456789", output)

    def test_secret_too_large_exits_non_zero(self):
        code, _ = self.run_main("shamir", "--secret", str(2**521))
        self.assertEqual(code, 1)

    def test_bad_threshold_rejected(self):
        with self.assertRaises(SystemExit) as ctx:
            self.run_main("-t", "4", "-n", "3")
        self.assertEqual(ctx.exception.code, 2)


if __name__ == '__main__':
    unittest.main()
