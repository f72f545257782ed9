import os

from abstractable import testing
from abstractable.utils import traceback_utils


def _raise_value_error():
    raise ValueError("Original message")


class TracebackUtilsTest(testing.TestCase):
    def test_toggle_filtering(self):
        # `TestCase.setUp` turns filtering off.
        self.assertFalse(traceback_utils.is_traceback_filtering_enabled())
        traceback_utils.enable_traceback_filtering()
        self.assertTrue(traceback_utils.is_traceback_filtering_enabled())
        traceback_utils.disable_traceback_filtering()
        self.assertFalse(traceback_utils.is_traceback_filtering_enabled())

    def test_include_frame(self):
        package_dir = os.path.dirname(os.path.dirname(traceback_utils.__file__))
        self.assertFalse(
            traceback_utils.include_frame(
                os.path.join(package_dir, "core", "gate.py")
            )
        )
        self.assertTrue(
            traceback_utils.include_frame(
                os.path.join(os.sep, "home", "user", "project", "app.py")
            )
        )

    def test_filter_traceback_reraises_same_exception(self):
        fn = traceback_utils.filter_traceback(_raise_value_error)
        self.assertEqual(fn.__name__, "_raise_value_error")
        for enabled in (True, False):
            if enabled:
                traceback_utils.enable_traceback_filtering()
            else:
                traceback_utils.disable_traceback_filtering()
            with self.assertRaisesRegex(ValueError, "Original message"):
                fn()

    def test_filter_traceback_passes_results_through(self):
        traceback_utils.enable_traceback_filtering()
        fn = traceback_utils.filter_traceback(lambda x, y=1: x + y)
        self.assertEqual(fn(2, y=3), 5)

    def test_filtered_traceback_keeps_a_frame(self):
        try:
            _raise_value_error()
        except ValueError as e:
            tb = traceback_utils._process_traceback_frames(e.__traceback__)
        # Every frame lives in the package here, the innermost is kept.
        self.assertIsNotNone(tb)
        self.assertIsNone(tb.tb_next)
