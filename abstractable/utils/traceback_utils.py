# Copyright 2021 The TensorFlow Authors. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================
"""Utilities related to abstractable exception stack trace prettifying."""

import functools
import os
import traceback
import types

from abstractable import global_state
from abstractable.api_export import abstractable_export

_EXCLUDED_PATHS = (os.path.abspath(os.path.join(__file__, "..", "..")),)


@abstractable_export("abstractable.config.enable_traceback_filtering")
def enable_traceback_filtering():
    """Turn on traceback filtering.

    Raw abstractable tracebacks (also known as stack traces)
    involve many internal frames, which can be
    challenging to read through, while not being actionable for end users.
    By default, abstractable filters internal frames in most exceptions that
    it raises, to keep traceback short, readable, and focused on what's
    actionable for you (your own code).

    See also `abstractable.config.disable_traceback_filtering()` and
    `abstractable.config.is_traceback_filtering_enabled()`.
    """
    global_state.set_global_setting("traceback_filtering", True)


@abstractable_export("abstractable.config.disable_traceback_filtering")
def disable_traceback_filtering():
    """Turn off traceback filtering.

    See also `abstractable.config.enable_traceback_filtering()` and
    `abstractable.config.is_traceback_filtering_enabled()`.
    """
    global_state.set_global_setting("traceback_filtering", False)


@abstractable_export("abstractable.config.is_traceback_filtering_enabled")
def is_traceback_filtering_enabled():
    """Check if traceback filtering is enabled.

    Returns:
        Boolean, `True` if traceback filtering is enabled,
        and `False` otherwise.
    """
    return global_state.get_global_setting("traceback_filtering", True)


def include_frame(fname):
    for exclusion in _EXCLUDED_PATHS:
        if exclusion in fname:
            return False
    return True


def _process_traceback_frames(tb):
    """Iterate through traceback frames and return a new, filtered traceback."""
    last_tb = None
    tb_list = list(traceback.walk_tb(tb))
    for f, line_no in reversed(tb_list):
        if include_frame(f.f_code.co_filename):
            last_tb = types.TracebackType(last_tb, f, f.f_lasti, line_no)
    if last_tb is None and tb_list:
        # If no frames were kept during filtering, create a new traceback
        # from the outermost function.
        f, line_no = tb_list[-1]
        last_tb = types.TracebackType(last_tb, f, f.f_lasti, line_no)
    return last_tb


def filter_traceback(fn):
    """Filter out abstractable-internal traceback frames in exceptions
    raised by fn."""

    @functools.wraps(fn)
    def error_handler(*args, **kwargs):
        if not is_traceback_filtering_enabled():
            return fn(*args, **kwargs)

        filtered_tb = None
        try:
            return fn(*args, **kwargs)
        except Exception as e:
            filtered_tb = _process_traceback_frames(e.__traceback__)
            # To get the full stack trace, call:
            # `abstractable.config.disable_traceback_filtering()`
            raise e.with_traceback(filtered_tb) from None
        finally:
            del filtered_tb

    return error_handler
