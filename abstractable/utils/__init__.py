from abstractable.global_state import clear_session
from abstractable.utils.traceback_utils import disable_traceback_filtering
from abstractable.utils.traceback_utils import enable_traceback_filtering
from abstractable.utils.traceback_utils import is_traceback_filtering_enabled
