# Utilities package
# Import directly where needed:
#   - from hello_redux.utils.scheduling import QtTimerScheduler
#   - from hello_redux.utils.thread_safety import ensure_main_thread

__all__ = []
