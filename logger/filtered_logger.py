from enum import Enum

from env_utils import parse_bool_env


class LogChannel(Enum):
    GLOBAL = "GLOBAL"
    PLANNER = "PLANNER"
    GPU = "GPU"


class LogLevel(Enum):
    INFO = "INFO"
    WARNING = "WARN"
    ERROR = "ERROR"
    DEBUG = "DEBUG"


class FilteredLogger:
    def __init__(self):
        self.extreme_debug = parse_bool_env('EXTREME_DEBUG', '0')
        self.planner_debug = parse_bool_env('PLANNER_DEBUG_LOGS', '0')
        self.gpu_debug = parse_bool_env('GPU_DEBUG_LOGS', '0')

    def configure(self, *, extreme_debug=None, planner_debug=None, gpu_debug=None):
        if extreme_debug is not None:
            self.extreme_debug = extreme_debug
        if planner_debug is not None:
            self.planner_debug = planner_debug
        if gpu_debug is not None:
            self.gpu_debug = gpu_debug

    def should_log_debug(self, channel):
        if channel == LogChannel.GLOBAL:
            return self.extreme_debug or self.planner_debug or self.gpu_debug
        if channel == LogChannel.PLANNER:
            return self.extreme_debug or self.planner_debug
        if channel == LogChannel.GPU:
            return self.extreme_debug or self.gpu_debug
        return False

    def _print(self, level, channel, message):
        prefix = f"[{level.value}]"
        channel_tag = f"[{channel.value}]"
        for line in str(message).splitlines():
            print(f"{prefix} {channel_tag} {line}")

    def info(self, channel, message):
        self._print(LogLevel.INFO, channel, message)

    def warning(self, channel, message):
        self._print(LogLevel.WARNING, channel, message)

    def error(self, channel, message):
        self._print(LogLevel.ERROR, channel, message)

    def debug(self, channel, message):
        if not self.should_log_debug(channel):
            return
        self._print(LogLevel.DEBUG, channel, message)


_shared_logger = FilteredLogger()


def configure_logger(**kwargs):
    _shared_logger.configure(**kwargs)


def should_log_debug(channel):
    return _shared_logger.should_log_debug(channel)


def info(channel, message):
    _shared_logger.info(channel, message)


def warning(channel, message):
    _shared_logger.warning(channel, message)


def error(channel, message):
    _shared_logger.error(channel, message)


def debug(channel, message):
    _shared_logger.debug(channel, message)
