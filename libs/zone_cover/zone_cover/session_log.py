# USAGE:
# from zone_cover import session_log as slog
# slog.config(slog.Profile(slog.Profile.MODE_STD, level='DEBUG'))
# slog.enable_sessions(['dzzones'])
# slog.info('dzzones', 'message')   # explicit session
# slog.info('message')              # session taken from the calling function

import inspect
import sys
from .colors import bcolors, LEVEL_COLORS


class Profile(object):
    MODE_DISABLED = 0
    MODE_STD = 2
    LEVELS = ['DEBUG', 'STATS', 'INFO', 'WARN', 'ERROR']

    def __init__(self, mode, **kwargs):
        self.mode = mode
        # If None, then all sessions are enabled.
        self.enabled_sessions = None
        self.disabled_sessions = set()
        self.level = 'INFO'
        self.stream = None  # Resolved at write time so redirected stderr is honoured.
        self.colored = True
        for k, v in kwargs.items():
            setattr(self, k, v)
        if self.level not in Profile.LEVELS:
            raise ValueError(f'Invalid logging level: {self.level}')
        self._level_id = Profile.LEVELS.index(self.level)

    def above_water_level(self, level):
        return Profile.LEVELS.index(level) >= self._level_id


_g_config = Profile(Profile.MODE_STD)


def config(config, sessions=None):
    global _g_config
    _g_config = config
    enable_sessions(sessions)


def current():
    return _g_config


def get_method_name(stack_pos):
    frame = inspect.currentframe()
    for _ in range(stack_pos):
        if frame.f_back is None:
            break
        frame = frame.f_back

    method_name = frame.f_code.co_name
    if 'self' in frame.f_locals:
        method_name = f"{frame.f_locals['self'].__class__.__name__}.{method_name}"
    return method_name


def is_session_enabled(session):
    if session in _g_config.disabled_sessions:
        return False
    return ((_g_config.enabled_sessions is None) or
            (session in _g_config.enabled_sessions))


def enable_sessions(sessions):
    if sessions is None:
        _g_config.enabled_sessions = None
        _g_config.disabled_sessions.clear()
    else:
        if _g_config.enabled_sessions is None:
            _g_config.enabled_sessions = set()
        _g_config.enabled_sessions.update(sessions)
        _g_config.disabled_sessions -= set(sessions)


def disable_sessions(sessions):
    if _g_config.enabled_sessions is not None:
        _g_config.enabled_sessions -= set(sessions)
    _g_config.disabled_sessions.update(sessions)


def _split(arg1, arg2):
    # Called from the level helpers, so the caller of interest is 3 frames up.
    message = arg1 if arg2 is None else arg2
    session = get_method_name(3) if arg2 is None else arg1
    return session, message


def info(arg1, arg2=None):
    return log('INFO', *_split(arg1, arg2))


def warn(arg1, arg2=None):
    return log('WARN', *_split(arg1, arg2))


def error(arg1, arg2=None):
    return log('ERROR', *_split(arg1, arg2))


def debug(arg1, arg2=None):
    return log('DEBUG', *_split(arg1, arg2))


def stats(arg1, arg2=None):
    return log('STATS', *_split(arg1, arg2))


def log(level, session, message):
    if _g_config.mode == Profile.MODE_DISABLED:
        return
    if not _g_config.above_water_level(level):
        return
    if not is_session_enabled(session):
        return

    stream = _g_config.stream if _g_config.stream is not None else sys.stderr
    if _g_config.colored:
        color_level = LEVEL_COLORS.get(level, bcolors.OKBLUE)
        line = f'{color_level}[{session}]:\t{message}{bcolors.ENDC}'
    else:
        line = f'{level} [{session}]:\t{message}'
    print(line, file=stream)
