import time
import collections
from .session_log import is_session_enabled, stats, get_method_name
from .colors import bcolors


class Measure(object):

    def __init__(self):
        self.tick = time.perf_counter()


class DeltaMeasure(object):
    def __init__(self, prev_measure: Measure, next_measure: Measure):
        self.elapsed = next_measure.tick - prev_measure.tick

    def __str__(self):
        return f'{self.elapsed:.4f} s'


_g_sessions = collections.defaultdict(collections.OrderedDict)


def stat(arg1, arg2=None):
    """Record a named tick in a session (defaults to the calling function)."""
    name = arg1 if arg2 is None else arg2
    session = get_method_name(2) if arg2 is None else str(arg1)
    _g_sessions[session][name] = Measure()


def show_profile(session=None):
    session = get_method_name(2) if session is None else session
    if is_session_enabled(session):
        stats(session, cycle_profile(session))
    else:
        _g_sessions.pop(session, None)


def cycle_profile(session=None):
    """Render the deltas between consecutive ticks and forget the session."""
    session = get_method_name(2) if session is None else str(session)
    NamedMeasure = collections.namedtuple('NamedMeasure', ['name', 'measure'])
    start = prev = None
    lines = [f'=== Session [{session}] profile ===']
    for name, measure in _g_sessions.pop(session, {}).items():
        if prev is not None:
            lines.append(f'{prev.name} -> {name}:\t{DeltaMeasure(prev.measure, measure)}')
        else:
            start = NamedMeasure(name=name, measure=measure)
        prev = NamedMeasure(name=name, measure=measure)

    if start is not None:
        total = DeltaMeasure(start.measure, prev.measure)
        lines.append(f'{bcolors.BOLD}Total:\t{total}{bcolors.ENDC}')

    return '\n'.join(lines)
