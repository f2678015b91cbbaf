# tests/core/test_stack.py
"""
Call-stack capture tests
"""

import os
import sys
import sysconfig

from failchain.core.stack import (
    Call,
    caller,
    trace,
    trim_below,
    trim_runtime,
    is_runtime_call,
    stack_trace_to_string,
)


STDLIB = sysconfig.get_paths()["stdlib"]


def test_call_format():
    call = Call(filename="/app/service.py", lineno=42, function="Service.run")

    assert str(call) == "/app/service.py:42 (Service.run)"


def test_caller_describes_calling_function():
    call, line = caller(), sys._getframe().f_lineno

    assert call.filename == __file__ or os.path.samefile(call.filename, __file__)
    assert call.lineno == line
    assert call.function.endswith("test_caller_describes_calling_function")


def test_caller_skip():
    def helper():
        return caller(1)

    call, line = helper(), sys._getframe().f_lineno

    assert call.lineno == line
    assert call.function.endswith("test_caller_skip")


def test_caller_skip_past_outermost_frame_does_not_raise():
    call = caller(100000)

    assert isinstance(call, Call)


def test_trace_starts_at_caller():
    stack = trace()

    assert stack[0].function.endswith("test_trace_starts_at_caller")
    assert len(stack) > 1


def test_trim_below():
    a = Call("/app/a.py", 1, "a")
    b = Call("/app/b.py", 2, "b")
    c = Call("/app/c.py", 3, "c")

    assert trim_below((a, b, c), b) == (b, c)
    assert trim_below((a, b, c), a) == (a, b, c)
    assert trim_below((a, b), c) == ()


def test_is_runtime_call():
    assert is_runtime_call(Call("<frozen runpy>", 1, "_run_module_as_main"))
    assert is_runtime_call(Call(os.path.join(STDLIB, "runpy.py"), 1, "_run_code"))
    assert not is_runtime_call(Call(os.path.join(STDLIB, "site-packages", "pkg", "mod.py"), 1, "f"))
    assert not is_runtime_call(Call("/app/main.py", 1, "main"))
    assert is_runtime_call(Call("/opt/framework/loop.py", 1, "run"), extra_paths=("/opt/framework",))


def test_trim_runtime_only_trims_outer_end():
    user = Call("/app/main.py", 10, "main")
    stdlib_middle = Call(os.path.join(STDLIB, "contextlib.py"), 20, "__exit__")
    user_outer = Call("/app/cli.py", 5, "cli")
    runpy = Call(os.path.join(STDLIB, "runpy.py"), 30, "_run_code")
    frozen = Call("<frozen runpy>", 40, "_run_module_as_main")

    stack = (user, stdlib_middle, user_outer, runpy, frozen)

    assert trim_runtime(stack) == (user, stdlib_middle, user_outer)
    assert trim_runtime((runpy, frozen)) == ()


def test_stack_trace_to_string():
    stack = (Call("/app/a.py", 1, "a"), Call("/app/b.py", 2, "b"))

    assert stack_trace_to_string(stack) == "/app/a.py:1 (a)\n/app/b.py:2 (b)"
    assert stack_trace_to_string(()) == ""
