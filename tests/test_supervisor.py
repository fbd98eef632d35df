from src.ui.supervisor import CrashSupervisor
from tests.utils.fakes import DummyLogger


def test_render_result_passes_through():
    sup = CrashSupervisor(DummyLogger())
    assert sup.run(lambda: "page", lambda err: f"recovery: {err}") == "page"
    assert not sup.crashed


def test_exception_switches_to_recovery_until_reset():
    sup = CrashSupervisor(DummyLogger())
    calls = []

    def broken():
        calls.append(1)
        raise RuntimeError("bad section")

    assert sup.run(broken, lambda err: f"recovery: {err}") == "recovery: bad section"
    assert sup.crashed

    # stays on recovery without re-running the page
    assert sup.run(broken, lambda err: "still recovering") == "still recovering"
    assert len(calls) == 1

    sup.reset()
    assert sup.run(lambda: "page", lambda err: "recovery") == "page"


def test_message_less_exception_uses_type_name():
    sup = CrashSupervisor(DummyLogger())

    def broken():
        raise KeyError()

    sup.run(broken, lambda err: err)
    assert sup.error == "KeyError"
