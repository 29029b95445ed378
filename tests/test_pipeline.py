import pytest

from lazyvim_installer.pipeline import run_pipeline


class RecordingStep:
    def __init__(self, step_id, log, fail=False):
        self.step_id = step_id
        self._log = log
        self._fail = fail

    def run(self, state):
        self._log.append(self.step_id)
        if self._fail:
            raise RuntimeError(f"{self.step_id} failed")
        state.setdefault("seen", []).append(self.step_id)
        return state


def test_steps_run_in_order():
    log = []
    steps = [RecordingStep("10_a", log), RecordingStep("20_b", log), RecordingStep("30_c", log)]

    result = run_pipeline(state={}, steps=steps)

    assert log == ["10_a", "20_b", "30_c"]
    assert result.ran_steps == ["10_a", "20_b", "30_c"]
    assert result.state["seen"] == ["10_a", "20_b", "30_c"]
    assert result.state["execution"]["current_step"] is None


def test_first_failure_stops_the_pipeline():
    log = []
    state = {}
    steps = [RecordingStep("10_a", log), RecordingStep("20_b", log, fail=True), RecordingStep("30_c", log)]

    with pytest.raises(RuntimeError, match="20_b failed"):
        run_pipeline(state=state, steps=steps)

    assert log == ["10_a", "20_b"]
    assert state["execution"]["current_step"] == "20_b"
