import pytest

from transabs.delay_stage import DelayStage, StageJogger


@pytest.fixture
def sent():
    return []


@pytest.fixture
def stage(sent):
    s = DelayStage("COM5", sent.append)
    s.settle_time = 0
    return s


def test_home_sends_origin_command(stage, sent):
    stage.home()
    assert sent == [b"1OR\r"]
    assert stage.current_position == 0.0


def test_go_to_zero_instruction(stage, sent):
    stage.go_to_time(0.0)
    assert sent == [b"1PA0.000000\r"]
    assert stage.current_position == 0.0
    assert stage.get_time() == 0.0


def test_instruction_uses_fixed_six_decimals(stage, sent):
    stage.go_to_time(3.0)
    text = sent[-1].decode("ascii")
    assert text.startswith("1PA") and text.endswith("\r")
    assert len(text[3:-1].split(".")[1]) == 6
    assert float(text[3:-1]) == pytest.approx(stage.current_position, abs=1e-6)


@pytest.mark.parametrize("delay", [0.0, 1.5, 12.25, -4.0])
def test_time_round_trip(stage, delay):
    stage.go_to_time(delay)
    assert stage.get_time() == pytest.approx(delay)


def test_set_time_zero(stage):
    stage.go_to_time(5.0)
    stage.set_time_zero()
    assert stage.get_time() == pytest.approx(0.0)
    stage.go_to_time(2.0)
    assert stage.get_time() == pytest.approx(2.0)


def test_time_zero_offsets_absolute_position(stage, sent):
    stage.go_to_time(5.0)
    position_at_five = stage.current_position
    stage.set_time_zero()
    stage.go_to_time(0.0)
    assert sent[-1] == sent[0]
    assert stage.current_position == pytest.approx(position_at_five)
    assert stage.get_time() == pytest.approx(0.0)


def test_reverse_negates_target(stage, sent):
    stage.set_reverse(True)
    stage.go_to_time(2.0)
    assert sent[-1].startswith(b"1PA-")
    assert stage.get_time() == pytest.approx(-2.0)


def test_jogger_steps(stage):
    jogger = StageJogger(stage, 0.1)
    jogger.jog_right()
    jogger.jog_right()
    assert stage.get_time() == pytest.approx(0.2)
    jogger.jog_left()
    assert stage.get_time() == pytest.approx(0.1)


def test_position_text_four_decimals(stage):
    jogger = StageJogger(stage, 0.1)
    jogger.jog_right()
    assert jogger.position_text() == "0.1000"


def test_set_jog_size(stage):
    jogger = StageJogger(stage)
    jogger.set_jog_size("2.5")
    assert jogger.jog_size == 2.5
    jogger.set_jog_size("abc")
    assert jogger.jog_size == 0.0