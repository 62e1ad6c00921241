import pytest

from wastelandtales.temperature import build_temperature_drop, build_temperature_increase


def test_drop_choices():
    scenes = build_temperature_drop()
    assert scenes[0].options == ["Eat food to get warmer", "Endured the cold"]
    assert scenes[0].follow(0) is scenes[1]
    assert scenes[0].follow(1) is scenes[2]


def test_drop_rewards():
    scenes = build_temperature_drop()
    assert scenes[1].reward == ["food -1"]
    assert scenes[2].reward == ["health -1"]
    assert scenes[2].text == "Your got sick because of the cold"


def test_increase_choices_and_rewards():
    scenes = build_temperature_increase()
    assert scenes[0].follow(0).reward == ["water -1"]
    assert scenes[0].follow(1).reward == ["health -1"]
    assert scenes[1].text == "You cooled yourself down and was able to get asleep"


@pytest.mark.parametrize("builder", [build_temperature_drop, build_temperature_increase])
def test_outcomes_end_the_night(builder):
    start, *outcomes = builder()
    assert not start.is_ending()
    for outcome in outcomes:
        assert outcome.is_ending()
        assert outcome.follow(0) is None


@pytest.mark.parametrize("builder", [build_temperature_drop, build_temperature_increase])
def test_bad_choice_raises(builder):
    start = builder()[0]
    with pytest.raises(IndexError):
        start.follow(2)


def test_builds_are_independent():
    first = build_temperature_drop()
    second = build_temperature_drop()
    first[1].reward.append("sanity +1")
    assert second[1].reward == ["food -1"]