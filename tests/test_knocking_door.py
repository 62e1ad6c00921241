import random

import pytest

from wastelandtales.knocking_door import build_knocking_door


class _FixedRoll:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        return self.value % n


def test_nothing_outside_branch():
    scenes = build_knocking_door(_FixedRoll(0))
    assert scenes[0].follow(0) is scenes[1]
    assert scenes[1].follow(0) is scenes[2]
    assert scenes[1].follow(1) is scenes[5]
    death = scenes[2].follow(0)
    assert death is scenes[3]
    assert death.reward == ["death"]
    assert death.is_ending()
    assert scenes[7].next == []


def test_weird_guy_branch():
    scenes = build_knocking_door(_FixedRoll(1))
    assert scenes[0].follow(0) is scenes[6]
    guy = scenes[6].follow(0)
    assert guy.text == "The guy asks you if you have any food"
    assert guy.follow(0).reward == ["food -1", "bullet +1"]
    assert guy.follow(2).follow(0).reward == ["inventory silver key"]
    assert scenes[13].next == []


def test_cockroach_branch():
    scenes = build_knocking_door(_FixedRoll(2))
    assert scenes[0].follow(0) is scenes[12]
    roach = scenes[12].follow(0)
    assert roach is scenes[13]
    assert roach.follow(1) is scenes[15]
    assert scenes[15].reward == ["bullet -1"]
    assert scenes[15].follow(0) is scenes[14]
    assert scenes[15].follow(1) is scenes[16]
    assert scenes[1].next == []


@pytest.mark.parametrize("seed", range(10))
def test_random_branch_is_one_of_three(seed):
    scenes = build_knocking_door(random.Random(seed))
    assert len(scenes[0].next) == 1
    assert scenes[0].follow(0) in (scenes[1], scenes[6], scenes[12])


def test_deaths_are_endings():
    scenes = build_knocking_door(_FixedRoll(2))
    for scene in scenes:
        if "death" in scene.reward:
            assert scene.is_ending()


def test_bad_choice_raises():
    scenes = build_knocking_door(_FixedRoll(0))
    with pytest.raises(IndexError):
        scenes[0].follow(1)