import random

import pytest

from wastelandtales.green_light import build_green_light


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        assert 0 <= self.value < n
        return self.value


def _reachable(start):
    seen = []
    stack = [start]
    while stack:
        scene = stack.pop()
        if any(scene is s for s in seen):
            continue
        seen.append(scene)
        stack.extend(s for s in scene.next if s is not None)
    return seen


def test_scene_count_and_stay_inside():
    scenes = build_green_light(_FixedRng(0))
    assert len(scenes) == 26
    assert scenes[0].follow(1) is scenes[1]
    assert scenes[1].is_ending()


def test_giant_zombie_branch():
    scenes = build_green_light(_FixedRng(0))
    first = scenes[0].follow(0)
    assert first.text == (
        "You see a giant zombie standing outside, glowing green light from its belley"
    )
    assert [scenes[3].follow(i) for i in range(4)] == [
        scenes[4], scenes[5], scenes[8], scenes[7]
    ]
    assert scenes[9].follow(0) is scenes[11]
    assert scenes[5].follow(0).reward == ["health +2"]


def test_car_branch():
    scenes = build_green_light(_FixedRng(1))
    assert scenes[0].follow(0) is scenes[12]
    assert scenes[14].follow(0) is scenes[15]
    assert scenes[16].follow(0).reward == ["bullet +10"]
    assert scenes[9].follow(0) is None


def test_flashlight_branch():
    scenes = build_green_light(_FixedRng(2))
    assert scenes[0].follow(0) is scenes[18]
    assert scenes[20].follow(1).reward == ["food -1", "water +2"]
    assert scenes[23].follow(0).reward == ["bullet +5", "water +4"]
    assert scenes[25].follow(0) is scenes[7]


def test_chase_ends_when_not_flashlight_branch():
    scenes = build_green_light(_FixedRng(0))
    assert scenes[25].follow(0) is None


def test_follow_rejects_missing_option():
    scenes = build_green_light(_FixedRng(1))
    with pytest.raises(IndexError):
        scenes[0].follow(-1)


@pytest.mark.parametrize("seed", range(10))
def test_every_reachable_option_is_wired(seed):
    scenes = build_green_light(random.Random(seed))
    for scene in _reachable(scenes[0]):
        assert len(scene.next) == len(scene.options)


@pytest.mark.parametrize("seed", range(5))
def test_every_run_can_return_to_shelter(seed):
    scenes = build_green_light(random.Random(seed))
    assert any(s is scenes[1] for s in _reachable(scenes[0]))
    assert any(s is scenes[7] for s in _reachable(scenes[0]))