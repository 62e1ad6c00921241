import random

import pytest

from wastelandtales.lights_off import build_lights_off


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


def test_scene_count_and_entry_text():
    scenes = build_lights_off(_FixedRng(0))
    assert len(scenes) == 16
    assert scenes[0].text == "You are chilling in the room, but the light suddenly goes off"
    assert scenes[0].options == ["Go to the window to check", "Ignore the light"]


def test_spider_branch():
    scenes = build_lights_off(_FixedRng(0))
    assert scenes[0].follow(0) is scenes[1]
    assert scenes[0].follow(1) is scenes[2]
    assert scenes[1].follow(0) is scenes[3]
    assert [scenes[3].follow(i) for i in range(3)] == [scenes[4], scenes[5], scenes[6]]
    assert scenes[6].reward == ["death"]
    assert scenes[6].is_ending()


def test_zombie_branch():
    scenes = build_lights_off(_FixedRng(1))
    assert scenes[0].follow(0).text.startswith("You see a zombie kicking the cable")
    assert scenes[8].follow(1) is scenes[11]
    assert scenes[9].follow(0) is scenes[10]
    assert scenes[12].follow(0) is scenes[2]
    assert scenes[10].reward == ["sanity -1, health -2, food +1"]


def test_flood_branch():
    scenes = build_lights_off(_FixedRng(2))
    assert scenes[0].follow(0) is scenes[13]
    assert scenes[13].follow(1) is scenes[15]
    assert scenes[15].reward == ["water +1"]
    assert scenes[14].reward == ["death"]


def test_unwired_scene_leads_nowhere_outside_its_branch():
    scenes = build_lights_off(_FixedRng(0))
    assert scenes[12].follow(0) is None
    assert scenes[12].is_ending()


def test_follow_rejects_missing_option():
    scenes = build_lights_off(_FixedRng(0))
    with pytest.raises(IndexError):
        scenes[0].follow(2)


@pytest.mark.parametrize("seed", range(10))
def test_every_reachable_option_is_wired(seed):
    scenes = build_lights_off(random.Random(seed))
    for scene in _reachable(scenes[0]):
        assert len(scene.next) == len(scene.options)


def test_same_seed_gives_same_branch():
    first = build_lights_off(random.Random(7))
    second = build_lights_off(random.Random(7))
    assert first[0].follow(0).text == second[0].follow(0).text