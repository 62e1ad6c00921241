import random

import pytest

from wastelandtales.weaponshop import WEAPONSHOP_HEAD_STORIES, build_weaponshop_stories


class FixedRoll:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        return self.value % n


def test_scene_count():
    assert len(build_weaponshop_stories(0, FixedRoll(0))) == 51


def test_head_scenes_have_text_and_options():
    scenes = build_weaponshop_stories(0, FixedRoll(9))
    for index in WEAPONSHOP_HEAD_STORIES:
        assert scenes[index].text
        assert scenes[index].options


def test_links_stay_inside_the_shop():
    scenes = build_weaponshop_stories(0, FixedRoll(9))
    ids = {id(s) for s in scenes}
    for scene in scenes:
        for target in scene.next:
            assert target is None or id(target) in ids


def test_lucky_roll_links():
    scenes = build_weaponshop_stories(0, FixedRoll(9))
    assert scenes[23].follow(0) is scenes[31]
    assert scenes[36].follow(0) is scenes[30]
    assert scenes[37].follow(0) is scenes[29]
    assert scenes[23].follow(0).follow(0).reward == ["health +2", "sanity +2"]


def test_unlucky_roll_links():
    scenes = build_weaponshop_stories(0, FixedRoll(0))
    assert scenes[23].follow(0) is scenes[28]
    assert scenes[36].follow(0) is scenes[27]
    assert scenes[37].follow(0) is scenes[24]
    assert scenes[36].follow(0).reward == ["sanity -1"]


def test_high_difficulty_defeats_best_roll():
    scenes = build_weaponshop_stories(5, FixedRoll(9))
    assert scenes[37].follow(0) is scenes[24]


def test_ak47_branches():
    scenes = build_weaponshop_stories(0, FixedRoll(0))
    assert scenes[0].follow(0).reward == ["inventory AK47"]
    bullets = scenes[0].follow(1).follow(0)
    assert bullets.text == "You got some bullets."
    assert bullets.reward == ["bullet +5"]


def test_warehouse_fight_costs_bullets():
    scenes = build_weaponshop_stories(0, FixedRoll(0))
    fight = scenes[9].follow(0).follow(0)
    assert fight is scenes[45]
    assert fight.reward == ["bullet -4"]
    assert scenes[9].follow(0).follow(1) is scenes[13]


def test_locked_room_leave_ends():
    scenes = build_weaponshop_stories(0, FixedRoll(0))
    assert scenes[18].follow(2) is None
    assert scenes[18].follow(1).reward == ["bulletproof_vest effect", "hunger -2"]


def test_endings():
    scenes = build_weaponshop_stories(0, FixedRoll(0))
    assert scenes[44].is_ending()
    assert not scenes[0].is_ending()


def test_invalid_choice_raises():
    scenes = build_weaponshop_stories(0, FixedRoll(0))
    with pytest.raises(IndexError):
        scenes[44].follow(1)
    with pytest.raises(IndexError):
        scenes[12].follow(0)


def test_seeded_builds_agree():
    first = build_weaponshop_stories(0, random.Random(7))
    second = build_weaponshop_stories(0, random.Random(7))
    assert first.index(first[23].follow(0)) == second.index(second[23].follow(0))