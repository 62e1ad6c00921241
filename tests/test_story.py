import random

import pytest

from wastelandtales.story import Story, new_stories, passes_check, random_int


class FixedRoll:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        return self.value % n


def test_follow_returns_linked_scene():
    end = Story(text="end", options=["Ok"], next=[None])
    start = Story(text="start", options=["a", "b"], next=[end, None])
    assert start.follow(0) is end
    assert start.follow(1) is None


def test_follow_without_link_returns_none():
    scene = Story(text="x", options=["only"])
    assert scene.follow(0) is None


@pytest.mark.parametrize("choice", [-1, 2, 5])
def test_follow_out_of_range_raises(choice):
    scene = Story(options=["a", "b"], next=[None, None])
    with pytest.raises(IndexError):
        scene.follow(choice)


def test_is_ending():
    end = Story(options=["Ok"], next=[None])
    mid = Story(options=["go", "stop"], next=[end, None])
    assert end.is_ending() is True
    assert mid.is_ending() is False
    assert Story().is_ending() is True


def test_cyclic_scenes_have_finite_repr():
    a = Story(text="a", options=["x"])
    b = Story(text="b", options=["y"], next=[a])
    a.next.append(b)
    assert "a" in repr(a)
    assert a.follow(0).follow(0) is a


def test_new_stories_are_distinct():
    scenes = new_stories(5)
    assert len(scenes) == 5
    assert len({id(s) for s in scenes}) == 5
    scenes[0].options.append("x")
    assert scenes[1].options == []


def test_new_stories_negative():
    with pytest.raises(ValueError):
        new_stories(-1)


def test_random_int_bounds():
    rng = random.Random(42)
    values = {random_int(0, 2, rng) for _ in range(200)}
    assert values == {0, 1, 2}


def test_random_int_single_value():
    assert random_int(7, 7, random.Random(1)) == 7


def test_random_int_empty_range():
    with pytest.raises(ValueError):
        random_int(3, 2)


def test_passes_check_compares_roll_with_threshold():
    assert passes_check(0, FixedRoll(7)) is True
    assert passes_check(3, FixedRoll(7)) is False
    assert passes_check(0, FixedRoll(7), threshold=7) is False


def test_passes_check_extremes():
    rng = random.Random(3)
    assert not any(passes_check(5, rng) for _ in range(100))
    assert all(passes_check(-5, rng) for _ in range(100))