from wastelandtales.ui_stories import build_ui_stories


def test_scene_count_and_single_options():
    ui = build_ui_stories()
    assert len(ui) == 19
    assert all(len(scene.options) == 1 for scene in ui)


def test_pinned_texts():
    ui = build_ui_stories()
    assert ui[0].text == "You HAVE to go back to the shelter now because it is NIGHT"
    assert ui[0].options == ["Start Night Time"]
    assert ui[18].options == ["Game over"]


def test_day_end_leads_to_summary():
    ui = build_ui_stories()
    assert ui[16].follow(0) is ui[17]
    assert ui[16].is_ending() is False
    assert ui[17].follow(0) is None


def test_all_other_scenes_end():
    ui = build_ui_stories()
    endings = [i for i, scene in enumerate(ui) if scene.is_ending()]
    assert endings == [i for i in range(19) if i != 16]


def test_text_free_scenes():
    ui = build_ui_stories()
    blank = [i for i, scene in enumerate(ui) if not scene.text]
    assert blank == [3, 11, 13, 15, 17, 18]


def test_no_rewards_and_fresh_instances():
    first = build_ui_stories()
    second = build_ui_stories()
    assert all(scene.reward == [] for scene in first)
    first[0].options.append("extra")
    assert second[0].options == ["Start Night Time"]